"""RQ task definitions for asynchronous map rendering."""

from __future__ import annotations

from pathlib import Path

from rq import get_current_job

from .core.exceptions import RenderError
from .pipelines import MapPipeline


def render_map(
    *,
    job_id: str,
    flight_log_path: str,
    zoom_level: float,
    output_format: str = "geojson",
    mode: str = "auto",
) -> dict:
    """Render an uploaded flight log into a route map file."""

    job = get_current_job()
    if job:
        job.meta["progress"] = 0
        job.save_meta()

    pipeline = MapPipeline.default()

    try:
        summary = pipeline.run(
            flight_log_paths=[Path(flight_log_path)],
            zoom_level=zoom_level,
            job_id=job_id,
            output_format=output_format,
            mode=mode,
        )
    except RenderError as exc:
        if job:
            job.meta["error"] = exc.as_dict()
            job.save_meta()
        raise

    if job:
        job.meta["progress"] = 100
        job.save_meta()

    return summary.as_dict()

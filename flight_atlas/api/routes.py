"""REST API blueprint."""

from __future__ import annotations

import math
import uuid
from datetime import datetime
from pathlib import Path

from flask import Blueprint, current_app, jsonify, request
from rq.exceptions import NoSuchJobError
from rq.job import Job

from ..config import APP_CONFIG, STORAGE_PATHS
from ..core import RenderError, Route, parse_coordinate, parse_flag
from ..pipelines import EXPORT_FORMATS, PATH_MODES, MapPipeline
from ..utils import distance_miles, ensure_directory, format_carbon, format_offset_cost, safe_filename

api_bp = Blueprint("api", __name__)


@api_bp.post("/distance")
def distance():
    payload = _payload()
    origin = parse_coordinate(payload, "origin")
    destination = parse_coordinate(payload, "destination")
    return jsonify({"distance_miles": distance_miles(origin, destination)})


@api_bp.post("/paths")
def path():
    """Return the drawable line between two coordinates."""

    payload = _payload()
    origin = parse_coordinate(payload, "origin")
    destination = parse_coordinate(payload, "destination")
    mode = str(payload.get("mode", "great_circle"))
    num_points = _number(payload, "num_points", None, kind=int, minimum=0, maximum=APP_CONFIG.max_path_points)

    route = Route(origin=origin, destination=destination)
    coordinates = _pipeline().path_for(route, mode=_path_mode(mode), num_points=num_points)
    return jsonify({"mode": mode, "coordinates": coordinates})


@api_bp.post("/routes/render")
def render_routes():
    """Aggregate posted flights for a zoom level and return GeoJSON."""

    payload = _payload()
    flights = payload.get("flights")
    if not isinstance(flights, list):
        raise RenderError("flights must be a list of flight objects")

    routes = []
    for index, flight in enumerate(flights):
        if not isinstance(flight, dict):
            raise RenderError("Each flight must be an object", details={"index": index})
        try:
            routes.append(Route.from_row(flight))
        except RenderError as exc:
            raise RenderError(str(exc), details={"index": index, **exc.details}) from exc

    zoom = _number(payload, "zoom", 3.0, kind=float)
    num_points = _number(payload, "num_points", None, kind=int, minimum=0, maximum=APP_CONFIG.max_path_points)
    mode = _path_mode(str(payload.get("mode", "auto")))

    pipeline = _pipeline()
    rendered = pipeline.render(routes, zoom, mode=mode, num_points=num_points)
    collection = pipeline.geojson_exporter.build(rendered)
    collection["max_count"] = max((item.aggregated.count for item in rendered), default=0)
    collection["level"] = pipeline.aggregator.level_for(zoom).value
    return jsonify(collection)


@api_bp.post("/carbon/estimate")
def carbon_estimate():
    payload = _payload()
    if payload.get("distance_miles") is None and "origin" in payload:
        distance = float(distance_miles(parse_coordinate(payload, "origin"), parse_coordinate(payload, "destination")))
    else:
        distance = _number(payload, "distance_miles", None, kind=float, minimum=0)
        if distance is None:
            raise RenderError("distance_miles is required")

    passengers = _number(payload, "passengers", 1, kind=int, minimum=1)
    aircraft_type = str(payload["aircraft_type"]) if payload.get("aircraft_type") else None
    currency = str(payload.get("currency") or "USD")

    estimate = _pipeline().carbon_estimator.estimate(distance, passengers, aircraft_type)
    response = estimate.as_dict()
    response.update(
        {
            "distance_miles": distance,
            "carbon_display": format_carbon(estimate.carbon_kg),
            "cost_display": format_offset_cost(estimate.offset_cost, currency),
        }
    )
    return jsonify(response)


@api_bp.post("/carbon/summary")
def carbon_summary():
    payload = _payload()
    flights = payload.get("flights")
    if not isinstance(flights, list):
        raise RenderError("flights must be a list of flight objects")

    entries = []
    for index, flight in enumerate(flights):
        if not isinstance(flight, dict):
            raise RenderError("Each flight must be an object", details={"index": index})
        entries.append(
            (
                _number(flight, "carbon_kg", 0.0, kind=float, minimum=0),
                parse_flag(flight.get("carbon_offset")),
            )
        )

    summary = _pipeline().carbon_estimator.summarize(entries)
    return jsonify(summary.as_dict())


@api_bp.post("/maps")
def create_map_job():
    """Queue rendering of an uploaded flight log."""

    uploaded = request.files.get("flight_log")
    if uploaded is None or not uploaded.filename:
        return jsonify({"error": "flight_log field is required"}), 400
    if not _allowed(uploaded.filename, APP_CONFIG.allowed_flight_log_extensions):
        return jsonify({"error": f"Invalid flight log file: {uploaded.filename}"}), 400

    output_format = request.form.get("format", "geojson")
    if output_format not in EXPORT_FORMATS:
        return jsonify({"error": f"Unsupported output format: {output_format}"}), 400
    zoom = _number(request.form, "zoom", 3.0, kind=float)
    mode = _path_mode(request.form.get("mode", "auto"))

    job_id = str(uuid.uuid4())
    job_dir = ensure_directory(STORAGE_PATHS.uploads / job_id)
    target: Path = job_dir / safe_filename(uploaded.filename)
    uploaded.save(target)

    created_at = datetime.utcnow().isoformat()
    job = _queue().enqueue(
        "flight_atlas.tasks.render_map",
        kwargs={
            "job_id": job_id,
            "flight_log_path": str(target),
            "zoom_level": zoom,
            "output_format": output_format,
            "mode": mode,
        },
        job_id=job_id,
        meta={"created_at": created_at},
    )

    response = {
        "job_id": job.id,
        "status": job.get_status(refresh=False),
        "created_at": created_at,
    }
    return jsonify(response), 202


@api_bp.get("/maps/<job_id>")
def map_job_status(job_id: str):
    try:
        job = Job.fetch(job_id, connection=_connection())
    except NoSuchJobError:
        return jsonify({"error": "Job not found"}), 404

    payload: dict[str, object] = {
        "job_id": job.id,
        "status": job.get_status(refresh=True),
        "created_at": job.meta.get("created_at"),
    }

    if job.is_finished:
        payload["result"] = job.result or {}
        return jsonify(payload), 200
    if job.is_failed:
        payload["error"] = job.meta.get("error", job.exc_info)
        return jsonify(payload), 500

    payload["progress"] = job.meta.get("progress", 0)
    return jsonify(payload), 200


def _payload() -> dict:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise RenderError("Request body must be a JSON object")
    return payload


def _number(source, key: str, default, *, kind=float, minimum=None, maximum=None):
    raw = source.get(key)
    if raw in (None, ""):
        return default
    try:
        value = kind(raw)
    except (TypeError, ValueError) as exc:
        raise RenderError(f"Invalid value for {key}", details={"field": key, "value": str(raw)}) from exc
    if kind is int and isinstance(raw, float) and not raw.is_integer():
        raise RenderError(f"Invalid value for {key}", details={"field": key, "value": str(raw)})
    if kind is float and not math.isfinite(value):
        raise RenderError(f"Invalid value for {key}", details={"field": key, "value": str(raw)})
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        raise RenderError(
            f"{key} is out of range",
            details={"field": key, "value": value, "minimum": minimum, "maximum": maximum},
        )
    return value


def _path_mode(mode: str) -> str:
    if mode not in PATH_MODES:
        raise RenderError(f"Unknown path mode: {mode}", details={"allowed": list(PATH_MODES)})
    return mode


def _allowed(filename: str, extensions: tuple[str, ...]) -> bool:
    return "." in filename and filename.rsplit(".", 1)[1].lower() in extensions


def _pipeline() -> MapPipeline:
    return current_app.extensions["flight_atlas"]["pipeline"]


def _queue():
    return current_app.extensions["rq"]["queue"]


def _connection():
    return current_app.extensions["rq"]["connection"]

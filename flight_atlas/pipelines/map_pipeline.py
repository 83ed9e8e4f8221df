"""Route map pipeline orchestrator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, Sequence

from ..config import ROUTE_ENGINE_CONFIG, STORAGE_PATHS, RouteEngineConfig
from ..core import MapSummary, RenderError, RenderedRoute, Route
from ..services import (
    ArcGenerator,
    CarbonEstimator,
    DensityColorMapper,
    FlightLoader,
    GeoJsonExporter,
    GreatCircleInterpolator,
    KmzExporter,
    RouteAggregator,
)
from ..utils import distance_miles, ensure_directory, safe_filename

logger = logging.getLogger(__name__)

PATH_MODES = ("auto", "great_circle", "arc")
EXPORT_FORMATS = ("geojson", "kmz")


@dataclass(slots=True)
class MapPipeline:
    """Orchestrates aggregation, path building, colouring and export."""

    loader: FlightLoader
    aggregator: RouteAggregator
    interpolator: GreatCircleInterpolator
    arc_generator: ArcGenerator
    density_mapper: DensityColorMapper
    carbon_estimator: CarbonEstimator
    geojson_exporter: GeoJsonExporter
    kmz_exporter: KmzExporter
    config: RouteEngineConfig = ROUTE_ENGINE_CONFIG
    output_root: Path = STORAGE_PATHS.outputs

    def render(
        self,
        routes: Sequence[Route],
        zoom_level: float,
        *,
        mode: str = "auto",
        num_points: int | None = None,
    ) -> list[RenderedRoute]:
        """Aggregate ``routes`` for ``zoom_level`` and build coloured paths."""

        if mode not in PATH_MODES:
            raise RenderError(
                f"Unknown path mode: {mode}",
                details={"mode": mode, "allowed": list(PATH_MODES)},
            )

        aggregated = self.aggregator.aggregate(routes, zoom_level)
        if not aggregated:
            return []

        max_count = self.density_mapper.max_count(aggregated)
        return [
            RenderedRoute(
                aggregated=entry,
                coordinates=self.path_for(entry.route, mode=mode, num_points=num_points),
                color=self.density_mapper.color(entry.count, max_count),
            )
            for entry in aggregated
        ]

    def path_for(self, route: Route, *, mode: str = "auto", num_points: int | None = None) -> list[list[float]]:
        if mode == "auto":
            distance = route.distance_miles
            if distance is None:
                distance = distance_miles(route.origin, route.destination)
            crosses_seam = abs(route.destination.longitude - route.origin.longitude) > 180
            short = distance <= self.config.arc_max_distance_miles
            mode = "arc" if short and not crosses_seam else "great_circle"

        if mode == "arc":
            return self.arc_generator.arc(route.origin, route.destination).as_lists()
        return self.interpolator.path(route.origin, route.destination, num_points).as_lists()

    def run(
        self,
        *,
        flight_log_paths: Iterable[Path | str],
        zoom_level: float,
        job_id: str,
        output_format: str = "geojson",
        mode: str = "auto",
    ) -> MapSummary:
        if output_format not in EXPORT_FORMATS:
            raise RenderError(
                f"Unsupported output format: {output_format}",
                details={"format": output_format, "allowed": list(EXPORT_FORMATS)},
            )

        logger.info("Starting route map for job %s at zoom %s", job_id, zoom_level)
        created_at = datetime.utcnow()

        routes = self.loader.load(flight_log_paths)
        if not routes:
            raise RenderError("Flight log contains no flights", details={"job_id": job_id})

        rendered = self.render(routes, zoom_level, mode=mode)

        output_dir = ensure_directory(self.output_root / job_id)
        output_file = output_dir / f"{safe_filename(job_id)}.{output_format}"
        if output_format == "kmz":
            self.kmz_exporter.export(rendered, output_file)
        else:
            self.geojson_exporter.export(rendered, output_file)

        carbon = self.carbon_estimator.summarize(
            (self.carbon_estimator.route_footprint(route), route.carbon_offset) for route in routes
        )

        completed_at = datetime.utcnow()
        logger.info("Job %s finished; generated %s", job_id, output_file.name)

        return MapSummary(
            job_id=job_id,
            created_at=created_at,
            completed_at=completed_at,
            generated_files=[output_file.name],
            zoom_level=zoom_level,
            route_count=len(routes),
            bucket_count=len(rendered),
            max_count=max((item.aggregated.count for item in rendered), default=0),
            carbon=carbon,
            level=self.aggregator.level_for(zoom_level).value,
        )

    @classmethod
    def default(cls) -> "MapPipeline":
        return cls(
            loader=FlightLoader(encoding="auto"),
            aggregator=RouteAggregator(),
            interpolator=GreatCircleInterpolator(),
            arc_generator=ArcGenerator(),
            density_mapper=DensityColorMapper(),
            carbon_estimator=CarbonEstimator(),
            geojson_exporter=GeoJsonExporter(),
            kmz_exporter=KmzExporter(),
        )

"""Top-level package for the Flight Atlas route engine."""

from .api.app_factory import create_app
from .pipelines.map_pipeline import MapPipeline
from .services import (
    aggregate_routes,
    carbon_footprint,
    curved_arc,
    density_color,
    great_circle_path,
    offset_cost,
)
from .utils.geo import distance_miles

__all__ = [
    "create_app",
    "MapPipeline",
    "aggregate_routes",
    "carbon_footprint",
    "curved_arc",
    "density_color",
    "distance_miles",
    "great_circle_path",
    "offset_cost",
]

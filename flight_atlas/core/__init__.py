"""Core domain primitives for Flight Atlas."""

from .models import (
    AggregatedRoute,
    AggregationLevel,
    ArcPath,
    CarbonSummary,
    Coordinate,
    EmissionsEstimate,
    GeoPath,
    MapSummary,
    RenderedRoute,
    Route,
    parse_coordinate,
    parse_flag,
)
from .exceptions import RenderError

__all__ = [
    "AggregatedRoute",
    "AggregationLevel",
    "ArcPath",
    "CarbonSummary",
    "Coordinate",
    "EmissionsEstimate",
    "GeoPath",
    "MapSummary",
    "RenderedRoute",
    "Route",
    "parse_coordinate",
    "parse_flag",
    "RenderError",
]

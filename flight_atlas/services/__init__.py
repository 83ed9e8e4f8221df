"""Service layer exports."""

from .aggregator import RouteAggregator, aggregate_routes
from .arc import ArcGenerator, curved_arc
from .carbon import CarbonEstimator, carbon_footprint, offset_cost
from .density import DensityColorMapper, density_color
from .flight_loader import FlightLoader
from .geojson_exporter import GeoJsonExporter
from .great_circle import GreatCircleInterpolator, great_circle_path
from .kmz_exporter import KmzExporter

__all__ = [
    "RouteAggregator",
    "aggregate_routes",
    "ArcGenerator",
    "curved_arc",
    "CarbonEstimator",
    "carbon_footprint",
    "offset_cost",
    "DensityColorMapper",
    "density_color",
    "FlightLoader",
    "GeoJsonExporter",
    "GreatCircleInterpolator",
    "great_circle_path",
    "KmzExporter",
]

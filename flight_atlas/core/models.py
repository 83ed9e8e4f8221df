"""Domain models used throughout Flight Atlas."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterator, Mapping, Sequence

from .exceptions import RenderError

_TRUTHY = {"1", "true", "yes", "y", "t"}


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A ``(longitude, latitude)`` pair in decimal degrees."""

    longitude: float
    latitude: float

    @property
    def within_bounds(self) -> bool:
        return (
            math.isfinite(self.longitude)
            and math.isfinite(self.latitude)
            and -180.0 <= self.longitude <= 180.0
            and -90.0 <= self.latitude <= 90.0
        )

    def as_list(self) -> list[float]:
        return [self.longitude, self.latitude]


class AggregationLevel(str, Enum):
    """Granularity at which routes were bucketed."""

    ROUTE = "route"
    CITY = "city"
    COUNTRY = "country"


@dataclass(slots=True)
class Route:
    """A single flown leg between two airports."""

    origin: Coordinate
    destination: Coordinate
    origin_city: str = ""
    origin_country: str = ""
    destination_city: str = ""
    destination_country: str = ""
    annotation: str | None = None
    distance_miles: float | None = None
    aircraft_type: str | None = None
    carbon_offset: bool = False

    @classmethod
    def from_row(cls, row: Mapping[str, object]) -> "Route":
        """Build a route from a flight-log record.

        Coordinates are read either from ``origin``/``destination`` pairs of
        ``[lon, lat]`` or from the flat ``origin_lon``/``origin_lat`` style
        columns used by the CSV flight log.
        """

        def text(key: str) -> str:
            value = row.get(key)
            return str(value).strip() if value not in (None, "") else ""

        distance = row.get("distance_miles")
        aircraft = text("aircraft_type")
        annotation = text("annotation")

        return cls(
            origin=parse_coordinate(row, "origin"),
            destination=parse_coordinate(row, "destination"),
            origin_city=text("origin_city"),
            origin_country=text("origin_country"),
            destination_city=text("destination_city"),
            destination_country=text("destination_country"),
            annotation=annotation or None,
            distance_miles=_parse_float(distance, "distance_miles") if distance not in (None, "") else None,
            aircraft_type=aircraft or None,
            carbon_offset=parse_flag(row.get("carbon_offset")),
        )

    def as_properties(self) -> dict:
        return {
            "origin_city": self.origin_city,
            "origin_country": self.origin_country,
            "destination_city": self.destination_city,
            "destination_country": self.destination_country,
            "annotation": self.annotation,
        }


@dataclass(slots=True)
class AggregatedRoute:
    """A representative route standing in for ``count`` raw routes."""

    route: Route
    count: int = 1
    key: tuple[str, str] | None = None
    level: AggregationLevel = AggregationLevel.ROUTE


@dataclass(frozen=True, slots=True)
class GeoPath:
    """Ordered coordinates describing a renderable line."""

    points: tuple[Coordinate, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    def as_lists(self) -> list[list[float]]:
        return [point.as_list() for point in self.points]


@dataclass(frozen=True, slots=True)
class ArcPath:
    """Quadratic curve described by its control points."""

    origin: Coordinate
    destination: Coordinate
    control: Coordinate | None = None

    @property
    def points(self) -> tuple[Coordinate, ...]:
        if self.control is None:
            return (self.origin, self.destination)
        return (self.origin, self.control, self.destination)

    def as_lists(self) -> list[list[float]]:
        return [point.as_list() for point in self.points]

    def as_feature(self) -> dict:
        return {
            "type": "Feature",
            "geometry": {"type": "LineString", "coordinates": self.as_lists()},
        }


@dataclass(frozen=True, slots=True)
class EmissionsEstimate:
    carbon_kg: float
    offset_cost: float

    def as_dict(self) -> dict:
        return {"carbon_kg": self.carbon_kg, "offset_cost": self.offset_cost}


@dataclass(frozen=True, slots=True)
class CarbonSummary:
    """Totals shown on the carbon offset dashboard."""

    total_carbon_kg: float
    offset_carbon_kg: float
    unoffset_carbon_kg: float
    offset_percentage: int
    estimated_offset_cost: float

    def as_dict(self) -> dict:
        return {
            "total_carbon_kg": self.total_carbon_kg,
            "offset_carbon_kg": self.offset_carbon_kg,
            "unoffset_carbon_kg": self.unoffset_carbon_kg,
            "offset_percentage": self.offset_percentage,
            "estimated_offset_cost": self.estimated_offset_cost,
        }


@dataclass(slots=True)
class RenderedRoute:
    """An aggregated route with its drawable geometry and colour."""

    aggregated: AggregatedRoute
    coordinates: list[list[float]]
    color: list[int]


@dataclass(slots=True)
class MapSummary:
    """Information returned to API callers after a map job completes."""

    job_id: str
    created_at: datetime
    completed_at: datetime
    generated_files: Sequence[str]
    zoom_level: float
    route_count: int
    bucket_count: int
    max_count: int
    carbon: CarbonSummary
    level: str = "route"

    def as_dict(self) -> dict:
        return {
            "job_id": self.job_id,
            "created_at": self.created_at.isoformat(),
            "completed_at": self.completed_at.isoformat(),
            "generated_files": list(self.generated_files),
            "zoom_level": self.zoom_level,
            "route_count": self.route_count,
            "bucket_count": self.bucket_count,
            "max_count": self.max_count,
            "carbon": self.carbon.as_dict(),
            "level": self.level,
        }


def parse_flag(value: object) -> bool:
    """Read a yes/no field from a CSV cell or JSON value."""

    if value is None:
        return False
    return str(value).strip().lower() in _TRUTHY


def parse_coordinate(row: Mapping[str, object], prefix: str) -> Coordinate:
    """Read and validate the ``prefix`` coordinate of ``row``."""

    pair = row.get(prefix)
    if isinstance(pair, (list, tuple)):
        if len(pair) != 2:
            raise RenderError(
                f"{prefix} must be a [longitude, latitude] pair",
                details={"field": prefix, "value": list(pair)},
            )
        lon_value, lat_value = pair
    else:
        lon_value = row.get(f"{prefix}_lon")
        lat_value = row.get(f"{prefix}_lat")

    coordinate = Coordinate(
        longitude=_parse_float(lon_value, f"{prefix}_lon"),
        latitude=_parse_float(lat_value, f"{prefix}_lat"),
    )
    if not coordinate.within_bounds:
        raise RenderError(
            f"{prefix} coordinate is out of bounds",
            details={"field": prefix, "value": coordinate.as_list()},
        )
    return coordinate


def _parse_float(value: object, field_name: str) -> float:
    if value in (None, "", "null"):
        raise RenderError(f"Missing value for {field_name}", details={"field": field_name})
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise RenderError(
            f"Invalid number for {field_name}",
            details={"field": field_name, "value": str(value)},
        ) from exc

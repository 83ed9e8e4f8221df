"""Geospatial helpers."""

from __future__ import annotations

from math import atan2, cos, floor, pi, sin, sqrt

from ..core import Coordinate

EARTH_RADIUS_MILES = 3958.8


def to_radians(degrees: float) -> float:
    return degrees * pi / 180


def to_degrees(radians: float) -> float:
    return radians * 180 / pi


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding up."""

    return int(floor(value + 0.5))


def distance_miles(origin: Coordinate, destination: Coordinate) -> int:
    """Return the haversine distance between two coordinates in whole miles."""

    phi1 = to_radians(origin.latitude)
    phi2 = to_radians(destination.latitude)
    delta_phi = phi2 - phi1
    delta_lambda = to_radians(destination.longitude) - to_radians(origin.longitude)

    a = sin(delta_phi / 2) ** 2 + cos(phi1) * cos(phi2) * sin(delta_lambda / 2) ** 2
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return round_half_up(EARTH_RADIUS_MILES * c)

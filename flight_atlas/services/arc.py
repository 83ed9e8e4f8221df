"""Curved arcs for short-hop route rendering."""

from __future__ import annotations

from math import hypot

from ..config import ROUTE_ENGINE_CONFIG, RouteEngineConfig
from ..core import ArcPath, Coordinate


class ArcGenerator:
    """Bow a straight segment into a quadratic curve.

    Works in plain lon/lat space; the result is a rendering hint, not a
    flown track.
    """

    def __init__(self, config: RouteEngineConfig = ROUTE_ENGINE_CONFIG):
        self.config = config

    def arc(self, origin: Coordinate, destination: Coordinate) -> ArcPath:
        dx = destination.longitude - origin.longitude
        dy = destination.latitude - origin.latitude

        length = hypot(dx, dy)
        if length == 0:
            return ArcPath(origin=origin, destination=destination)

        strength = min(length / self.config.arc_divisor, self.config.arc_max_strength)

        # (-dy, dx) is perpendicular to the segment and has the same length
        mid_lon = (origin.longitude + destination.longitude) / 2
        mid_lat = (origin.latitude + destination.latitude) / 2
        control = Coordinate(
            longitude=mid_lon + (-dy / length) * strength,
            latitude=mid_lat + (dx / length) * strength,
        )
        return ArcPath(origin=origin, destination=destination, control=control)


_DEFAULT = ArcGenerator()


def curved_arc(origin: Coordinate, destination: Coordinate) -> ArcPath:
    return _DEFAULT.arc(origin, destination)

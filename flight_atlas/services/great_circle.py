"""Great-circle interpolation between two coordinates."""

from __future__ import annotations

from math import asin, atan2, cos, sin, sqrt

from ..config import ROUTE_ENGINE_CONFIG, RouteEngineConfig
from ..core import Coordinate, GeoPath
from ..utils import to_degrees, to_radians


class GreatCircleInterpolator:
    """Sample points along the geodesic between two coordinates."""

    def __init__(self, config: RouteEngineConfig = ROUTE_ENGINE_CONFIG):
        self.config = config

    def path(self, origin: Coordinate, destination: Coordinate, num_points: int | None = None) -> GeoPath:
        """Return ``num_points + 1`` points from ``origin`` to ``destination``.

        Coincident endpoints or a non-positive ``num_points`` yield the
        two-point path ``[origin, destination]``. Longitudes of interpolated
        points are unwrapped when the route crosses the anti-meridian so the
        line renders without jumping across the map; the endpoints are always
        emitted exactly as given.
        """

        if num_points is None:
            num_points = self.config.default_path_points

        lon1 = to_radians(origin.longitude)
        lat1 = to_radians(origin.latitude)
        lon2 = to_radians(destination.longitude)
        lat2 = to_radians(destination.latitude)

        h = sin((lat1 - lat2) / 2) ** 2 + cos(lat1) * cos(lat2) * sin((lon1 - lon2) / 2) ** 2
        d = 2 * asin(sqrt(min(h, 1.0)))

        if d < self.config.degenerate_angle or num_points < 1:
            return GeoPath((origin, destination))

        crosses_antimeridian = abs(origin.longitude - destination.longitude) > 180
        sin_d = sin(d)

        points: list[Coordinate] = [origin]
        for i in range(1, num_points):
            f = i / num_points
            a = sin((1 - f) * d) / sin_d
            b = sin(f * d) / sin_d

            x = a * cos(lat1) * cos(lon1) + b * cos(lat2) * cos(lon2)
            y = a * cos(lat1) * sin(lon1) + b * cos(lat2) * sin(lon2)
            z = a * sin(lat1) + b * sin(lat2)

            latitude = to_degrees(atan2(z, sqrt(x * x + y * y)))
            longitude = to_degrees(atan2(y, x))
            if crosses_antimeridian:
                longitude = _unwrap_longitude(longitude, origin.longitude)
            points.append(Coordinate(longitude, latitude))
        points.append(destination)

        return GeoPath(tuple(points))


def _unwrap_longitude(longitude: float, origin_longitude: float) -> float:
    # keep far-side points on the origin's side of the 180 degree line
    if origin_longitude > 0 and longitude < -90:
        return longitude + 360
    if origin_longitude < 0 and longitude > 90:
        return longitude - 360
    return longitude


_DEFAULT = GreatCircleInterpolator()


def great_circle_path(origin: Coordinate, destination: Coordinate, num_points: int | None = None) -> GeoPath:
    """Module level shortcut using the default engine configuration."""

    return _DEFAULT.path(origin, destination, num_points)

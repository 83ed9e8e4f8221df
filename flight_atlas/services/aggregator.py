"""Collapse routes into buckets appropriate for the current zoom level."""

from __future__ import annotations

from typing import Iterable

from ..config import ROUTE_ENGINE_CONFIG, RouteEngineConfig
from ..core import AggregatedRoute, AggregationLevel, Route


class RouteAggregator:
    """Group routes by city pair or country pair depending on zoom."""

    def __init__(self, config: RouteEngineConfig = ROUTE_ENGINE_CONFIG):
        self.config = config

    def level_for(self, zoom_level: float) -> AggregationLevel:
        if zoom_level > self.config.pass_through_zoom:
            return AggregationLevel.ROUTE
        if zoom_level > self.config.city_zoom:
            return AggregationLevel.CITY
        return AggregationLevel.COUNTRY

    def aggregate(self, routes: Iterable[Route], zoom_level: float) -> list[AggregatedRoute]:
        """Return one entry per bucket in creation order.

        Bucket keys keep the direction of travel, so A->B and B->A are counted
        separately. The counts always add up to the number of input routes.
        """

        level = self.level_for(zoom_level)
        if level is AggregationLevel.ROUTE:
            return [AggregatedRoute(route=route, count=1, level=level) for route in routes]

        buckets: dict[tuple[str, str], AggregatedRoute] = {}
        for route in routes:
            key = self._key(route, level)
            bucket = buckets.get(key)
            if bucket is None:
                buckets[key] = AggregatedRoute(route=route, count=1, key=key, level=level)
            else:
                bucket.count += 1
        return list(buckets.values())

    @staticmethod
    def _key(route: Route, level: AggregationLevel) -> tuple[str, str]:
        if level is AggregationLevel.CITY:
            return (route.origin_city, route.destination_city)
        return (route.origin_country, route.destination_country)


_DEFAULT = RouteAggregator()


def aggregate_routes(routes: Iterable[Route], zoom_level: float) -> list[AggregatedRoute]:
    return _DEFAULT.aggregate(routes, zoom_level)

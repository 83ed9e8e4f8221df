import pytest

from flight_atlas.config import RouteEngineConfig
from flight_atlas.core import AggregationLevel
from flight_atlas.services import RouteAggregator, aggregate_routes

from factories import make_route


@pytest.mark.parametrize("zoom", [0, 2.5, 4, 4.5, 6, 8, 8.5, 12])
def test_counts_always_add_up_to_route_count(mixed_routes, zoom):
    aggregated = aggregate_routes(mixed_routes, zoom)

    assert sum(entry.count for entry in aggregated) == len(mixed_routes)


def test_high_zoom_passes_routes_through(mixed_routes):
    aggregated = aggregate_routes(mixed_routes, 9)

    assert len(aggregated) == len(mixed_routes)
    assert all(entry.count == 1 for entry in aggregated)
    assert [entry.route for entry in aggregated] == mixed_routes
    assert all(entry.level is AggregationLevel.ROUTE and entry.key is None for entry in aggregated)


def test_medium_zoom_buckets_by_city_pair(mixed_routes):
    aggregated = aggregate_routes(mixed_routes, 8)

    counts = {entry.key: entry.count for entry in aggregated}
    assert counts == {
        ("New York", "San Francisco"): 2,
        ("San Francisco", "New York"): 1,
        ("New York", "London"): 1,
        ("Boston", "London"): 1,
        ("London", "Paris"): 1,
    }
    assert all(entry.level is AggregationLevel.CITY for entry in aggregated)


def test_low_zoom_buckets_by_country_pair(mixed_routes):
    aggregated = aggregate_routes(mixed_routes, 4)

    counts = {entry.key: entry.count for entry in aggregated}
    assert counts == {("US", "US"): 3, ("US", "GB"): 2, ("GB", "FR"): 1}


def test_bucket_keys_keep_direction():
    routes = [make_route("A", "B"), make_route("B", "A"), make_route("A", "B")]

    aggregated = aggregate_routes(routes, 6)

    assert [(entry.key, entry.count) for entry in aggregated] == [(("A", "B"), 2), (("B", "A"), 1)]


def test_first_route_seeds_the_bucket():
    first = make_route("A", "B", annotation="first")
    second = make_route("A", "B", annotation="second")

    (bucket,) = aggregate_routes([first, second], 5)

    assert bucket.route is first
    assert bucket.count == 2


def test_empty_input_gives_no_buckets():
    assert aggregate_routes([], 3) == []


def test_thresholds_are_configurable():
    aggregator = RouteAggregator(RouteEngineConfig(pass_through_zoom=12, city_zoom=10))

    assert aggregator.level_for(11) is AggregationLevel.CITY
    assert aggregator.level_for(10) is AggregationLevel.COUNTRY
    assert aggregator.level_for(12.5) is AggregationLevel.ROUTE

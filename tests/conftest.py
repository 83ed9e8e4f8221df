from __future__ import annotations

import pytest

from flight_atlas.core import Coordinate, Route

from factories import CDG, JFK, LHR, SFO, make_route


@pytest.fixture()
def mixed_routes() -> list[Route]:
    return [
        make_route("New York", "San Francisco"),
        make_route("New York", "San Francisco"),
        make_route("San Francisco", "New York", origin=SFO, destination=JFK),
        make_route(
            "New York",
            "London",
            destination_country="GB",
            destination=LHR,
        ),
        make_route(
            "Boston",
            "London",
            destination_country="GB",
            origin=Coordinate(-71.0052, 42.3656),
            destination=LHR,
        ),
        make_route(
            "London",
            "Paris",
            origin_country="GB",
            destination_country="FR",
            origin=LHR,
            destination=CDG,
        ),
    ]

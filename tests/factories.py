"""Shared test data: airport coordinates and a route builder."""

from __future__ import annotations

from flight_atlas.core import Coordinate, Route

JFK = Coordinate(-73.7781, 40.6413)
LHR = Coordinate(-0.4543, 51.4700)
CDG = Coordinate(2.5479, 49.0097)
SFO = Coordinate(-122.3790, 37.6213)


def make_route(
    origin_city: str,
    destination_city: str,
    *,
    origin_country: str = "US",
    destination_country: str = "US",
    origin: Coordinate = JFK,
    destination: Coordinate = SFO,
    **extra,
) -> Route:
    return Route(
        origin=origin,
        destination=destination,
        origin_city=origin_city,
        origin_country=origin_country,
        destination_city=destination_city,
        destination_country=destination_country,
        **extra,
    )


FIELDS = [
    "origin_lon",
    "origin_lat",
    "destination_lon",
    "destination_lat",
    "origin_city",
    "origin_country",
    "destination_city",
    "destination_country",
    "distance_miles",
    "aircraft_type",
    "carbon_offset",
]


def jfk_lhr(**overrides) -> dict:
    row = {
        "origin_lon": "-73.7781",
        "origin_lat": "40.6413",
        "destination_lon": "-0.4543",
        "destination_lat": "51.47",
        "origin_city": "New York",
        "origin_country": "US",
        "destination_city": "London",
        "destination_country": "GB",
        "distance_miles": "3451",
        "aircraft_type": "Boeing 777-300ER",
        "carbon_offset": "true",
    }
    row.update(overrides)
    return row

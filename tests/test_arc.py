import pytest

from flight_atlas.config import RouteEngineConfig
from flight_atlas.core import Coordinate
from flight_atlas.services import ArcGenerator, curved_arc


def test_short_segment_bows_by_tenth_of_its_length():
    arc = curved_arc(Coordinate(0.0, 0.0), Coordinate(10.0, 0.0))

    assert arc.control.longitude == pytest.approx(5.0)
    assert arc.control.latitude == pytest.approx(1.0)


def test_curvature_is_capped_for_long_segments():
    arc = curved_arc(Coordinate(0.0, 0.0), Coordinate(100.0, 0.0))

    assert arc.control.longitude == pytest.approx(50.0)
    assert arc.control.latitude == pytest.approx(5.0)


def test_offset_is_perpendicular_to_the_segment():
    arc = curved_arc(Coordinate(0.0, 0.0), Coordinate(0.0, 10.0))

    assert arc.control.longitude == pytest.approx(-1.0)
    assert arc.control.latitude == pytest.approx(5.0)


def test_coincident_points_give_degenerate_arc():
    point = Coordinate(12.5, 41.9)
    arc = curved_arc(point, point)

    assert arc.control is None
    assert arc.points == (point, point)


def test_arc_keeps_exact_endpoints_and_builds_feature():
    origin = Coordinate(-0.4543, 51.47)
    destination = Coordinate(2.5479, 49.0097)
    feature = curved_arc(origin, destination).as_feature()

    coordinates = feature["geometry"]["coordinates"]
    assert feature["geometry"]["type"] == "LineString"
    assert len(coordinates) == 3
    assert coordinates[0] == [origin.longitude, origin.latitude]
    assert coordinates[-1] == [destination.longitude, destination.latitude]


def test_cap_is_configurable():
    generator = ArcGenerator(RouteEngineConfig(arc_max_strength=2.0))
    arc = generator.arc(Coordinate(0.0, 0.0), Coordinate(100.0, 0.0))

    assert arc.control.latitude == pytest.approx(2.0)

from __future__ import annotations

import json
import zipfile
from pathlib import Path

import pytest

from flight_atlas.core import AggregatedRoute, AggregationLevel, RenderedRoute
from flight_atlas.services import GeoJsonExporter, KmzExporter
from flight_atlas.services.kmz_exporter import kml_color

from factories import CDG, LHR, make_route


@pytest.fixture()
def rendered() -> list[RenderedRoute]:
    busy = AggregatedRoute(
        route=make_route("London", "Paris", origin=LHR, destination=CDG),
        count=4,
        key=("London", "Paris"),
        level=AggregationLevel.CITY,
    )
    quiet = AggregatedRoute(
        route=make_route("Paris", "London", origin=CDG, destination=LHR),
        count=1,
        key=("Paris", "London"),
        level=AggregationLevel.CITY,
    )
    return [
        RenderedRoute(aggregated=busy, coordinates=[LHR.as_list(), CDG.as_list()], color=[255, 0, 0, 255]),
        RenderedRoute(aggregated=quiet, coordinates=[CDG.as_list(), LHR.as_list()], color=[64, 0, 191, 255]),
    ]


def test_geojson_feature_collection(rendered):
    collection = GeoJsonExporter().build(rendered)

    assert collection["type"] == "FeatureCollection"
    first = collection["features"][0]
    assert first["geometry"] == {"type": "LineString", "coordinates": [LHR.as_list(), CDG.as_list()]}
    assert first["properties"]["count"] == 4
    assert first["properties"]["level"] == "city"
    assert first["properties"]["color"] == [255, 0, 0, 255]
    assert first["properties"]["stroke"] == "#ff0000"
    assert first["properties"]["destination_city"] == "Paris"


def test_geojson_export_writes_json(tmp_path: Path, rendered):
    output = GeoJsonExporter().export(rendered, tmp_path / "routes.geojson")

    data = json.loads(output.read_text(encoding="utf-8"))
    assert len(data["features"]) == 2


def test_kml_color_is_aabbggrr():
    assert kml_color([255, 0, 0, 255]) == "ff0000ff"
    assert kml_color([0, 0, 255, 128]) == "80ff0000"


def test_kmz_export_writes_styled_lines(tmp_path: Path, rendered):
    output = KmzExporter().export(rendered, tmp_path / "routes.kmz")

    with zipfile.ZipFile(output) as archive:
        content = archive.read("doc.kml").decode("utf-8")

    assert content.count("<Placemark>") == 2
    assert "<color>ff0000ff</color>" in content
    assert "#density-ff0000ff" in content
    assert "London - Paris (4)" in content
    assert f"{LHR.longitude:.6f},{LHR.latitude:.6f},0 {CDG.longitude:.6f},{CDG.latitude:.6f},0" in content

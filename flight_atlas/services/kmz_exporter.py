"""Generate KMZ route maps from rendered routes."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable
from zipfile import ZIP_DEFLATED, ZipFile

from ..core import RenderedRoute

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class KmzExporter:
    """Create KMZ archives with one styled line per rendered route."""

    document_name: str = "Flight Atlas"
    line_width: float = 2.0

    def export(self, rendered: Iterable[RenderedRoute], output_path: Path | str) -> Path:
        output_path = Path(output_path)
        kml_content = self._build_kml(list(rendered))
        with ZipFile(output_path, "w", compression=ZIP_DEFLATED) as archive:
            archive.writestr("doc.kml", kml_content)
        logger.debug("Wrote KMZ route map to %s", output_path)
        return output_path

    def _build_kml(self, rendered: list[RenderedRoute]) -> bytes:
        kml = ET.Element("kml", xmlns="http://www.opengis.net/kml/2.2")
        document = ET.SubElement(kml, "Document")
        ET.SubElement(document, "name").text = self.document_name

        styles: dict[str, str] = {}
        for item in rendered:
            color = kml_color(item.color)
            if color in styles:
                continue
            style_id = f"density-{color}"
            styles[color] = style_id
            style = ET.SubElement(document, "Style", id=style_id)
            line_style = ET.SubElement(style, "LineStyle")
            ET.SubElement(line_style, "color").text = color
            ET.SubElement(line_style, "width").text = f"{self.line_width:g}"

        for item in rendered:
            route = item.aggregated.route
            placemark = ET.SubElement(document, "Placemark")
            ET.SubElement(placemark, "name").text = _route_name(item)
            ET.SubElement(placemark, "styleUrl").text = f"#{styles[kml_color(item.color)]}"

            extended_data = ET.SubElement(placemark, "ExtendedData")

            def add_field(key: str, value: object) -> None:
                data = ET.SubElement(extended_data, "Data", name=key)
                ET.SubElement(data, "value").text = "" if value is None else str(value)

            add_field("count", item.aggregated.count)
            add_field("level", item.aggregated.level.value)
            for key, value in route.as_properties().items():
                add_field(key, value)

            line = ET.SubElement(placemark, "LineString")
            ET.SubElement(line, "tessellate").text = "1"
            ET.SubElement(line, "coordinates").text = " ".join(
                f"{lon:.6f},{lat:.6f},0" for lon, lat in item.coordinates
            )

        return ET.tostring(kml, encoding="utf-8", xml_declaration=True)


def kml_color(rgba: list[int]) -> str:
    """Convert an RGBA list to KML's ``aabbggrr`` hex notation."""

    red, green, blue, alpha = rgba
    return f"{alpha:02x}{blue:02x}{green:02x}{red:02x}"


def _route_name(item: RenderedRoute) -> str:
    route = item.aggregated.route
    key = item.aggregated.key
    if key is not None:
        origin, destination = key
    else:
        origin = route.origin_city or route.origin_country
        destination = route.destination_city or route.destination_country
    return f"{origin or '?'} - {destination or '?'} ({item.aggregated.count})"

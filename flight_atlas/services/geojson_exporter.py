"""GeoJSON output for rendered route maps."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from ..core import RenderedRoute
from .density import DensityColorMapper

logger = logging.getLogger(__name__)


class GeoJsonExporter:
    """Turn rendered routes into a GeoJSON ``FeatureCollection``."""

    def build(self, rendered: Iterable[RenderedRoute]) -> dict:
        features = []
        for item in rendered:
            aggregated = item.aggregated
            properties = {
                "count": aggregated.count,
                "level": aggregated.level.value,
                "color": list(item.color),
                "stroke": DensityColorMapper.to_hex(item.color),
            }
            properties.update(aggregated.route.as_properties())
            features.append(
                {
                    "type": "Feature",
                    "geometry": {"type": "LineString", "coordinates": item.coordinates},
                    "properties": properties,
                }
            )
        return {"type": "FeatureCollection", "features": features}

    def export(self, rendered: Iterable[RenderedRoute], output_path: Path | str) -> Path:
        output_path = Path(output_path)
        collection = self.build(rendered)
        with output_path.open("w", encoding="utf-8") as handle:
            json.dump(collection, handle, ensure_ascii=False)
        logger.debug("Wrote %d features to %s", len(collection["features"]), output_path)
        return output_path

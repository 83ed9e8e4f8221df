"""Flight log CSV loading service."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, Sequence

from ..core import RenderError, Route
from ..utils import detect_encoding

logger = logging.getLogger(__name__)


class FlightLoader:
    """Load flight log CSV files into :class:`Route` objects."""

    REQUIRED_COLUMNS: Sequence[str] = (
        "origin_lon",
        "origin_lat",
        "destination_lon",
        "destination_lat",
        "origin_city",
        "origin_country",
        "destination_city",
        "destination_country",
    )

    def __init__(self, *, encoding: str | None = None):
        self.encoding = encoding or "utf-8-sig"

    def load(self, paths: Iterable[Path | str]) -> list[Route]:
        routes: list[Route] = []
        for path in paths:
            routes.extend(self._load_single(Path(path)))
        return routes

    def _load_single(self, path: Path) -> list[Route]:
        if not path.exists():
            raise RenderError(f"Flight log not found: {path}")

        encoding = self.encoding
        if encoding == "auto":
            encoding = detect_encoding(path)

        routes: list[Route] = []
        with path.open("r", encoding=encoding, errors="replace", newline="") as handle:
            reader = csv.DictReader(handle)
            self._validate_headers(reader.fieldnames or [], path)

            # header is line 1
            for line_number, row in enumerate(reader, start=2):
                if not any((value or "").strip() for value in row.values() if isinstance(value, str)):
                    continue
                try:
                    routes.append(Route.from_row(row))
                except RenderError as exc:
                    raise RenderError(
                        f"Invalid flight on line {line_number}: {exc}",
                        details={"path": str(path), "line": line_number, **exc.details},
                    ) from exc

        logger.info("Loaded %d flights from %s", len(routes), path.name)
        return routes

    def _validate_headers(self, headers: Sequence[str], path: Path) -> None:
        missing = [column for column in self.REQUIRED_COLUMNS if column not in headers]
        if missing:
            raise RenderError(
                "Flight log is missing required columns",
                details={"path": str(path), "missing": missing},
            )

"""File IO utilities."""

from __future__ import annotations

import os
import unicodedata
from pathlib import Path

import chardet

# bytes read for encoding detection
_ENCODING_SAMPLE_BYTES = 64 * 1024
_MIN_ENCODING_CONFIDENCE = 0.5


def detect_encoding(path: os.PathLike[str] | str, *, fallback: str = "utf-8-sig") -> str:
    """Guess the encoding of a flight log, returning ``fallback`` when unsure."""

    with open(path, "rb") as handle:
        sample = handle.read(_ENCODING_SAMPLE_BYTES)
    if not sample:
        return fallback
    detection = chardet.detect(sample)
    encoding = detection.get("encoding")
    if not encoding or (detection.get("confidence") or 0) < _MIN_ENCODING_CONFIDENCE:
        return fallback
    if encoding.lower() in {"ascii", "utf-8"}:
        # utf-8-sig also strips a spreadsheet BOM
        return "utf-8-sig"
    return encoding


def safe_filename(filename: str, *, default: str = "flight_log") -> str:
    """Return a filesystem safe version of an uploaded filename."""

    normalized = unicodedata.normalize("NFKD", filename)
    ascii_only = normalized.encode("ascii", "ignore").decode("ascii")
    sanitized = "".join(c for c in ascii_only if c.isalnum() or c in {"-", "_", "."})
    sanitized = sanitized.lstrip(".")
    return sanitized or default


def ensure_directory(path: os.PathLike[str] | str) -> Path:
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory

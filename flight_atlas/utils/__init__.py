"""Utility helpers for the Flight Atlas project."""

from .geo import distance_miles, round_half_up, to_degrees, to_radians
from .formatting import (
    currency_symbol,
    format_carbon,
    format_currency,
    format_number,
    format_offset_cost,
)
from .io import detect_encoding, ensure_directory, safe_filename

__all__ = [
    "distance_miles",
    "round_half_up",
    "to_degrees",
    "to_radians",
    "currency_symbol",
    "format_carbon",
    "format_currency",
    "format_number",
    "format_offset_cost",
    "detect_encoding",
    "ensure_directory",
    "safe_filename",
]

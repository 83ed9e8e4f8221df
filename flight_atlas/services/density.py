"""Map route frequency onto a blue (rare) to red (frequent) gradient."""

from __future__ import annotations

from typing import Iterable

from ..core import AggregatedRoute
from ..utils import round_half_up

Rgba = list[int]


class DensityColorMapper:
    def color(self, count: int, max_count: int) -> Rgba:
        """Return the RGBA colour for ``count`` out of ``max_count``.

        ``max_count`` must be positive; callers skip empty route sets.
        """

        ratio = min(count / max_count, 1)
        red = round_half_up(255 * ratio)
        blue = round_half_up(255 * (1 - ratio))
        return [red, 0, blue, 255]

    @staticmethod
    def max_count(aggregated: Iterable[AggregatedRoute]) -> int:
        return max((entry.count for entry in aggregated), default=0)

    @staticmethod
    def to_hex(rgba: Rgba) -> str:
        red, green, blue, _ = rgba
        return f"#{red:02x}{green:02x}{blue:02x}"


_DEFAULT = DensityColorMapper()


def density_color(count: int, max_count: int) -> Rgba:
    return _DEFAULT.color(count, max_count)

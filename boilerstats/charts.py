from __future__ import annotations
import math
from typing import Protocol, Sequence

import asciichartpy

from . import canon


class ChartRenderer(Protocol):
    """Turns a numeric series into a multi-line text plot."""

    def plot(self, series: Sequence[float], height: int = canon.CHART_HEIGHT) -> str: ...


class AsciiChart:
    """ChartRenderer backed by asciichartpy."""

    def __init__(self, offset: int = 3, fmt: str = "{:8.2f} "):
        self.offset = offset
        self.fmt = fmt

    def plot(self, series: Sequence[float], height: int = canon.CHART_HEIGHT) -> str:
        values = [float(v) for v in series]
        if not any(math.isfinite(v) for v in values):
            return ""
        return asciichartpy.plot(
            values, {"height": height, "offset": self.offset, "format": self.fmt}
        )


def repeat_points(series: Sequence[float], times: int = canon.HOURLY_CHART_REPEAT) -> list[float]:
    """Stretch a short series horizontally by repeating every point."""
    return [float(v) for v in series for _ in range(times)]

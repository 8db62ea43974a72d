from __future__ import annotations
import pandas as pd
from typing import Sequence

from . import canon, transform
from .types import SampleFrame, ShortWindow


def smooth(
    values: Sequence[float] | pd.Series, neighbours: int = canon.SMOOTHING_NEIGHBOURS
) -> pd.Series:
    """
    Centred moving average: each point becomes the mean of itself and up to
    `neighbours` values on each side. Edges average over whatever neighbours
    exist (no padding, no wrap-around); NaNs are skipped. Rounded to 3 decimals.
    """
    s = pd.Series(values, dtype=float).reset_index(drop=True)
    if s.empty:
        return s
    width = 2 * neighbours + 1
    return s.rolling(width, center=True, min_periods=1).mean().round(3)


def _trend(delta: float | None) -> str:
    if delta is None or pd.isna(delta) or delta == 0:
        return "flat"
    return "up" if delta > 0 else "down"


def short_window(
    df: SampleFrame,
    now: pd.Timestamp,
    *,
    minutes: int = canon.SHORT_WINDOW_MIN,
    neighbours: int = canon.SMOOTHING_NEIGHBOURS,
) -> ShortWindow:
    """Smoothed view of the samples recorded in the last `minutes` before `now`."""
    recent = transform.last_minutes(df, now, minutes)
    values = recent[canon.POWER_COL].astype(float).reset_index(drop=True)
    smoothed = smooth(values, neighbours)

    if values.empty:
        return ShortWindow(values=[], smoothed=[], average=0.0)

    average = float(smoothed.sum()) / len(values)
    last = float(values.iat[-1])
    delta = float(values.iat[-1] - values.iat[-2]) if len(values) >= 2 else None
    if delta is not None and pd.isna(delta):
        delta = None

    times = recent[canon.TIME_COL]
    return ShortWindow(
        values=values.tolist(),
        smoothed=smoothed.tolist(),
        average=average,
        last=last,
        delta=delta,
        trend=_trend(delta),  # type: ignore[arg-type]
        start=times.iat[0],
        end=times.iat[-1],
    )

# boilerstats/utils.py
from __future__ import annotations
import math
import numpy as np
import pandas as pd
from datetime import datetime
from zoneinfo import ZoneInfo

from . import canon


def parse_timestamps(ts: pd.Series, tz: str = canon.DEFAULT_TZ) -> pd.Series:
    """
    Parse ISO-8601 strings into tz-aware timestamps in `tz`.

    Unparseable values become NaT. Strings without an offset are read as UTC,
    which is what the log writer emits.
    """
    s = pd.to_datetime(ts, errors="coerce", utc=True, format="ISO8601")
    return s.dt.tz_convert(ZoneInfo(tz))


def parse_power(values: pd.Series) -> pd.Series:
    """Numeric kW from raw strings; non-numeric (including empty) become NaN."""
    s = values.astype(str).str.strip()
    return pd.to_numeric(s, errors="coerce").astype(float)


def parse_flag(values: pd.Series) -> pd.Series:
    return values.astype(str).str.strip().str.lower().isin(canon.TRUTHY)


def to_local(now: datetime | pd.Timestamp | str, tz: str = canon.DEFAULT_TZ) -> pd.Timestamp:
    """Return `now` as a tz-aware Timestamp in `tz`; naive values are taken as local."""
    ts = pd.Timestamp(now)
    if ts.tz is None:
        return ts.tz_localize(ZoneInfo(tz))
    return ts.tz_convert(ZoneInfo(tz))


def wall_clock(ts: pd.Series) -> pd.Series:
    """Drop the timezone from tz-aware timestamps, keeping local wall-clock time."""
    if getattr(ts.dt, "tz", None) is None:
        return ts
    return ts.dt.tz_localize(None)


def elapsed_hours_since_midnight(now: pd.Timestamp) -> float:
    """Real hours elapsed between local midnight and `now`.

    Stays tz-aware so a clock change that day is counted (23 or 25 hour days).
    """
    return (now - now.normalize()) / pd.Timedelta(hours=1)


def safe_ratio(num: float, den: float) -> float:
    """num / den, or NaN when den is zero or either side is not finite."""
    if den == 0 or not np.isfinite(den) or not np.isfinite(num):
        return float("nan")
    return num / den


def is_finite(value: float | None) -> bool:
    return value is not None and math.isfinite(value)


def fmt_number(value: float | None, decimals: int = 1, suffix: str = "") -> str:
    """Fixed-decimal text; non-finite or missing values render as 'n/a'."""
    if not is_finite(value):
        return "n/a"
    return f"{value:.{decimals}f}{suffix}"

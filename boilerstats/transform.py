from __future__ import annotations
import pandas as pd
from typing import Optional

from . import canon, utils
from .types import SampleFrame

HOURLY_COLUMNS = ["hour_start", "average", "samples"]


def filter_range(
    df: SampleFrame,
    start: Optional[pd.Timestamp] = None,
    end: Optional[pd.Timestamp] = None,
) -> SampleFrame:
    """
    Keep rows with start < t_start <= end. Open bounds when None.

    Uses a mask rather than label slicing since the log is not guaranteed to be
    time-sorted; rows without a timestamp never pass a bounded filter.
    """
    if start is None and end is None:
        return df
    t = df[canon.TIME_COL]
    mask = pd.Series(True, index=df.index)
    if start is not None:
        mask &= t > start
    if end is not None:
        mask &= t <= end
    return df[mask.fillna(False).astype(bool)]


def last_hours(df: SampleFrame, now: pd.Timestamp, hours: float) -> SampleFrame:
    return filter_range(df, start=now - pd.Timedelta(hours=hours))


def last_minutes(df: SampleFrame, now: pd.Timestamp, minutes: float) -> SampleFrame:
    return filter_range(df, start=now - pd.Timedelta(minutes=minutes))


def hourly_means(df: SampleFrame) -> pd.DataFrame:
    """
    Mean kW per local calendar hour.

    Returns:
        DataFrame with columns:
          - 'hour_start' (naive local wall-clock Timestamp, minute=0)
          - 'average' (mean of the hour's numeric kW values)
          - 'samples' (how many numeric values went into the mean)
        sorted ascending by 'hour_start'. Hours with no numeric value are
        not emitted.
    """
    s = pd.DataFrame(
        {
            "hour_start": utils.wall_clock(df[canon.TIME_COL]).dt.floor("h"),
            "kw": df[canon.POWER_COL],
        }
    ).dropna(subset=["hour_start"])

    if s.empty:
        return pd.DataFrame(columns=HOURLY_COLUMNS)

    out = (
        s.groupby("hour_start", sort=True)["kw"]
        .agg(average="mean", samples="count")
        .reset_index()
    )
    out = out[out["samples"] > 0]
    return out.sort_values("hour_start", kind="stable").reset_index(drop=True)[
        HOURLY_COLUMNS
    ]

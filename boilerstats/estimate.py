from __future__ import annotations
import numpy as np
import pandas as pd

from . import utils
from .config import Estimations
from .types import FuelRunway

DAILY_COLUMNS = [
    "day",
    "average_kw",
    "consumption_kwh",
    "is_partial",
    "fuel_kg",
    "cost_eur",
    "change_pct",
]


def daily_estimates(
    hourly: pd.DataFrame, now: pd.Timestamp, estimations: Estimations
) -> pd.DataFrame:
    """
    Roll hourly means up into one row per local calendar day.

    - average_kw: mean of the day's hourly averages
    - consumption_kwh: average_kw * 24, or average_kw * hours elapsed since
      local midnight for today (is_partial=True)
    - fuel_kg / cost_eur: consumption converted with the pellet estimations
    - change_pct: % change of average_kw vs the previous row; 0.0 for the first
      day, NaN when the previous average is 0

    Negative averages are passed through untouched; they point at bad readings
    upstream and clamping would hide them.
    """
    if hourly.empty:
        return pd.DataFrame(columns=DAILY_COLUMNS)

    h = hourly.assign(day=pd.to_datetime(hourly["hour_start"]).dt.date)
    out = (
        h.groupby("day", sort=True)["average"]
        .mean()
        .rename("average_kw")
        .reset_index()
    )

    today = now.tz_localize(None).date() if now.tz is not None else now.date()
    elapsed = utils.elapsed_hours_since_midnight(now)
    out["is_partial"] = out["day"] == today
    hours = np.where(out["is_partial"], elapsed, 24.0)
    out["consumption_kwh"] = out["average_kw"] * hours
    out["fuel_kg"] = out["consumption_kwh"] / estimations.pellet_kg_power
    out["cost_eur"] = out["fuel_kg"] * estimations.pellet_kg_cost

    prev = out["average_kw"].shift(1)
    change = (out["average_kw"] - prev) / prev.where(prev != 0) * 100.0
    change.iloc[0] = 0.0
    out["change_pct"] = change.astype(float)

    return out.sort_values("day", kind="stable").reset_index(drop=True)[DAILY_COLUMNS]


def fuel_runway(days: pd.DataFrame, estimations: Estimations) -> FuelRunway:
    """Fuel burnt so far and how long the remaining pellets should last."""
    n = int(len(days))
    total_kwh = float(days["consumption_kwh"].sum()) if n else 0.0
    total_fuel = total_kwh / estimations.pellet_kg_power
    per_day = total_fuel / n if n else 0.0
    remaining = estimations.last_fuel_level - total_fuel
    remaining_days = utils.safe_ratio(remaining, per_day)
    return FuelRunway(
        days=n,
        total_consumption_kwh=total_kwh,
        total_fuel_kg=total_fuel,
        average_fuel_per_day_kg=per_day,
        remaining_fuel_kg=remaining,
        remaining_days=remaining_days if utils.is_finite(remaining_days) else None,
    )

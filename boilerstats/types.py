from __future__ import annotations
from typing import Literal, List, Optional
from dataclasses import dataclass, field

import pandas as pd

IssueKind = Literal["out_of_range", "not_a_number", "invalid_timestamp"]
Trend = Literal["up", "down", "flat"]


# Sample log frame
class SampleFrame(pd.DataFrame):
    """
    Boiler sample log, one row per line of the CSV file.

    Expected:
      - RangeIndex in file order (not necessarily time-sorted)
      - Raw string columns: ['time', 'in_operation', 'power', 'error']
      - Derived columns: ['t_start' (tz-aware, NaT if unparseable),
        'kw' (float, NaN if non-numeric), 'operating' (bool)]
    """

    @property
    def _constructor(self):
        return SampleFrame

    @property
    def t_start(self) -> pd.Series:
        return self["t_start"]

    @property
    def kw(self) -> pd.Series:
        return self["kw"]

    @property
    def operating(self) -> pd.Series:
        return self["operating"]


@dataclass(frozen=True)
class ValidationIssue:
    index: int  # 1-based row in the log file
    kind: IssueKind
    value: str


@dataclass
class ShortWindow:
    """Recent window of samples with its smoothed trend.

    - values/smoothed: raw and centred-average kW, same length
    - average: sum(smoothed) / len(values); 0.0 for an empty window
    - delta: last value minus the previous one, None with fewer than 2 values
    """

    values: List[float]
    smoothed: List[float]
    average: float
    last: Optional[float] = None
    delta: Optional[float] = None
    trend: Trend = "flat"
    start: Optional[pd.Timestamp] = None
    end: Optional[pd.Timestamp] = None

    @property
    def powered_down(self) -> bool:
        return self.average == 0


@dataclass
class FuelRunway:
    days: int
    total_consumption_kwh: float
    total_fuel_kg: float
    average_fuel_per_day_kg: float
    remaining_fuel_kg: float
    remaining_days: Optional[float] = None


@dataclass
class Analysis:
    """Every intermediate product the report is built from."""

    frame: SampleFrame
    issues: List[ValidationIssue] = field(default_factory=list)
    alerts: List[str] = field(default_factory=list)
    window: Optional[ShortWindow] = None
    last_day: Optional[pd.DataFrame] = None
    history: Optional[pd.DataFrame] = None
    days: Optional[pd.DataFrame] = None
    runway: Optional[FuelRunway] = None

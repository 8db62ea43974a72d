from __future__ import annotations
from typing import Final

# Raw log columns, in file order
LOG_COLUMNS: Final[list[str]] = ["time", "in_operation", "power", "error"]

# Derived columns attached by ingest.to_frame
TIME_COL: Final[str] = "t_start"
POWER_COL: Final[str] = "kw"
OPERATING_COL: Final[str] = "operating"

DEFAULT_TZ: Final[str] = "UTC"

# Analytics defaults
SHORT_WINDOW_MIN: Final[int] = 42
DAY_WINDOW_HOURS: Final[int] = 24
SMOOTHING_NEIGHBOURS: Final[int] = 3
MIN_SAMPLES: Final[int] = 15
POWER_MIN_KW: Final[float] = 0.0
POWER_MAX_KW: Final[float] = 15.0
CHART_HEIGHT: Final[int] = 10
HOURLY_CHART_REPEAT: Final[int] = 3

# Hours in [DAY_START_HOUR, DAY_END_HOUR) pick the daytime off-hours message
DAY_START_HOUR: Final[int] = 8
DAY_END_HOUR: Final[int] = 18

NOT_ENOUGH_DATA: Final[str] = "Not enough data to generate stats"

TRUTHY = ("true", "1", "yes", "y", "on")

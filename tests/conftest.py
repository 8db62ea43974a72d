import logging

import pandas as pd
import pytest

from boilerstats import ingest
from boilerstats.config import Config, Estimations

TZ = "UTC"
NOW = pd.Timestamp("2025-01-03 12:00", tz=TZ)


def _aware(ts, tz):
    ts = pd.Timestamp(ts)
    return ts.tz_localize(tz) if ts.tz is None else ts.tz_convert(tz)


def make_rows(start, end, freq="10min", power="1.0", in_operation="true", tz=TZ):
    """Log rows every `freq` in [start, end), shaped like the CSV writer's output."""
    idx = pd.date_range(_aware(start, tz), _aware(end, tz), freq=freq, inclusive="left")
    return [
        {"time": t.isoformat(), "in_operation": in_operation, "power": power, "error": ""}
        for t in idx
    ]


def to_csv_text(rows):
    return "".join(
        f"{r['time']},{r['in_operation']},{r['power']},{r['error']}\n" for r in rows
    )


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def estimations():
    return Estimations(pellet_kg_power=2.0, pellet_kg_cost=0.5, last_fuel_level=100.0)


@pytest.fixture
def config(estimations):
    return Config(estimations=estimations, timezone=TZ)


@pytest.fixture
def steady_rows():
    # 1 kW every 10 minutes from 2025-01-01 00:00 up to NOW
    return make_rows("2025-01-01 00:00", NOW)


@pytest.fixture
def steady_log(steady_rows):
    return ingest.from_records(steady_rows, tz=TZ)


@pytest.fixture
def idle_log():
    return ingest.from_records(make_rows("2025-01-01 00:00", "2025-01-04 00:00", power="0"), tz=TZ)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)

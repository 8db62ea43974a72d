"""Injected clocks: the report only depends on the `now` it is given."""

from datetime import datetime

import pandas as pd
import pytz

from boilerstats import report, utils

from conftest import NOW


def test_to_local_accepts_pytz_and_naive():
    aware = pytz.timezone("Europe/Bucharest").localize(datetime(2025, 1, 3, 14, 0))
    assert utils.to_local(aware, "UTC") == NOW
    naive = utils.to_local(datetime(2025, 1, 3, 12, 0), "UTC")
    assert naive == NOW
    assert str(naive.tz) == "UTC"


def test_elapsed_hours_since_midnight():
    assert utils.elapsed_hours_since_midnight(pd.Timestamp("2025-01-03 06:45", tz="UTC")) == 6.75
    assert utils.elapsed_hours_since_midnight(pd.Timestamp("2025-01-03 00:00")) == 0.0


def test_same_instant_in_any_zone_gives_same_report(steady_log, config):
    local = pytz.timezone("America/New_York").localize(datetime(2025, 1, 3, 7, 0))
    a = report.build_report(steady_log, config=config, now=NOW)
    b = report.build_report(steady_log, config=config, now=local)
    assert a == b


def test_fmt_number_hides_non_finite():
    assert utils.fmt_number(float("nan")) == "n/a"
    assert utils.fmt_number(float("inf")) == "n/a"
    assert utils.fmt_number(None) == "n/a"
    assert utils.fmt_number(2.347, 2, "kg") == "2.35kg"

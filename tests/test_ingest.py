"""Tests for reading the boiler CSV log into a SampleFrame."""

import io

import pandas as pd
import pytest

from boilerstats import exceptions, ingest

LOG = (
    "2025-01-01T00:00:00.000Z,true,1.5,\n"
    "2025-01-01T00:10:00.000Z,false,abc,Power value is not a number\n"
    "nonsense,true,2,\n"
)


def test_from_csv_keeps_every_row_in_file_order():
    df = ingest.from_csv(io.StringIO(LOG))
    assert len(df) == 3
    assert list(df["power"]) == ["1.5", "abc", "2"]
    assert isinstance(df.index, pd.RangeIndex)


def test_from_csv_parses_columns():
    df = ingest.from_csv(io.StringIO(LOG), tz="Europe/Bucharest")
    assert df["kw"].iloc[0] == 1.5
    assert pd.isna(df["kw"].iloc[1])
    assert df["kw"].iloc[2] == 2.0
    assert str(df["t_start"].dt.tz) == "Europe/Bucharest"
    # 00:00 UTC is 02:00 in Bucharest during winter
    assert df["t_start"].iloc[0].hour == 2
    assert pd.isna(df["t_start"].iloc[2])
    assert list(df["operating"]) == [True, False, True]
    assert df["error"].iloc[0] == ""
    assert df["error"].iloc[1] == "Power value is not a number"


def test_from_csv_empty_file():
    df = ingest.from_csv(io.StringIO(""))
    assert len(df) == 0
    assert "kw" in df.columns and "t_start" in df.columns


def test_from_csv_missing_file_raises(tmp_path):
    with pytest.raises(exceptions.IngestError):
        ingest.from_csv(tmp_path / "missing.csv")


def test_from_dataframe_requires_log_columns():
    with pytest.raises(exceptions.IngestError):
        ingest.from_dataframe(pd.DataFrame({"time": ["2025-01-01T00:00:00Z"]}))


def test_from_records_defaults_missing_fields():
    df = ingest.from_records([{"time": "2025-01-01T00:00:00Z", "power": "3"}])
    assert df["error"].iloc[0] == ""
    assert not df["operating"].iloc[0]
    assert df["kw"].iloc[0] == 3.0

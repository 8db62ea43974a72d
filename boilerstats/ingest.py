from __future__ import annotations
import logging
import pandas as pd
from pathlib import Path
from typing import IO, Iterable, Mapping, cast

from . import canon, exceptions, utils
from .types import SampleFrame

logger = logging.getLogger(__name__)


def _empty_raw() -> pd.DataFrame:
    return pd.DataFrame({c: pd.Series(dtype=str) for c in canon.LOG_COLUMNS})


def from_dataframe(df: pd.DataFrame, *, tz: str = canon.DEFAULT_TZ) -> SampleFrame:
    """
    Attach parsed columns to a raw log frame:
      - 't_start': tz-aware timestamp in `tz` (NaT when unparseable)
      - 'kw': float power (NaN when non-numeric)
      - 'operating': bool from 'in_operation'
    Raw columns are kept as strings; rows are never dropped or reordered.
    """
    missing = [c for c in canon.LOG_COLUMNS if c not in df.columns]
    exceptions.require(
        not missing, f"Missing log column(s): {', '.join(missing)}", exceptions.IngestError
    )

    raw = df[canon.LOG_COLUMNS].fillna("").astype(str).reset_index(drop=True)
    out = raw.assign(
        **{
            canon.TIME_COL: utils.parse_timestamps(raw["time"], tz),
            canon.POWER_COL: utils.parse_power(raw["power"]),
            canon.OPERATING_COL: utils.parse_flag(raw["in_operation"]),
        }
    )
    out.__class__ = SampleFrame
    return cast(SampleFrame, out)


def from_records(
    records: Iterable[Mapping[str, object]], *, tz: str = canon.DEFAULT_TZ
) -> SampleFrame:
    """Build a SampleFrame from dicts keyed by the log column names."""
    rows = [{c: r.get(c, "") for c in canon.LOG_COLUMNS} for r in records]
    df = pd.DataFrame(rows, columns=canon.LOG_COLUMNS) if rows else _empty_raw()
    return from_dataframe(df, tz=tz)


def from_csv(file_like: IO[str] | str | Path, *, tz: str = canon.DEFAULT_TZ) -> SampleFrame:
    """
    Read the append-only boiler log (headerless CSV:
    time, in_operation, power, error) and normalise it.
    """
    try:
        raw = pd.read_csv(
            file_like,
            header=None,
            names=canon.LOG_COLUMNS,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        raw = _empty_raw()
    except (OSError, pd.errors.ParserError) as e:
        raise exceptions.IngestError(f"Cannot read boiler log: {e}") from e

    logger.debug("Read %d log rows", len(raw))
    return from_dataframe(raw, tz=tz)

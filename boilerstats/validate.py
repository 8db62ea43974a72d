from __future__ import annotations
import logging
import pandas as pd
from typing import Iterable, List

from . import canon, exceptions
from .types import SampleFrame, ValidationIssue

logger = logging.getLogger(__name__)


def assert_frame(df: pd.DataFrame) -> None:
    for col in (*canon.LOG_COLUMNS, canon.TIME_COL, canon.POWER_COL):
        if col not in df.columns:
            raise exceptions.IngestError(f"Missing required column '{col}'.")
    if not isinstance(df.index, pd.RangeIndex):
        raise exceptions.IngestError("Sample frame must keep a RangeIndex in file order.")


def find_issues(
    df: SampleFrame,
    *,
    power_min: float = canon.POWER_MIN_KW,
    power_max: float = canon.POWER_MAX_KW,
) -> List[ValidationIssue]:
    """
    Flag suspicious rows without removing them.

    Returns one ValidationIssue per problem, ordered by row, carrying the
    1-based file position so operators can find the line.
    """
    assert_frame(df)
    kw = df[canon.POWER_COL]
    out_of_range = (kw < power_min) | (kw > power_max)
    not_a_number = kw.isna()
    bad_time = df[canon.TIME_COL].isna()

    issues: list[ValidationIssue] = []
    for pos in range(len(df)):
        row = pos + 1
        if out_of_range.iat[pos]:
            issues.append(ValidationIssue(row, "out_of_range", df["power"].iat[pos]))
        if not_a_number.iat[pos]:
            issues.append(ValidationIssue(row, "not_a_number", df["power"].iat[pos]))
        if bad_time.iat[pos]:
            issues.append(ValidationIssue(row, "invalid_timestamp", df["time"].iat[pos]))
    return issues


def report_issues(issues: Iterable[ValidationIssue]) -> int:
    """Log each issue as a warning; returns how many were logged."""
    n = 0
    for issue in issues:
        if issue.kind == "invalid_timestamp":
            logger.warning("Invalid time value detected %r at row %d", issue.value, issue.index)
        else:
            logger.warning(
                "Invalid power value detected (%s) %r at row %d",
                issue.kind,
                issue.value,
                issue.index,
            )
        n += 1
    return n


def idle_while_operating(df: SampleFrame) -> pd.Series:
    """Rows flagged as in operation that read exactly 0 kW."""
    return df.operating & (df.kw == 0)

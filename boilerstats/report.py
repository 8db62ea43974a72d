from __future__ import annotations
import logging
import pandas as pd
from datetime import datetime
from typing import Iterable, List, Optional

from . import canon, estimate, messages, smoothing, transform, utils, validate
from .charts import AsciiChart, ChartRenderer, repeat_points
from .config import Config
from .types import Analysis, FuelRunway, SampleFrame, ShortWindow, ValidationIssue

logger = logging.getLogger(__name__)

AXIS = "            ^"
BASELINE = "       -----+" + "-" * 76 + ">"
TABLE_INDENT = "      "
# title, minimum content width, title alignment
DAILY_TABLE = [
    ("Day", 10, "<"),
    ("Consumption (kWh)", 17, "^"),
    ("Fuel", 6, "^"),
    ("Cost", 6, "^"),
    ("H. Average", 11, "<"),
    ("Change", 8, "^"),
]


def _table_rule(widths: List[int]) -> str:
    return TABLE_INDENT + "+" + "+".join("-" * (w + 2) for w in widths) + "+"


def _table_head(widths: List[int]) -> str:
    cells = [f" {title:{align}{w}} " for (title, _, align), w in zip(DAILY_TABLE, widths)]
    return TABLE_INDENT + "|" + "|".join(cells) + "|"


MIN_WIDTHS = [w for _, w, _ in DAILY_TABLE]
TABLE_RULE = _table_rule(MIN_WIDTHS)
TABLE_HEAD = _table_head(MIN_WIDTHS)


def off_hours_message(now: pd.Timestamp) -> str:
    """Pick the idle text by hour of day: [8, 18) is daytime, the rest is night."""
    if canon.DAY_START_HOUR <= now.hour < canon.DAY_END_HOUR:
        return messages.DAY
    return messages.NIGHT


def _issues(df: SampleFrame, config: Config):
    return validate.find_issues(
        df,
        power_min=config.analytics.power_min,
        power_max=config.analytics.power_max,
    )


def operating_alerts(
    df: SampleFrame, window: ShortWindow, now: pd.Timestamp, config: Config
) -> List[str]:
    """Disagreements between the operating flag, the schedule and the power readings."""
    alerts = []
    recent = transform.last_minutes(df, now, config.analytics.short_window_minutes)
    idle = int(validate.idle_while_operating(recent).sum())
    if idle:
        alerts.append(f"{idle} recent sample(s) flagged in operation read 0 kW")
    if window.powered_down and config.in_operation(now.hour):
        alerts.append(f"Boiler idle at {now:%H:%M} inside its operating hours")
    return alerts


def analyse(
    df: SampleFrame,
    *,
    config: Config,
    now: datetime | pd.Timestamp,
    issues: Optional[List[ValidationIssue]] = None,
) -> Analysis:
    """Run every analytics stage on a snapshot of the log.

    Pass `issues` when the log was already validated.
    """
    settings = config.analytics
    now_ts = utils.to_local(now, config.timezone)

    if issues is None:
        issues = _issues(df, config)

    window = smoothing.short_window(
        df,
        now_ts,
        minutes=settings.short_window_minutes,
        neighbours=settings.smoothing_neighbours,
    )
    last_day = transform.hourly_means(
        transform.last_hours(df, now_ts, settings.day_window_hours)
    )
    history = transform.hourly_means(df)
    days = estimate.daily_estimates(history, now_ts, config.estimations)
    runway = estimate.fuel_runway(days, config.estimations)

    return Analysis(
        frame=df,
        issues=issues,
        alerts=operating_alerts(df, window, now_ts, config),
        window=window,
        last_day=last_day,
        history=history,
        days=days,
        runway=runway,
    )


def _change_text(delta: Optional[float]) -> str:
    if delta is None or delta == 0:
        return ""
    arrow = "⬆" if delta > 0 else "⬇"
    return f"({arrow}{delta:.1f})"


def short_window_section(
    window: ShortWindow,
    now: pd.Timestamp,
    renderer: ChartRenderer,
    *,
    minutes: int = canon.SHORT_WINDOW_MIN,
    height: int = canon.CHART_HEIGHT,
) -> List[str]:
    if window.powered_down:
        return [off_hours_message(now)]

    span = ""
    if window.start is not None and window.end is not None:
        span = f"{window.start:%I:%M %p} - {window.end:%I:%M %p}"
    power_now = f"Power now: {utils.fmt_number(window.last, 1)} kW {_change_text(window.delta)}"
    return [
        f"Heating Power (kW)                    Boiler Heating Power Variation in the Last {minutes} Minutes",
        AXIS,
        renderer.plot(window.smoothed, height),
        BASELINE,
        f"    Time:  {span} | {power_now.rstrip()}",
        "",
    ]


def hourly_section(
    hourly: pd.DataFrame,
    renderer: ChartRenderer,
    *,
    hours: int = canon.DAY_WINDOW_HOURS,
    height: int = canon.CHART_HEIGHT,
) -> List[str]:
    averages = hourly["average"].astype(float).tolist()
    labels = " ".join(f"{pd.Timestamp(h).hour:>2}" for h in hourly["hour_start"])
    mean = sum(averages) / len(averages) if averages else None
    return [
        "",
        f"Heating Power (kW)                                                             Last {hours} Hours",
        AXIS,
        renderer.plot(repeat_points(averages), height),
        BASELINE,
        f"Hour:       {labels}",
        f"Average Power: {utils.fmt_number(mean, 2)}kW",
        "",
    ]


def _change_cell(pct: float) -> str:
    if not utils.is_finite(pct):
        return "n/a"
    if pct == 0:
        return ""
    arrow = "↑" if pct > 0 else "↓"
    return f"{arrow} {abs(pct):.1f}%"


def _daily_cells(row: pd.Series) -> List[str]:
    return [
        f"{row['day']:%Y-%m-%d}",
        utils.fmt_number(row["consumption_kwh"], 2),
        utils.fmt_number(row["fuel_kg"], 1, "kg"),
        "€" + utils.fmt_number(row["cost_eur"], 2),
        utils.fmt_number(row["average_kw"], 4, " kWh"),
        _change_cell(row["change_pct"]),
    ]


def table_widths(rows: Iterable[List[str]]) -> List[int]:
    """Column widths wide enough for every cell, never below MIN_WIDTHS."""
    widths = list(MIN_WIDTHS)
    for cells in rows:
        widths = [max(w, len(c)) for w, c in zip(widths, cells)]
    return widths


def daily_row(row: pd.Series, widths: Optional[List[int]] = None) -> str:
    cells = _daily_cells(row)
    widths = widths or table_widths([cells])
    marker = "*" if row["is_partial"] else " "
    out = [f" {cells[0]:<{widths[0]}}{marker}"]
    out += [f" {c:>{w}} " for c, w in zip(cells[1:], widths[1:])]
    return TABLE_INDENT + "|" + "|".join(out) + "|"


def daily_section(days: pd.DataFrame, runway: FuelRunway) -> List[str]:
    rows = [row for _, row in days.iterrows()]
    widths = table_widths(_daily_cells(row) for row in rows)
    rule = _table_rule(widths)
    lines = [
        "",
        TABLE_INDENT
        + "Daily Reports   | Remaining Fuel: "
        + utils.fmt_number(runway.remaining_fuel_kg, 1, "kg")
        + " for "
        + utils.fmt_number(runway.remaining_days, 1, " days"),
        rule,
        _table_head(widths),
        rule,
    ]
    lines.extend(daily_row(row, widths) for row in rows)
    lines.append(rule)
    if days["is_partial"].any():
        lines.append(TABLE_INDENT + "* today so far, extrapolated to the current hour")
    lines.append("")
    return lines


def render(analysis: Analysis, *, config: Config, now: pd.Timestamp, renderer: ChartRenderer) -> str:
    settings = config.analytics
    output: List[str] = []
    output += short_window_section(
        analysis.window,
        now,
        renderer,
        minutes=settings.short_window_minutes,
        height=settings.chart_height,
    )
    output += hourly_section(
        analysis.last_day,
        renderer,
        hours=settings.day_window_hours,
        height=settings.chart_height,
    )
    output += daily_section(analysis.days, analysis.runway)
    return "\n".join(output)


def build_report(
    df: SampleFrame,
    *,
    config: Config,
    now: datetime | pd.Timestamp,
    renderer: Optional[ChartRenderer] = None,
) -> str:
    """
    Build the text report for a log snapshot.

    Data-quality problems are logged as warnings and never stop the report.
    Logs shorter than `analytics.min_samples` rows yield canon.NOT_ENOUGH_DATA.
    """
    issues = _issues(df, config)
    validate.report_issues(issues)
    if len(df) < config.analytics.min_samples:
        logger.info("Only %d samples in the log; skipping stats", len(df))
        return canon.NOT_ENOUGH_DATA

    now_ts = utils.to_local(now, config.timezone)
    analysis = analyse(df, config=config, now=now_ts, issues=issues)
    for alert in analysis.alerts:
        logger.warning(alert)
    logger.debug("Report built with %d data-quality issue(s)", len(issues))
    return render(analysis, config=config, now=now_ts, renderer=renderer or AsciiChart())

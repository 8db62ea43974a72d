"""Command line entry point: boilerstats stats --config config.json"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd
import structlog

from . import exceptions, ingest, utils
from .config import load_config
from .log import setup_logging
from .report import build_report

logger = structlog.get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="boilerstats", description=__doc__)
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--log-format", choices=["console", "json"], default="console")
    sub = parser.add_subparsers(dest="command", required=True)

    stats = sub.add_parser("stats", help="Print the boiler consumption report.")
    stats.add_argument("-c", "--config", required=True, help="Path to the JSON config file.")
    stats.add_argument("--now", type=pd.Timestamp, default=None, help="ISO timestamp to report at (default: now).")
    stats.add_argument("-o", "--output", default=None, help="Also write the report here.")
    return parser.parse_args(argv)


def run_stats(args: argparse.Namespace) -> str:
    config = load_config(args.config)
    if config.verbose:
        logging.getLogger().setLevel(logging.INFO)
    logger.info("Reading boiler log", path=config.paths.data)
    frame = ingest.from_csv(config.paths.data, tz=config.timezone)
    now = utils.to_local(args.now if args.now is not None else pd.Timestamp.now(tz="UTC"), config.timezone)
    text = build_report(frame, config=config, now=now)

    target = args.output or config.paths.stats
    if target:
        Path(target).write_text(text + "\n", encoding="utf-8")
        logger.info("Report written", path=str(target))
    return text


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_format)
    try:
        text = run_stats(args)
    except exceptions.BoilerStatsError as e:
        logger.error("stats failed", error=str(e))
        return 1
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())

from . import (
    canon,
    types,
    utils,
    config,
    ingest,
    validate,
    transform,
    smoothing,
    estimate,
    charts,
    report,
)
from .report import build_report

__all__ = [
    "canon",
    "types",
    "utils",
    "config",
    "ingest",
    "validate",
    "transform",
    "smoothing",
    "estimate",
    "charts",
    "report",
    "build_report",
]

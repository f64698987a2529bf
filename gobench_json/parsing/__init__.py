"""gobench_json.parsing

Line classification, metric extraction and per-package grouping.
"""

from __future__ import annotations

from .lines import (
    BenchmarkLine,
    Ignored,
    LineKind,
    PackageDecl,
    classify,
    extract_benchmark,
)
from .metrics import METRIC_UNITS, SUPPORTED_UNITS, extract_metrics, parse_float
from .state import ParseState, ingest, parse_lines

__all__ = [
    "BenchmarkLine",
    "Ignored",
    "LineKind",
    "METRIC_UNITS",
    "PackageDecl",
    "ParseState",
    "SUPPORTED_UNITS",
    "classify",
    "extract_benchmark",
    "extract_metrics",
    "ingest",
    "parse_float",
    "parse_lines",
]

"""gobench_json.parsing.metrics

Central registry of the metric units we understand.

``go test -bench`` prints metrics as ``<value> <unit>`` pairs after the
iteration count::

    BenchmarkEncode-8       500000        2381 ns/op    1024 B/op         3 allocs/op

Only the units listed in :data:`METRIC_UNITS` are kept. Custom units reported
through ``b.ReportMetric`` (``ops/sec``, ``hits/op``...) are ignored.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Union

logger = logging.getLogger(__name__)

# Field 0 is the benchmark name, field 1 the iteration count.
FIRST_METRIC_FIELD = 2


def _truncate(v: float) -> int:
    # int() rounds toward zero; NaN/Inf raise and the pair is skipped.
    return int(v)


@dataclass(frozen=True)
class MetricUnit:
    """Static description of one recognized unit label."""

    unit: str
    attr: str
    convert: Callable[[float], Union[int, float]] = float


METRIC_UNITS: Dict[str, MetricUnit] = {
    m.unit: m
    for m in (
        MetricUnit("ns/op", "nanos_per_op"),
        MetricUnit("B/op", "bytes_per_op"),
        MetricUnit("allocs/op", "allocs_per_op", _truncate),
        MetricUnit("MB/s", "megabytes_per_second"),
    )
}

SUPPORTED_UNITS = frozenset(METRIC_UNITS)

_INF_SPELLINGS = frozenset({"inf", "infinity"})


def parse_float(token: str) -> Optional[float]:
    """Parse a metric value; return None instead of raising.

    ``float()`` is more permissive than the harness' number format: it accepts
    digit-group underscores and non-ASCII digits, both of which are rejected
    here. A finite literal too large for a double (``1e400``) is out of range
    and rejected too; only an explicit ``inf``/``infinity`` yields infinity.
    """
    if not token or not token.isascii() or "_" in token:
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    if math.isinf(value) and token.lstrip("+-").lower() not in _INF_SPELLINGS:
        return None
    return value


def extract_metrics(fields: Sequence[str]) -> Dict[str, Union[int, float]]:
    """Scan ``(value, unit)`` pairs of a tokenized benchmark line.

    Pairs start at :data:`FIRST_METRIC_FIELD` and advance by two regardless of
    whether a pair was usable. A unit seen twice keeps the last value.

    Returns a mapping of :class:`~gobench_json.domain.BenchmarkResult`
    attribute name to converted value.
    """
    out: Dict[str, Union[int, float]] = {}
    for i in range(FIRST_METRIC_FIELD, len(fields) - 1, 2):
        raw, unit = fields[i], fields[i + 1]
        value = parse_float(raw)
        if value is None:
            logger.debug("skipping non-numeric metric value %r (unit %r)", raw, unit)
            continue

        metric = METRIC_UNITS.get(unit)
        if metric is None:
            continue

        try:
            out[metric.attr] = metric.convert(value)
        except (ValueError, OverflowError):
            logger.debug("skipping %s value %r: not representable", unit, raw)
            continue

    return out

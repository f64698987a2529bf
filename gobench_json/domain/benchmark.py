"""gobench_json.domain.benchmark

Canonical representation of one parsed benchmark-result line.

Output keys
-----------
The JSON keys are the ones downstream dashboards already consume::

    name, runs, ns_per_op, b_per_op, allocs_per_op, mb_per_s

``name`` and ``runs`` are always written. The four metric keys are written
only when the metric was present on the input line; an absent metric is never
emitted as ``null`` or ``0``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

Number = Union[int, float]

# attribute name -> output key, in output order.
METRIC_KEYS: Dict[str, str] = {
    "nanos_per_op": "ns_per_op",
    "bytes_per_op": "b_per_op",
    "allocs_per_op": "allocs_per_op",
    "megabytes_per_second": "mb_per_s",
}

# Largest magnitude Go's encoding/json still writes without an exponent.
_PLAIN_FLOAT_LIMIT = 1e21


def json_number(v: Number) -> Number:
    """Render integral reals as ints (``105`` rather than ``105.0``).

    Non-finite values are returned unchanged so a strict encoder rejects them.
    """
    if isinstance(v, bool):
        raise TypeError("bool is not a metric value")
    if isinstance(v, int):
        return v
    if math.isfinite(v) and v.is_integer() and abs(v) < _PLAIN_FLOAT_LIMIT:
        return int(v)
    return v


@dataclass(frozen=True)
class BenchmarkResult:
    """One benchmark-result line.

    ``name`` keeps any ``-N`` GOMAXPROCS suffix and sub-benchmark path
    (``BenchmarkEncode/small-8``).
    """

    name: str
    iterations: int

    nanos_per_op: Optional[float] = None
    bytes_per_op: Optional[float] = None
    allocs_per_op: Optional[int] = None
    megabytes_per_second: Optional[float] = None

    def metrics(self) -> Dict[str, Number]:
        """Present metrics keyed by output key, in output order."""
        out: Dict[str, Number] = {}
        for attr, key in METRIC_KEYS.items():
            v = getattr(self, attr)
            if v is not None:
                out[key] = v
        return out

    def to_dict(self, *, omit_zero: bool = False) -> Dict[str, Any]:
        """Convert to a JSON-serializable dict.

        With *omit_zero*, metrics equal to zero are dropped as well, which is
        the shape Go's ``omitempty`` struct tags produce.
        """
        out: Dict[str, Any] = {
            "name": self.name,
            "runs": self.iterations,
        }
        for key, v in self.metrics().items():
            if omit_zero and v == 0:
                continue
            out[key] = json_number(v)
        return out


# Package name -> results in input order.
PackageGroups = Dict[str, List[BenchmarkResult]]

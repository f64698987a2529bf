"""gobench_json.parsing.lines

Classify single lines of ``go test -bench`` output.

Three kinds of line matter::

    pkg: example.com/foo                                  -> PackageDecl
    BenchmarkAdd-8      1000000     105 ns/op             -> BenchmarkLine
    goos: linux / PASS / ok  example.com/foo  1.2s        -> Ignored

Classification is pure: no state, no IO.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from gobench_json.domain import BenchmarkResult
from gobench_json.parsing.metrics import extract_metrics

PACKAGE_PREFIX = "pkg: "

# Name field: "Benchmark" plus one or more non-tab characters (spaces allowed),
# then whitespace and the iteration count. Whitespace is the ASCII set the
# harness pads with; NBSP and friends belong to the name.
#
# The harness ends the name field with a tab, so the name runs up to the last
# "<ws><digits>" before that tab. Lines with no tab at all (space-aligned
# copies) split at the first "<ws><digits>" run instead.
_WS = r"[ \t\n\f\r]+"
BENCHMARK_RE = re.compile(r"^(Benchmark[^\t]+)" + _WS + r"([0-9]+)", re.ASCII)
BENCHMARK_SPACED_RE = re.compile(r"^(Benchmark[^\t]+?)" + _WS + r"([0-9]+)", re.ASCII)


@dataclass(frozen=True)
class PackageDecl:
    name: str


@dataclass(frozen=True)
class BenchmarkLine:
    raw: str
    name: str
    iterations: int


@dataclass(frozen=True)
class Ignored:
    pass


LineKind = Union[PackageDecl, BenchmarkLine, Ignored]

IGNORED = Ignored()


def classify(line: str) -> LineKind:
    """Decide what one input line is.

    A package line keeps its trimmed remainder even when that is empty.
    """
    if line.startswith(PACKAGE_PREFIX):
        return PackageDecl(name=line[len(PACKAGE_PREFIX):].strip())

    pattern = BENCHMARK_RE if "\t" in line else BENCHMARK_SPACED_RE
    m = pattern.match(line)
    if m is None:
        return IGNORED

    return BenchmarkLine(
        raw=line,
        name=m.group(1).strip(),
        iterations=int(m.group(2)),
    )


def extract_benchmark(line: Union[str, BenchmarkLine]) -> BenchmarkResult:
    """Build a :class:`BenchmarkResult` from a benchmark-result line.

    Metrics are read from the whitespace-tokenized view of the whole line, so
    a name containing spaces shifts the pair positions.

    Raises ValueError if *line* is not a benchmark-result line.
    """
    if isinstance(line, str):
        kind = classify(line)
        if not isinstance(kind, BenchmarkLine):
            raise ValueError(f"not a benchmark line: {line!r}")
        line = kind

    return BenchmarkResult(
        name=line.name,
        iterations=line.iterations,
        **extract_metrics(line.raw.split()),
    )

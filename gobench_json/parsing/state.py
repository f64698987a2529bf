"""gobench_json.parsing.state

Accumulate parsed benchmarks into per-package groups.

The grouping structure and the current-package cursor live on an explicit
:class:`ParseState` passed through :func:`ingest`; nothing here reads or
writes streams.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from gobench_json.domain import BenchmarkResult, PackageGroups
from gobench_json.parsing.lines import BenchmarkLine, PackageDecl, classify, extract_benchmark

logger = logging.getLogger(__name__)


@dataclass
class ParseState:
    """Mutable context for one pass over the input.

    ``current_package`` is None until the first ``pkg:`` line. A ``pkg:`` line
    with an empty name moves the cursor to "", which collects nothing.
    """

    groups: PackageGroups = field(default_factory=dict)
    current_package: Optional[str] = None

    # Benchmark lines dropped because no (non-empty) package was current.
    orphans: int = 0

    @property
    def benchmark_count(self) -> int:
        return sum(len(v) for v in self.groups.values())

    def add(self, result: BenchmarkResult) -> None:
        """Append *result* to the current package, creating the group lazily."""
        if not self.current_package:
            self.orphans += 1
            logger.debug("dropping %s: no package declared yet", result.name)
            return
        self.groups.setdefault(self.current_package, []).append(result)

    def to_dict(self, *, omit_zero: bool = False) -> Dict[str, List[Dict[str, Any]]]:
        """JSON-ready view: package names sorted, each list in input order."""
        return {
            pkg: [r.to_dict(omit_zero=omit_zero) for r in self.groups[pkg]]
            for pkg in sorted(self.groups)
        }


def ingest(line: str, state: ParseState) -> ParseState:
    """Apply one input line to *state* and return it."""
    kind = classify(line)

    if isinstance(kind, PackageDecl):
        state.current_package = kind.name
    elif isinstance(kind, BenchmarkLine):
        state.add(extract_benchmark(kind))

    return state


def parse_lines(lines: Iterable[str], state: Optional[ParseState] = None) -> ParseState:
    """Fold :func:`ingest` over *lines* (without trailing newlines)."""
    if state is None:
        state = ParseState()
    for line in lines:
        ingest(line, state)
    return state

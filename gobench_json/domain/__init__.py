"""gobench_json.domain

Domain objects that form the contract between parsing and serialization.
"""

from __future__ import annotations

from .benchmark import BenchmarkResult, PackageGroups

__all__ = [
    "BenchmarkResult",
    "PackageGroups",
]

"""gobench_json

Convert ``go test -bench`` output into a package-grouped JSON document.

Layout
------
* :mod:`gobench_json.domain` holds the data contract (one parsed benchmark).
* :mod:`gobench_json.parsing` owns line classification and metric extraction.
  It performs no IO, so it can be driven from a list of strings in tests.
* :mod:`gobench_json.io` reads input lines and writes the JSON document.

The CLI (:mod:`bench_cli`) is a thin composition root that wires these
together.
"""

from __future__ import annotations

__version__ = "0.1.0"

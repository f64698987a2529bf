"""gobench_json.io

Input line reading and JSON document output.
"""

from __future__ import annotations

from .fs import (
    iter_lines,
    open_input,
    render_json,
    write_document,
    write_text_atomic,
)

__all__ = [
    "iter_lines",
    "open_input",
    "render_json",
    "write_document",
    "write_text_atomic",
]

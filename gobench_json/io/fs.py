"""gobench_json.io.fs

Stream readers and atomic writers.

Reading
-------
Benchmark output is read as bytes where possible and decoded as UTF-8 with
replacement characters, so a stray binary byte in a log never aborts a run.
``\\n`` ends a line and one trailing ``\\r`` is dropped.

Writing
-------
The JSON document is rendered to a string first and only then written, so a
serialization failure never leaves half a document behind. File output goes
through a temp file and :func:`os.replace`.
"""

from __future__ import annotations

import json
import os
import sys
import tempfile
from pathlib import Path
from typing import Any, IO, Iterator, Optional, Union

ENCODING = "utf-8"


def _decode(raw: Union[bytes, str]) -> str:
    if isinstance(raw, bytes):
        return raw.decode(ENCODING, errors="replace")
    return raw


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def iter_lines(stream: IO[Any]) -> Iterator[str]:
    """Yield lines from a text or binary stream without line terminators.

    OSError raised by the underlying stream propagates to the caller.
    """
    for raw in stream:
        yield _strip_eol(_decode(raw))


def open_input(path: Optional[Path], stdin: Optional[IO[Any]] = None) -> IO[Any]:
    """Return a binary stream for *path*, or stdin's byte buffer if None."""
    if path is not None:
        return Path(path).open("rb")
    if stdin is None:
        stdin = sys.stdin
    return getattr(stdin, "buffer", stdin)


def render_json(data: Any, *, indent: int = 2) -> str:
    """Render *data* as a JSON document with a trailing newline.

    An empty mapping is written compactly as ``{}``. NaN and infinities are
    rejected (ValueError) since strict JSON readers cannot load them.
    """
    if isinstance(data, dict) and not data:
        return "{}\n"
    return json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False) + "\n"


def write_text_atomic(path: Path, text: str, *, encoding: str = ENCODING) -> None:
    """Replace *path* with *text* in one step.

    The text goes to a sibling ``<name>.*.tmp`` file first; readers of *path*
    see either the old document or the complete new one.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    tmp = tempfile.NamedTemporaryFile(
        "w",
        encoding=encoding,
        newline="",
        dir=target.parent,
        prefix=f"{target.name}.",
        suffix=".tmp",
        delete=False,
    )
    staged = Path(tmp.name)
    try:
        with tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(staged, target)
    except BaseException:
        if staged.exists():
            staged.unlink()
        raise


def write_document(text: str, *, path: Optional[Path] = None, stream: Optional[IO[str]] = None) -> None:
    """Write a rendered document to *path* (atomically) or to *stream*."""
    if path is not None:
        write_text_atomic(path, text)
        return
    if stream is None:
        stream = sys.stdout
    stream.write(text)
    stream.flush()

from __future__ import annotations

import logging
from typing import IO, Any, Optional

from gobench_json.config import Settings
from gobench_json.io import iter_lines, open_input, render_json, write_document
from gobench_json.parsing import ParseState, parse_lines

logger = logging.getLogger(__name__)


def read_state(settings: Settings, stdin: Optional[IO[Any]] = None) -> ParseState:
    """Parse the configured input. Read failures exit with status 1."""
    try:
        stream = open_input(settings.input_path, stdin)
    except OSError as e:
        raise SystemExit(f"error reading input: {e}") from e

    try:
        return parse_lines(iter_lines(stream))
    except OSError as e:
        raise SystemExit(f"error reading input: {e}") from e
    finally:
        # stdin belongs to the caller.
        if settings.input_path is not None:
            stream.close()


def run_convert(
    settings: Settings,
    *,
    stdin: Optional[IO[Any]] = None,
    stdout: Optional[IO[str]] = None,
) -> int:
    state = read_state(settings, stdin)

    logger.info(
        "parsed %d benchmark(s) across %d package(s); dropped %d without a package",
        state.benchmark_count,
        len(state.groups),
        state.orphans,
    )

    try:
        text = render_json(state.to_dict(omit_zero=settings.omit_zero))
    except (TypeError, ValueError) as e:
        raise SystemExit(f"error encoding json: {e}") from e

    try:
        write_document(text, path=settings.output_path, stream=stdout)
    except OSError as e:
        raise SystemExit(f"error writing output: {e}") from e

    if settings.output_path is not None:
        logger.info("wrote %s", settings.output_path)
    return 0

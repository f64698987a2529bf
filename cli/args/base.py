from __future__ import annotations

import argparse

from gobench_json.config import LOG_LEVELS


def add_base_args(parser: argparse.ArgumentParser) -> None:
    """Register the converter's flags.

    Every flag is optional; unset flags fall back to the environment/.env
    (see :mod:`gobench_json.config`).
    """

    parser.add_argument(
        "--input",
        "-i",
        dest="input_path",
        help="Read benchmark output from this file instead of stdin.",
    )
    parser.add_argument(
        "--output",
        "-o",
        dest="output_path",
        help="Write JSON to this file (atomically) instead of stdout.",
    )
    parser.add_argument(
        "--omit-zero",
        dest="omit_zero",
        action="store_true",
        default=None,
        help="Drop metrics whose value is 0 (Go encoding/json omitempty shape).",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="stderr log verbosity (default: WARNING, or GOBENCH_JSON_LOG_LEVEL).",
    )

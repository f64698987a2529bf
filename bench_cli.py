#!/usr/bin/env python3
"""
Convert `go test -bench` output into package-grouped JSON.

Usage:
  go test -bench . ./... | python bench_cli.py
  gobench2json --input bench.txt --output bench.json
  gobench2json --omit-zero --log-level info < bench.txt

Configuration precedence: flags > environment > .env > defaults.
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from cli.args.base import add_base_args
from cli.commands.convert import run_convert
from gobench_json.config import apply_overrides, configure_logging, load_settings


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Read `go test -bench` output and print JSON grouped by package.",
    )
    add_base_args(parser)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    settings = apply_overrides(
        load_settings(),
        input_path=args.input_path,
        output_path=args.output_path,
        omit_zero=args.omit_zero,
        log_level=args.log_level,
    )
    configure_logging(settings)

    raise SystemExit(run_convert(settings))


if __name__ == "__main__":
    main()

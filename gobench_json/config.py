"""gobench_json.config

Runtime settings for the converter.

Precedence (highest first):
  1. CLI flags
  2. environment variables
  3. ``.env`` in the working directory (never overrides exported variables)
  4. defaults

With nothing configured the converter reads stdin, writes stdout and logs
warnings only.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

ENV_PATH = Path(".env")

ENV_LOG_LEVEL = "GOBENCH_JSON_LOG_LEVEL"
ENV_OMIT_ZERO = "GOBENCH_JSON_OMIT_ZERO"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _env_bool(env: Mapping[str, str], var: str, default: bool = False) -> bool:
    raw = env.get(var)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise SystemExit(f"Invalid {var}={raw!r}; expected one of: 1/0, true/false, yes/no, on/off.")


def normalize_log_level(raw: Optional[str]) -> str:
    level = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        raise SystemExit(f"Invalid log level {raw!r}; expected one of: {', '.join(LOG_LEVELS)}.")
    return level


@dataclass(frozen=True)
class Settings:
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    omit_zero: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_no(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(
    env: Optional[Mapping[str, str]] = None,
    *,
    dotenv_path: Optional[Path] = ENV_PATH,
) -> Settings:
    """Build settings from the environment (after loading ``.env``).

    Pass *env* explicitly to bypass ``os.environ`` and ``.env`` entirely.
    """
    if env is None:
        if dotenv_path is not None and Path(dotenv_path).is_file():
            load_dotenv(dotenv_path, override=False)
        env = os.environ

    return Settings(
        omit_zero=_env_bool(env, ENV_OMIT_ZERO),
        log_level=normalize_log_level(env.get(ENV_LOG_LEVEL)),
    )


def apply_overrides(
    settings: Settings,
    *,
    input_path: Optional[str] = None,
    output_path: Optional[str] = None,
    omit_zero: Optional[bool] = None,
    log_level: Optional[str] = None,
) -> Settings:
    """Layer CLI flag values (None = not given) over *settings*."""
    changes = {}
    if input_path:
        changes["input_path"] = Path(input_path)
    if output_path:
        changes["output_path"] = Path(output_path)
    if omit_zero is not None:
        changes["omit_zero"] = bool(omit_zero)
    if log_level is not None:
        changes["log_level"] = normalize_log_level(log_level)
    return replace(settings, **changes)


def configure_logging(settings: Settings) -> None:
    """Send log records to stderr; stdout carries only the JSON document."""
    logging.basicConfig(
        level=settings.log_level_no,
        format="%(levelname)s %(name)s: %(message)s",
    )

"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from statecalc.exceptions import ConfigurationError

LOG_LEVEL_ENV = "STATECALC_LOG_LEVEL"
HISTORY_LIMIT_ENV = "STATECALC_HISTORY_LIMIT"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_HISTORY_LIMIT = 50

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Settings shared by the context and the command line."""

    log_level: str = DEFAULT_LOG_LEVEL
    history_limit: int = DEFAULT_HISTORY_LIMIT


def parse_log_level(raw: str, source: str = LOG_LEVEL_ENV) -> str:
    """Normalise a level name; ``source`` names where it came from in errors."""
    level = raw.strip().upper()
    if level not in _LEVEL_NAMES:
        raise ConfigurationError(source, raw, f"expected one of {', '.join(_LEVEL_NAMES)}")
    return level


def parse_history_limit(raw: str) -> int:
    try:
        limit = int(raw.strip())
    except ValueError as e:
        raise ConfigurationError(HISTORY_LIMIT_ENV, raw, "expected an integer") from e
    if limit < 0:
        raise ConfigurationError(HISTORY_LIMIT_ENV, raw, "must be non-negative")
    return limit


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read instead of ``os.environ``

    Raises:
        ConfigurationError: If a variable is set to an unusable value
    """
    env = os.environ if environ is None else environ

    log_level = DEFAULT_LOG_LEVEL
    if LOG_LEVEL_ENV in env:
        log_level = parse_log_level(env[LOG_LEVEL_ENV])

    history_limit = DEFAULT_HISTORY_LIMIT
    if HISTORY_LIMIT_ENV in env:
        history_limit = parse_history_limit(env[HISTORY_LIMIT_ENV])

    return Settings(log_level=log_level, history_limit=history_limit)

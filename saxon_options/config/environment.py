from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Optional

_DEFAULTS: Dict[str, str] = {
    "SAXON_OPTIONS_VERBOSE": "off",
    "SAXON_OPTIONS_DEBUG": "off",
    "SAXON_OPTIONS_LOG_FILE": "",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class LoggingEnvironmentConfig:
    verbose: bool
    debug: bool
    log_file: Optional[str]


def _coalesce_env(key: str) -> str:
    default = _DEFAULTS.get(key)
    value = os.getenv(key)
    if value is None:
        if default is None:
            raise RuntimeError(f"Missing environment variable '{key}'")
        return default
    trimmed = value.strip()
    if not trimmed and default is not None:
        return default
    return trimmed


def _parse_flag(key: str) -> bool:
    raw = _coalesce_env(key).lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise RuntimeError(
        f"Environment variable '{key}' must be one of "
        f"{sorted(_TRUE_VALUES | _FALSE_VALUES)}"
    )


def _parse_path(key: str) -> Optional[str]:
    raw = _coalesce_env(key)
    if not raw:
        return None
    return os.path.abspath(os.path.expanduser(raw))


@lru_cache(maxsize=1)
def get_logging_environment() -> LoggingEnvironmentConfig:
    return LoggingEnvironmentConfig(
        verbose=_parse_flag("SAXON_OPTIONS_VERBOSE"),
        debug=_parse_flag("SAXON_OPTIONS_DEBUG"),
        log_file=_parse_path("SAXON_OPTIONS_LOG_FILE"),
    )


__all__ = ["LoggingEnvironmentConfig", "get_logging_environment"]

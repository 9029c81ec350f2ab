"""Trace output for option translation.

Lines go to ``SAXON_OPTIONS_LOG_FILE`` when it is set, otherwise to standard
error.  Logging never interrupts a translation: an unwritable log file sends
the line to standard error instead.
"""

from __future__ import annotations

import os
import sys
from typing import Any

from .config import get_logging_environment
from .utils import now_iso, truncate_string


def _emit(prefix: str, label: str, payload: Any) -> None:
    timestamp = now_iso()
    text = truncate_string(str(payload)) or ""
    message = f"[{prefix}][{timestamp}] {label}: {text}"
    _append_log(message)


def _write_stderr(message: str) -> None:
    print(message, file=sys.stderr, flush=True)


def _append_log(message: str) -> None:
    log_file = get_logging_environment().log_file
    if log_file is None:
        _write_stderr(message)
        return
    encoding = getattr(sys.stdout, "encoding", None) or "utf-8"
    safe_message = message.encode(encoding, errors="replace").decode(encoding)
    try:
        folder = os.path.dirname(log_file)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(log_file, "a", encoding=encoding) as handle:
            handle.write(f"{safe_message}\n")
    except OSError as exc:
        _write_stderr(f"{message} (log file {log_file} unavailable: {exc.strerror})")


def verbose_log(label: str, payload: Any) -> None:
    """Record translation decisions (ignored values, installed classes)."""
    if not get_logging_environment().verbose:
        return
    _emit("VERBOSE", label, payload)


def debug_verbose(label: str, payload: Any) -> None:
    """Record every feature assignment; also on in verbose mode."""
    env = get_logging_environment()
    if not (env.debug or env.verbose):
        return
    _emit("DEBUG", label, payload)


__all__ = ["verbose_log", "debug_verbose"]

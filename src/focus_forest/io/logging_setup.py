"""Logging bootstrap for focus-forest.

The TUI owns the terminal, so records go to a rotating file only. Every
module logs through `logging.getLogger(__name__)`; configure() attaches the
handler to the package logger they all propagate to.

Environment:
  FOCUS_FOREST_LOG_LEVEL  level name (default INFO; unknown names mean INFO)
  FOCUS_FOREST_LOG_FILE   explicit log file
  FOCUS_FOREST_LOG_DIR    directory for generated file names
                          (default ~/.local/share/focus-forest/logs)

// [LAW:single-enforcer] Handler wiring happens in this module only.
"""

from __future__ import annotations

import logging
import os
import re
import time
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "focus_forest"

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
_MAX_BYTES = 2 * 1024 * 1024
_BACKUPS = 2


@dataclass(frozen=True)
class LoggingRuntime:
    level_name: str
    level: int
    file_path: str


_runtime: LoggingRuntime | None = None


def resolve(session_name: str = "focus") -> LoggingRuntime:
    """Work out level and file path from the environment. Touches nothing."""
    requested = os.environ.get("FOCUS_FOREST_LOG_LEVEL", "").strip().upper()
    level = logging.getLevelName(requested) if requested else logging.INFO
    if not isinstance(level, int):
        level = logging.INFO

    file_path = os.environ.get("FOCUS_FOREST_LOG_FILE")
    if not file_path:
        log_dir = os.environ.get("FOCUS_FOREST_LOG_DIR") or os.path.expanduser(
            "~/.local/share/focus-forest/logs"
        )
        stem = re.sub(r"[^A-Za-z0-9_-]+", "-", session_name).strip("-_") or "focus"
        file_path = os.path.join(log_dir, f"{stem}-{time.strftime('%Y%m%d-%H%M%S')}-{os.getpid()}.log")

    return LoggingRuntime(logging.getLevelName(level), level, file_path)


def configure(session_name: str = "focus") -> LoggingRuntime:
    """Attach the file handler once; later calls return the first runtime."""
    global _runtime
    if _runtime is not None:
        return _runtime

    runtime = resolve(session_name)
    Path(runtime.file_path).parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        runtime.file_path, maxBytes=_MAX_BYTES, backupCount=_BACKUPS, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(_FORMAT))

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(runtime.level)
    package_logger.addHandler(handler)
    package_logger.propagate = False

    _runtime = runtime
    return runtime


def get_runtime() -> LoggingRuntime | None:
    return _runtime


def reset() -> None:
    """Detach handlers and forget the runtime (tests)."""
    global _runtime
    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    _runtime = None

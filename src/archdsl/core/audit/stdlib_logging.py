from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_CONFIGURED_TARGET: str | None = None
_ARCHDSL_HANDLER: logging.Handler | None = None


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_stdlib_logging(*, log_path: Path | None = None, level: str = "INFO") -> None:
    """Route Python stdlib logging to `log_path`, or to stderr when no path is given.

    Idempotent per-process: if already configured for the same target, only the
    level is updated.
    """
    global _CONFIGURED_TARGET, _ARCHDSL_HANDLER

    target = str(Path(log_path).resolve()) if log_path is not None else "<stderr>"
    root = logging.getLogger()
    root.setLevel(_level_from_name(level))

    if _CONFIGURED_TARGET == target and _ARCHDSL_HANDLER is not None:
        _ARCHDSL_HANDLER.setLevel(_level_from_name(level))
        return

    # Replace the handler we installed earlier when switching targets.
    if _ARCHDSL_HANDLER is not None:
        root.removeHandler(_ARCHDSL_HANDLER)
        _ARCHDSL_HANDLER.close()
        _ARCHDSL_HANDLER = None

    handler: logging.Handler
    if log_path is not None:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    _ARCHDSL_HANDLER = handler
    _CONFIGURED_TARGET = target


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the handler installed by configure_stdlib_logging."""
    global _CONFIGURED_TARGET, _ARCHDSL_HANDLER
    if _ARCHDSL_HANDLER is not None:
        logging.getLogger().removeHandler(_ARCHDSL_HANDLER)
        _ARCHDSL_HANDLER.close()
    _CONFIGURED_TARGET = None
    _ARCHDSL_HANDLER = None


__all__ = ["configure_stdlib_logging", "reset_stdlib_logging_for_tests"]

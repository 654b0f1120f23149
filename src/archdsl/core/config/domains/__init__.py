"""Domain-specific configuration accessors."""
from __future__ import annotations

from .includes import IncludeConfig
from .logging import LoggingConfig

__all__ = ["IncludeConfig", "LoggingConfig"]

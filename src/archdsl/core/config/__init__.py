"""Layered configuration for archdsl."""
from __future__ import annotations

from .base import BaseDomainConfig
from .cache import clear_all_caches, get_cached_config, is_cached
from .domains import IncludeConfig, LoggingConfig
from .manager import ConfigManager

__all__ = [
    "BaseDomainConfig",
    "ConfigManager",
    "IncludeConfig",
    "LoggingConfig",
    "clear_all_caches",
    "get_cached_config",
    "is_cached",
]

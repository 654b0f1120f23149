"""Domain-specific configuration for include resolution.

Reads the ``includes`` section: settings for fetching ``https://`` targets.
"""
from __future__ import annotations

from functools import cached_property
from typing import Any, Dict, Optional

from ..base import BaseDomainConfig


class IncludeConfig(BaseDomainConfig):
    """Include resolution configuration accessor."""

    def _config_section(self) -> str:
        return "includes"

    @cached_property
    def fetch(self) -> Dict[str, Any]:
        return self.section.get("fetch", {}) or {}

    @cached_property
    def fetch_timeout_seconds(self) -> Optional[float]:
        """Timeout for remote includes; None blocks until the fetch completes."""
        raw = self.fetch.get("timeoutSeconds")
        return float(raw) if raw is not None else None

    @cached_property
    def user_agent(self) -> str:
        raw = self.fetch.get("userAgent")
        if raw:
            return str(raw)
        from archdsl import __version__

        return f"archdsl/{__version__}"


__all__ = ["IncludeConfig"]

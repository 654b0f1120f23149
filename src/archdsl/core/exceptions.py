from __future__ import annotations

from typing import Any, Dict, Mapping


class ArchDslError(Exception):
    """Base exception for archdsl."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class GrammarError(ArchDslError, ValueError):
    """Raised when a directive does not match its grammar (wrong token count)."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ArchDslError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class IncludeResolutionError(ArchDslError, RuntimeError):
    """Raised when an include target cannot be located, read or fetched."""

    def __init__(
        self,
        message: str = "",
        *,
        source: str | None = None,
        cause: BaseException | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if source:
            ctx["source"] = source
        if cause is not None:
            ctx["cause"] = type(cause).__name__
        ArchDslError.__init__(self, message, context=ctx)
        RuntimeError.__init__(self, message)


class ConfigError(ArchDslError, ValueError):
    """Raised when configuration cannot be loaded or fails validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ArchDslError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "ArchDslError",
    "GrammarError",
    "IncludeResolutionError",
    "ConfigError",
]

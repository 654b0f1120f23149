"""Protocols for architecture model elements.

Model nodes implement these capabilities explicitly instead of inheriting
identity, tag and parent behaviour from a shared element base class.
"""
from __future__ import annotations

from typing import FrozenSet, Optional, Protocol, runtime_checkable


@runtime_checkable
class Identifiable(Protocol):
    """Protocol for elements with a display name and a canonical name."""

    @property
    def name(self) -> str:
        """Display name."""
        ...

    @property
    def canonical_name(self) -> str:
        """Fully qualified name, unique within the model."""
        ...


@runtime_checkable
class Taggable(Protocol):
    """Protocol for elements that carry default tags."""

    @property
    def default_tags(self) -> FrozenSet[str]:
        """Tags every instance of the element type carries."""
        ...


@runtime_checkable
class Parented(Protocol):
    """Protocol for elements that may sit below another element."""

    @property
    def parent(self) -> Optional["Parented"]:
        """Containing element, or None for root-level elements."""
        ...


@runtime_checkable
class ModelElement(Identifiable, Taggable, Parented, Protocol):
    """Combined protocol for model elements."""
    pass


__all__ = [
    "Identifiable",
    "Taggable",
    "Parented",
    "ModelElement",
]

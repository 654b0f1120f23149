"""Deployment environment model node."""
from __future__ import annotations

from typing import Any, FrozenSet, Optional

_NO_TAGS: FrozenSet[str] = frozenset()


class DeploymentEnvironment:
    """A named, root-level deployment environment.

    Identity is the name alone: two environments with the same name are equal
    and hash the same. Instances are immutable once constructed.
    """

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        if not isinstance(name, str):
            raise TypeError(
                f"DeploymentEnvironment name must be a string, got {type(name).__name__}"
            )
        object.__setattr__(self, "_name", name)

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def name(self) -> str:
        return self._name

    @property
    def canonical_name(self) -> str:
        # No parent, so there is nothing to qualify the name with.
        return self._name

    @property
    def parent(self) -> Optional[Any]:
        return None

    @property
    def default_tags(self) -> FrozenSet[str]:
        return _NO_TAGS

    def get_name(self) -> str:
        return self.name

    def get_canonical_name(self) -> str:
        return self.canonical_name

    def get_parent(self) -> Optional[Any]:
        return self.parent

    def get_default_tags(self) -> FrozenSet[str]:
        return self.default_tags

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"DeploymentEnvironment(name={self._name!r})"


__all__ = ["DeploymentEnvironment"]

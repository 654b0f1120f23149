"""Token accessor for already-split directive lines."""
from __future__ import annotations

import shlex
from typing import Iterator, List, Sequence


class Tokens:
    """Ordered directive tokens; index 0 is the directive keyword itself."""

    def __init__(self, tokens: Sequence[str]) -> None:
        self._tokens: List[str] = list(tokens)

    @classmethod
    def from_line(cls, line: str) -> "Tokens":
        """Split a raw DSL line with shell-like quoting rules."""
        return cls(shlex.split(line, posix=True))

    def includes(self, index: int) -> bool:
        """Return True when a token exists at ``index``."""
        return 0 <= index < len(self._tokens)

    def has_more_than(self, index: int) -> bool:
        """Return True when there are tokens after ``index``."""
        return len(self._tokens) - 1 > index

    def get(self, index: int) -> str:
        return self._tokens[index]

    def size(self) -> int:
        return len(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __repr__(self) -> str:
        return f"Tokens({self._tokens!r})"


__all__ = ["Tokens"]

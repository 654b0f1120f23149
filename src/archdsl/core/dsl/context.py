"""Parsing context for include resolution.

The context knows which file is currently being parsed and collects every
source unit an include directive discovers, in registration order.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class IncludedFile:
    """One resolved content unit.

    Attributes:
        file: Origin of the lines. For remote content this is the including
            file (None when the include was not read from a file).
        lines: Source lines in their original order.
    """

    file: Optional[Path]
    lines: List[str] = field(default_factory=list)


@runtime_checkable
class DslContext(Protocol):
    """What the include resolver needs from the surrounding parser."""

    @property
    def parent_file(self) -> Optional[Path]:
        """File currently being parsed, if the source is file-backed."""
        ...

    def add_file(self, file: Optional[Path], lines: List[str]) -> None:
        """Register a discovered unit; called once per unit in resolution order."""
        ...


class IncludedDslContext:
    """Context collecting the units produced by a single include directive."""

    def __init__(self, parent_file: Optional[Path] = None) -> None:
        self._parent_file = Path(parent_file) if parent_file is not None else None
        self.files: List[IncludedFile] = []

    @property
    def parent_file(self) -> Optional[Path]:
        return self._parent_file

    def add_file(self, file: Optional[Path], lines: List[str]) -> None:
        self.files.append(IncludedFile(file=file, lines=list(lines)))


__all__ = ["IncludedFile", "DslContext", "IncludedDslContext"]

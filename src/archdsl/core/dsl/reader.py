"""Line reader that splices included sources into a DSL file.

Every line whose first token is ``!include`` is replaced by the lines of the
units it resolves to. Included lines are scanned again, with the unit's origin
as the current file, so nested includes resolve relative to the file that
contains them.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from archdsl.core.exceptions import GrammarError

from .context import IncludedDslContext
from .includes import IncludeParser, read_file_lines
from .tokens import Tokens

INCLUDE_DIRECTIVE = "!include"


@dataclass(frozen=True)
class DslLine:
    """A source line and where it came from."""

    origin: Optional[Path]
    line_number: int
    text: str


class DslReader:
    """Flatten a DSL source and everything it includes into ordered lines."""

    def __init__(self, include_parser: Optional[IncludeParser] = None) -> None:
        self.include_parser = include_parser or IncludeParser()

    def read_file(self, path: Path) -> List[DslLine]:
        path = Path(path)
        return self.read_lines(read_file_lines(path), origin=path)

    def read_lines(self, lines: Iterable[str], origin: Optional[Path] = None) -> List[DslLine]:
        out: List[DslLine] = []
        self._expand(list(lines), origin, out)
        return out

    def _expand(self, lines: List[str], origin: Optional[Path], out: List[DslLine]) -> None:
        for number, text in enumerate(lines, start=1):
            tokens = self._include_tokens(text)
            if tokens is None:
                out.append(DslLine(origin=origin, line_number=number, text=text))
                continue

            context = IncludedDslContext(parent_file=origin)
            self.include_parser.parse(context, tokens)
            for unit in context.files:
                self._expand(unit.lines, unit.file, out)

    def _include_tokens(self, text: str) -> Optional[Tokens]:
        stripped = text.strip()
        if not stripped.lower().startswith(INCLUDE_DIRECTIVE):
            return None
        try:
            tokens = Tokens.from_line(stripped)
        except ValueError as exc:
            raise GrammarError(f"Cannot tokenize {stripped!r}: {exc}") from exc
        if tokens.size() == 0 or tokens.get(0).lower() != INCLUDE_DIRECTIVE:
            return None
        return tokens


__all__ = ["DslLine", "DslReader", "INCLUDE_DIRECTIVE"]

"""Resolution of ``!include <file|directory|url>`` directives.

A target starting with ``https://`` is fetched and attributed to the including
file. Anything else is a path relative to the directory of the file being
parsed: files are read as UTF-8, directories are expanded depth-first with
children sorted by name. Every discovered unit is handed to a ``register``
callback in that order, which is the only output of resolution.

There is no cycle detection and no depth limit; a directory symlink loop
recurses until the interpreter gives up.
"""
from __future__ import annotations

import http.client
import logging
import os
from pathlib import Path, PurePath
from typing import Callable, Iterator, List, Optional

from archdsl.core.exceptions import GrammarError, IncludeResolutionError
from archdsl.core.utils.text import split_file_lines, split_remote_lines

from .context import DslContext, IncludedFile
from .remote import Fetcher, RemoteFetcher, fetch_text
from .tokens import Tokens

logger = logging.getLogger(__name__)

GRAMMAR = "!include <file|directory|url>"
SOURCE_INDEX = 1
REMOTE_PREFIX = "https://"

Register = Callable[[Optional[Path], List[str]], None]


def is_remote(source: str) -> bool:
    return source.startswith(REMOTE_PREFIX)


def local_target_path(parent_file: Path, source: str) -> Path:
    """Join ``source`` under the directory of ``parent_file``.

    An absolute ``source`` loses its anchor and is nested like a relative one.
    """
    parent_dir = Path(parent_file).parent
    target = PurePath(source)
    if target.anchor:
        return parent_dir.joinpath(*target.parts[1:])
    return parent_dir / target


def read_file_lines(path: Path) -> List[str]:
    """Read ``path`` as UTF-8 and split it into lines.

    Raises:
        IncludeResolutionError: If the file cannot be read or decoded.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IncludeResolutionError(str(exc), source=str(path), cause=exc) from exc
    return split_file_lines(text)


def iter_included_files(path: Path) -> Iterator[IncludedFile]:
    """Yield the content units below ``path`` in registration order.

    Directories whose children cannot be listed contribute nothing.
    """
    if path.is_dir():
        try:
            children = sorted(path.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            logger.warning("Skipping include directory %s: %s", path, exc)
            return
        for child in children:
            yield from iter_included_files(child)
    else:
        yield IncludedFile(file=path, lines=read_file_lines(path))


def resolve_include(
    source: str,
    *,
    parent_file: Optional[Path],
    register: Register,
    fetcher: Optional[Fetcher] = None,
) -> None:
    """Resolve one include target and register each unit it produces.

    Args:
        source: The directive argument (file, directory or https URL).
        parent_file: File currently being parsed, or None for non-file sources.
        register: Called as ``register(file, lines)`` once per unit, in order.
        fetcher: Retrieves remote bodies; defaults to an unconfigured fetch.

    Raises:
        IncludeResolutionError: Target missing, unreadable or not fetchable.
    """
    if is_remote(source):
        fetch = fetcher or fetch_text
        try:
            body = fetch(source)
        except IncludeResolutionError:
            raise
        except (OSError, ValueError, http.client.HTTPException) as exc:
            raise IncludeResolutionError(str(exc), source=source, cause=exc) from exc
        lines = split_remote_lines(body)
        logger.debug("Registering %d remote lines from %s as %s", len(lines), source, parent_file)
        register(parent_file, lines)
        return

    if parent_file is None:
        logger.debug("Ignoring local include %r: no file is being parsed", source)
        return

    path = local_target_path(parent_file, source)
    if not path.exists():
        raise IncludeResolutionError(f"{os.path.realpath(path)} could not be found", source=source)

    for unit in iter_included_files(path):
        logger.debug("Registering %d lines from %s", len(unit.lines), unit.file)
        register(unit.file, unit.lines)


class IncludeParser:
    """Parser for the ``!include`` directive."""

    def __init__(self, fetcher: Optional[Fetcher] = None) -> None:
        self.fetcher = fetcher

    @classmethod
    def from_config(cls, repo_root: Optional[Path] = None) -> "IncludeParser":
        """Build a parser whose remote fetches use the configured timeout and user agent."""
        return cls(fetcher=RemoteFetcher.from_config(repo_root))

    def parse(self, context: DslContext, tokens: Tokens) -> None:
        # !include <file|directory|url>

        if tokens.has_more_than(SOURCE_INDEX):
            raise GrammarError(f"Too many tokens, expected: {GRAMMAR}")

        if not tokens.includes(SOURCE_INDEX):
            raise GrammarError(f"Expected: {GRAMMAR}")

        resolve_include(
            tokens.get(SOURCE_INDEX),
            parent_file=context.parent_file,
            register=context.add_file,
            fetcher=self.fetcher,
        )


__all__ = [
    "GRAMMAR",
    "REMOTE_PREFIX",
    "IncludeParser",
    "is_remote",
    "local_target_path",
    "iter_included_files",
    "read_file_lines",
    "resolve_include",
]

"""DSL include handling.

- **tokens**: Tokens accessor for split directive lines
- **context**: IncludedFile units and the DslContext protocol
- **includes**: IncludeParser and the callback-based resolve_include
- **remote**: HTTPS fetch primitive
- **reader**: DslReader, which splices includes into a line stream
"""
from __future__ import annotations

from .context import DslContext, IncludedDslContext, IncludedFile
from .includes import (
    GRAMMAR,
    REMOTE_PREFIX,
    IncludeParser,
    is_remote,
    local_target_path,
    iter_included_files,
    read_file_lines,
    resolve_include,
)
from .reader import DslLine, DslReader
from .remote import RemoteFetcher, fetch_text
from .tokens import Tokens

__all__ = [
    "GRAMMAR",
    "REMOTE_PREFIX",
    "DslContext",
    "DslLine",
    "DslReader",
    "IncludeParser",
    "IncludedDslContext",
    "IncludedFile",
    "RemoteFetcher",
    "Tokens",
    "fetch_text",
    "is_remote",
    "local_target_path",
    "iter_included_files",
    "read_file_lines",
    "resolve_include",
]

"""Line splitting for included sources."""
from __future__ import annotations

from typing import List


def split_file_lines(text: str) -> List[str]:
    """Split file content into lines.

    ``\\n``, ``\\r\\n`` and ``\\r`` all terminate a line. A terminator at the
    very end does not start an extra empty line, so ``"a\\nb\\n"`` gives
    ``["a", "b"]`` and an empty file gives ``[]``.
    """
    if not text:
        return []
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = normalized.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def split_remote_lines(body: str) -> List[str]:
    """Split a fetched body on ``\\n``.

    A body without any newline is a single line (``""`` gives ``[""]``).
    Otherwise trailing empty segments are discarded, so ``"a\\nb\\n\\n"``
    gives ``["a", "b"]``. Carriage returns are kept as part of the line.
    """
    if "\n" not in body:
        return [body]
    lines = body.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return lines


__all__ = ["split_file_lines", "split_remote_lines"]

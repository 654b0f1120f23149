"""Shared utilities for archdsl."""
from __future__ import annotations

from .io import iter_yaml_files, read_yaml
from .merge import deep_merge
from .text import split_file_lines, split_remote_lines

__all__ = [
    "deep_merge",
    "iter_yaml_files",
    "read_yaml",
    "split_file_lines",
    "split_remote_lines",
]

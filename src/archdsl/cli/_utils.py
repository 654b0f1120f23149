"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path

from archdsl.core.audit import configure_stdlib_logging
from archdsl.core.config import LoggingConfig


def get_repo_root(args: argparse.Namespace) -> Path:
    """Repository root from ``--repo-root``, else the current directory."""
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).resolve()
    return Path.cwd().resolve()


def setup_logging(args: argparse.Namespace, repo_root: Path) -> None:
    """Configure logging from the ``logging`` config section and CLI overrides."""
    cfg = LoggingConfig(repo_root=repo_root)
    level = getattr(args, "log_level", None) or cfg.level
    log_file = getattr(args, "log_file", None)
    log_path = Path(log_file) if log_file else cfg.file
    configure_stdlib_logging(log_path=log_path, level=level)


__all__ = ["get_repo_root", "setup_logging"]

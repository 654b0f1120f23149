"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--repo-root",
        type=str,
        help="Project root holding .archdsl/config (default: current directory)",
    )


def add_logging_flags(parser: argparse.ArgumentParser) -> None:
    """Add --log-level and --log-file overrides for the ``logging`` config section."""
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Write logs to this file instead of stderr",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    add_json_flag(parser)
    add_repo_root_flag(parser)
    add_logging_flags(parser)


__all__ = [
    "add_json_flag",
    "add_repo_root_flag",
    "add_logging_flags",
    "add_standard_flags",
]

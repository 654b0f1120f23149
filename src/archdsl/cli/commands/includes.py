"""
archdsl includes command.

SUMMARY: Resolve one include target as if written in a DSL file
"""

from __future__ import annotations

import argparse
from pathlib import Path

from archdsl.cli import OutputFormatter, add_standard_flags, get_repo_root, setup_logging
from archdsl.core.dsl import IncludedDslContext, IncludeParser, Tokens
from archdsl.core.exceptions import ArchDslError

SUMMARY = "Resolve one include target as if written in a DSL file"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="DSL file containing the directive")
    parser.add_argument("target", help="Include target (file, directory or https URL)")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        repo_root = get_repo_root(args)
        setup_logging(args, repo_root)

        context = IncludedDslContext(parent_file=Path(args.file).resolve())
        IncludeParser.from_config(repo_root).parse(context, Tokens(["!include", args.target]))
    except ArchDslError as e:
        formatter.error(e, error_code=type(e).__name__)
        return 1

    units = [
        {"file": str(unit.file) if unit.file else None, "lines": len(unit.lines)}
        for unit in context.files
    ]
    formatter.success(
        {"target": args.target, "files": units},
        "\n".join(f"{u['file'] or '-'} ({u['lines']} lines)" for u in units)
        or f"{args.target}: nothing to include",
    )
    return 0

"""
archdsl expand command.

SUMMARY: Print a DSL file with all !include directives expanded
"""

from __future__ import annotations

import argparse
from pathlib import Path

from archdsl.cli import OutputFormatter, add_standard_flags, get_repo_root, setup_logging
from archdsl.core.dsl import DslReader, IncludeParser
from archdsl.core.exceptions import ArchDslError

SUMMARY = "Print a DSL file with all !include directives expanded"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="DSL source file to expand")
    parser.add_argument(
        "--origins",
        action="store_true",
        help="Prefix each line with <origin>:<line>:",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        repo_root = get_repo_root(args)
        setup_logging(args, repo_root)

        source = Path(args.file).resolve()
        reader = DslReader(IncludeParser.from_config(repo_root))
        lines = reader.read_file(source)
    except ArchDslError as e:
        formatter.error(e, error_code=type(e).__name__)
        return 1

    if formatter.json_mode:
        formatter.success(
            {
                "file": str(source),
                "lines": [
                    {
                        "origin": str(line.origin) if line.origin else None,
                        "line": line.line_number,
                        "text": line.text,
                    }
                    for line in lines
                ],
            },
            "",
        )
        return 0

    for line in lines:
        if args.origins:
            formatter.text(f"{line.origin or '-'}:{line.line_number}:{line.text}")
        else:
            formatter.text(line.text)
    return 0

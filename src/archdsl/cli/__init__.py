"""
archdsl CLI package.

Commands live in cli/commands/ and are discovered automatically; each module
exports SUMMARY, register_args(parser) and main(args).
"""
from ._args import add_json_flag, add_logging_flags, add_repo_root_flag, add_standard_flags
from ._output import OutputFormatter
from ._utils import get_repo_root, setup_logging

__all__ = [
    "OutputFormatter",
    "add_json_flag",
    "add_logging_flags",
    "add_repo_root_flag",
    "add_standard_flags",
    "get_repo_root",
    "setup_logging",
]

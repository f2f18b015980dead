"""
Main Entry Point for cst-unparser CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `cst_unparser.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from cst_unparser import __version__
from cst_unparser.cli import commands


def _add_input_arguments(cmd: argparse.ArgumentParser, multiple: bool) -> None:
  if multiple:
    cmd.add_argument("paths", nargs="*", type=Path, help="Source files or directories")
    cmd.add_argument(
      "-e",
      "--execute",
      dest="sources",
      action="append",
      default=[],
      metavar="SOURCE",
      help="Literal source text to verify (repeatable)",
    )
  else:
    group = cmd.add_mutually_exclusive_group(required=True)
    group.add_argument("path", nargs="?", type=Path, help="Source file")
    group.add_argument("-e", "--execute", dest="source", metavar="SOURCE", help="Literal source text")
  cmd.add_argument(
    "--python-version",
    default=None,
    help="Grammar version for parsing, e.g. 3.8 (default: from toml, else current)",
  )


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 success, 1 verification failure, 2 fatal error).
  """
  parser = argparse.ArgumentParser(description="cst-unparser: Python source regeneration and round-trip verification")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CHECK ---
  cmd_check = subparsers.add_parser("check", help="Verify that sources survive a parse/unparse round trip")
  _add_input_arguments(cmd_check, multiple=True)
  cmd_check.add_argument(
    "--fail-fast",
    action="store_true",
    default=None,
    help="Stop at the first failing source (Overrides config)",
  )
  cmd_check.add_argument(
    "--ignore",
    action="append",
    default=[],
    metavar="GLOB",
    help="Glob pattern excluded from directory expansion (repeatable)",
  )
  cmd_check.add_argument(
    "-v",
    "--verbose",
    action="store_true",
    help="Also log every source that round-trips cleanly",
  )

  # --- Command: UNPARSE ---
  cmd_unparse = subparsers.add_parser("unparse", help="Print the source regenerated from the normalized AST")
  _add_input_arguments(cmd_unparse, multiple=False)

  # --- Command: DUMP ---
  cmd_dump = subparsers.add_parser("dump", help="Print the normalized AST")
  _add_input_arguments(cmd_dump, multiple=False)

  args = parser.parse_args(argv)

  if args.command == "check":
    return commands.handle_check(
      paths=args.paths,
      sources=args.sources,
      fail_fast=args.fail_fast,
      ignore=args.ignore,
      python_version=args.python_version,
      verbose=args.verbose,
    )
  if args.command == "unparse":
    return commands.handle_unparse(path=args.path, source=args.source, python_version=args.python_version)
  if args.command == "dump":
    return commands.handle_dump(path=args.path, source=args.source, python_version=args.python_version)

  return 0


if __name__ == "__main__":
  sys.exit(main())

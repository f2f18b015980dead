"""
CLI Command Handlers.

Each ``handle_*`` function implements one sub-command and returns the
process exit code:

- ``0``: every source verified (or the output was printed).
- ``1``: at least one source failed verification.
- ``2``: a fatal error (unsupported node kind, unreadable file, bad config).
"""

import fnmatch
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from pydantic import ValidationError
from rich.markup import escape

from cst_unparser.config import UnparserConfig
from cst_unparser.emitter import unparse
from cst_unparser.errors import UnparserError
from cst_unparser.tree.parser import Parser
from cst_unparser.utils.console import (
  console,
  log_check_summary,
  log_error,
  log_info,
  log_verification,
  log_warning,
  set_verbosity,
)
from cst_unparser.verifier import FileSource, Source, StringSource, colorize
from cst_unparser.verifier.source import read_source_file

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_FATAL = 2


def expand_paths(paths: Iterable[Path], ignore: Sequence[str] = ()) -> List[Path]:
  """
  Expands directories into the ``*.py`` files below them.

  Explicitly named files are always kept. Files found by directory expansion
  are dropped when their path relative to the directory, or their name,
  matches one of the `ignore` globs.

  Args:
      paths: Files and directories, in command line order.
      ignore: Glob patterns.

  Returns:
      List[Path]: Files in a deterministic order.
  """
  expanded: List[Path] = []
  for path in paths:
    if not path.is_dir():
      expanded.append(path)
      continue
    for candidate in sorted(path.rglob("*.py")):
      relative = candidate.relative_to(path).as_posix()
      if any(fnmatch.fnmatch(relative, pat) or fnmatch.fnmatch(candidate.name, pat) for pat in ignore):
        continue
      expanded.append(candidate)
  return expanded


def _load_config(search_path: Optional[Path], **overrides) -> Optional[UnparserConfig]:
  try:
    return UnparserConfig.load(search_path=search_path, **overrides)
  except ValidationError as e:
    log_error(f"Invalid configuration: {escape(str(e))}")
    return None


def _search_root(path: Optional[Path]) -> Optional[Path]:
  if path is None:
    return None
  return path if path.is_dir() else path.parent


def handle_check(
  paths: Sequence[Path],
  sources: Sequence[str],
  fail_fast: Optional[bool] = None,
  ignore: Optional[List[str]] = None,
  python_version: Optional[str] = None,
  verbose: bool = False,
) -> int:
  """
  Handles the 'check' command execution.

  Literal sources are verified first, then files in expansion order.

  Args:
      paths: Files or directories to verify.
      sources: Literal source texts to verify.
      fail_fast: If True, stop at the first failure (Overrides config).
      ignore: Extra ignore globs for directory expansion.
      python_version: Grammar version override.
      verbose: If True, also log every source that round-trips cleanly.

  Returns:
      int: Exit code.
  """
  set_verbosity(verbose)
  config = _load_config(
    _search_root(paths[0] if paths else None),
    python_version=python_version,
    fail_fast=fail_fast,
    ignore=ignore,
  )
  if config is None:
    return EXIT_FATAL

  parser = Parser(config.python_version)
  queue: List[Source] = [StringSource(text, config=config, parser=parser) for text in sources]
  queue.extend(FileSource(path, config=config, parser=parser) for path in expand_paths(paths, config.ignore))

  if not queue:
    log_warning("Nothing to check. Pass PATH arguments or -e SOURCE.")
    return EXIT_OK

  log_info(f"Checking {len(queue)} source(s)...")
  failures = 0
  for source in queue:
    try:
      ok = source.success
    except (UnparserError, OSError) as e:
      log_error(f"Fatal error in [path]{escape(source.identification)}[/path]: {escape(str(e))}")
      return EXIT_FATAL

    if ok:
      log_verification(source.identification, source.state)
      continue
    failures += 1
    log_verification(source.identification, source.state, colorize(source.error_report))
    if config.fail_fast:
      break

  log_check_summary(len(queue), failures)
  return EXIT_FAILURE if failures else EXIT_OK


def _read_input(path: Optional[Path], source: Optional[str]) -> str:
  if source is not None:
    return source
  return read_source_file(path)


def _parse_input(path: Optional[Path], source: Optional[str], python_version: Optional[str]):
  config = _load_config(_search_root(path), python_version=python_version)
  if config is None:
    return None, None
  try:
    tree = Parser(config.python_version).parse_node(_read_input(path, source))
  except (UnparserError, OSError) as e:
    log_error(f"Could not parse input: {escape(str(e))}")
    return config, None
  return config, tree


def handle_unparse(path: Optional[Path], source: Optional[str], python_version: Optional[str] = None) -> int:
  """
  Handles the 'unparse' command: prints the source regenerated from the normalized AST.

  Args:
      path: Source file, if `source` is not given.
      source: Literal source text.
      python_version: Grammar version override.

  Returns:
      int: Exit code.
  """
  config, tree = _parse_input(path, source, python_version)
  if tree is None:
    return EXIT_FATAL
  try:
    generated = unparse(tree, config)
  except UnparserError as e:
    log_error(escape(str(e)))
    return EXIT_FATAL
  console.print(generated, end="", markup=False, highlight=False)
  return EXIT_OK


def handle_dump(path: Optional[Path], source: Optional[str], python_version: Optional[str] = None) -> int:
  """
  Handles the 'dump' command: prints the normalized AST.

  Args:
      path: Source file, if `source` is not given.
      source: Literal source text.
      python_version: Grammar version override.

  Returns:
      int: Exit code.
  """
  _, tree = _parse_input(path, source, python_version)
  if tree is None:
    return EXIT_FATAL
  console.print(tree.dump(), markup=False, highlight=False)
  return EXIT_OK

"""
Console Output and Verification Logging.

All user-facing output of the command line goes through the standard
`logging` library, rendered by `rich`:

- `log_*` helpers: one emoji-prefixed line per event, with Rich markup.
- `log_verification`: one line per verified source, styled by its
  terminal state, optionally followed by the colorized failure report.
- `set_verbosity`: toggles DEBUG output, which carries per-source matches
  and the verifier's internal parse diagnostics.

The module-level `console` is a proxy whose backend can be swapped at
runtime via `set_console` (e.g. an in-memory recording console in tests);
the logging handler follows the active backend.

Attributes:
    console (_ConsoleProxy): A stable reference to the active Rich Console.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from rich.console import Console, RenderableType
from rich.logging import RichHandler
from rich.markup import escape
from rich.theme import Theme

# Between INFO (20) and WARNING (30)
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
    "diff.added": "green",
    "diff.removed": "red",
    "diff.header": "bold",
    "diff.hunk": "cyan",
  }
)


class _ConsoleProxy:
  """
  Forwards printing to a swappable `rich.console.Console` backend.

  Swapping the backend re-routes the root logger's `RichHandler` too, so
  log records and `console.print(...)` output always interleave on the same
  destination.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._level = logging.INFO
    self._configure_logging()

  def set_backend(self, new_console: Console) -> None:
    self._backend = new_console
    self._configure_logging()

  def set_level(self, level: int) -> None:
    self._level = level
    logging.getLogger().setLevel(level)

  def reset(self) -> None:
    self._backend = Console(theme=_THEME)
    self._level = logging.INFO
    self._configure_logging()

  @property
  def backend(self) -> Console:
    return self._backend

  def _configure_logging(self) -> None:
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
      if isinstance(handler, RichHandler):
        root_logger.removeHandler(handler)

    root_logger.setLevel(self._level)
    root_logger.addHandler(
      RichHandler(
        console=self._backend,
        show_time=False,
        omit_repeated_times=False,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
      )
    )

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Routes printing and logging to `new_console`.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Restores the standard output console and INFO verbosity."""
  console.reset()


def get_console() -> Console:
  """Returns the currently active console backend."""
  return console.backend


def set_verbosity(verbose: bool) -> None:
  """Shows DEBUG records (per-source matches, parse diagnostics) when `verbose`."""
  console.set_level(logging.DEBUG if verbose else logging.INFO)


def log_info(msg: str) -> None:
  logging.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  logging.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  logging.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  logging.error(f"❌ {msg}", extra={"markup": True})


# --- Verification Output ---

# Keyed by `VerificationState` value: (theme style, short description).
_VERDICTS: Dict[str, Tuple[str, str]] = {
  "match": ("success", "round-trips cleanly"),
  "original_parse_failed": ("warning", "input does not parse"),
  "generated_parse_failed": ("error", "generated source does not parse"),
  "mismatch": ("error", "regenerated AST differs"),
}


def log_verification(identification: str, state: str, report: Optional[RenderableType] = None) -> None:
  """
  Logs the outcome of one round-trip verification.

  A match is logged at DEBUG level, so it only shows with `set_verbosity(True)`.
  Any other state is an error line naming the source and the state, followed
  by `report` (if given) printed verbatim.

  Args:
      identification: Display name of the source (a path or `(string)`).
      state: A `VerificationState` or its string value.
      report: The failure report, e.g. the output of `colorize`.

  Raises:
      KeyError: If `state` is not a known verification state.
  """
  value = getattr(state, "value", state)
  style, description = _VERDICTS[value]
  name = escape(identification)
  if value == "match":
    logging.debug(f"[{style}]{description}[/{style}]: [path]{name}[/path]", extra={"markup": True})
    return
  log_error(f"Round trip failed: [path]{name}[/path] ({value}) [{style}]{description}[/{style}]")
  if report is not None:
    console.print(report, highlight=False)


def log_check_summary(total: int, failures: int) -> None:
  """Logs the closing line of a `check` run."""
  if failures:
    log_error(f"{failures} of {total} source(s) failed the round trip.")
  else:
    log_success(f"All {total} source(s) round-trip cleanly.")

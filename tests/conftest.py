"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so log output of one test never leaks into another.
- A recording console fixture for asserting on CLI output.
"""

import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'cst_unparser' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from cst_unparser.utils.console import reset_console, set_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_console():
  """Ensures console is reset to stdout around every test."""
  reset_console()
  yield
  reset_console()


@pytest.fixture
def recording_console():
  """Injects a recording console; read output with `export_text()`."""
  capture = Console(record=True, width=200, force_terminal=False)
  set_console(capture)
  return capture

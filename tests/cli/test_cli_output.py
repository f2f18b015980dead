"""
Tests for the CLI 'unparse' and 'dump' Commands.
"""

import pytest

from cst_unparser.cli.__main__ import main
from cst_unparser.cli.commands import EXIT_FATAL, EXIT_OK


@pytest.fixture(autouse=True)
def run_in_tmp(tmp_path, monkeypatch):
  monkeypatch.chdir(tmp_path)


def test_unparse_literal(recording_console):
  assert main(["unparse", "-e", "def f():\n  return a or b\n"]) == EXIT_OK
  assert recording_console.export_text().rstrip("\n") == "def f():\n    return (a or b)"


def test_unparse_file(tmp_path, recording_console):
  path = tmp_path / "m.py"
  path.write_text("x=[1,2]\n", encoding="utf-8")
  assert main(["unparse", str(path)]) == EXIT_OK
  assert recording_console.export_text().rstrip("\n") == "x = [1, 2]"


def test_unparse_uses_configured_indent(tmp_path, recording_console):
  (tmp_path / "pyproject.toml").write_text('[tool.cst_unparser]\nindent = "  "\n', encoding="utf-8")
  path = tmp_path / "m.py"
  path.write_text("if a:\n    pass\n", encoding="utf-8")
  assert main(["unparse", str(path)]) == EXIT_OK
  assert recording_console.export_text().rstrip("\n") == "if a:\n  pass"


def test_unparse_syntax_error(recording_console):
  assert main(["unparse", "-e", "def (:\n"]) == EXIT_FATAL
  assert "Could not parse input" in recording_console.export_text()


def test_unparse_unsupported_construct(recording_console):
  assert main(["unparse", "-e", "match x:\n    case 1:\n        pass\n"]) == EXIT_FATAL
  assert "Match" in recording_console.export_text()


def test_dump_literal(recording_console):
  assert main(["dump", "-e", "x\n"]) == EXIT_OK
  output = recording_console.export_text()
  assert output.startswith("(Module\n")
  assert "(Name 'x')" in output


def test_dump_missing_file(tmp_path, recording_console):
  assert main(["dump", str(tmp_path / "missing.py")]) == EXIT_FATAL


def test_path_and_literal_are_exclusive():
  with pytest.raises(SystemExit):
    main(["dump", "file.py", "-e", "x"])


def test_input_is_required():
  with pytest.raises(SystemExit):
    main(["unparse"])


def test_unparse_latin1_file(tmp_path, recording_console):
  path = tmp_path / "legacy.py"
  path.write_bytes(b"# -*- coding: latin-1 -*-\nx = '\xe9'\n")
  assert main(["unparse", str(path)]) == EXIT_OK
  assert recording_console.export_text().rstrip("\n") == "x = 'é'"


def test_dump_undecodable_file(tmp_path, recording_console):
  path = tmp_path / "broken.py"
  path.write_bytes(b"x = '\xe9'\n")
  assert main(["dump", str(path)]) == EXIT_FATAL
  assert "Could not parse input" in recording_console.export_text()

"""
Tests for Runtime Configuration loading.

Verifies:
1. Defaults without any pyproject.toml.
2. Values read from `[tool.cst_unparser]` in the nearest pyproject.toml.
3. Explicit overrides win over TOML values; ignore lists are merged.
4. Validation of malformed values.
"""

import pytest
from pydantic import ValidationError

from cst_unparser.config import UnparserConfig

TOML = """
[tool.cst_unparser]
python_version = "3.8"
indent = "  "
fail_fast = true
ignore = ["build/*"]
"""


def test_defaults():
  config = UnparserConfig()
  assert config.python_version is None
  assert config.indent == "    "
  assert config.fail_fast is False
  assert config.ignore == []


def test_load_without_toml(tmp_path):
  config = UnparserConfig.load(search_path=tmp_path)
  assert config == UnparserConfig()


def test_load_from_parent_directory(tmp_path):
  (tmp_path / "pyproject.toml").write_text(TOML, encoding="utf-8")
  nested = tmp_path / "pkg" / "sub"
  nested.mkdir(parents=True)

  config = UnparserConfig.load(search_path=nested)
  assert config.python_version == "3.8"
  assert config.indent == "  "
  assert config.fail_fast is True
  assert config.ignore == ["build/*"]


def test_overrides_win(tmp_path):
  (tmp_path / "pyproject.toml").write_text(TOML, encoding="utf-8")

  config = UnparserConfig.load(
    python_version="3.9",
    indent="\t",
    fail_fast=False,
    ignore=["*_pb2.py"],
    search_path=tmp_path,
  )
  assert config.python_version == "3.9"
  assert config.indent == "\t"
  assert config.fail_fast is False
  assert config.ignore == ["build/*", "*_pb2.py"]


def test_other_tool_sections_are_ignored(tmp_path):
  (tmp_path / "pyproject.toml").write_text('[tool.other]\nindent = "x"\n', encoding="utf-8")
  assert UnparserConfig.load(search_path=tmp_path).indent == "    "


@pytest.mark.parametrize("version", ["3", "python3.8", "2.7", "3.x"])
def test_invalid_python_version(version):
  with pytest.raises(ValidationError):
    UnparserConfig(python_version=version)


def test_python_version_is_stripped():
  assert UnparserConfig(python_version=" 3.10 ").python_version == "3.10"


@pytest.mark.parametrize("indent", ["", "ab", " x "])
def test_invalid_indent(indent):
  with pytest.raises(ValidationError):
    UnparserConfig(indent=indent)

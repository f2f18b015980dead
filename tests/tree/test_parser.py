"""
Tests for the Parser collaborator.
"""

import libcst as cst
import pytest

from cst_unparser.errors import SourceSyntaxError, UnparserError
from cst_unparser.tree.node import s
from cst_unparser.tree.parser import Parser, parse


def test_parse_returns_libcst_module():
  assert isinstance(Parser().parse("x = 1\n"), cst.Module)


def test_parse_node_normalizes():
  tree = Parser().parse_node("x\n")
  assert tree == s("Module", (s("SimpleStatementLine", (s("Expr", s("Name", "x")),)),))


def test_module_level_parse():
  assert parse("x\n") == Parser().parse_node("x\n")


def test_syntax_error_is_wrapped():
  with pytest.raises(SourceSyntaxError) as excinfo:
    Parser().parse("def (:\n")
  assert isinstance(excinfo.value, UnparserError)
  assert isinstance(excinfo.value.__cause__, cst.ParserSyntaxError)
  assert excinfo.value.source == "def (:\n"


def test_grammar_version_is_recorded():
  parser = Parser("3.8")
  assert parser.python_version == "3.8"
  assert parser.parse_node("(y := 1)\n") is not None

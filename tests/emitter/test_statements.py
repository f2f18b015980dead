"""
Tests for Statement Emission.

Covers block layout, assignments, imports, compound statements and
definitions. Expected output is the canonical spelling: four-space
indentation, one statement per line, minimal parentheses.
"""

import pytest

from cst_unparser import UnparserConfig, parse, unparse
from cst_unparser.errors import UnknownNodeKindError


def _emit(code: str) -> str:
  return unparse(parse(code))


@pytest.mark.parametrize(
  "code, expected",
  [
    ("", ""),
    ("x = 1\n", "x = 1\n"),
    ("a = b = 1\n", "a = b = 1\n"),
    ("a, b = 1, 2\n", "(a, b) = (1, 2)\n"),
    ("x += 1\n", "x += 1\n"),
    ("x //= 2\n", "x //= 2\n"),
    ("x: int = 1\n", "x: int = 1\n"),
    ("x: int\n", "x: int\n"),
    ("a; b\n", "a; b\n"),
    ("pass\n", "pass\n"),
    ("global a, b\n", "global a, b\n"),
    ("f = lambda: 0\n", "f = lambda: 0\n"),
  ],
)
def test_simple_statements(code, expected):
  assert _emit(code) == expected


@pytest.mark.parametrize(
  "code, expected",
  [
    ("import os\n", "import os\n"),
    ("import a.b as c, d\n", "import a.b as c, d\n"),
    ("from x import y\n", "from x import y\n"),
    ("from ..pkg import (a as b,\n    c)\n", "from ..pkg import a as b, c\n"),
    ("from . import *\n", "from . import *\n"),
  ],
)
def test_imports(code, expected):
  assert _emit(code) == expected


def test_if_elif_else():
  code = "if a:\n    pass\nelif b:\n    pass\nelse:\n    pass\n"
  assert _emit(code) == code


def test_else_with_nested_if_is_not_elif():
  code = "if a:\n    pass\nelse:\n    if b:\n        pass\n"
  assert _emit(code) == code


def test_one_line_suite_is_expanded():
  assert _emit("if a: pass\n") == "if a:\n    pass\n"


def test_loops():
  code = "for i in range(3):\n    continue\nelse:\n    pass\nwhile True:\n    break\n"
  assert _emit(code) == code


def test_try_statement():
  code = (
    "try:\n"
    "    pass\n"
    "except ValueError as e:\n"
    "    raise\n"
    "except:\n"
    "    pass\n"
    "else:\n"
    "    pass\n"
    "finally:\n"
    "    pass\n"
  )
  assert _emit(code) == code


def test_with_statement():
  code = "with open(p) as f, lock:\n    pass\n"
  assert _emit(code) == code


def test_function_definition():
  code = "@dec\n@dec.attr(1)\ndef f(a, /, b: int = 1, *args, c, **kw) -> int:\n    return a\n"
  expected = "@dec\n@dec.attr(1)\ndef f(a, /, b: int = 1, *args, c, **kw) -> int:\n    return (a)\n"
  assert _emit(code) == expected


def test_async_constructs():
  code = "async def f():\n    async with a:\n        await b\n    async for x in y:\n        pass\n"
  assert _emit(code) == code


def test_class_definition():
  code = "class A(B, metaclass=M):\n    x = 1\n\n    def m(self):\n        pass\n"
  expected = "class A(B, metaclass=M):\n    x = 1\n    def m(self):\n        pass\n"
  assert _emit(code) == expected


def test_bare_class():
  assert _emit("class A: pass\n") == "class A:\n    pass\n"


def test_indent_from_config():
  code = "if a:\n    if b:\n        pass\n"
  config = UnparserConfig(indent="  ")
  assert unparse(parse(code), config) == "if a:\n  if b:\n    pass\n"


def test_match_statement_is_unsupported():
  code = "match x:\n    case 1:\n        pass\n"
  with pytest.raises(UnknownNodeKindError) as excinfo:
    _emit(code)
  assert excinfo.value.kind == "Match"

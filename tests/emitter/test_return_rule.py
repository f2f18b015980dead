"""
Tests for the `return` Emission Rule.

Verifies:
1. Zero, one and many arguments, each argument parenthesized.
2. The extra outer wrap when the statement is a direct `or` / `and` operand.
3. Only the immediate parent is consulted.
"""

import pytest

from cst_unparser import parse, unparse
from cst_unparser.emitter import Emitter
from cst_unparser.tree.context import ParentContext
from cst_unparser.tree.node import s

A = s("Name", "a")
B = s("Name", "b")
X = s("Name", "x")
Y = s("Name", "y")


def test_return_without_arguments():
  assert unparse(s("Return", None)) == "return"
  assert unparse(s("Return")) == "return"


def test_return_single_argument():
  assert unparse(s("Return", X)) == "return (x)"


def test_return_many_arguments():
  assert unparse(s("Return", A, B)) == "return (a), (b)"


def test_absent_arguments_are_skipped():
  assert unparse(s("Return", None, A)) == "return (a)"


@pytest.mark.parametrize("kind", ["Or", "And"])
def test_logical_operand_gets_outer_wrap(kind):
  token = kind.lower()
  assert unparse(s(kind, s("Return", X), Y)) == f"(return (x)) {token} y"


def test_logical_operand_many_arguments():
  assert unparse(s("Or", s("Return", A, B), Y)) == "(return (a), (b)) or y"


def test_logical_operand_without_arguments_is_not_wrapped():
  assert unparse(s("And", s("Return", None), Y)) == "return and y"


def test_right_operand_is_wrapped_too():
  assert unparse(s("Or", A, s("Return", B))) == "a or (return (b))"


def test_only_immediate_parent_counts():
  tree = s("Or", s("UnaryOperation", s("Not"), s("Return", X)), Y)
  assert unparse(tree) == "not return (x) or y"


def test_parent_context_drives_wrap():
  emitter = Emitter()
  emitter.emit(s("Return", X), ParentContext("Or", "left"))
  assert emitter.result() == "(return (x))"

  emitter = Emitter()
  emitter.emit(s("Return", X), ParentContext("If", "test"))
  assert emitter.result() == "return (x)"


def test_nested_argument_is_self_contained():
  value = s("Or", A, B)
  assert unparse(s("Return", value)) == "return (a or b)"


def test_return_statement_from_source():
  code = "def f():\n    return x or y\n"
  assert unparse(parse(code)) == "def f():\n    return (x or y)\n"


def test_return_tuple_from_source():
  code = "def f():\n    return a, b\n"
  assert unparse(parse(code)) == "def f():\n    return ((a, b))\n"


@pytest.mark.parametrize(
  "code, expected",
  [
    ("del a\n", "del (a)\n"),
    ("del a, b\n", "del ((a, b))\n"),
    ("assert x\n", "assert (x)\n"),
    ("assert x, 'm'\n", "assert (x), ('m')\n"),
    ("raise\n", "raise\n"),
    ("raise E\n", "raise (E)\n"),
    ("raise E from c\n", "raise (E) from (c)\n"),
  ],
)
def test_keyword_statements_follow_the_template(code, expected):
  assert unparse(parse(code)) == expected


@pytest.mark.parametrize(
  "code, expected",
  [
    ("def g():\n    yield\n", "def g():\n    (yield)\n"),
    ("def g():\n    yield x\n", "def g():\n    (yield (x))\n"),
    ("def g():\n    y = yield from x\n", "def g():\n    y = (yield from (x))\n"),
  ],
)
def test_yield_follows_the_template(code, expected):
  assert unparse(parse(code)) == expected

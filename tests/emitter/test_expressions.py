"""
Tests for Expression Emission and Precedence.

Each case parses an expression, emits it and compares with the expected
text. Redundant parentheses in the input disappear; required ones survive.
"""

import libcst as cst
import pytest

from cst_unparser.emitter import Precedence, precedence_of, unparse
from cst_unparser.tree.node import s
from cst_unparser.tree.normalizer import normalize


def _emit(code: str) -> str:
  return unparse(normalize(cst.parse_expression(code)))


@pytest.mark.parametrize(
  "code, expected",
  [
    ("a + b * c", "a + b * c"),
    ("(a + b) * c", "(a + b) * c"),
    ("((a))", "a"),
    ("a - b - c", "a - b - c"),
    ("a - (b - c)", "a - (b - c)"),
    ("-x ** 2", "-x ** 2"),
    ("(-x) ** 2", "(-x) ** 2"),
    ("a ** b ** c", "a ** b ** c"),
    ("(a ** b) ** c", "(a ** b) ** c"),
    ("2 ** -1", "2 ** -1"),
    ("a | b & c ^ d", "a | b & c ^ d"),
    ("a << 1 + 2", "a << 1 + 2"),
  ],
)
def test_arithmetic_precedence(code, expected):
  assert _emit(code) == expected


@pytest.mark.parametrize(
  "code, expected",
  [
    ("a or b and c", "a or b and c"),
    ("(a or b) and c", "(a or b) and c"),
    ("not (a and b)", "not (a and b)"),
    ("not a == b", "not a == b"),
    ("a < b < c", "a < b < c"),
    ("a not in b", "a not in b"),
    ("a is not None", "a is not None"),
    ("(a or b) == c", "(a or b) == c"),
  ],
)
def test_logical_and_comparison_precedence(code, expected):
  assert _emit(code) == expected


@pytest.mark.parametrize(
  "code, expected",
  [
    ("a if b else c", "a if b else c"),
    ("(a if b else c) if d else e", "(a if b else c) if d else e"),
    ("a if b else c if d else e", "a if b else c if d else e"),
    ("lambda: 0", "lambda: 0"),
    ("lambda x, *, y=1: x", "lambda x, *, y=1: x"),
    ("lambda *args, **kw: args", "lambda *args, **kw: args"),
    ("(x := 5)", "x := 5"),
    ("f((y := 1))", "f((y := 1))"),
  ],
)
def test_conditional_lambda_walrus(code, expected):
  assert _emit(code) == expected


@pytest.mark.parametrize(
  "code, expected",
  [
    ("a.b.c", "a.b.c"),
    ("(a + b).c", "(a + b).c"),
    ("(1).real", "(1).real"),
    ("1.5.real", "1.5.real"),
    ("f(*args, key=value, **kw)", "f(*args, key=value, **kw)"),
    ("f(x=lambda: 1)", "f(x=(lambda: 1))"),
    ("f(x for x in y)", "f((x for x in y))"),
    ("x[1:2, ::3]", "x[1:2, ::3]"),
    ("x[:]", "x[:]"),
    ("x[1,]", "x[1,]"),
    ("x[(1, 2)]", "x[(1, 2)]"),
    ("(await x).y", "(await x).y"),
  ],
)
def test_primaries(code, expected):
  assert _emit(code) == expected


@pytest.mark.parametrize(
  "code, expected",
  [
    ("()", "()"),
    ("(1,)", "(1,)"),
    ("a, b", "(a, b)"),
    ("[1, *rest]", "[1, *rest]"),
    ("{1, 2}", "{1, 2}"),
    ("{}", "{}"),
    ("{'a': 1, **other}", "{'a': 1, **other}"),
    ("[x for x in y if x]", "[x for x in y if x]"),
    ("{x for x in y}", "{x for x in y}"),
    ("{k: v for k, v in items}", "{k: v for (k, v) in items}"),
    ("(x for x in a for a in b)", "(x for x in a for a in b)"),
    ("[x for x in (a if b else c)]", "[x for x in (a if b else c)]"),
  ],
)
def test_collections_and_comprehensions(code, expected):
  assert _emit(code) == expected


@pytest.mark.parametrize(
  "code",
  [
    "'single'",
    '"double"',
    "r'\\d+'",
    "b'bytes'",
    "0x1F",
    "1_000",
    "1e10",
    "3j",
    "...",
    "'a' 'b'",
    'f"{x!r:>10} and {y}"',
    'f"{ {1: 2} }"',
  ],
)
def test_literals_are_verbatim(code):
  assert _emit(code) == code


@pytest.mark.parametrize(
  "code, expected",
  [
    ('f"{ {1, 2} | s }"', 'f"{ {1, 2} | s}"'),
    ("f\"{ {'a': 1}['a'] }\"", "f\"{ {'a': 1}['a']}\""),
    ('f"{ {1}.pop() }"', 'f"{ {1}.pop()}"'),
    ('f"{s | {1} }"', 'f"{s | {1} }"'),
  ],
)
def test_fstring_pads_expression_braces(code, expected):
  assert _emit(code) == expected


def test_precedence_of():
  assert precedence_of(s("Name", "x")) is Precedence.ATOM
  assert precedence_of(s("Or", None, None)) is Precedence.OR
  assert precedence_of(s("UnaryOperation", s("Not"), None)) is Precedence.NOT
  assert precedence_of(s("UnaryOperation", s("Minus"), None)) is Precedence.UNARY
  assert precedence_of(s("BinaryOperation", None, s("Multiply"), None)) is Precedence.TERM
  assert precedence_of(s("Call", None, ())) is Precedence.PRIMARY

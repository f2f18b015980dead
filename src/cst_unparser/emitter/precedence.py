"""
Operator Precedence.

Binding strength of Python expressions, weakest first. The dispatch engine
wraps a child in parentheses when its precedence is below what the slot it
is emitted into requires.
"""

from enum import IntEnum
from typing import Dict

from cst_unparser.tree.node import Node


class Precedence(IntEnum):
  """Python expression precedence levels."""

  ASSIGNMENT = 0  # `:=` and bare `yield`
  LAMBDA = 1
  TERNARY = 2
  OR = 3
  AND = 4
  NOT = 5
  COMPARISON = 6
  BIT_OR = 7
  BIT_XOR = 8
  BIT_AND = 9
  SHIFT = 10
  ARITH = 11
  TERM = 12
  UNARY = 13
  POWER = 14
  AWAIT = 15
  PRIMARY = 16
  ATOM = 17


BINARY_PRECEDENCE: Dict[str, Precedence] = {
  "BitOr": Precedence.BIT_OR,
  "BitXor": Precedence.BIT_XOR,
  "BitAnd": Precedence.BIT_AND,
  "LeftShift": Precedence.SHIFT,
  "RightShift": Precedence.SHIFT,
  "Add": Precedence.ARITH,
  "Subtract": Precedence.ARITH,
  "Multiply": Precedence.TERM,
  "Divide": Precedence.TERM,
  "FloorDivide": Precedence.TERM,
  "Modulo": Precedence.TERM,
  "MatrixMultiply": Precedence.TERM,
  "Power": Precedence.POWER,
}

_KIND_PRECEDENCE: Dict[str, Precedence] = {
  "NamedExpr": Precedence.ASSIGNMENT,
  "Yield": Precedence.ASSIGNMENT,
  "Lambda": Precedence.LAMBDA,
  "IfExp": Precedence.TERNARY,
  "Or": Precedence.OR,
  "And": Precedence.AND,
  "Comparison": Precedence.COMPARISON,
  "Await": Precedence.AWAIT,
  "Call": Precedence.PRIMARY,
  "Attribute": Precedence.PRIMARY,
  "Subscript": Precedence.PRIMARY,
}


def precedence_of(node: Node) -> Precedence:
  """
  Determines how tightly an expression node binds.

  Args:
      node: A normalized expression node.

  Returns:
      Precedence: The binding level. Atoms and self-delimited forms
      (tuples, comprehensions, literals) return `Precedence.ATOM`.
  """
  if node.kind == "BinaryOperation":
    operator = node.children[1]
    return BINARY_PRECEDENCE.get(operator.kind, Precedence.ATOM)
  if node.kind == "UnaryOperation":
    operator = node.children[0]
    return Precedence.NOT if operator.kind == "Not" else Precedence.UNARY
  return _KIND_PRECEDENCE.get(node.kind, Precedence.ATOM)

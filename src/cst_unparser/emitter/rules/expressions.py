"""
Expression Rules.

Operators, calls, attribute access, subscripts, collections and
comprehensions. Every operand goes through `Emitter.visit_expression`, which
parenthesizes it when it binds weaker than the operand slot requires.
"""

from typing import TYPE_CHECKING

from cst_unparser.emitter.precedence import BINARY_PRECEDENCE, Precedence, precedence_of
from cst_unparser.emitter.tokens import (
  BINARY_OPERATORS,
  BOOLEAN_OPERATORS,
  COMPARISON_OPERATORS,
  K_ASYNC,
  K_AWAIT,
  UNARY_OPERATORS,
)
from cst_unparser.errors import UnknownNodeKindError
from cst_unparser.tree.context import ParentContext
from cst_unparser.tree.node import Node

if TYPE_CHECKING:
  from cst_unparser.emitter.dispatch import Emitter


def _token(table: dict, operator: Node) -> str:
  token = table.get(operator.kind)
  if token is None:
    raise UnknownNodeKindError(operator.kind)
  return token


def emit_primary(emitter: "Emitter", value: Node, node: Node, role: str) -> None:
  """
  Emits the value an attribute, call or subscript applies to.

  Integers are always wrapped: `1.real` would lex as a float literal.
  """
  with emitter.wrap(precedence_of(value) < Precedence.PRIMARY or value.kind == "Integer"):
    emitter.visit(value, node, role)


# --- Operators ---


def emit_boolean_operation(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  left, right = node.children
  precedence = precedence_of(node)
  emitter.visit_expression(left, node, precedence, "left")
  emitter.write(" ", BOOLEAN_OPERATORS[node.kind], " ")
  emitter.visit_expression(right, node, Precedence(precedence + 1), "right")


def emit_binary_operation(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  left, operator, right = node.children
  token = _token(BINARY_OPERATORS, operator)
  precedence = BINARY_PRECEDENCE[operator.kind]
  if operator.kind == "Power":
    # Right associative; `2 ** -1` is valid, `-2 ** 2` means `-(2 ** 2)`.
    left_minimum, right_minimum = Precedence.AWAIT, Precedence.UNARY
  else:
    left_minimum, right_minimum = precedence, Precedence(precedence + 1)
  emitter.visit_expression(left, node, left_minimum, "left")
  emitter.write(" ", token, " ")
  emitter.visit_expression(right, node, right_minimum, "right")


def emit_unary_operation(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  operator, operand = node.children
  emitter.write(_token(UNARY_OPERATORS, operator))
  minimum = Precedence.NOT if operator.kind == "Not" else Precedence.UNARY
  emitter.visit_expression(operand, node, minimum, "expression")


def emit_comparison(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  left, comparisons = node.children
  emitter.visit_expression(left, node, Precedence.BIT_OR, "left")
  for target in comparisons:
    operator, comparator = target.children
    emitter.write(" ", _token(COMPARISON_OPERATORS, operator), " ")
    emitter.visit_expression(comparator, node, Precedence.BIT_OR, "comparisons")


def emit_if_exp(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  test, body, orelse = node.children
  emitter.visit_expression(body, node, Precedence.OR, "body")
  emitter.write(" if ")
  emitter.visit_expression(test, node, Precedence.OR, "test")
  emitter.write(" else ")
  emitter.visit_expression(orelse, node, Precedence.TERNARY, "orelse")


def emit_await(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (expression,) = node.children
  emitter.write(K_AWAIT, " ")
  emitter.visit_expression(expression, node, Precedence.PRIMARY, "expression")


def emit_named_expr(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  target, value = node.children
  emitter.visit(target, node, "target")
  emitter.write(" := ")
  emitter.visit_expression(value, node, Precedence.TERNARY, "value")


# --- Primaries ---


def emit_attribute(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  value, attr = node.children
  emit_primary(emitter, value, node, "value")
  emitter.write(".")
  emitter.visit(attr, node, "attr")


def emit_call(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  func, args = node.children
  emit_primary(emitter, func, node, "func")
  with emitter.wrap_always():
    emitter.visit_all(args, node, role="args")


def emit_arg(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  star, keyword, value = node.children
  if star:
    emitter.write(star)
  if keyword is not None:
    emitter.visit(keyword, node, "keyword")
    emitter.write("=")
  minimum = Precedence.BIT_OR if star else Precedence.TERNARY
  emitter.visit_expression(value, node, minimum, "value")


def emit_subscript(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  value, elements, single_with_comma = node.children
  emit_primary(emitter, value, node, "value")
  emitter.write("[")
  emitter.visit_all(elements, node, role="slice")
  if single_with_comma:
    emitter.write(",")
  emitter.write("]")


def emit_subscript_element(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (element,) = node.children
  emitter.visit(element, node, "slice")


def emit_index(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  star, value = node.children
  if star:
    emitter.write(star)
  emitter.visit_expression(value, node, Precedence.BIT_OR if star else Precedence.TERNARY, "value")


def emit_slice(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  lower, upper, step = node.children
  if lower is not None:
    emitter.visit_expression(lower, node, Precedence.TERNARY, "lower")
  emitter.write(":")
  if upper is not None:
    emitter.visit_expression(upper, node, Precedence.TERNARY, "upper")
  if step is not None:
    emitter.write(":")
    emitter.visit_expression(step, node, Precedence.TERNARY, "step")


# --- Collections ---


def emit_tuple(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (elements,) = node.children
  with emitter.wrap_always():
    emitter.visit_all(elements, node, role="elements")
    if len(elements) == 1:
      emitter.write(",")


def emit_list(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (elements,) = node.children
  emitter.write("[")
  emitter.visit_all(elements, node, role="elements")
  emitter.write("]")


def emit_set_or_dict(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (elements,) = node.children
  emitter.write("{")
  emitter.visit_all(elements, node, role="elements")
  emitter.write("}")


def emit_element(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (value,) = node.children
  emitter.visit_expression(value, node, Precedence.TERNARY, "value")


def emit_starred_element(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (value,) = node.children
  emitter.write("**" if node.kind == "StarredDictElement" else "*")
  emitter.visit_expression(value, node, Precedence.BIT_OR, "value")


def emit_dict_element(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  key, value = node.children
  emitter.visit_expression(key, node, Precedence.TERNARY, "key")
  emitter.write(": ")
  emitter.visit_expression(value, node, Precedence.TERNARY, "value")


# --- Comprehensions ---

_COMPREHENSION_DELIMITERS = {
  "ListComp": ("[", "]"),
  "SetComp": ("{", "}"),
  "GeneratorExp": ("(", ")"),
}


def emit_simple_comprehension(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  elt, for_in = node.children
  opening, closing = _COMPREHENSION_DELIMITERS[node.kind]
  emitter.write(opening)
  emitter.visit_expression(elt, node, Precedence.TERNARY, "elt")
  emitter.write(" ")
  emitter.visit(for_in, node, "for_in")
  emitter.write(closing)


def emit_dict_comp(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  key, value, for_in = node.children
  emitter.write("{")
  emitter.visit_expression(key, node, Precedence.TERNARY, "key")
  emitter.write(": ")
  emitter.visit_expression(value, node, Precedence.TERNARY, "value")
  emitter.write(" ")
  emitter.visit(for_in, node, "for_in")
  emitter.write("}")


def emit_comp_for(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  asynchronous, target, iterable, ifs, inner_for_in = node.children
  if asynchronous is not None:
    emitter.write(K_ASYNC, " ")
  emitter.write("for ")
  emitter.visit(target, node, "target")
  emitter.write(" in ")
  emitter.visit_expression(iterable, node, Precedence.OR, "iter")
  for condition in ifs:
    emitter.write(" ")
    emitter.visit(condition, node, "ifs")
  if inner_for_in is not None:
    emitter.write(" ")
    emitter.visit(inner_for_in, node, "inner_for_in")


def emit_comp_if(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (test,) = node.children
  emitter.write("if ")
  emitter.visit_expression(test, node, Precedence.OR, "test")

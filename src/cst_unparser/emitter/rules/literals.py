"""
Literal Rules.

Names, numbers and strings are emitted verbatim from the token text the
parser recorded, so prefixes, quoting and numeric spelling round-trip exactly.
"""

from typing import TYPE_CHECKING

from cst_unparser.emitter.precedence import Precedence
from cst_unparser.tree.context import ParentContext
from cst_unparser.tree.node import Node

if TYPE_CHECKING:
  from cst_unparser.emitter.dispatch import Emitter


def emit_token(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  """Emits `Name`, `Integer`, `Float`, `Imaginary` and `SimpleString` verbatim."""
  (value,) = node.children
  emitter.write(value)


def emit_ellipsis(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  emitter.write("...")


def emit_concatenated_string(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  left, right = node.children
  emitter.visit(left, node, "left")
  emitter.write(" ")
  emitter.visit(right, node, "right")


def emit_formatted_string(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  start, parts, end = node.children
  emitter.write(start)
  for part in parts:
    emitter.visit(part, node, "parts")
  emitter.write(end)


def emit_formatted_string_expression(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  expression, equal, conversion, format_spec = node.children
  # A rendering that starts with `{` would read as an escaped brace.
  scratch = emitter.fork()
  scratch.visit_expression(expression, node, Precedence.TERNARY, "expression")
  text = scratch.result()
  lead = " " if text.startswith("{") else ""
  trail = " " if text.endswith("}") else ""
  emitter.write("{", lead, text, trail)
  if equal is not None:
    emitter.write("=")
  if conversion is not None:
    emitter.write("!", conversion)
  if format_spec is not None:
    emitter.write(":")
    for part in format_spec:
      emitter.visit(part, node, "format_spec")
  emitter.write("}")

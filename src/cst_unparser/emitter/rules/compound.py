"""
Compound Statement Rules.

`if`, `while`, `for`, `try` and `with` blocks. Each writes its header, then
delegates the `:` and indented body to `Emitter.emit_suite`.
"""

from typing import TYPE_CHECKING

from cst_unparser.emitter.precedence import Precedence
from cst_unparser.emitter.tokens import K_ASYNC
from cst_unparser.tree.context import ParentContext
from cst_unparser.tree.node import Node

if TYPE_CHECKING:
  from cst_unparser.emitter.dispatch import Emitter


def emit_if(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  """
  Emits an `if` block. An `If` sitting in the `orelse` slot of another `If`
  is an `elif` branch.
  """
  test, body, orelse = node.children
  is_elif = parent.kind == "If" and parent.role == "orelse"
  emitter.write("elif " if is_elif else "if ")
  emitter.visit_expression(test, node, Precedence.LAMBDA, "test")
  emitter.emit_suite(body, node)
  if orelse is not None:
    emitter.visit(orelse, node, "orelse")


def emit_else(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (body,) = node.children
  emitter.write("else")
  emitter.emit_suite(body, node)


def emit_while(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  test, body, orelse = node.children
  emitter.write("while ")
  emitter.visit_expression(test, node, Precedence.LAMBDA, "test")
  emitter.emit_suite(body, node)
  if orelse is not None:
    emitter.visit(orelse, node, "orelse")


def emit_for(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  asynchronous, target, iterable, body, orelse = node.children
  if asynchronous is not None:
    emitter.write(K_ASYNC, " ")
  emitter.write("for ")
  emitter.visit(target, node, "target")
  emitter.write(" in ")
  emitter.visit_expression(iterable, node, Precedence.TERNARY, "iter")
  emitter.emit_suite(body, node)
  if orelse is not None:
    emitter.visit(orelse, node, "orelse")


def emit_try(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  body, handlers, orelse, finalbody = node.children
  emitter.write("try")
  emitter.emit_suite(body, node)
  for handler in handlers:
    emitter.visit(handler, node, "handlers")
  if orelse is not None:
    emitter.visit(orelse, node, "orelse")
  if finalbody is not None:
    emitter.visit(finalbody, node, "finalbody")


def emit_except_handler(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  exception_type, name, body = node.children
  emitter.write("except*" if node.kind == "ExceptStarHandler" else "except")
  if exception_type is not None:
    emitter.write(" ")
    emitter.visit_expression(exception_type, node, Precedence.TERNARY, "type")
  if name is not None:
    emitter.visit(name, node, "name")
  emitter.emit_suite(body, node)


def emit_finally(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (body,) = node.children
  emitter.write("finally")
  emitter.emit_suite(body, node)


def emit_with(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  asynchronous, items, body = node.children
  if asynchronous is not None:
    emitter.write(K_ASYNC, " ")
  emitter.write("with ")
  emitter.visit_all(items, node, role="items")
  emitter.emit_suite(body, node)


def emit_with_item(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  item, asname = node.children
  # A bare `with (a, b):` would read as two parenthesized items.
  with emitter.wrap(item.kind == "Tuple"):
    emitter.visit_expression(item, node, Precedence.TERNARY, "item")
  if asname is not None:
    emitter.visit(asname, node, "asname")

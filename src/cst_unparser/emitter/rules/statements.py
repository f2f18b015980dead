"""
Simple Statement Rules.

Module and block layout, assignments and imports. Statements that form a
line (`SimpleStatementLine`) and compound statements terminate their own
lines; small statements inside a line never write newlines.
"""

from typing import TYPE_CHECKING

from cst_unparser.emitter.precedence import Precedence
from cst_unparser.emitter.tokens import AUGMENTED_OPERATORS
from cst_unparser.errors import UnknownNodeKindError
from cst_unparser.tree.context import ParentContext
from cst_unparser.tree.node import Node

if TYPE_CHECKING:
  from cst_unparser.emitter.dispatch import Emitter


def emit_module(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (body,) = node.children
  for statement in body:
    emitter.visit(statement, node, "body")


def emit_indented_block(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (body,) = node.children
  with emitter.indented():
    for statement in body:
      emitter.visit(statement, node, "body")


def emit_simple_statement_line(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (body,) = node.children
  emitter.visit_all(body, node, delimiter="; ", role="body")
  emitter.newline()


def emit_expr(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (value,) = node.children
  emitter.visit_expression(value, node, Precedence.LAMBDA, "value")


def emit_assign(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  targets, value = node.children
  for target in targets:
    emitter.visit(target, node, "targets")
    emitter.write(" = ")
  emitter.visit_expression(value, node, Precedence.LAMBDA, "value")


def emit_assign_target(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (target,) = node.children
  emitter.visit(target, node, "target")


def emit_aug_assign(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  target, operator, value = node.children
  token = AUGMENTED_OPERATORS.get(operator.kind)
  if token is None:
    raise UnknownNodeKindError(operator.kind)
  emitter.visit(target, node, "target")
  emitter.write(" ", token, " ")
  emitter.visit_expression(value, node, Precedence.LAMBDA, "value")


def emit_ann_assign(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  target, annotation, value = node.children
  emitter.visit(target, node, "target")
  emitter.write(": ")
  emitter.visit(annotation, node, "annotation")
  if value is not None:
    emitter.write(" = ")
    emitter.visit_expression(value, node, Precedence.LAMBDA, "value")


def emit_import(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (names,) = node.children
  emitter.write("import ")
  emitter.visit_all(names, node, role="names")


def emit_import_from(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  relative, module, names = node.children
  emitter.write("from ", "." * len(relative))
  if module is not None:
    emitter.visit(module, node, "module")
  emitter.write(" import ")
  if isinstance(names, Node):
    emitter.visit(names, node, "names")
  else:
    emitter.visit_all(names, node, role="names")


def emit_import_alias(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  name, asname = node.children
  emitter.visit(name, node, "name")
  if asname is not None:
    emitter.visit(asname, node, "asname")


def emit_as_name(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (name,) = node.children
  emitter.write(" as ")
  emitter.visit(name, node, "name")


def emit_import_star(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  emitter.write("*")

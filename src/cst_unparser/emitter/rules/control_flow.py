"""
Keyword Statement Rules.

Emission rules for statements introduced by a keyword that carries zero or
more argument expressions: `return`, `yield`, `del`, `assert`, `raise`, plus
the argument-free `pass`, `break` and `continue`.

The `return` rule is the template the other rules follow:

- no arguments: the keyword alone (``return``);
- one argument: ``return (e)``;
- several arguments: ``return (e1), (e2)``.

Every argument is parenthesized unconditionally, so its rendering can never
merge with the keyword's grammar. When the statement is a direct operand of a
logical `or` / `and` and has at least one argument, the whole rendering gets
one more pair of parentheses to compensate for the statement's low binding
strength.
"""

from typing import TYPE_CHECKING, List

from cst_unparser.emitter.tokens import (
  DEFAULT_DELIMITER,
  K_ASSERT,
  K_BREAK,
  K_CONTINUE,
  K_DEL,
  K_FROM,
  K_GLOBAL,
  K_NONLOCAL,
  K_PASS,
  K_RAISE,
  K_RETURN,
  K_YIELD,
)
from cst_unparser.tree.context import ParentContext
from cst_unparser.tree.node import Node

if TYPE_CHECKING:
  from cst_unparser.emitter.dispatch import Emitter


def arguments_of(node: Node) -> List[Node]:
  """Returns the present argument children of a keyword node (absent slots are None)."""
  return [child for child in node.children if child is not None]


def emit_keyword_arguments(emitter: "Emitter", node: Node, arguments: List[Node]) -> None:
  """
  Writes `` (e1), (e2), ...`` after a keyword.

  Args:
      emitter: The dispatch engine.
      node: The keyword node (the parent of every argument).
      arguments: The argument expressions, possibly empty.
  """
  if not arguments:
    return
  emitter.write(" ")
  head, *tail = arguments
  with emitter.wrap_always():
    emitter.visit(head, node, "argument")
  for argument in tail:
    emitter.write(DEFAULT_DELIMITER)
    with emitter.wrap_always():
      emitter.visit(argument, node, "argument")


def emit_return(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  """Emits `return` with its arguments, see module docstring."""
  arguments = arguments_of(node)
  with emitter.wrap(parent.is_logical_operand and bool(arguments)):
    emitter.write(K_RETURN)
    emit_keyword_arguments(emitter, node, arguments)


def emit_del(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  emitter.write(K_DEL)
  emit_keyword_arguments(emitter, node, arguments_of(node))


def emit_assert(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  # `assert (test), (msg)` is the two-argument form of the template.
  emitter.write(K_ASSERT)
  emit_keyword_arguments(emitter, node, arguments_of(node))


def emit_raise(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  exc, cause = node.children
  emitter.write(K_RAISE)
  if exc is not None:
    emit_keyword_arguments(emitter, node, [exc])
  if cause is not None:
    emitter.write(" ")
    emitter.visit(cause, node, "cause")


def emit_from(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (item,) = node.children
  emitter.write(K_FROM, " ")
  with emitter.wrap_always():
    emitter.visit(item, node, "item")


def emit_yield(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  """
  Emits `yield`, `yield (e)` or `yield from (e)`.

  The surrounding parentheses come from the slot: `Yield` has the weakest
  precedence, so any expression slot wraps it.
  """
  (value,) = node.children
  emitter.write(K_YIELD)
  if value is None:
    return
  if value.kind == "From":
    emitter.write(" ")
    emitter.visit(value, node, "value")
  else:
    emit_keyword_arguments(emitter, node, [value])


def emit_pass(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  emitter.write(K_PASS)


def emit_break(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  emitter.write(K_BREAK)


def emit_continue(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  emitter.write(K_CONTINUE)


def emit_global(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (names,) = node.children
  emitter.write(K_GLOBAL if node.kind == "Global" else K_NONLOCAL, " ")
  emitter.visit_all(names, node, role="names")


def emit_name_item(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (name,) = node.children
  emitter.visit(name, node, "name")


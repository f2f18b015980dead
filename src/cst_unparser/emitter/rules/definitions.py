"""
Definition Rules.

Functions, classes, decorators, parameter lists and lambdas.
"""

from typing import TYPE_CHECKING, List, Optional, Tuple

from cst_unparser.emitter.precedence import Precedence
from cst_unparser.emitter.tokens import DEFAULT_DELIMITER, K_ASYNC, K_LAMBDA
from cst_unparser.tree.context import ParentContext
from cst_unparser.tree.node import Node

if TYPE_CHECKING:
  from cst_unparser.emitter.dispatch import Emitter


def emit_decorators(emitter: "Emitter", node: Node, decorators: Tuple[Node, ...]) -> None:
  for decorator in decorators:
    emitter.visit(decorator, node, "decorators")


def emit_decorator(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (decorator,) = node.children
  emitter.write("@")
  emitter.visit_expression(decorator, node, Precedence.TERNARY, "decorator")
  emitter.newline()


def emit_function_def(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  decorators, asynchronous, name, type_parameters, params, returns, body = node.children
  emit_decorators(emitter, node, decorators)
  if asynchronous is not None:
    emitter.write(K_ASYNC, " ")
  emitter.write("def ")
  emitter.visit(name, node, "name")
  if type_parameters is not None:
    emitter.visit(type_parameters, node, "type_parameters")
  with emitter.wrap_always():
    emitter.visit(params, node, "params")
  if returns is not None:
    emitter.write(" -> ")
    emitter.visit(returns, node, "returns")
  emitter.emit_suite(body, node)


def emit_class_def(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  decorators, name, type_parameters, bases, keywords, body = node.children
  emit_decorators(emitter, node, decorators)
  emitter.write("class ")
  emitter.visit(name, node, "name")
  if type_parameters is not None:
    emitter.visit(type_parameters, node, "type_parameters")
  arguments = bases + keywords
  if arguments:
    with emitter.wrap_always():
      emitter.visit_all(arguments, node, role="bases")
  emitter.emit_suite(body, node)


def emit_parameters(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  """
  Emits a parameter list in grammar order:
  positional-only, `/`, regular, `*args` (or bare `*`), keyword-only, `**kwargs`.
  """
  posonly_params, _posonly_ind, params, star_arg, kwonly_params, star_kwarg = node.children

  entries: List[Tuple[str, Optional[Node]]] = [("", param) for param in posonly_params]
  if posonly_params:
    entries.append(("/", None))
  entries.extend(("", param) for param in params)
  if star_arg is not None:
    entries.append(("*", None if star_arg.kind == "ParamStar" else star_arg))
  entries.extend(("", param) for param in kwonly_params)
  if star_kwarg is not None:
    entries.append(("**", star_kwarg))

  for index, (prefix, param) in enumerate(entries):
    if index:
      emitter.write(DEFAULT_DELIMITER)
    emitter.write(prefix)
    if param is not None:
      emitter.visit(param, node, "params")


def emit_param(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  name, annotation, default = node.children
  emitter.visit(name, node, "name")
  if annotation is not None:
    emitter.write(": ")
    emitter.visit(annotation, node, "annotation")
  if default is not None:
    # PEP 8 spacing: `b=1` but `b: int = 1`.
    emitter.write("=" if annotation is None else " = ")
    emitter.visit_expression(default, node, Precedence.TERNARY, "default")


def emit_annotation(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  (annotation,) = node.children
  emitter.visit_expression(annotation, node, Precedence.TERNARY, "annotation")


def emit_lambda(emitter: "Emitter", node: Node, parent: ParentContext) -> None:
  params, body = node.children
  emitter.write(K_LAMBDA)
  if any(child for child in params.children):
    emitter.write(" ")
    emitter.visit(params, node, "params")
  emitter.write(": ")
  emitter.visit_expression(body, node, Precedence.LAMBDA, "body")

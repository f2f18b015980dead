"""
Emitter Dispatch Engine.

Given a normalized `Node` and its parent context, resolves the emission rule
from the registry and runs it against a shared `EmissionBuffer`. The engine
also supplies the helpers every rule builds on:

1.  **Parenthesization**: `wrap(condition)` and `wrap_always()` context
    managers around a body that writes to the buffer.
2.  **Precedence-aware visiting**: `visit_expression` wraps a child whose
    binding strength is below what its slot requires.
3.  **Layout**: delimited lists, newlines and indented suites.

Usage
-----

.. code-block:: python

    from cst_unparser import parse, unparse

    tree = parse("x = (1 + 2) * 3")
    print(unparse(tree))
    # x = (1 + 2) * 3
"""

import sys
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, Optional

from cst_unparser.config import UnparserConfig
from cst_unparser.emitter.buffer import EmissionBuffer
from cst_unparser.emitter.precedence import Precedence, precedence_of
from cst_unparser.emitter.registry import EMITTERS, EmitRule, lookup
from cst_unparser.emitter.tokens import DEFAULT_DELIMITER
from cst_unparser.tree.context import ROOT_CONTEXT, ParentContext
from cst_unparser.tree.node import Node


class Emitter:
  """
  Dispatches nodes to their emission rules and owns the output buffer.

  A failed emission is not rolled back: when a rule raises (e.g.
  `UnknownNodeKindError`), whatever is already in the buffer, including an
  unclosed `(` opened by `wrap`, is left as is and the caller discards the
  emitter along with the error.

  Attributes:
      buffer (EmissionBuffer): The buffer all rules write into.
  """

  def __init__(self, indent: str = "    ", registry: Optional[Dict[str, EmitRule]] = None) -> None:
    """
    Args:
        indent: Text used for one level of block indentation.
        registry: Kind to rule table. Defaults to the built-in `EMITTERS`.
    """
    self.buffer = EmissionBuffer(indent)
    self._registry = EMITTERS if registry is None else registry

  def emit(self, node: Node, parent: ParentContext = ROOT_CONTEXT) -> None:
    """
    Writes the rendering of `node` into the buffer.

    Args:
        node: The node to emit.
        parent: Context of the enclosing node.

    Raises:
        UnknownNodeKindError: If no rule is registered for `node.kind`.
            Nothing is written for the node in that case.
    """
    rule = lookup(node.kind, self._registry)
    rule(self, node, parent)

  def visit(self, child: Node, parent_node: Node, role: Optional[str] = None) -> None:
    """Emits a child node, recording `parent_node` as its context."""
    self.emit(child, ParentContext(parent_node.kind, role))

  def visit_expression(
    self,
    child: Node,
    parent_node: Node,
    minimum: Precedence,
    role: Optional[str] = None,
  ) -> None:
    """
    Emits an expression child, parenthesized if it binds weaker than `minimum`.

    Args:
        child: The expression node.
        parent_node: The enclosing node.
        minimum: The weakest precedence the slot accepts without parentheses.
        role: Positional role of the child.
    """
    with self.wrap(precedence_of(child) < minimum):
      self.visit(child, parent_node, role)

  def visit_all(
    self,
    children: Iterable[Node],
    parent_node: Node,
    delimiter: str = DEFAULT_DELIMITER,
    role: Optional[str] = None,
  ) -> None:
    """Emits children in order, separated by `delimiter`."""
    for index, child in enumerate(children):
      if index:
        self.write(delimiter)
      self.visit(child, parent_node, role)

  @contextmanager
  def wrap(self, condition: bool) -> Iterator[None]:
    """
    Surrounds the body's output with parentheses when `condition` holds.

    The closing parenthesis is only written if the body completes. When the
    body raises, the opening `(` stays in the buffer; the emitter is not
    reusable after a failed emission and callers drop it with the error.
    """
    if condition:
      self.write("(")
    yield
    if condition:
      self.write(")")

  @contextmanager
  def wrap_always(self) -> Iterator[None]:
    """Unconditionally surrounds the body's output with parentheses."""
    with self.wrap(True):
      yield

  @contextmanager
  def indented(self) -> Iterator[None]:
    """Increases the block indentation level for the duration of the body."""
    self.buffer.level += 1
    try:
      yield
    finally:
      self.buffer.level -= 1

  def write(self, *fragments: str) -> None:
    for fragment in fragments:
      self.buffer.write(fragment)

  def newline(self) -> None:
    self.buffer.newline()

  def emit_suite(self, body: Node, parent_node: Node, role: str = "body") -> None:
    """Writes the `:` that opens a block, then the indented block itself."""
    self.write(":")
    self.newline()
    self.visit(body, parent_node, role)

  def result(self) -> str:
    """Returns everything written to the buffer."""
    return self.buffer.content()

  def fork(self) -> "Emitter":
    """Returns a fresh emitter with the same indentation and registry, for rendering a fragment on the side."""
    return Emitter(indent=self.buffer.indent, registry=self._registry)


# Upper bound of interpreter frames one tree level costs during emission.
_FRAMES_PER_LEVEL = 6


@contextmanager
def recursion_headroom(depth: int) -> Iterator[None]:
  """
  Temporarily raises the interpreter recursion limit for a tree of `depth` levels.

  Emission recurses once per tree level. The limit is only touched when the
  tree is deep enough to need it, and is restored afterwards.

  Args:
      depth: Nesting depth of the tree, see `Node.depth`.
  """
  limit = sys.getrecursionlimit()
  needed = limit + depth * _FRAMES_PER_LEVEL
  if depth * _FRAMES_PER_LEVEL < limit // 2:
    yield
    return
  sys.setrecursionlimit(needed)
  try:
    yield
  finally:
    sys.setrecursionlimit(limit)


def unparse(node: Node, config: Optional[UnparserConfig] = None, **kwargs: Any) -> str:
  """
  Regenerates source text from a normalized tree.

  Args:
      node: The root node (usually a `Module`, but any registered kind works).
      config: Optional configuration providing the indentation string.
      **kwargs: Forwarded to `Emitter` (e.g. a custom `registry`).

  Returns:
      str: The generated source.

  Raises:
      UnknownNodeKindError: If the tree contains an unsupported kind.
  """
  indent = config.indent if config is not None else "    "
  emitter = Emitter(indent=indent, **kwargs)
  with recursion_headroom(node.depth()):
    emitter.emit(node, ROOT_CONTEXT)
  return emitter.result()

"""
Normalized AST Nodes.

A `Node` is an immutable value: a kind tag plus an ordered tuple of children.
Children are nested Nodes, literals (str, bool, None) or tuples of those.
Equality is purely structural, which is what the round-trip verifier relies on.

Nodes carry no parent pointer and no source positions. Parent information is
passed explicitly during emission (see `ParentContext`).

Equality, hashing, `depth()` and `dump()` walk the tree with an explicit
stack, so arbitrarily deep trees never hit the interpreter recursion limit.
"""

from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, Iterator, List, Tuple

_INDENT = "  "

_NODE = "node"
_TUPLE = "tuple"
_LEAF = "leaf"


def _freeze(value: Any) -> Any:
  if isinstance(value, list):
    return tuple(_freeze(item) for item in value)
  if isinstance(value, tuple):
    return tuple(_freeze(item) for item in value)
  return value


def _tokens(root: Any) -> Iterator[Tuple[Any, ...]]:
  """Pre-order token stream; two values are equal iff their streams are."""
  stack = [root]
  while stack:
    item = stack.pop()
    if isinstance(item, Node):
      yield _NODE, item.kind, len(item.children)
      stack.extend(reversed(item.children))
    elif isinstance(item, tuple):
      yield _TUPLE, len(item)
      stack.extend(reversed(item))
    else:
      yield _LEAF, item


@dataclass(frozen=True, eq=False)
class Node:
  """
  Structural AST value.

  Attributes:
      kind (str): The node kind (e.g. "Return", "BinaryOperation").
      children (Tuple[Any, ...]): Ordered children.
  """

  kind: str
  children: Tuple[Any, ...] = ()

  def __post_init__(self) -> None:
    object.__setattr__(self, "children", _freeze(tuple(self.children)))

  def __eq__(self, other: Any) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    if self is other:
      return True
    return all(a == b for a, b in zip_longest(_tokens(self), _tokens(other)))

  def __hash__(self) -> int:
    return hash(tuple(_tokens(self)))

  def depth(self) -> int:
    """Number of nesting levels below and including this node (tuples count as a level)."""
    deepest = 0
    stack: List[Tuple[Any, int]] = [(self, 1)]
    while stack:
      value, level = stack.pop()
      if isinstance(value, Node):
        children = value.children
      elif isinstance(value, tuple):
        children = value
      else:
        continue
      deepest = max(deepest, level)
      stack.extend((child, level + 1) for child in children)
    return deepest

  def dump(self) -> str:
    """
    Renders the node as a deterministic multi-line s-expression.

    Leaf-only nodes stay on one line, nested nodes are indented by two
    spaces per level. The output is line-diffable.

    Returns:
        str: The textual dump.
    """
    lines: List[str] = []
    # (value, depth, text closing the value's last line)
    stack: List[Tuple[Any, int, str]] = [(self, 0, "")]
    while stack:
      value, depth, closers = stack.pop()
      pad = _INDENT * depth
      if isinstance(value, Node) and _contains_node(value.children):
        opening, items, closing = "(" + value.kind, value.children, ")"
      elif isinstance(value, tuple) and _contains_node(value):
        opening, items, closing = "[", value, "]"
      else:
        lines.append(pad + _inline(value) + closers)
        continue
      lines.append(pad + opening)
      last = len(items) - 1
      for index in range(last, -1, -1):
        stack.append((items[index], depth + 1, closing + closers if index == last else ""))
    return "\n".join(lines)

  def __str__(self) -> str:
    return self.dump()


def s(kind: str, *children: Any) -> Node:
  """Shorthand constructor: ``s("Return", s("Name", "x"))``."""
  return Node(kind, children)


def _contains_node(value: Any) -> bool:
  if isinstance(value, Node):
    return True
  if isinstance(value, tuple):
    return any(_contains_node(item) for item in value)
  return False


def _inline(value: Any) -> str:
  # Only reached for values without nested Nodes.
  if isinstance(value, Node):
    return "(" + " ".join([value.kind] + [_inline(child) for child in value.children]) + ")"
  if isinstance(value, tuple):
    return "[" + ", ".join(_inline(item) for item in value) + "]"
  return repr(value)

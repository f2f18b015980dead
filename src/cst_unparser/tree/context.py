"""
Parent Context.

Transient information about where a node sits during emission: the kind of
the immediately enclosing node and the role (field name) the node fills in
it. It is computed while traversing and never stored on a `Node`.
"""

from typing import NamedTuple, Optional

LOGICAL_KINDS = frozenset({"Or", "And"})


class ParentContext(NamedTuple):
  """
  Attributes:
      kind (Optional[str]): Kind of the enclosing node, None at the root.
      role (Optional[str]): Positional role inside the parent (e.g. "left", "orelse").
  """

  kind: Optional[str] = None
  role: Optional[str] = None

  @property
  def is_logical_operand(self) -> bool:
    """True if the node is a direct operand of a logical `or` / `and`."""
    return self.kind in LOGICAL_KINDS


ROOT_CONTEXT = ParentContext()

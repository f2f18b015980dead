"""
CST Normalizer.

Converts a LibCST concrete syntax tree into a normalized `Node` tree by
stripping everything that does not affect meaning: whitespace, comments,
commas, semicolons, redundant parentheses and one-line suites.

Each LibCST class maps to an explicit, ordered tuple of semantic fields
(`NODE_FIELDS`). Classes without an entry fall back to every dataclass
field that is not formatting. Such kinds have no emitter, so they surface as
`UnknownNodeKindError` downstream rather than being silently dropped.

Normalization is idempotent: a `Node` passes through unchanged.
"""

import dataclasses
from typing import Any, Callable, Dict, List, Tuple

import libcst as cst

from cst_unparser.tree.node import Node

NODE_FIELDS: Dict[str, Tuple[str, ...]] = {
  # Module & Blocks
  "Module": ("body",),
  "IndentedBlock": ("body",),
  "SimpleStatementLine": ("body",),
  # Small Statements
  "Expr": ("value",),
  "Assign": ("targets", "value"),
  "AssignTarget": ("target",),
  "AnnAssign": ("target", "annotation", "value"),
  "AugAssign": ("target", "operator", "value"),
  "Return": ("value",),
  "Raise": ("exc", "cause"),
  "Assert": ("test", "msg"),
  "Del": ("target",),
  "Pass": (),
  "Break": (),
  "Continue": (),
  "Global": ("names",),
  "Nonlocal": ("names",),
  "NameItem": ("name",),
  "Import": ("names",),
  "ImportFrom": ("relative", "module", "names"),
  "ImportAlias": ("name", "asname"),
  "AsName": ("name",),
  # Compound Statements
  "If": ("test", "body", "orelse"),
  "Else": ("body",),
  "While": ("test", "body", "orelse"),
  "For": ("asynchronous", "target", "iter", "body", "orelse"),
  "Try": ("body", "handlers", "orelse", "finalbody"),
  "TryStar": ("body", "handlers", "orelse", "finalbody"),
  "ExceptHandler": ("type", "name", "body"),
  "ExceptStarHandler": ("type", "name", "body"),
  "Finally": ("body",),
  "With": ("asynchronous", "items", "body"),
  "WithItem": ("item", "asname"),
  # Definitions
  "FunctionDef": ("decorators", "asynchronous", "name", "type_parameters", "params", "returns", "body"),
  "ClassDef": ("decorators", "name", "type_parameters", "bases", "keywords", "body"),
  "Decorator": ("decorator",),
  "Parameters": ("posonly_params", "posonly_ind", "params", "star_arg", "kwonly_params", "star_kwarg"),
  "Param": ("name", "annotation", "default"),
  "Annotation": ("annotation",),
  "Lambda": ("params", "body"),
  # Literals
  "Name": ("value",),
  "Integer": ("value",),
  "Float": ("value",),
  "Imaginary": ("value",),
  "SimpleString": ("value",),
  "ConcatenatedString": ("left", "right"),
  "FormattedString": ("start", "parts", "end"),
  "FormattedStringText": ("value",),
  "FormattedStringExpression": ("expression", "equal", "conversion", "format_spec"),
  # Expressions
  "Comparison": ("left", "comparisons"),
  "ComparisonTarget": ("operator", "comparator"),
  "UnaryOperation": ("operator", "expression"),
  "BinaryOperation": ("left", "operator", "right"),
  "Attribute": ("value", "attr"),
  "Call": ("func", "args"),
  "Arg": ("star", "keyword", "value"),
  "SubscriptElement": ("slice",),
  "Index": ("star", "value"),
  "Slice": ("lower", "upper", "step"),
  "IfExp": ("test", "body", "orelse"),
  "Await": ("expression",),
  "Yield": ("value",),
  "From": ("item",),
  "NamedExpr": ("target", "value"),
  # Collections
  "Tuple": ("elements",),
  "List": ("elements",),
  "Set": ("elements",),
  "Dict": ("elements",),
  "Element": ("value",),
  "StarredElement": ("value",),
  "DictElement": ("key", "value"),
  "StarredDictElement": ("value",),
  "ListComp": ("elt", "for_in"),
  "SetComp": ("elt", "for_in"),
  "GeneratorExp": ("elt", "for_in"),
  "DictComp": ("key", "value", "for_in"),
  "CompFor": ("asynchronous", "target", "iter", "ifs", "inner_for_in"),
  "CompIf": ("test",),
}

FORMATTING_FIELDS = frozenset(
  {
    "lpar",
    "rpar",
    "lbracket",
    "rbracket",
    "lbrace",
    "rbrace",
    "comma",
    "semicolon",
    "colon",
    "dot",
    "equal",
    "first_colon",
    "second_colon",
    "leading_lines",
    "lines_after_decorators",
    "trailing_whitespace",
    "header",
    "footer",
    "indent",
    "newline",
    "encoding",
    "default_indent",
    "default_newline",
    "has_trailing_newline",
  }
)


def normalize(tree: Any) -> Node:
  """
  Strips formatting metadata from a LibCST tree.

  Args:
      tree: A `libcst.CSTNode` or an already normalized `Node`.

  Returns:
      Node: The normalized tree.

  Raises:
      TypeError: If the input is neither a CSTNode nor a Node.
  """
  if isinstance(tree, Node):
    return tree
  if not isinstance(tree, cst.CSTNode):
    raise TypeError(f"Cannot normalize object of type {type(tree).__name__}")
  return _convert(tree)


def semantic_fields(node: cst.CSTNode) -> Tuple[str, ...]:
  """
  Returns the ordered semantic field names kept for a LibCST node.

  Args:
      node: The LibCST node.

  Returns:
      Tuple[str, ...]: Field names, explicit table first, generic fallback otherwise.
  """
  kind = type(node).__name__
  if kind in NODE_FIELDS:
    return NODE_FIELDS[kind]
  return tuple(
    f.name
    for f in dataclasses.fields(node)
    if f.name not in FORMATTING_FIELDS and not f.name.startswith("whitespace")
  )


# --- Conversion ---
#
# Iterative, with an explicit work stack: tree depth is bounded only by what
# LibCST can parse, not by the interpreter recursion limit.

Builder = Callable[[List[Any]], Any]

_VISIT = 0
_BUILD = 1


def _convert(root: Any) -> Any:
  results: List[Any] = []
  stack: List[Tuple[int, Any]] = [(_VISIT, root)]

  while stack:
    action, item = stack.pop()

    if action == _BUILD:
      build, count = item
      if count:
        values = results[-count:]
        del results[-count:]
      else:
        values = []
      results.append(build(values))
      continue

    if isinstance(item, Node):
      results.append(item)
    elif isinstance(item, cst.CSTNode):
      pending, build = _decompose(item)
      stack.append((_BUILD, (build, len(pending))))
      stack.extend((_VISIT, value) for value in reversed(pending))
    elif isinstance(item, cst.MaybeSentinel):
      results.append(None)
    elif isinstance(item, (list, tuple)):
      stack.append((_BUILD, (tuple, len(item))))
      stack.extend((_VISIT, value) for value in reversed(item))
    else:
      results.append(item)

  return results[0]


def _decompose(node: cst.CSTNode) -> Tuple[List[Any], Builder]:
  """Splits a LibCST node into its raw semantic values and the builder applied once they are converted."""
  special = _SPECIAL_CASES.get(type(node).__name__)
  if special is not None:
    return special(node)

  kind = type(node).__name__
  # Fields missing on older LibCST releases (e.g. `type_parameters`) read as None.
  pending = [getattr(node, name, None) for name in semantic_fields(node)]
  return pending, lambda children: Node(kind, tuple(children))


def _boolean_operation(node: cst.BooleanOperation) -> Tuple[List[Any], Builder]:
  kind = type(node.operator).__name__
  return [node.left, node.right], lambda children: Node(kind, tuple(children))


def _simple_statement_suite(node: cst.SimpleStatementSuite) -> Tuple[List[Any], Builder]:
  def build(children: List[Any]) -> Node:
    (body,) = children
    return Node("IndentedBlock", ((Node("SimpleStatementLine", (body,)),),))

  return [node.body], build


def _subscript(node: cst.Subscript) -> Tuple[List[Any], Builder]:
  # `a[1,]` indexes with a tuple, `a[1]` does not.
  single_with_comma = len(node.slice) == 1 and isinstance(node.slice[0].comma, cst.Comma)
  return [node.value, node.slice], lambda children: Node("Subscript", (*children, single_with_comma))


_SPECIAL_CASES: Dict[str, Callable[[Any], Tuple[List[Any], Builder]]] = {
  "BooleanOperation": _boolean_operation,
  "SimpleStatementSuite": _simple_statement_suite,
  "Subscript": _subscript,
}

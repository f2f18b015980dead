"""
Emitter Registry.

A closed, inspectable table mapping normalized node kinds to their emission
rules. The table is assembled once at import time; there is no dynamic
discovery. Looking up an unregistered kind raises `UnknownNodeKindError`.
"""

from typing import TYPE_CHECKING, Callable, Dict, FrozenSet

from cst_unparser.emitter.rules import compound, control_flow, definitions, expressions, literals, statements
from cst_unparser.errors import UnknownNodeKindError
from cst_unparser.tree.context import ParentContext
from cst_unparser.tree.node import Node

if TYPE_CHECKING:
  from cst_unparser.emitter.dispatch import Emitter

EmitRule = Callable[["Emitter", Node, ParentContext], None]

EMITTERS: Dict[str, EmitRule] = {
  # Module & Blocks
  "Module": statements.emit_module,
  "IndentedBlock": statements.emit_indented_block,
  "SimpleStatementLine": statements.emit_simple_statement_line,
  # Keyword Statements
  "Return": control_flow.emit_return,
  "Del": control_flow.emit_del,
  "Assert": control_flow.emit_assert,
  "Raise": control_flow.emit_raise,
  "From": control_flow.emit_from,
  "Yield": control_flow.emit_yield,
  "Pass": control_flow.emit_pass,
  "Break": control_flow.emit_break,
  "Continue": control_flow.emit_continue,
  "Global": control_flow.emit_global,
  "Nonlocal": control_flow.emit_global,
  "NameItem": control_flow.emit_name_item,
  # Simple Statements
  "Expr": statements.emit_expr,
  "Assign": statements.emit_assign,
  "AssignTarget": statements.emit_assign_target,
  "AugAssign": statements.emit_aug_assign,
  "AnnAssign": statements.emit_ann_assign,
  "Import": statements.emit_import,
  "ImportFrom": statements.emit_import_from,
  "ImportAlias": statements.emit_import_alias,
  "AsName": statements.emit_as_name,
  "ImportStar": statements.emit_import_star,
  # Compound Statements
  "If": compound.emit_if,
  "Else": compound.emit_else,
  "While": compound.emit_while,
  "For": compound.emit_for,
  "Try": compound.emit_try,
  "TryStar": compound.emit_try,
  "ExceptHandler": compound.emit_except_handler,
  "ExceptStarHandler": compound.emit_except_handler,
  "Finally": compound.emit_finally,
  "With": compound.emit_with,
  "WithItem": compound.emit_with_item,
  # Definitions
  "FunctionDef": definitions.emit_function_def,
  "ClassDef": definitions.emit_class_def,
  "Decorator": definitions.emit_decorator,
  "Parameters": definitions.emit_parameters,
  "Param": definitions.emit_param,
  "Annotation": definitions.emit_annotation,
  "Lambda": definitions.emit_lambda,
  # Literals
  "Name": literals.emit_token,
  "Integer": literals.emit_token,
  "Float": literals.emit_token,
  "Imaginary": literals.emit_token,
  "SimpleString": literals.emit_token,
  "Ellipsis": literals.emit_ellipsis,
  "ConcatenatedString": literals.emit_concatenated_string,
  "FormattedString": literals.emit_formatted_string,
  "FormattedStringText": literals.emit_token,
  "FormattedStringExpression": literals.emit_formatted_string_expression,
  # Operators
  "Or": expressions.emit_boolean_operation,
  "And": expressions.emit_boolean_operation,
  "BinaryOperation": expressions.emit_binary_operation,
  "UnaryOperation": expressions.emit_unary_operation,
  "Comparison": expressions.emit_comparison,
  "IfExp": expressions.emit_if_exp,
  "Await": expressions.emit_await,
  "NamedExpr": expressions.emit_named_expr,
  # Primaries
  "Attribute": expressions.emit_attribute,
  "Call": expressions.emit_call,
  "Arg": expressions.emit_arg,
  "Subscript": expressions.emit_subscript,
  "SubscriptElement": expressions.emit_subscript_element,
  "Index": expressions.emit_index,
  "Slice": expressions.emit_slice,
  # Collections
  "Tuple": expressions.emit_tuple,
  "List": expressions.emit_list,
  "Set": expressions.emit_set_or_dict,
  "Dict": expressions.emit_set_or_dict,
  "Element": expressions.emit_element,
  "StarredElement": expressions.emit_starred_element,
  "StarredDictElement": expressions.emit_starred_element,
  "DictElement": expressions.emit_dict_element,
  # Comprehensions
  "ListComp": expressions.emit_simple_comprehension,
  "SetComp": expressions.emit_simple_comprehension,
  "GeneratorExp": expressions.emit_simple_comprehension,
  "DictComp": expressions.emit_dict_comp,
  "CompFor": expressions.emit_comp_for,
  "CompIf": expressions.emit_comp_if,
}


def lookup(kind: str, registry: Dict[str, EmitRule] = EMITTERS) -> EmitRule:
  """
  Resolves the emission rule for a node kind.

  Args:
      kind: The normalized node kind.
      registry: The table to search. Defaults to the built-in rules.

  Returns:
      EmitRule: The registered rule.

  Raises:
      UnknownNodeKindError: If the kind has no registered rule.
  """
  rule = registry.get(kind)
  if rule is None:
    raise UnknownNodeKindError(kind)
  return rule


def registered_kinds() -> FrozenSet[str]:
  """Returns every kind the built-in registry can emit."""
  return frozenset(EMITTERS)

"""
Tests for the Normalized Node value type.

Verifies:
1. Structural equality and hashing.
2. Freezing of list children.
3. Deterministic, line-diffable dumps.
"""

import dataclasses

import pytest

from cst_unparser.tree.node import Node, s


def test_structural_equality():
  a = s("Return", s("Name", "x"))
  b = Node("Return", (Node("Name", ("x",)),))
  assert a == b
  assert hash(a) == hash(b)
  assert a != s("Return", s("Name", "y"))


def test_kind_participates_in_equality():
  assert s("Or", s("Name", "a"), s("Name", "b")) != s("And", s("Name", "a"), s("Name", "b"))


def test_lists_are_frozen_into_tuples():
  node = Node("Module", [[s("Pass")]])
  assert node.children == ((s("Pass"),),)
  # Still hashable after freezing
  hash(node)


def test_nodes_are_immutable():
  node = s("Name", "x")
  with pytest.raises(dataclasses.FrozenInstanceError):
    node.kind = "Integer"


def test_empty_node_is_truthy():
  assert s("Pass")


def test_dump_leaf_on_one_line():
  assert s("Name", "x").dump() == "(Name 'x')"
  assert s("Return", None).dump() == "(Return None)"
  assert s("Pass").dump() == "(Pass)"


def test_dump_nested_indentation():
  node = s("Return", s("Name", "x"))
  assert node.dump() == "(Return\n  (Name 'x'))"


def test_dump_tuples():
  assert s("List", ()).dump() == "(List [])"
  node = s("List", (s("Element", s("Name", "a")),))
  assert node.dump() == "(List\n  [\n    (Element\n      (Name 'a'))])"


def test_str_is_dump():
  node = s("Name", "x")
  assert str(node) == node.dump()


def test_depth_counts_nodes_and_tuples():
  assert s("Name", "x").depth() == 1
  assert s("Return", s("Name", "x")).depth() == 2
  assert s("List", (s("Element", s("Name", "a")),)).depth() == 4


def _chain(levels: int) -> Node:
  node = s("Name", "a")
  for _ in range(levels):
    node = s("UnaryOperation", s("Minus"), node)
  return node


def test_deep_trees_do_not_exhaust_the_stack():
  levels = 5000
  a, b = _chain(levels), _chain(levels)
  assert a == b
  assert hash(a) == hash(b)
  assert a != _chain(levels - 1)
  assert a.depth() == levels + 1
  dump = a.dump()
  assert dump.count("(UnaryOperation") == levels
  assert dump.endswith("(Name 'a')" + ")" * levels)

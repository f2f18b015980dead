"""
Parser Collaborator.

Thin, swappable wrapper around `libcst.parse_module`. The grammar version is
configurable so alternate Python versions can be targeted. LibCST syntax
errors are re-raised as `SourceSyntaxError` so callers never depend on the
underlying parser's exception types.
"""

from typing import Optional

import libcst as cst

from cst_unparser.errors import SourceSyntaxError
from cst_unparser.tree.node import Node
from cst_unparser.tree.normalizer import normalize


class Parser:
  """
  Parses Python source text into LibCST modules.

  Attributes:
      python_version (Optional[str]): Grammar version (e.g. "3.8"). None selects
          the version LibCST considers current.
  """

  def __init__(self, python_version: Optional[str] = None) -> None:
    self.python_version = python_version
    if python_version is None:
      self._config = cst.PartialParserConfig()
    else:
      self._config = cst.PartialParserConfig(python_version=python_version)

  def parse(self, source: str) -> cst.Module:
    """
    Parses source text.

    Args:
        source: The Python source code.

    Returns:
        cst.Module: The concrete syntax tree.

    Raises:
        SourceSyntaxError: If the text is not valid for the configured grammar.
    """
    try:
      return cst.parse_module(source, config=self._config)
    except cst.ParserSyntaxError as e:
      raise SourceSyntaxError(str(e), source=source) from e

  def parse_node(self, source: str) -> Node:
    """
    Parses and normalizes source text in one step.

    Args:
        source: The Python source code.

    Returns:
        Node: The normalized AST.
    """
    return normalize(self.parse(source))


def parse(source: str, python_version: Optional[str] = None) -> Node:
  """Module-level convenience for `Parser(python_version).parse_node(source)`."""
  return Parser(python_version).parse_node(source)

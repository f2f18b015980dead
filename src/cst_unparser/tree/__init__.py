"""
Normalized tree model: nodes, parent context, parser and normalizer.
"""

from cst_unparser.tree.context import ROOT_CONTEXT, ParentContext
from cst_unparser.tree.node import Node, s
from cst_unparser.tree.normalizer import normalize
from cst_unparser.tree.parser import Parser, parse

__all__ = ["Node", "s", "ParentContext", "ROOT_CONTEXT", "normalize", "Parser", "parse"]

"""
Emitter: regenerates source text from normalized trees.
"""

from cst_unparser.emitter.dispatch import Emitter, unparse
from cst_unparser.emitter.precedence import Precedence, precedence_of
from cst_unparser.emitter.registry import EMITTERS, lookup, registered_kinds

__all__ = ["Emitter", "unparse", "Precedence", "precedence_of", "EMITTERS", "lookup", "registered_kinds"]

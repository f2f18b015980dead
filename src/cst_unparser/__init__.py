"""
cst-unparser: Python source regeneration with round-trip verification.

Parses Python with LibCST, normalizes the concrete tree into a
formatting-free AST, regenerates source from that AST through a
kind-keyed emitter registry and verifies that the regenerated source
parses back to an equal tree.
"""

__version__ = "0.0.1"

from cst_unparser.config import UnparserConfig
from cst_unparser.emitter import Emitter, unparse
from cst_unparser.errors import (
  ASTMismatchError,
  GeneratedParseError,
  OriginalParseError,
  SourceEncodingError,
  SourceSyntaxError,
  UnknownNodeKindError,
  UnparserError,
  VerificationError,
)
from cst_unparser.tree import Node, Parser, normalize, parse
from cst_unparser.verifier import FileSource, Source, StringSource

__all__ = [
  "__version__",
  "UnparserConfig",
  "Emitter",
  "unparse",
  "Node",
  "Parser",
  "normalize",
  "parse",
  "Source",
  "StringSource",
  "FileSource",
  "UnparserError",
  "SourceSyntaxError",
  "SourceEncodingError",
  "UnknownNodeKindError",
  "VerificationError",
  "OriginalParseError",
  "GeneratedParseError",
  "ASTMismatchError",
]

"""
Exception hierarchy for cst-unparser.

Two families live here:

1.  **Faults** (`SourceSyntaxError`, `SourceEncodingError`,
    `UnknownNodeKindError`): raised while reading, parsing or emitting. Unknown node kinds always propagate, since they mean
    the emitter does not support the input at all.
2.  **Verification Outcomes** (`VerificationError` subclasses): raised only on
    request via `Source.check()`. They classify a failed round trip and carry
    the full diagnostic report as their message.
"""

from typing import Any, Optional


class UnparserError(Exception):
  """Base class for all errors raised by cst-unparser."""


class SourceSyntaxError(UnparserError):
  """
  Raised by the parser when the given text is not valid in the grammar.

  Attributes:
      source (str): The text that failed to parse.
  """

  def __init__(self, message: str, source: str = "") -> None:
    super().__init__(message)
    self.source = source


class SourceEncodingError(UnparserError):
  """
  Raised when a source file cannot be decoded.

  Covers unknown encoding declarations as well as bytes that are invalid in
  the declared (or default UTF-8) encoding.

  Attributes:
      path (str): The file that failed to decode.
  """

  def __init__(self, message: str, path: str = "") -> None:
    super().__init__(message)
    self.path = path


class UnknownNodeKindError(UnparserError):
  """
  Raised by the dispatch engine when no emission rule is registered for a kind.

  Attributes:
      kind (str): The unsupported node kind.
  """

  def __init__(self, kind: str) -> None:
    super().__init__(f"No emitter registered for node kind: {kind!r}")
    self.kind = kind


class VerificationError(UnparserError):
  """
  Base class for failed round-trip verifications.

  Attributes:
      source: The `Source` instance whose verification failed.
  """

  def __init__(self, report: str, source: Optional[Any] = None) -> None:
    super().__init__(report)
    self.source = source


class OriginalParseError(VerificationError):
  """The input text is not valid source. Not a defect in the emitter."""


class GeneratedParseError(VerificationError):
  """The emitter produced text that the parser rejects."""


class ASTMismatchError(VerificationError):
  """The regenerated text parses to a structurally different tree."""

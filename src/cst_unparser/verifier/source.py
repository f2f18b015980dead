"""
Round-Trip Source Verifier.

A `Source` identifies one input (literal text or a file) and lazily derives,
at most once each:

1.  ``original_ast``: normalized tree of the input, or None if it does not parse.
2.  ``generated_source``: the text regenerated from ``original_ast``.
3.  ``generated_ast``: normalized tree of the generated text, or None.
4.  ``state`` / ``success`` / ``error_report``.

Parse failures are captured as None at the stage where they occur and turned
into report content; they never escape the verifier, so a caller scanning
many sources can continue past individual failures. Unknown node kinds and
file I/O errors do propagate.

Usage
-----

.. code-block:: python

    from cst_unparser.verifier import StringSource

    source = StringSource("x = (a or b) and c\\n")
    if not source.success:
        print(source.error_report)
"""

import abc
import logging
import tokenize
from enum import Enum
from functools import cached_property
from pathlib import Path
from typing import Callable, Dict, Optional, Type, Union

from cst_unparser.emitter.dispatch import unparse
from cst_unparser.config import UnparserConfig
from cst_unparser.errors import (
  ASTMismatchError,
  GeneratedParseError,
  OriginalParseError,
  SourceEncodingError,
  SourceSyntaxError,
  VerificationError,
)
from cst_unparser.tree.node import Node
from cst_unparser.tree.normalizer import normalize
from cst_unparser.tree.parser import Parser
from cst_unparser.verifier.differ import diff

logger = logging.getLogger(__name__)


class VerificationState(str, Enum):
  """Terminal states of a round-trip verification."""

  ORIGINAL_PARSE_FAILED = "original_parse_failed"
  GENERATED_PARSE_FAILED = "generated_parse_failed"
  MISMATCH = "mismatch"
  MATCH = "match"


_FAILURES: Dict[VerificationState, Type[VerificationError]] = {
  VerificationState.ORIGINAL_PARSE_FAILED: OriginalParseError,
  VerificationState.GENERATED_PARSE_FAILED: GeneratedParseError,
  VerificationState.MISMATCH: ASTMismatchError,
}


class Source(abc.ABC):
  """
  Abstract round-trip verification unit.

  Subclasses provide `identification` and `original_source`; every derived
  value is implemented here purely in terms of those two.
  """

  def __init__(
    self,
    config: Optional[UnparserConfig] = None,
    parser: Optional[Parser] = None,
    normalizer: Callable[..., Node] = normalize,
  ) -> None:
    """
    Args:
        config: Emission and grammar settings. Defaults to `UnparserConfig()`.
        parser: Parser collaborator. Defaults to one built for `config.python_version`.
        normalizer: Normalizer collaborator.
    """
    self.config = config or UnparserConfig()
    self.parser = parser or Parser(self.config.python_version)
    self.normalizer = normalizer

  @property
  @abc.abstractmethod
  def identification(self) -> str:
    """Human readable origin used in diagnostics."""

  @property
  @abc.abstractmethod
  def original_source(self) -> str:
    """The text under verification."""

  @cached_property
  def original_ast(self) -> Optional[Node]:
    """Normalized tree of the original source, None if it fails to parse."""
    return self._parse(self.original_source)

  @cached_property
  def generated_source(self) -> Optional[str]:
    """
    Source regenerated from `original_ast`, None if there is no original tree.

    Raises:
        UnknownNodeKindError: If the tree contains an unsupported construct.
    """
    if self.original_ast is None:
      return None
    return unparse(self.original_ast, self.config)

  @cached_property
  def generated_ast(self) -> Optional[Node]:
    """Normalized tree of the generated source, None if it fails to parse."""
    if self.generated_source is None:
      return None
    return self._parse(self.generated_source)

  @cached_property
  def state(self) -> VerificationState:
    """The terminal state of the verification state machine."""
    if self.original_ast is None:
      return VerificationState.ORIGINAL_PARSE_FAILED
    if self.generated_ast is None:
      return VerificationState.GENERATED_PARSE_FAILED
    if self.original_ast == self.generated_ast:
      return VerificationState.MATCH
    return VerificationState.MISMATCH

  @property
  def success(self) -> bool:
    """True iff both parses succeeded and the normalized trees are equal."""
    return self.state is VerificationState.MATCH

  @cached_property
  def error_report(self) -> str:
    """
    Diagnostic report for the verification outcome.

    The report shape depends on the state:

    - original parse failed: the raw source only;
    - generated parse failed: the original AST dump and the generated source;
    - otherwise: the AST diff, then both sources and both AST dumps.

    Returns:
        str: The report text.
    """
    if self.state is VerificationState.ORIGINAL_PARSE_FAILED:
      return f"Parsing of original source failed:\n{self.original_source}"
    if self.state is VerificationState.GENERATED_PARSE_FAILED:
      return (
        "Parsing of generated source failed:\n"
        f"Original-AST:\n{self.original_ast.dump()}\n"
        f"Source:\n{self.generated_source}"
      )
    return self._report_with_ast_diff()

  def check(self) -> None:
    """
    Raises the matching `VerificationError` subclass if verification failed.

    Raises:
        OriginalParseError: The input does not parse.
        GeneratedParseError: The regenerated text does not parse.
        ASTMismatchError: The regenerated text parses to a different tree.
    """
    if self.success:
      return
    raise _FAILURES[self.state](self.error_report, source=self)

  def _parse(self, text: str) -> Optional[Node]:
    try:
      return self.normalizer(self.parser.parse(text))
    except SourceSyntaxError as e:
      logger.debug("Parse failed for %s: %s", self.identification, e)
      return None

  def _report_with_ast_diff(self) -> str:
    original_dump = self.original_ast.dump()
    generated_dump = self.generated_ast.dump()
    ast_diff = diff(original_dump.splitlines(), generated_dump.splitlines())
    return (
      f"{ast_diff}\n"
      f"Original-Source:\n{self.original_source}\n"
      f"Original-AST:\n{original_dump}\n"
      f"Generated-Source:\n{self.generated_source}\n"
      f"Generated-AST:\n{generated_dump}\n"
    )

  def __repr__(self) -> str:
    return f"<{type(self).__name__} {self.identification}>"


class StringSource(Source):
  """Source given as literal text."""

  def __init__(self, text: str, **kwargs) -> None:
    super().__init__(**kwargs)
    self._text = text

  @property
  def identification(self) -> str:
    return "(string)"

  @property
  def original_source(self) -> str:
    return self._text


def read_source_file(path: Path) -> str:
  """
  Reads a source file, honouring a PEP 263 encoding declaration or BOM.

  Files without a declaration are decoded as UTF-8. Newlines are translated
  as in text mode.

  Raises:
      OSError: If the file cannot be opened.
      SourceEncodingError: If the declared encoding is unknown or the bytes do
          not decode with it.
  """
  with path.open("rb") as handle:
    try:
      encoding = tokenize.detect_encoding(handle.readline)[0]
    except SyntaxError as e:
      raise SourceEncodingError(f"{path}: {e}", str(path)) from e
  try:
    return path.read_text(encoding=encoding)
  except UnicodeDecodeError as e:
    raise SourceEncodingError(f"{path}: cannot decode as {encoding}: {e.reason}", str(path)) from e


class FileSource(Source):
  """
  Source read from a file.

  The file is read on first access to `original_source` and cached for the
  lifetime of the instance. Missing or unreadable files raise `OSError`;
  undecodable ones raise `SourceEncodingError`.
  """

  def __init__(self, path: Union[str, Path], **kwargs) -> None:
    super().__init__(**kwargs)
    self.path = Path(path)

  @property
  def identification(self) -> str:
    return f"({self.path})"

  @cached_property
  def original_source(self) -> str:
    return read_source_file(self.path)

"""
Emission Buffer.

Append-only sequence of text fragments with an indentation level. A buffer is
owned by exactly one `unparse` call and is joined once when that call returns.
"""

from typing import List


class EmissionBuffer:
  """
  Accumulates emitted source text.

  Indentation is applied lazily: the prefix is written in front of the first
  fragment of each new line, so empty lines never carry trailing spaces.
  """

  def __init__(self, indent: str = "    ") -> None:
    self.indent = indent
    self.level = 0
    self._fragments: List[str] = []
    self._at_line_start = True

  def write(self, text: str) -> None:
    if not text:
      return
    if self._at_line_start:
      if self.level:
        self._fragments.append(self.indent * self.level)
      self._at_line_start = False
    self._fragments.append(text)

  def newline(self) -> None:
    self._fragments.append("\n")
    self._at_line_start = True

  def content(self) -> str:
    """Returns the concatenated text written so far."""
    return "".join(self._fragments)

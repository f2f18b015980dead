"""
Line Diff Reporter.

Renders a unified diff between two sequences of lines (typically the dumps
of the original and regenerated ASTs) and optionally colorizes it for the
terminal.
"""

import difflib
from typing import Sequence

from rich.text import Text


def diff(old: Sequence[str], new: Sequence[str], context: int = 3) -> str:
  """
  Produces a unified diff between two line sequences.

  Args:
      old: Lines of the original text, without line terminators.
      new: Lines of the new text, without line terminators.
      context: Number of unchanged context lines around each hunk.

  Returns:
      str: The diff, empty if the sequences are equal.
  """
  lines = difflib.unified_diff(list(old), list(new), fromfile="original", tofile="generated", n=context, lineterm="")
  return "\n".join(lines)


def colorize(diff_text: str) -> Text:
  """
  Styles a unified diff for Rich output.

  Args:
      diff_text: Output of `diff`.

  Returns:
      Text: Styled text; additions green, removals red, hunk headers cyan.
  """
  text = Text()
  for line in diff_text.splitlines():
    if line.startswith(("---", "+++")):
      style = "diff.header"
    elif line.startswith("@@"):
      style = "diff.hunk"
    elif line.startswith("+"):
      style = "diff.added"
    elif line.startswith("-"):
      style = "diff.removed"
    else:
      style = ""
    text.append(line + "\n", style=style)
  return text

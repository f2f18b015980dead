"""
Runtime Configuration Store.

Settings are read from the ``[tool.cst_unparser]`` table of the nearest
``pyproject.toml`` and can be overridden by CLI arguments.

.. code-block:: toml

    [tool.cst_unparser]
    python_version = "3.8"
    indent = "  "
    fail_fast = true
    ignore = ["**/migrations/*.py"]
"""

import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

_VERSION_PATTERN = re.compile(r"^3\.\d+$")


class UnparserConfig(BaseModel):
  """
  Global configuration container for parsing, emission and verification.
  """

  python_version: Optional[str] = Field(None, description="Grammar version handed to LibCST (e.g. '3.8').")
  indent: str = Field("    ", description="Text used for one level of block indentation.")
  fail_fast: bool = Field(False, description="Stop the CLI at the first failing source.")
  ignore: List[str] = Field(default_factory=list, description="Glob patterns excluded from directory expansion.")

  @field_validator("python_version")
  @classmethod
  def validate_python_version(cls, v: Optional[str]) -> Optional[str]:
    """
    Ensures the grammar version looks like ``3.x``.

    Args:
        v (Optional[str]): The requested version.

    Returns:
        Optional[str]: The stripped version string.

    Raises:
        ValueError: If the version is malformed.
    """
    if v is None:
      return v
    v_clean = v.strip()
    if not _VERSION_PATTERN.match(v_clean):
      raise ValueError(f"Invalid python_version: '{v}'. Expected a '3.x' version string.")
    return v_clean

  @field_validator("indent")
  @classmethod
  def validate_indent(cls, v: str) -> str:
    """
    Ensures indentation is non-empty whitespace.

    Raises:
        ValueError: If the indent is empty or contains non-whitespace.
    """
    if not v or v.strip():
      raise ValueError("indent must be a non-empty whitespace string.")
    return v

  @classmethod
  def load(
    cls,
    python_version: Optional[str] = None,
    indent: Optional[str] = None,
    fail_fast: Optional[bool] = None,
    ignore: Optional[List[str]] = None,
    search_path: Optional[Path] = None,
  ) -> "UnparserConfig":
    """
    Loads configuration from pyproject.toml and overrides with explicit arguments.

    Args:
        python_version (Optional[str]): Override for the grammar version.
        indent (Optional[str]): Override for the indentation string.
        fail_fast (Optional[bool]): Override for fail-fast mode.
        ignore (Optional[List[str]]): Extra ignore globs, appended to the TOML list.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        UnparserConfig: The fully resolved configuration object.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    settings: Dict[str, Any] = {}
    final_version = python_version or toml_config.get("python_version")
    if final_version is not None:
      settings["python_version"] = str(final_version)

    final_indent = indent if indent is not None else toml_config.get("indent")
    if final_indent is not None:
      settings["indent"] = final_indent

    if fail_fast is not None:
      settings["fail_fast"] = fail_fast
    else:
      settings["fail_fast"] = bool(toml_config.get("fail_fast", False))

    settings["ignore"] = [*toml_config.get("ignore", []), *(ignore or [])]

    return cls(**settings)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches the start directory and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      with open(toml_path, "rb") as f:
        data = tomllib.load(f)
      return data.get("tool", {}).get("cst_unparser", {}), parent

  return {}, None

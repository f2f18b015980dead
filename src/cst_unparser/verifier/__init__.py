"""
Round-trip verification: parse, regenerate, re-parse, compare.
"""

from cst_unparser.verifier.differ import colorize, diff
from cst_unparser.verifier.source import FileSource, Source, StringSource, VerificationState

__all__ = ["Source", "StringSource", "FileSource", "VerificationState", "diff", "colorize"]

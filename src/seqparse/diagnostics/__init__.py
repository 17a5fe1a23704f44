"""Diagnostic system for seqparse.

Provides the exception hierarchy, diagnostic codes and message templates
for misuse of the engine, plus rendering of parse error chains.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InputTooLargeError,
    InvalidRangeError,
    SeqParseError,
    UnwrapError,
)
from .formatter import LineOffsetCache, format_error
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "InputTooLargeError",
    "InvalidRangeError",
    "LineOffsetCache",
    "SeqParseError",
    "UnwrapError",
    "format_error",
]

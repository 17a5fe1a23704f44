"""seqparse exception hierarchy with structured diagnostics.

Exceptions are reserved for misuse of the engine (bad ranges, oversized
input, unwrapping a failure). A parser that simply does not match returns
an error value instead.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from seqparse.result import ParseError

__all__ = [
    "InputTooLargeError",
    "InvalidRangeError",
    "SeqParseError",
    "UnwrapError",
]


class SeqParseError(Exception):
    """Base exception for all seqparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize SeqParseError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidRangeError(SeqParseError, ValueError):
    """Repetition range is malformed.

    Raised at construction time, never while parsing.
    """


class InputTooLargeError(SeqParseError, ValueError):
    """Input exceeds the configured maximum size.

    Attributes:
        size: Length of the rejected input
        limit: Limit in force for the call
    """

    def __init__(self, message: str | Diagnostic, *, size: int, limit: int) -> None:
        super().__init__(message)
        self.size = size
        self.limit = limit


class UnwrapError(SeqParseError):
    """A failed parse result was unwrapped.

    Attributes:
        error: The parse error chain carried by the failed result
    """

    def __init__(self, message: str | Diagnostic, error: ParseError) -> None:
        super().__init__(message)
        self.error = error

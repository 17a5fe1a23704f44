"""Codes and structured messages for engine misuse.

Defines error codes and diagnostic messages for exceptions raised by the
engine. Parse failures themselves are values (see seqparse.result), not
diagnostics.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Stable numeric identifiers for every exception the engine raises.

    Ranges:
        1000-1999: Construction errors (malformed combinator arguments)
        2000-2999: Invocation errors (input rejected before parsing)
        3000-3999: Result errors (unwrapping a failed parse)
    """

    # Construction errors (1000-1999)
    RANGE_NEGATIVE = 1001
    RANGE_EMPTY = 1002
    RANGE_UNSUPPORTED = 1003

    # Invocation errors (2000-2999)
    INPUT_TOO_LARGE = 2001

    # Result errors (3000-3999)
    PARSE_FAILED = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Message attached to a SeqParseError.

    Attributes:
        code: Which misuse occurred
        message: What was wrong, with the offending value
        hint: How to fix the call (optional)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[RANGE_EMPTY]: Repetition range [3, 2] admits no count
              = help: Make the upper bound at least the lower bound

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)

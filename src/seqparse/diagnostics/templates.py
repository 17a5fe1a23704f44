"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All exception messages are created here. NO f-strings in exception constructors!
    """

    # =========================================================================
    # CONSTRUCTION ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def range_negative(value: int) -> Diagnostic:
        """Repetition bound below zero.

        Args:
            value: The offending bound

        Returns:
            Diagnostic for RANGE_NEGATIVE
        """
        msg = f"Repetition bound must be >= 0, got {value}"
        return Diagnostic(
            code=DiagnosticCode.RANGE_NEGATIVE,
            message=msg,
            hint="Counts are non-negative; use Unbounded for an open end",
        )

    @staticmethod
    def range_empty(description: str) -> Diagnostic:
        """Repetition range that admits no count at all.

        Args:
            description: Human-readable rendering of the range

        Returns:
            Diagnostic for RANGE_EMPTY
        """
        msg = f"Repetition range {description} admits no count"
        return Diagnostic(
            code=DiagnosticCode.RANGE_EMPTY,
            message=msg,
            hint="Make the upper bound at least the lower bound",
        )

    @staticmethod
    def range_unsupported(bounds: object) -> Diagnostic:
        """Value that cannot be read as a repetition range.

        Args:
            bounds: The value passed to repeat()

        Returns:
            Diagnostic for RANGE_UNSUPPORTED
        """
        msg = f"Cannot use {bounds!r} as a repetition range"
        return Diagnostic(
            code=DiagnosticCode.RANGE_UNSUPPORTED,
            message=msg,
            hint="Pass a RepeatRange, an int, a range() with step 1, or a slice",
        )

    # =========================================================================
    # INVOCATION ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def input_too_large(size: int, limit: int) -> Diagnostic:
        """Input longer than the configured limit.

        Args:
            size: Input length
            limit: Configured maximum

        Returns:
            Diagnostic for INPUT_TOO_LARGE
        """
        msg = f"Input size ({size:,} elements) exceeds maximum ({limit:,} elements)"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TOO_LARGE,
            message=msg,
            hint="Pass max_input_size= to Parser.parse() to raise the limit, or 0 to disable it",
        )

    # =========================================================================
    # RESULT ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def parse_failed(error: object) -> Diagnostic:
        """Unwrap of a failed parse.

        Args:
            error: The parse error value

        Returns:
            Diagnostic for PARSE_FAILED
        """
        msg = f"Parse failed: {error}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_FAILED,
            message=msg,
            hint="Check is_ok() before unwrap(), or use unwrap_or()",
        )

"""Shared constants for seqparse.

Centralized configuration defaults used across the engine, the diagnostics
layer and the bundled lexers. Placing them here avoids circular imports and
provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_INPUT_SIZE",
    # Conversion
    "CONVERSION_ERRORS",
    # Logging
    "TRACE_LOGGER_NAME",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum input length (in elements) accepted by Parser.parse().
# Inputs are fully materialized sequences; this bounds accidental parses of
# very large buffers. Override per call with max_input_size=, 0 disables.
MAX_INPUT_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# CONVERSION
# ============================================================================

# Exceptions raised by a convert() callable that count as a failed conversion.
# Anything else propagates: it is a bug in the callable, not a non-match.
# UnicodeDecodeError and decimal.InvalidOperation are covered by
# ValueError and ArithmeticError respectively.
CONVERSION_ERRORS: tuple[type[Exception], ...] = (ValueError, TypeError, ArithmeticError)

# ============================================================================
# LOGGING
# ============================================================================

# Logger used by Parser.trace() when no observer is supplied.
TRACE_LOGGER_NAME: str = "seqparse.trace"

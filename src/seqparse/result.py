"""Parse results and parse errors.

Failure is a value, never an exception. Every parser step returns either a
ParseResult (value plus end offset) or one of the ParseError variants:

    - Incomplete: could not match here, no further context
    - Expect: a named construct was required at a position, with its cause
    - Custom: a caller-defined diagnostic, optionally with a cause

Errors nest through ``inner`` into a non-empty chain for diagnostics.
Parser.parse() hands callers an Ok or an Err.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Literal, NoReturn

from seqparse.diagnostics import ErrorTemplate, UnwrapError

__all__ = [
    "INCOMPLETE",
    "Custom",
    "Err",
    "Expect",
    "Incomplete",
    "Ok",
    "ParseError",
    "ParseResult",
    "Result",
    "Span",
]


# ============================================================================
# ERRORS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Incomplete:
    """Input did not match at this point. Carries no context."""

    @property
    def position(self) -> None:
        """Incomplete errors are not positioned."""
        return None

    def describe(self) -> str:
        """Description of this link alone."""
        return "Incomplete"

    def chain(self) -> Iterator[ParseError]:
        """Yield this error (it has no cause)."""
        yield self

    def __str__(self) -> str:
        return "Incomplete"


INCOMPLETE = Incomplete()


@dataclass(frozen=True, slots=True)
class Expect:
    """A named expectation failed at a position.

    Attributes:
        message: What was expected (e.g. "number")
        position: Offset where the expected construct should have started
        inner: The failure that caused this one
    """

    message: str
    position: int
    inner: ParseError

    def describe(self) -> str:
        """Description of this link alone."""
        return f"expected {self.message}"

    def chain(self) -> Iterator[ParseError]:
        """Yield this error, then each nested cause."""
        yield self
        yield from self.inner.chain()

    def __str__(self) -> str:
        return f"Expect {self.message} at {self.position}: {self.inner}"


@dataclass(frozen=True, slots=True)
class Custom:
    """Caller-defined diagnostic.

    Attributes:
        message: Free-form description
        position: Offset the diagnostic refers to
        inner: Optional cause
    """

    message: str
    position: int
    inner: ParseError | None = None

    def describe(self) -> str:
        """Description of this link alone."""
        return self.message

    def chain(self) -> Iterator[ParseError]:
        """Yield this error, then each nested cause (if any)."""
        yield self
        if self.inner is not None:
            yield from self.inner.chain()

    def __str__(self) -> str:
        if self.inner is None:
            return f"{self.message} at {self.position}"
        return f"{self.message} at {self.position}, {self.inner}"


type ParseError = Incomplete | Expect | Custom


# ============================================================================
# STEP RESULT
# ============================================================================


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Successful parser step: the parsed value and the end offset.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every parser function has the signature:
            def step(source: Sequence[I], start: int) -> ParseResult[O] | ParseError

    Example:
        >>> result = ParseResult(b"H", 1)
        >>> result.value
        b'H'
        >>> result.pos
        1
    """

    value: T
    pos: int


@dataclass(frozen=True, slots=True)
class Span:
    """Consumed region of the input, as offsets.

    Attributes:
        start: Starting offset (inclusive)
        end: Ending offset (exclusive)

    Example:
        >>> Span(0, 5).slice(b"Hello world!")
        b'Hello'
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    def __len__(self) -> int:
        return self.end - self.start

    def slice[S: Sequence[Any]](self, source: S) -> S:
        """Resolve the span against the input it was produced from."""
        return source[self.start : self.end]  # type: ignore[return-value]


# ============================================================================
# PUBLIC RESULT
# ============================================================================


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful parse."""

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        """Return the parsed value."""
        return self.value

    def unwrap_or[D](self, default: D) -> T:  # noqa: ARG002
        return self.value

    def map[R](self, f: Callable[[T], R]) -> Ok[R]:
        """Apply f to the parsed value."""
        return Ok(f(self.value))


@dataclass(frozen=True, slots=True)
class Err:
    """Failed parse.

    Attributes:
        error: The error chain, outermost first
    """

    error: ParseError

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        """Raise UnwrapError carrying the error chain.

        Raises:
            UnwrapError: Always
        """
        raise UnwrapError(ErrorTemplate.parse_failed(self.error), self.error)

    def unwrap_or[D](self, default: D) -> D:
        return default

    def map(self, f: Callable[[object], object]) -> Err:  # noqa: ARG002
        return self


type Result[T] = Ok[T] | Err

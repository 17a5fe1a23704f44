"""Core parser abstraction and combinators.

A Parser wraps a pure step function:

    step(source: Sequence[I], start: int) -> ParseResult[O] | ParseError

Combinators never mutate their operands; each returns a new Parser that
closes over the parsers and callables it was built from. The same Parser
can be applied to any number of inputs, from any number of threads.

Composition operators:
    a & b   both, in sequence; value is the pair (a, b)
    a | b   ordered alternation; b restarts from the original offset
    a << b  both, in sequence; keep a's value
    a >> b  both, in sequence; keep b's value

Precedence follows Python: << and >> bind tighter than &, which binds
tighter than |. So ``digit << rest | zero`` reads ``(digit << rest) | zero``.

Failure Model:
    Sequencing and alternation hand back the failing sub-parser's error
    untouched. decide() and convert() add a condition of their own; when
    it does not hold they answer a plain Incomplete. expect() wraps any
    failure into a positioned Expect for user-facing grammars.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from threading import RLock
from typing import Any

from seqparse.constants import CONVERSION_ERRORS, MAX_INPUT_SIZE, TRACE_LOGGER_NAME
from seqparse.diagnostics import ErrorTemplate, InputTooLargeError
from seqparse.range import RepeatRange
from seqparse.result import (
    INCOMPLETE,
    Err,
    Expect,
    Ok,
    ParseError,
    ParseResult,
    Result,
    Span,
)

__all__ = [
    "Parser",
    "either",
    "element_at",
    "lazy",
    "sequence_both",
    "sequence_keep_left",
    "sequence_keep_right",
]

logger = logging.getLogger(__name__)

type StepFn[I, O] = Callable[[Sequence[I], int], ParseResult[O] | ParseError]


def element_at[I](source: Sequence[I], pos: int) -> I:
    """Element of input at pos.

    ``bytes``/``bytearray`` yield one-byte ``bytes`` objects rather than
    ints, so that ``sym(b"H")`` matches ``b"Hello"`` the same way
    ``sym("H")`` matches ``"Hello"``. Caller guarantees ``pos < len(source)``.
    """
    if isinstance(source, (bytes, bytearray)):
        return bytes(source[pos : pos + 1])  # type: ignore[return-value]
    return source[pos]


@dataclass(frozen=True, slots=True, eq=False)
class Parser[I, O]:
    """Composable parser over a random-access sequence of I, producing O.

    Design:
        - Frozen dataclass: a built parser never changes
        - Pure: applying twice at the same offset gives the same result
        - Failure is a returned ParseError, never an exception

    Attributes:
        fn: The step function, ``(source, start) -> ParseResult | ParseError``

    Example:
        >>> from seqparse import sym
        >>> (sym(b"H") & sym(b"e")).parse(b"Hello")
        Ok(value=(b'H', b'e'))
    """

    fn: StepFn[I, O]

    # =========================================================================
    # INVOCATION
    # =========================================================================

    def apply(self, source: Sequence[I], start: int = 0) -> ParseResult[O] | ParseError:
        """Run the parser at an offset, keeping the end offset.

        Args:
            source: Sequence to parse (borrowed, never modified)
            start: Offset to start at

        Returns:
            ParseResult with the value and end offset, or the ParseError
        """
        return self.fn(source, start)

    def parse(
        self,
        source: Sequence[I],
        *,
        max_input_size: int | None = None,
    ) -> Result[O]:
        """Run the parser from offset 0 and drop the end offset.

        Trailing input is not an error; combine with end_of_input() to
        require that everything is consumed.

        Args:
            source: Sequence to parse
            max_input_size: Maximum accepted input length (default:
                MAX_INPUT_SIZE). 0 disables the check.

        Returns:
            Ok with the parsed value, or Err with the error chain

        Raises:
            InputTooLargeError: If input is longer than the limit
        """
        limit = MAX_INPUT_SIZE if max_input_size is None else max_input_size
        if limit > 0 and len(source) > limit:
            raise InputTooLargeError(
                ErrorTemplate.input_too_large(len(source), limit),
                size=len(source),
                limit=limit,
            )
        result = self.fn(source, 0)
        if isinstance(result, ParseResult):
            return Ok(result.value)
        return Err(result)

    # =========================================================================
    # TRANSFORMATION
    # =========================================================================

    def map[U](self, f: Callable[[O], U]) -> Parser[I, U]:
        """Transform the value of a successful parse. Failures pass through."""
        fn = self.fn

        def step(source: Sequence[I], start: int) -> ParseResult[U] | ParseError:
            result = fn(source, start)
            if isinstance(result, ParseResult):
                return ParseResult(f(result.value), result.pos)
            return result

        return Parser(step)

    def convert[U](self, f: Callable[[O], U]) -> Parser[I, U]:
        """Transform the value with a conversion that may fail.

        ``f`` signals failure by raising one of CONVERSION_ERRORS
        (ValueError, TypeError, ArithmeticError). The parse then fails with
        Incomplete at the original offset; the exception text is logged at
        DEBUG and otherwise dropped. Other exceptions propagate.

        Example:
            >>> digits.collect().convert(bytes.decode).convert(int)
        """
        fn = self.fn

        def step(source: Sequence[I], start: int) -> ParseResult[U] | ParseError:
            result = fn(source, start)
            if not isinstance(result, ParseResult):
                return result
            try:
                value = f(result.value)
            except CONVERSION_ERRORS as e:
                logger.debug(
                    "Conversion of %r at %d..%d failed: %s", result.value, start, result.pos, e
                )
                return INCOMPLETE
            return ParseResult(value, result.pos)

        return Parser(step)

    def decide(self, predicate: Callable[[O], bool]) -> Parser[I, O]:
        """Keep a successful parse only if its value satisfies predicate.

        The check runs after the match, so ``next().decide(str.isdigit)``
        consumes one element and then accepts or rejects it. Any failure,
        the inner one included, is reported as Incomplete.
        """
        fn = self.fn

        def step(source: Sequence[I], start: int) -> ParseResult[O] | ParseError:
            result = fn(source, start)
            if isinstance(result, ParseResult) and predicate(result.value):
                return result
            return INCOMPLETE

        return Parser(step)

    def collect(self) -> Parser[I, Sequence[I]]:
        """Replace the value with the consumed slice ``source[start:end]``.

        Example:
            >>> digit.repeat(at_least(1)).collect().parse(b"123x")
            Ok(value=b'123')
        """
        fn = self.fn

        def step(source: Sequence[I], start: int) -> ParseResult[Sequence[I]] | ParseError:
            result = fn(source, start)
            if isinstance(result, ParseResult):
                return ParseResult(source[start : result.pos], result.pos)
            return result

        return Parser(step)

    def span(self) -> Parser[I, Span]:
        """Replace the value with the consumed Span (start, end offsets).

        Use instead of collect() when the slice is only needed later, or
        not at all; Span.slice() resolves it against the input.
        """
        fn = self.fn

        def step(source: Sequence[I], start: int) -> ParseResult[Span] | ParseError:
            result = fn(source, start)
            if isinstance(result, ParseResult):
                return ParseResult(Span(start, result.pos), result.pos)
            return result

        return Parser(step)

    def opt[D](self, default: D = None) -> Parser[I, O | D]:  # type: ignore[assignment]
        """Zero or one match. Never fails.

        On failure succeeds with ``default`` at the original offset,
        consuming nothing.
        """
        fn = self.fn

        def step(source: Sequence[I], start: int) -> ParseResult[O | D]:
            result = fn(source, start)
            if isinstance(result, ParseResult):
                return result
            return ParseResult(default, start)

        return Parser(step)

    def repeat(self, bounds: RepeatRange | range | slice | int) -> Parser[I, list[O]]:
        """Greedy repetition within a count range.

        Matches left to right, collecting values, until the inner parser
        fails or the upper bound is reached (no further attempt is made
        once it is). When the inner parser fails:

            - no matches yet and the range permits zero: empty list
            - fewer matches than the lower bound: Incomplete
            - unbounded upper: the matches collected so far
            - bounded upper not yet reached: Incomplete

        A bounded repetition is therefore all-or-nothing once it has
        started matching. A zero-width match under an unbounded upper ends
        the loop as soon as the lower bound is met.

        The upper bound is a stop count for both bound kinds: Included(n)
        and Excluded(n) each stop after n matches, so ``repeat(range(0, 1))``
        behaves like opt() with an empty list for absent. Included(n) does
        not allow an (n + 1)th match.

        Args:
            bounds: RepeatRange, or anything RepeatRange.coerce() accepts

        Returns:
            Parser producing the list of matched values

        Raises:
            InvalidRangeError: If bounds is not a valid range
        """
        fn = self.fn
        limits = RepeatRange.coerce(bounds)

        def step(source: Sequence[I], start: int) -> ParseResult[list[O]] | ParseError:
            values: list[O] = []
            pos = start
            while not limits.reached_upper(len(values)):
                result = fn(source, pos)
                if not isinstance(result, ParseResult):
                    count = len(values)
                    if not limits.satisfies_lower(count):
                        return INCOMPLETE
                    if count == 0 or not limits.is_bounded:
                        return ParseResult(values, pos)
                    return INCOMPLETE
                values.append(result.value)
                if (
                    result.pos == pos
                    and not limits.is_bounded
                    and limits.satisfies_lower(len(values))
                ):
                    break
                pos = result.pos
            return ParseResult(values, pos)

        return Parser(step)

    # =========================================================================
    # DIAGNOSTICS
    # =========================================================================

    def expect(self, message: str) -> Parser[I, O]:
        """Wrap any failure as ``Expect(message, start, cause)``."""
        fn = self.fn

        def step(source: Sequence[I], start: int) -> ParseResult[O] | ParseError:
            result = fn(source, start)
            if isinstance(result, ParseResult):
                return result
            return Expect(message, start, result)

        return Parser(step)

    def trace(
        self,
        observer: Callable[[O, int, int], object] | None = None,
        *,
        name: str | None = None,
    ) -> Parser[I, O]:
        """Report successful matches to an observer.

        The observer receives ``(value, start, end)`` and its return value
        is ignored. Without an observer, matches are logged at DEBUG on the
        ``seqparse.trace`` logger, labelled with ``name``. Parse results are
        passed through unchanged.
        """
        fn = self.fn
        if observer is None:
            trace_logger = logging.getLogger(TRACE_LOGGER_NAME)
            label = name or "parser"

            def log_match(value: O, start: int, end: int) -> None:
                trace_logger.debug("%s matched %d..%d: %r", label, start, end, value)

            observer = log_match

        def step(source: Sequence[I], start: int) -> ParseResult[O] | ParseError:
            result = fn(source, start)
            if isinstance(result, ParseResult):
                observer(result.value, start, result.pos)
            return result

        return Parser(step)

    # =========================================================================
    # SEQUENCING
    # =========================================================================

    def bind[U](self, f: Callable[[O], Parser[I, U]]) -> Parser[I, U]:
        """Choose the next parser from this parser's value.

        ``f(value)`` is applied at this parser's end offset. Use for
        context-sensitive grammars, e.g. a length prefix followed by that
        many elements.
        """
        fn = self.fn

        def step(source: Sequence[I], start: int) -> ParseResult[U] | ParseError:
            result = fn(source, start)
            if not isinstance(result, ParseResult):
                return result
            return f(result.value).fn(source, result.pos)

        return Parser(step)

    def __and__[U](self, other: Parser[I, U]) -> Parser[I, tuple[O, U]]:
        return sequence_both(self, other)

    def __or__[U](self, other: Parser[I, U]) -> Parser[I, O | U]:
        return either(self, other)

    def __lshift__(self, other: Parser[I, Any]) -> Parser[I, O]:
        return sequence_keep_left(self, other)

    def __rshift__[U](self, other: Parser[I, U]) -> Parser[I, U]:
        return sequence_keep_right(self, other)


# ============================================================================
# NAMED COMBINATORS
# ============================================================================


def sequence_both[I, A, B](first: Parser[I, A], second: Parser[I, B]) -> Parser[I, tuple[A, B]]:
    """Run first, then second from first's end; value is the pair.

    No backtracking into first once second has started.
    """
    first_fn, second_fn = first.fn, second.fn

    def step(source: Sequence[I], start: int) -> ParseResult[tuple[A, B]] | ParseError:
        left = first_fn(source, start)
        if not isinstance(left, ParseResult):
            return left
        right = second_fn(source, left.pos)
        if not isinstance(right, ParseResult):
            return right
        return ParseResult((left.value, right.value), right.pos)

    return Parser(step)


def sequence_keep_left[I, A](first: Parser[I, A], second: Parser[I, Any]) -> Parser[I, A]:
    """Run first, then second; keep first's value and second's end offset."""
    first_fn, second_fn = first.fn, second.fn

    def step(source: Sequence[I], start: int) -> ParseResult[A] | ParseError:
        left = first_fn(source, start)
        if not isinstance(left, ParseResult):
            return left
        right = second_fn(source, left.pos)
        if not isinstance(right, ParseResult):
            return right
        return ParseResult(left.value, right.pos)

    return Parser(step)


def sequence_keep_right[I, B](first: Parser[I, Any], second: Parser[I, B]) -> Parser[I, B]:
    """Run first, then second; keep second's value."""
    first_fn, second_fn = first.fn, second.fn

    def step(source: Sequence[I], start: int) -> ParseResult[B] | ParseError:
        left = first_fn(source, start)
        if not isinstance(left, ParseResult):
            return left
        return second_fn(source, left.pos)

    return Parser(step)


def either[I, O](first: Parser[I, O], second: Parser[I, O], *rest: Parser[I, O]) -> Parser[I, O]:
    """Ordered alternation: the first alternative that matches wins.

    Every alternative starts from the same offset. When all fail, the
    last alternative's error is returned.
    """
    fns = tuple(p.fn for p in (first, second, *rest))

    def step(source: Sequence[I], start: int) -> ParseResult[O] | ParseError:
        for fn in fns[:-1]:
            result = fn(source, start)
            if isinstance(result, ParseResult):
                return result
        return fns[-1](source, start)

    return Parser(step)


def lazy[I, O](factory: Callable[[], Parser[I, O]]) -> Parser[I, O]:
    """Defer building a parser until it is first applied.

    Needed for recursive grammars, where a rule refers to itself:

        >>> expr = lazy(lambda: term & (sym("+") >> expr).opt())

    The factory runs once, even when several threads make the first
    application at the same time; later applications reuse the built
    parser without locking. Recursion depth is bounded only by the
    interpreter's stack.
    """
    lock = RLock()
    built: list[Parser[I, O]] = []

    def build() -> Parser[I, O]:
        with lock:
            if not built:
                built.append(factory())
                logger.debug("Built deferred parser via %r", factory)
        return built[0]

    def step(source: Sequence[I], start: int) -> ParseResult[O] | ParseError:
        if built:
            return built[0].fn(source, start)
        return build().fn(source, start)

    return Parser(step)

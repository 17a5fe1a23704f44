"""Primitive parsers.

Leaf parsers that look at the input directly. Everything else is built
from these with the Parser combinators.

Element Access:
    For ``bytes``/``bytearray`` input an element is a one-byte ``bytes``
    value (``b"H"``), not an int, so byte grammars read like text grammars.
    Every other sequence yields ``source[pos]`` as is.

All primitives fail with Incomplete, except fail() which reports a Custom
error at the current offset.
"""

from collections.abc import Callable, Container, Sequence

from seqparse.parser import Parser, element_at
from seqparse.result import INCOMPLETE, Custom, ParseError, ParseResult

__all__ = [
    "end_of_input",
    "epsilon",
    "fail",
    "next",
    "none_of",
    "one_of",
    "satisfy",
    "seq",
    "succeed",
    "sym",
]


def epsilon() -> Parser[object, None]:
    """Always succeed, consuming nothing. Value is None."""

    def step(source: Sequence[object], start: int) -> ParseResult[None]:
        return ParseResult(None, start)

    return Parser(step)


def next[I]() -> Parser[I, I]:  # noqa: A001
    """Consume exactly one element; value is that element.

    Fails at end of input.

    Example:
        >>> next().parse("abc")
        Ok(value='a')
    """

    def step(source: Sequence[I], start: int) -> ParseResult[I] | ParseError:
        if start >= len(source):
            return INCOMPLETE
        return ParseResult(element_at(source, start), start + 1)

    return Parser(step)


def sym[I](value: I) -> Parser[I, I]:
    """Consume one element equal to value.

    Example:
        >>> sym(b"H").parse(b"Hello")
        Ok(value=b'H')
    """

    def step(source: Sequence[I], start: int) -> ParseResult[I] | ParseError:
        if start >= len(source):
            return INCOMPLETE
        element = element_at(source, start)
        if element != value:
            return INCOMPLETE
        return ParseResult(element, start + 1)

    return Parser(step)


def seq[I](values: Sequence[I]) -> Parser[I, Sequence[I]]:
    """Consume len(values) elements equal to values, position by position.

    Atomic: a partial match consumes nothing. The value is ``values``
    itself; use collect() when the slice of the input is wanted.

    Example:
        >>> seq(b"Hello").apply(b"Hello world!")
        ParseResult(value=b'Hello', pos=5)
    """
    expected = tuple(element_at(values, i) for i in range(len(values)))
    width = len(expected)

    def step(source: Sequence[I], start: int) -> ParseResult[Sequence[I]] | ParseError:
        if start + width > len(source):
            return INCOMPLETE
        for offset, element in enumerate(expected):
            if element_at(source, start + offset) != element:
                return INCOMPLETE
        return ParseResult(values, start + width)

    return Parser(step)


def satisfy[I](predicate: Callable[[I], bool]) -> Parser[I, I]:
    """Consume one element for which predicate holds."""
    return next().decide(predicate)


def one_of[I](values: Container[I]) -> Parser[I, I]:
    """Consume one element contained in values."""
    return next().decide(lambda element: element in values)


def none_of[I](values: Container[I]) -> Parser[I, I]:
    """Consume one element not contained in values. Fails at end of input."""
    return next().decide(lambda element: element not in values)


def end_of_input() -> Parser[object, None]:
    """Succeed, consuming nothing, only when no input is left."""

    def step(source: Sequence[object], start: int) -> ParseResult[None] | ParseError:
        if start < len(source):
            return INCOMPLETE
        return ParseResult(None, start)

    return Parser(step)


def succeed[T](value: T) -> Parser[object, T]:
    """Always succeed with value, consuming nothing."""

    def step(source: Sequence[object], start: int) -> ParseResult[T]:
        return ParseResult(value, start)

    return Parser(step)


def fail(message: str) -> Parser[object, object]:
    """Always fail with ``Custom(message, offset)``."""

    def step(source: Sequence[object], start: int) -> ParseError:
        return Custom(message, start)

    return Parser(step)

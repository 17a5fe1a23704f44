"""Repetition count ranges.

A RepeatRange pairs a lower and an upper RangeBound and tells
Parser.repeat() how many matches are acceptable. Ranges are small frozen
values built at the call site and consumed immediately.

Bounds:
    - Included(n) as lower: at least n matches
    - Excluded(n) as lower: more than n matches
    - Included(n) as upper: at most n matches
    - Excluded(n) as upper: at most n matches; repetition stops once the
      count reaches n, so range(0, 1) and slice(None, 1) take one match
      when one is available, like opt()
    - Unbounded: no limit on that side

As upper bounds Included(n) and Excluded(n) both stop after n matches.
Some combinator libraries let Included(n) take n + 1; here it does not.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from seqparse.diagnostics import ErrorTemplate, InvalidRangeError

__all__ = [
    "UNBOUNDED",
    "Excluded",
    "Included",
    "RangeBound",
    "RepeatRange",
    "at_least",
    "at_most",
    "between",
    "exactly",
]


@dataclass(frozen=True, slots=True)
class Included:
    """Inclusive count bound."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise InvalidRangeError(ErrorTemplate.range_negative(self.value))


@dataclass(frozen=True, slots=True)
class Excluded:
    """Exclusive count bound."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise InvalidRangeError(ErrorTemplate.range_negative(self.value))


@dataclass(frozen=True, slots=True)
class Unbounded:
    """No limit on this side of the range."""


UNBOUNDED = Unbounded()

type RangeBound = Included | Excluded | Unbounded


@dataclass(frozen=True, slots=True)
class RepeatRange:
    """Lower and upper bound on a repetition count.

    Attributes:
        start: Lower bound (default: Unbounded, i.e. zero is acceptable)
        end: Upper bound (default: Unbounded)

    Raises:
        InvalidRangeError: If no count satisfies both bounds

    Example:
        >>> RepeatRange(Included(1), UNBOUNDED).satisfies_lower(0)
        False
        >>> RepeatRange.coerce(range(0, 3)).max_count
        3
    """

    start: RangeBound = UNBOUNDED
    end: RangeBound = UNBOUNDED

    def __post_init__(self) -> None:
        """Reject ranges that admit no count."""
        maximum = self.max_count
        if maximum is not None and maximum < self.min_count:
            raise InvalidRangeError(ErrorTemplate.range_empty(str(self)))

    @property
    def min_count(self) -> int:
        """Smallest acceptable number of matches."""
        match self.start:
            case Included(value=n):
                return n
            case Excluded(value=n):
                return n + 1
            case _:
                return 0

    @property
    def max_count(self) -> int | None:
        """Largest acceptable number of matches, None when unbounded."""
        match self.end:
            case Included(value=n) | Excluded(value=n):
                return n
            case _:
                return None

    @property
    def permits_zero(self) -> bool:
        """Whether an empty repetition is acceptable."""
        return self.min_count == 0

    @property
    def is_bounded(self) -> bool:
        """Whether the upper bound is finite."""
        return not isinstance(self.end, Unbounded)

    def satisfies_lower(self, count: int) -> bool:
        """Check count against the lower bound."""
        return count >= self.min_count

    def reached_upper(self, count: int) -> bool:
        """Check whether count leaves no room for another match."""
        maximum = self.max_count
        return maximum is not None and count >= maximum

    def __str__(self) -> str:
        match self.start:
            case Included(value=n):
                left = f"[{n}"
            case Excluded(value=n):
                left = f"({n}"
            case _:
                left = "[0"
        match self.end:
            case Included(value=n):
                right = f"{n}]"
            case Excluded(value=n):
                right = f"{n})"
            case _:
                right = "inf)"
        return f"{left}, {right}"

    @classmethod
    def coerce(cls, bounds: RepeatRange | range | slice | int) -> RepeatRange:
        """Build a RepeatRange from the ways callers usually write one.

        Accepted forms:
            - RepeatRange: returned unchanged
            - int n: exactly n matches
            - range(a, b): a to b matches, stopping once b is reached (step 1)
            - slice(a, b): like range, None means unbounded on that side

        Args:
            bounds: Range description

        Returns:
            Equivalent RepeatRange

        Raises:
            InvalidRangeError: If bounds is none of the accepted forms,
                or describes an empty range
        """
        match bounds:
            case RepeatRange():
                return bounds
            case bool():
                raise InvalidRangeError(ErrorTemplate.range_unsupported(bounds))
            case int():
                return exactly(bounds)
            case range(step=1):
                return cls(Included(bounds.start), Excluded(bounds.stop))
            case slice(step=None):
                lower: RangeBound = UNBOUNDED if bounds.start is None else Included(bounds.start)
                upper: RangeBound = UNBOUNDED if bounds.stop is None else Excluded(bounds.stop)
                return cls(lower, upper)
            case _:
                raise InvalidRangeError(ErrorTemplate.range_unsupported(bounds))


def exactly(n: int) -> RepeatRange:
    """Exactly n matches."""
    return RepeatRange(Included(n), Included(n))


def at_least(n: int) -> RepeatRange:
    """n or more matches."""
    return RepeatRange(Included(n), UNBOUNDED)


def at_most(n: int) -> RepeatRange:
    """Zero to n matches."""
    return RepeatRange(Included(0), Included(n))


def between(low: int, high: int) -> RepeatRange:
    """low to high matches, both ends inclusive."""
    return RepeatRange(Included(low), Included(high))

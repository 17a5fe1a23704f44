"""Tests for Parser.repeat() count semantics."""

from __future__ import annotations

import pytest

from seqparse import (
    INCOMPLETE,
    Excluded,
    Included,
    InvalidRangeError,
    Ok,
    ParseResult,
    RepeatRange,
    at_least,
    at_most,
    between,
    epsilon,
    exactly,
    fail,
    next,  # noqa: A004
    sym,
)

# ============================================================================
# UNBOUNDED UPPER
# ============================================================================


class TestUnboundedRepeat:
    """Test repetition without an upper bound."""

    def test_zero_or_more(self) -> None:
        """at_least(0) collects every match."""
        assert sym("a").repeat(at_least(0)).apply("aaab") == ParseResult(["a", "a", "a"], 3)

    def test_zero_or_more_no_match(self) -> None:
        """at_least(0) succeeds with an empty list when nothing matches."""
        assert sym("a").repeat(at_least(0)).apply("bbb") == ParseResult([], 0)

    def test_one_or_more_fails_on_zero(self) -> None:
        """at_least(1) fails when nothing matches."""
        assert sym("a").repeat(at_least(1)).apply("b") == INCOMPLETE

    def test_below_lower_bound(self) -> None:
        """Fewer matches than the lower bound fail."""
        assert sym("a").repeat(at_least(3)).apply("aab") == INCOMPLETE

    def test_runs_to_end_of_input(self) -> None:
        """Repetition stops cleanly at end of input."""
        assert sym(b"x").repeat(at_least(1)).apply(b"xx") == ParseResult([b"x", b"x"], 2)

    def test_excluded_lower(self) -> None:
        """An excluded lower bound needs one more match."""
        more_than_one = sym("a").repeat(RepeatRange(Excluded(1)))

        assert more_than_one.apply("a") == INCOMPLETE
        assert more_than_one.apply("aa") == ParseResult(["a", "a"], 2)

    def test_inner_error_not_propagated(self) -> None:
        """A Custom error from the inner parser becomes Incomplete."""
        assert fail("boom").repeat(at_least(1)).apply("") == INCOMPLETE


# ============================================================================
# BOUNDED UPPER
# ============================================================================


class TestBoundedRepeat:
    """Test repetition with a finite upper bound."""

    def test_stops_at_upper(self) -> None:
        """Matching stops once the upper bound is reached."""
        assert sym("a").repeat(between(1, 3)).apply("aaaa") == ParseResult(["a"] * 3, 3)

    def test_exactly(self) -> None:
        """exactly(n) takes n matches and leaves the rest."""
        assert sym("a").repeat(exactly(2)).apply("aaa") == ParseResult(["a", "a"], 2)

    def test_exactly_too_few(self) -> None:
        """exactly(n) fails with fewer than n matches."""
        assert sym("a").repeat(exactly(3)).apply("aa") == INCOMPLETE

    def test_excluded_upper(self) -> None:
        """An excluded upper bound stops once the count reaches it."""
        up_to_three = sym("a").repeat(RepeatRange(Included(0), Excluded(3)))

        assert up_to_three.apply("aaaa") == ParseResult(["a"] * 3, 3)

    def test_included_upper_takes_no_extra_match(self) -> None:
        """An included upper bound stops at n, not n + 1."""
        up_to_two = sym("a").repeat(RepeatRange(Included(0), Included(2)))

        assert up_to_two.apply("aaaa") == ParseResult(["a", "a"], 2)

    def test_zero_matches_permitted(self) -> None:
        """A bounded range that permits zero succeeds on no match."""
        assert sym("a").repeat(at_most(3)).apply("b") == ParseResult([], 0)

    def test_exactly_zero(self) -> None:
        """exactly(0) never calls the inner parser."""
        assert fail("unused").repeat(exactly(0)).apply("x") == ParseResult([], 0)

    def test_started_but_short_of_upper(self) -> None:
        """Stopping between the bounds after some matches fails."""
        assert sym("a").repeat(between(2, 4)).apply("aaab") == INCOMPLETE

    def test_one_match_short_of_upper(self) -> None:
        """The all-or-nothing rule applies even to a single match."""
        assert sym("a").repeat(at_most(2)).apply("ab") == INCOMPLETE


# ============================================================================
# COERCED BOUNDS
# ============================================================================


class TestCoercedBounds:
    """Test the shorthand forms accepted by repeat()."""

    def test_int(self) -> None:
        """An int means exactly that many."""
        assert sym("a").repeat(2).apply("aaa") == ParseResult(["a", "a"], 2)

    def test_range(self) -> None:
        """range(a, b) stops once b matches are taken."""
        assert sym("a").repeat(range(0, 3)).apply("aaaa") == ParseResult(["a"] * 3, 3)

    def test_range_zero_one_is_optional(self) -> None:
        """range(0, 1) takes one match when available and none otherwise."""
        parser = sym("a").repeat(range(0, 1))

        assert parser.apply("ab") == ParseResult(["a"], 1)
        assert parser.apply("b") == ParseResult([], 0)

    def test_slice_up_to_one_collects_first_element(self) -> None:
        """slice(None, 1) over bytes collects the first byte."""
        first = next().repeat(slice(None, 1)).collect()

        assert first.parse(b"Hello world!") == Ok(b"H")

    def test_open_slice(self) -> None:
        """slice(1, None) is one or more."""
        parser = sym("a").repeat(slice(1, None))

        assert parser.apply("aaab") == ParseResult(["a"] * 3, 3)
        assert parser.apply("b") == INCOMPLETE

    def test_invalid_bounds_fail_at_construction(self) -> None:
        """A bad range is rejected when the parser is built."""
        with pytest.raises(InvalidRangeError):
            sym("a").repeat(range(3, 1))


# ============================================================================
# ZERO-WIDTH MATCHES
# ============================================================================


class TestZeroWidthRepeat:
    """Test repetition of parsers that consume nothing."""

    def test_unbounded_terminates(self) -> None:
        """A zero-width match ends an unbounded loop."""
        assert epsilon().repeat(at_least(0)).apply("abc") == ParseResult([None], 0)

    def test_unbounded_meets_lower(self) -> None:
        """The loop runs until the lower bound is met."""
        assert epsilon().repeat(at_least(3)).apply("") == ParseResult([None] * 3, 0)

    def test_bounded_runs_to_upper(self) -> None:
        """A bounded loop stops at its upper bound."""
        assert epsilon().repeat(exactly(4)).apply("") == ParseResult([None] * 4, 0)

    def test_optional_inside_repeat(self) -> None:
        """An optional parser inside an unbounded repeat terminates."""
        parser = sym("a").opt().repeat(at_least(0))

        assert parser.apply("aab") == ParseResult(["a", "a", None], 2)

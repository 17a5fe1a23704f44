"""Rendering of parse error chains against their input.

Parse errors carry integer offsets only. This module turns those offsets
into line:column positions when the input is textual, and renders the
whole causal chain one link per line.

Line Ending Support:
    LF and CRLF are supported (\\n is the line delimiter). CR-only input
    produces a single line.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from seqparse.result import ParseError

__all__ = ["LineOffsetCache", "format_error"]


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in O(n) single pass, then provides
    O(log n) lookups using binary search. Works for ``str`` and for
    ``bytes``/``bytearray`` input (where offsets are byte offsets).

    Example:
        >>> cache = LineOffsetCache("line1\\nline2\\nline3")
        >>> cache.get_line_col(0)
        (1, 1)
        >>> cache.get_line_col(8)
        (2, 3)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str | bytes | bytearray) -> None:
        """Build line offset cache from source.

        Args:
            source: Text or bytes to index
        """
        newline: str | bytes = "\n" if isinstance(source, str) else b"\n"
        offsets = [0]
        index = source.find(newline)  # type: ignore[arg-type]
        while index >= 0:
            offsets.append(index + 1)
            index = source.find(newline, index + 1)  # type: ignore[arg-type]
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get line and column for position using binary search.

        Args:
            pos: Offset in source (0-indexed); clamped to the source bounds

        Returns:
            (line, column) tuple (1-indexed, like text editors)
        """
        if pos < 0:
            pos = 0
        elif pos > self._source_len:
            pos = self._source_len

        # Line index = index of largest offset <= pos
        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1

        return (left + 1, pos - self._offsets[left] + 1)


def format_error(error: ParseError, source: Sequence[object] | None = None) -> str:
    """Format an error chain, outermost first.

    Each link of the chain becomes one line. Links with a position are
    prefixed with ``line:col`` when ``source`` is ``str``/``bytes``, or
    with ``@offset`` otherwise. ``Incomplete`` links have no position.

    Args:
        error: Error value returned by a failed parse
        source: The input that was parsed (optional)

    Returns:
        Multi-line description of the chain

    Example:
        >>> err = Expect("number", 6, Custom("bad digit", 7))
        >>> print(format_error(err, "x = 1\\n 2z"))
        2:1: expected number
          2:2: bad digit
    """
    cache: LineOffsetCache | None = None
    if isinstance(source, (str, bytes, bytearray)):
        cache = LineOffsetCache(source)

    lines: list[str] = []
    for depth, link in enumerate(error.chain()):
        text = link.describe()
        position = link.position
        if position is None:
            prefix = ""
        elif cache is not None:
            line, col = cache.get_line_col(position)
            prefix = f"{line}:{col}: "
        else:
            prefix = f"@{position}: "
        lines.append("  " * depth + prefix + text)
    return "\n".join(lines)

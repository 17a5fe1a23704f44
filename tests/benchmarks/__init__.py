"""Performance benchmarks for seqparse.

Benchmarks use pytest-benchmark to measure and track performance of critical operations.
Prevents performance regressions in the combinator engine and the bundled lexers.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []

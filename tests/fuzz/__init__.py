"""Fuzz testing infrastructure for seqparse.

This package contains:
- shadow_lexer: Simple reference scanners for differential testing
- test_lexer_oracle: Property fuzzers comparing the combinator lexers
  against the reference scanners

Python 3.13+.
"""

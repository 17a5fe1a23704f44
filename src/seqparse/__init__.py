"""seqparse - parser combinators over indexed sequences.

Build parsers for ad-hoc grammars over bytes, text or any token sequence by
combining primitive matchers with sequencing, alternation, repetition,
mapping and conversion. Parsers are immutable, pure and reusable; failure
is a returned value, never an exception.

Public API:
    Parser - Composable parser (operators &, |, <<, >>)
    epsilon, next, sym, seq - Primitive parsers
    satisfy, one_of, none_of, end_of_input, succeed, fail - More primitives
    either, sequence_both, sequence_keep_left, sequence_keep_right - Named combinators
    lazy - Deferred construction for recursive grammars
    RepeatRange, exactly, at_least, at_most, between - Repetition ranges
    Ok, Err - Outcome of Parser.parse()
    Incomplete, Expect, Custom - Parse error variants

Exceptions:
    SeqParseError - Base exception class
    InvalidRangeError - Malformed repetition range
    InputTooLargeError - Input over the configured size limit
    UnwrapError - Err.unwrap() on a failed parse

Submodules:
    seqparse.lexer - Number and identifier lexers built on the engine
    seqparse.diagnostics - Error chain rendering, codes and templates
    seqparse.constants - Configuration defaults
"""

from .diagnostics import (
    InputTooLargeError,
    InvalidRangeError,
    SeqParseError,
    UnwrapError,
    format_error,
)
from .parser import (
    Parser,
    either,
    lazy,
    sequence_both,
    sequence_keep_left,
    sequence_keep_right,
)
from .primitives import (
    end_of_input,
    epsilon,
    fail,
    next,  # noqa: A004
    none_of,
    one_of,
    satisfy,
    seq,
    succeed,
    sym,
)
from .range import (
    UNBOUNDED,
    Excluded,
    Included,
    RangeBound,
    RepeatRange,
    Unbounded,
    at_least,
    at_most,
    between,
    exactly,
)
from .result import (
    INCOMPLETE,
    Custom,
    Err,
    Expect,
    Incomplete,
    Ok,
    ParseError,
    ParseResult,
    Result,
    Span,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("seqparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "INCOMPLETE",
    "UNBOUNDED",
    "Custom",
    "Err",
    "Excluded",
    "Expect",
    "Incomplete",
    "Included",
    "InputTooLargeError",
    "InvalidRangeError",
    "Ok",
    "ParseError",
    "ParseResult",
    "Parser",
    "RangeBound",
    "RepeatRange",
    "Result",
    "SeqParseError",
    "Span",
    "Unbounded",
    "UnwrapError",
    "__version__",
    "at_least",
    "at_most",
    "between",
    "either",
    "end_of_input",
    "epsilon",
    "exactly",
    "fail",
    "format_error",
    "lazy",
    "next",
    "none_of",
    "one_of",
    "satisfy",
    "seq",
    "sequence_both",
    "sequence_keep_left",
    "sequence_keep_right",
    "succeed",
    "sym",
]

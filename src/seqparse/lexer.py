"""Token lexers built on the combinator engine.

These grammars only use the public Parser API; they double as worked
examples of composing primitives.

    number_parser()          bytes -> float   JSON-style unsigned number
    identifier_parser()      str -> str       [A-Za-z_$][A-Za-z0-9_$]*
    locale_number_parser()   str -> Decimal   locale-formatted number (Babel)

Number Grammar:
    integer  ::= [1-9] [0-9]* | "0"
    fraction ::= "." [0-9]+
    number   ::= integer fraction?

    A leading zero is a complete integer: ``0123`` lexes as ``0`` and
    leaves ``123`` unconsumed.
"""

from __future__ import annotations

import string
from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from seqparse.babel_compat import get_babel_numbers, get_number_symbols, require_babel
from seqparse.parser import Parser
from seqparse.primitives import one_of, seq, sym
from seqparse.range import at_least, exactly

__all__ = [
    "Lexer",
    "identifier_parser",
    "locale_number_parser",
    "number_parser",
]

_DIGITS: frozenset[bytes] = frozenset(bytes([c]) for c in b"0123456789")
_NON_ZERO_DIGITS: frozenset[bytes] = _DIGITS - {b"0"}

# ASCII only: str.isdigit() accepts superscripts and other Unicode digits
_TEXT_DIGITS: frozenset[str] = frozenset(string.digits)
_IDENTIFIER_START: frozenset[str] = frozenset(string.ascii_letters + "_$")
_IDENTIFIER_REST: frozenset[str] = _IDENTIFIER_START | _TEXT_DIGITS


def _decode_ascii(raw: Sequence[bytes]) -> str:
    return bytes(raw).decode("ascii")  # type: ignore[arg-type]


def number_parser() -> Parser[bytes, float]:
    """Unsigned decimal number over bytes, converted with float().

    Example:
        >>> number_parser().parse(b"22134HD")
        Ok(value=22134.0)
    """
    digit = one_of(_DIGITS)
    integer = one_of(_NON_ZERO_DIGITS) << digit.repeat(at_least(0)) | sym(b"0")
    fraction = sym(b".") << digit.repeat(at_least(1))
    return (integer & fraction.opt()).collect().convert(_decode_ascii).convert(float)


def identifier_parser() -> Parser[str, str]:
    """Identifier over str: a letter, ``_`` or ``$``, then those or digits.

    Example:
        >>> identifier_parser().parse("Hello world!")
        Ok(value='Hello')
    """
    first = one_of(_IDENTIFIER_START)
    rest = one_of(_IDENTIFIER_REST).repeat(at_least(0))
    return (first & rest).collect()  # type: ignore[return-value]


def locale_number_parser(locale_code: str) -> Parser[str, Decimal]:
    """Locale-formatted number over str, converted to Decimal.

    Decimal and group separators come from CLDR data for ``locale_code``.
    Groups after the first must be exactly three digits.

        en_US: ``-1,234.56``    de_DE: ``-1.234,56``

    Args:
        locale_code: Locale identifier (``en_US``, ``de-DE``, ...)

    Returns:
        Parser producing a Decimal

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If the locale is unknown
        ValueError: If locale_code is malformed

    Example:
        >>> locale_number_parser("de_DE").parse("1.234,5 EUR")
        Ok(value=Decimal('1234.5'))
    """
    require_babel("locale_number_parser")
    symbols = get_number_symbols(locale_code)
    numbers = get_babel_numbers()

    digit = one_of(_TEXT_DIGITS)
    digits = digit.repeat(at_least(1))
    group = seq(symbols.group) >> digit.repeat(exactly(3))
    integer = digits & group.repeat(at_least(0))
    fraction = seq(symbols.decimal) >> digits
    number = sym("-").opt() & integer & fraction.opt()

    def to_decimal(text: str) -> Decimal:
        return numbers.parse_decimal(text, locale=symbols.locale)

    return number.collect().convert(to_decimal)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class Lexer:
    """Ready-built token parsers.

    Parsers are built once per Lexer and can be reused for any number of
    inputs.

    Attributes:
        number: Unsigned number over bytes, as float
        identifier: Identifier over str
    """

    number: Parser[bytes, float] = field(default_factory=number_parser)
    identifier: Parser[str, str] = field(default_factory=identifier_parser)

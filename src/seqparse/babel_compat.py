"""Optional Babel access for locale-aware lexers.

The combinator engine has no dependencies. CLDR separator data and
locale-aware decimal parsing come from Babel, installed with
``pip install seqparse[babel]``, and are only imported when a locale-aware
lexer is built.

Everything Babel-specific goes through this module:
    - require_babel() fails early with BabelImportError and an install hint
    - get_number_symbols() resolves a locale code to its separators
    - get_babel_numbers() hands out babel.numbers behind a Protocol

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "BabelImportError",
    "BabelNumbersProtocol",
    "NumberSymbols",
    "get_babel_numbers",
    "get_locale_class",
    "get_number_symbols",
    "is_babel_available",
    "normalize_locale_code",
    "require_babel",
]


class BabelNumbersProtocol(Protocol):
    """The part of babel.numbers the lexers call."""

    def get_decimal_symbol(self, locale: Locale | str | None = None) -> str: ...

    def get_group_symbol(self, locale: Locale | str | None = None) -> str: ...

    def parse_decimal(
        self,
        string: str,
        locale: Locale | str | None = None,
        strict: bool = False,
    ) -> Decimal: ...


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import
    except ImportError:
        return False
    return True


class BabelImportError(ImportError):
    """Babel is needed by a lexer but is not installed.

    Attributes:
        feature: Name of the function that needed Babel
    """

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install seqparse[babel]"
        )
        self.feature = feature


def is_babel_available() -> bool:
    """Whether Babel can be imported. Checked once per process."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Raise BabelImportError naming ``feature`` unless Babel is installed."""
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """babel.Locale, imported on first use."""
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_babel_numbers() -> BabelNumbersProtocol:
    """babel.numbers, imported on first use."""
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers  # type: ignore[return-value]


def normalize_locale_code(locale_code: str) -> str:
    """Accept BCP 47 style codes: ``de-DE`` becomes ``de_DE``."""
    return locale_code.replace("-", "_")


@dataclass(frozen=True, slots=True)
class NumberSymbols:
    """Separators a locale uses when writing numbers.

    Attributes:
        locale: Resolved Babel Locale
        decimal: Decimal separator (``.`` for en_US, ``,`` for de_DE)
        group: Digit group separator (``,`` for en_US, ``.`` for de_DE)
    """

    locale: Locale
    decimal: str
    group: str


def get_number_symbols(locale_code: str) -> NumberSymbols:
    """Look up the CLDR number separators for a locale.

    Args:
        locale_code: Locale identifier (``en_US``, ``de-DE``, ...)

    Returns:
        NumberSymbols for the locale

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If the locale is unknown
        ValueError: If locale_code is malformed
    """
    require_babel("get_number_symbols")
    locale = get_locale_class().parse(normalize_locale_code(locale_code))
    numbers = get_babel_numbers()
    return NumberSymbols(
        locale=locale,
        decimal=numbers.get_decimal_symbol(locale),
        group=numbers.get_group_symbol(locale),
    )

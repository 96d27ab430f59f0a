"""Locale number formatter backed by Babel's CLDR data."""
from __future__ import annotations

import decimal
from functools import lru_cache

from babel import Locale, UnknownLocaleError
from babel.numbers import (
    NumberFormatError,
    get_decimal_symbol,
    get_exponential_symbol,
    get_group_symbol,
    parse_decimal,
    parse_number,
)

from locale_number_parser.formatting.base import LocaleFormattingError, LocaleNumberFormatter
from locale_number_parser.models.parser_config import NumberStyle, SeparatorSymbols

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@lru_cache(maxsize=64)
def _load_locale(language_tag: str) -> Locale:
    try:
        return Locale.parse(language_tag)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise LocaleFormattingError(f"Unknown locale: {language_tag!r}") from e


def _finite_float(value: decimal.Decimal, text: str) -> float:
    # Decimal accepts "NaN" and "Infinity" spellings, which are not user numbers
    if not value.is_finite():
        raise LocaleFormattingError(f"{text!r} is not a finite number")
    return float(value)


class BabelNumberFormatter(LocaleNumberFormatter):
    """Parses numbers with the separator conventions Babel knows for a locale."""

    def parse_integer(self, text: str, language_tag: str) -> int:
        locale = _load_locale(language_tag)
        try:
            value = parse_number(text, locale=locale)
        except (NumberFormatError, ValueError) as e:
            raise LocaleFormattingError(f"{text!r} is not an integer in {language_tag}") from e
        if not INT64_MIN <= value <= INT64_MAX:
            raise LocaleFormattingError(f"{text!r} does not fit a 64-bit integer")
        return value

    def parse_scientific(self, text: str, language_tag: str) -> float:
        locale = _load_locale(language_tag)
        exponent_symbol = get_exponential_symbol(locale).upper()
        mantissa, marker, exponent = text.strip().upper().partition(exponent_symbol)
        try:
            value = parse_decimal(mantissa, locale=locale)
            if marker:
                value = value.scaleb(int(exponent))
        except (NumberFormatError, ValueError, decimal.InvalidOperation) as e:
            raise LocaleFormattingError(f"{text!r} is not scientific notation in {language_tag}") from e
        return _finite_float(value, text)

    def parse_decimal(self, text: str, language_tag: str) -> float:
        locale = _load_locale(language_tag)
        try:
            value = parse_decimal(text, locale=locale)
        except (NumberFormatError, ValueError) as e:
            raise LocaleFormattingError(f"{text!r} is not a decimal number in {language_tag}") from e
        return _finite_float(value, text)

    def symbols(self, language_tag: str, style: NumberStyle = NumberStyle.DECIMAL) -> SeparatorSymbols:
        # CLDR shares separators between the decimal and scientific patterns
        locale = _load_locale(language_tag)
        return SeparatorSymbols(
            decimal=get_decimal_symbol(locale),
            grouping=get_group_symbol(locale),
        )

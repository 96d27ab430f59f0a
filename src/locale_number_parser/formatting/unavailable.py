"""Formatter used when no locale data is available."""
from __future__ import annotations

from locale_number_parser.formatting.base import LocaleFormattingError, LocaleNumberFormatter
from locale_number_parser.models.parser_config import NumberStyle, SeparatorSymbols


class UnavailableNumberFormatter(LocaleNumberFormatter):
    """Stands in for a missing locale formatter. Every call fails."""

    @property
    def available(self) -> bool:
        return False

    def parse_integer(self, text: str, language_tag: str) -> int:
        raise LocaleFormattingError("locale formatting is unavailable")

    def parse_scientific(self, text: str, language_tag: str) -> float:
        raise LocaleFormattingError("locale formatting is unavailable")

    def parse_decimal(self, text: str, language_tag: str) -> float:
        raise LocaleFormattingError("locale formatting is unavailable")

    def symbols(self, language_tag: str, style: NumberStyle = NumberStyle.DECIMAL) -> SeparatorSymbols:
        raise LocaleFormattingError("locale formatting is unavailable")

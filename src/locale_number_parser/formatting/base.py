"""Locale number formatter abstract base class."""
from __future__ import annotations

from abc import ABC, abstractmethod

from locale_number_parser.models.parser_config import NumberStyle, SeparatorSymbols


class LocaleFormattingError(Exception):
    """A locale formatter could not be built or could not parse its input."""


class LocaleNumberFormatter(ABC):
    """Abstract base class for locale-aware number formatters.

    Implementations raise ``LocaleFormattingError`` for every failure, including
    an unknown language tag.
    """

    @property
    def available(self) -> bool:
        """Whether the formatter is backed by real locale data."""
        return True

    @abstractmethod
    def parse_integer(self, text: str, language_tag: str) -> int:
        """Parse *text* as a 64-bit integer in the decimal style."""
        ...

    @abstractmethod
    def parse_scientific(self, text: str, language_tag: str) -> float:
        """Parse *text* as a float in the scientific style."""
        ...

    @abstractmethod
    def parse_decimal(self, text: str, language_tag: str) -> float:
        """Parse *text* as a float in the decimal style."""
        ...

    @abstractmethod
    def symbols(self, language_tag: str, style: NumberStyle = NumberStyle.DECIMAL) -> SeparatorSymbols:
        """Return the decimal and grouping symbols used for *style*."""
        ...

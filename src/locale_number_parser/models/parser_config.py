"""Configuration and value types shared by the parsing strategies.

``ParserConfig`` is owned by a single ``NumberParser``; the formatter-facing
types describe which formatting mode is consulted and which separator symbols
it reports.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from locale_number_parser.config import Settings

DEFAULT_LANGUAGE_TAG = "en_US"


class NumberStyle(str, Enum):
    """Formatting mode requested from a locale formatter."""

    DECIMAL = "decimal"
    SCIENTIFIC = "scientific"


class SeparatorSymbols(BaseModel):
    """Decimal and grouping symbols a formatter uses for one locale and style."""

    model_config = ConfigDict(frozen=True)

    decimal: str = "."
    grouping: str = ","

    def normalize(self, text: str) -> str:
        """Drop grouping symbols and turn the decimal symbol into a dot."""
        if self.grouping:
            text = text.replace(self.grouping, "")
        if self.decimal:
            text = text.replace(self.decimal, ".")
        return text


class ParserConfig(BaseModel):
    """Locale and strategy preference for one parser instance."""

    model_config = ConfigDict(validate_assignment=True)

    language_code: str | None = "en"
    region_code: str | None = "US"
    prefer_locale_formatting: bool = False

    @property
    def language_tag(self) -> str:
        """Return ``"{language}_{REGION}"``, or ``en_US`` when either part is missing."""
        if self.language_code and self.region_code:
            return f"{self.language_code}_{self.region_code}"
        return DEFAULT_LANGUAGE_TAG

    @classmethod
    def from_settings(cls, settings: Settings) -> ParserConfig:
        return cls(
            language_code=settings.language_code or None,
            region_code=settings.region_code or None,
            prefer_locale_formatting=settings.prefer_locale_formatting,
        )

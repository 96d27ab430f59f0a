"""Number parser: picks the order of the heuristic and locale strategies.

Inputs: int, float or str. Everything else (bool, None, containers) is not a
number. Numeric inputs come back unchanged. Strings go through:

    heuristic  →  locale formatter      (default)
    locale formatter  →  heuristic      (prefer_locale_formatting=True)

The locale formatter is only consulted when it reports itself available.
"""
from __future__ import annotations

import structlog

from locale_number_parser.config import Settings
from locale_number_parser.formatting.babel_formatter import BabelNumberFormatter
from locale_number_parser.formatting.base import LocaleNumberFormatter
from locale_number_parser.international.heuristic_parsing import parse_heuristic
from locale_number_parser.international.locale_parsing import parse_via_locale
from locale_number_parser.models.parser_config import ParserConfig

logger = structlog.get_logger(__name__)


class NumberParser:
    """Parses free-form numeric user input, tolerating locale ambiguity."""

    def __init__(
        self,
        config: ParserConfig | None = None,
        formatter: LocaleNumberFormatter | None = None,
    ):
        self._config = config.model_copy() if config is not None else ParserConfig()
        self._formatter = formatter if formatter is not None else BabelNumberFormatter()

    @classmethod
    def create(
        cls,
        language_code: str | None = "en",
        region_code: str | None = "US",
        prefer_locale_formatting: bool = False,
        formatter: LocaleNumberFormatter | None = None,
    ) -> NumberParser:
        config = ParserConfig(
            language_code=language_code,
            region_code=region_code,
            prefer_locale_formatting=prefer_locale_formatting,
        )
        return cls(config, formatter)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        formatter: LocaleNumberFormatter | None = None,
    ) -> NumberParser:
        """Build a parser from ``NUMBER_PARSER_*`` environment settings."""
        return cls(ParserConfig.from_settings(settings or Settings()), formatter)

    @property
    def config(self) -> ParserConfig:
        return self._config

    @property
    def formatter(self) -> LocaleNumberFormatter:
        return self._formatter

    @property
    def language_code(self) -> str | None:
        return self._config.language_code

    @language_code.setter
    def language_code(self, value: str | None) -> None:
        self._config.language_code = value

    @property
    def region_code(self) -> str | None:
        return self._config.region_code

    @region_code.setter
    def region_code(self, value: str | None) -> None:
        self._config.region_code = value

    @property
    def prefer_locale_formatting(self) -> bool:
        return self._config.prefer_locale_formatting

    @prefer_locale_formatting.setter
    def prefer_locale_formatting(self, value: bool) -> None:
        self._config.prefer_locale_formatting = value

    def parse(self, raw_input: object) -> int | float | None:
        """Return the number *raw_input* denotes, or ``None`` when undetermined."""
        if isinstance(raw_input, bool) or not isinstance(raw_input, (int, float, str)):
            return None
        if isinstance(raw_input, (int, float)):
            return raw_input

        locale_available = self._formatter.available
        language_tag = self._config.language_tag

        if self._config.prefer_locale_formatting and locale_available:
            result = parse_via_locale(self._formatter, raw_input, language_tag)
            if result is not None:
                return result
            result = parse_heuristic(raw_input)
        else:
            result = parse_heuristic(raw_input)
            if result is not None:
                return result
            if locale_available:
                result = parse_via_locale(self._formatter, raw_input, language_tag)

        if result is None:
            logger.debug("number_parse_unresolved", language_tag=language_tag)
        return result

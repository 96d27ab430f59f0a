"""Locale-formatter parsing with round-trip validation.

Each attempt asks the formatter to parse the input, then re-renders the input
with the formatter's own separator symbols and compares it to ``str()`` of the
parsed value. This rejects parses that silently dropped trailing text. Attempts
run in order and the first success wins:

1. integer, decimal style, validated
2. float, scientific style, validated
3. float, decimal style, not validated
"""
from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import structlog

from locale_number_parser.formatting.base import LocaleFormattingError, LocaleNumberFormatter
from locale_number_parser.models.parser_config import DEFAULT_LANGUAGE_TAG, NumberStyle

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _attempt(step: str, language_tag: str, call: Callable[[], T]) -> T | None:
    """Run one formatter call, turning any failure into ``None``."""
    try:
        return call()
    except LocaleFormattingError as e:
        logger.debug("locale_formatter_failed", step=step, language_tag=language_tag, error=str(e))
    except Exception as e:
        logger.warning(
            "locale_formatting_unexpected_error",
            step=step,
            language_tag=language_tag,
            error=str(e),
            error_type=type(e).__name__,
        )
    return None


def parse_integer_via_locale(
    formatter: LocaleNumberFormatter, raw_input: str, language_tag: str
) -> int | None:
    """Parse an integer and require it to round-trip through the decimal symbols."""
    parsed = _attempt("integer", language_tag, lambda: formatter.parse_integer(raw_input, language_tag))
    if parsed is None:
        return None
    symbols = _attempt("integer_symbols", language_tag, lambda: formatter.symbols(language_tag, NumberStyle.DECIMAL))
    if symbols is None or symbols.normalize(raw_input) != str(parsed):
        return None
    return parsed


def parse_scientific_via_locale(
    formatter: LocaleNumberFormatter, raw_input: str, language_tag: str
) -> float | None:
    """Parse a scientific-style float and require it to round-trip."""
    parsed = _attempt("scientific", language_tag, lambda: formatter.parse_scientific(raw_input, language_tag))
    if parsed is None:
        return None
    symbols = _attempt(
        "scientific_symbols", language_tag, lambda: formatter.symbols(language_tag, NumberStyle.SCIENTIFIC)
    )
    if symbols is None or symbols.normalize(raw_input) != str(parsed):
        return None
    return parsed


def parse_decimal_via_locale(
    formatter: LocaleNumberFormatter, raw_input: str, language_tag: str
) -> float | None:
    """Parse a decimal-style float. Least strict: no round-trip check."""
    return _attempt("decimal", language_tag, lambda: formatter.parse_decimal(raw_input, language_tag))


def parse_via_locale(
    formatter: LocaleNumberFormatter, raw_input: str, language_tag: str = DEFAULT_LANGUAGE_TAG
) -> int | float | None:
    """Parse *raw_input* with *formatter* for *language_tag*.

    Never raises; returns ``None`` when no attempt succeeds.
    """
    text = raw_input.strip()
    for attempt in (parse_integer_via_locale, parse_scientific_via_locale, parse_decimal_via_locale):
        result = attempt(formatter, text, language_tag)
        if result is not None:
            return result
    return None

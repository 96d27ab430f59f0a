"""Separator-role inference for numbers typed in an unknown locale.

Decides whether ``.`` or ``,`` is the decimal point from the position and
count of each separator, removes the grouping separator and converts the rest.

Handles:
- Single dot: "1234.56" → 1234.56
- Single comma: "1234,56" → 1234.56
- Repeated separator is grouping: "1.234.567" → 1234567.0, "1,234,567" → 1234567.0
- Mixed, last unique one is decimal: "1,234.56" → 1234.56, "1.234,56" → 1234.56
- Mixed, unresolved: "1,234.567,89" → None
- No separator: "1234" → 1234, "1e3" → 1000.0
"""
from __future__ import annotations

import re

import structlog

from locale_number_parser.utils.coercion import is_plain_integer, leading_float, leading_int

logger = structlog.get_logger(__name__)

# Anything outside digits, exponent marks, separators and minus is dropped
_DISALLOWED_RE = re.compile(r"[^0-9Ee,.\-]")


def clean_input(raw_input: str) -> str:
    """Trim *raw_input* and keep only characters that can form a number."""
    return _DISALLOWED_RE.sub("", raw_input.strip())


def parse_heuristic(raw_input: str) -> int | float | None:
    """Parse *raw_input* by guessing which separator is the decimal point.

    Returns ``None`` when nothing numeric survives cleaning or when both
    separators are present and neither is a unique, last-occurring decimal
    point. Separator-bearing inputs always produce a float.
    """
    cleaned = clean_input(raw_input)
    if not cleaned:
        return None

    has_dot = "." in cleaned
    has_comma = "," in cleaned

    if has_dot and not has_comma:
        if cleaned.count(".") == 1:
            return leading_float(cleaned)
        return leading_float(cleaned.replace(".", ""))

    if has_comma and not has_dot:
        if cleaned.count(",") == 1:
            return leading_float(cleaned.replace(",", "."))
        return leading_float(cleaned.replace(",", ""))

    if has_dot and has_comma:
        last_dot = cleaned.rfind(".")
        last_comma = cleaned.rfind(",")
        if last_dot > last_comma and cleaned.count(".") == 1:
            return leading_float(cleaned.replace(",", ""))
        if last_comma > last_dot and cleaned.count(",") == 1:
            return leading_float(cleaned.replace(".", "").replace(",", "."))
        logger.debug("number_parse_unresolved", cleaned=cleaned, reason="ambiguous_separators")
        return None

    if is_plain_integer(cleaned):
        return leading_int(cleaned)
    return leading_float(cleaned)

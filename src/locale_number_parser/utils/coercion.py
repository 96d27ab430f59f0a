"""Lenient string-to-number conversion.

Mirrors the native coercion of form frameworks: the longest leading numeric
prefix is converted and anything after it is ignored. Text without a numeric
prefix converts to zero. These helpers never raise.
"""

from __future__ import annotations

import re

_FLOAT_PREFIX_RE = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX_RE = re.compile(r"\s*([+-]?\d+)")
_INTEGER_RE = re.compile(r"[+-]?\d+")


def leading_float(text: str) -> float:
    """Convert the leading float literal of *text*, or return ``0.0``.

    >>> leading_float("12.5abc")
    12.5
    >>> leading_float("1e3x")
    1000.0
    >>> leading_float("abc")
    0.0
    """
    match = _FLOAT_PREFIX_RE.match(text)
    if match is None:
        return 0.0
    return float(match.group(1))


def leading_int(text: str) -> int:
    """Convert the leading integer literal of *text*, or return ``0``."""
    match = _INT_PREFIX_RE.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def is_plain_integer(text: str) -> bool:
    """True when *text* is an optionally signed run of digits and nothing else."""
    return _INTEGER_RE.fullmatch(text) is not None

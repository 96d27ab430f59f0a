"""Locale-tolerant parsing of user-entered numeric text."""

from locale_number_parser.parser import NumberParser

__version__ = "5.3.0"

__all__ = ["NumberParser", "__version__"]

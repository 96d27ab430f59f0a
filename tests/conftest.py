"""Shared test fixtures."""
import pytest
from unittest.mock import MagicMock
from locale_number_parser.formatting.base import LocaleFormattingError, LocaleNumberFormatter
from locale_number_parser.formatting.babel_formatter import BabelNumberFormatter
from locale_number_parser.formatting.unavailable import UnavailableNumberFormatter
from locale_number_parser.models.parser_config import SeparatorSymbols


@pytest.fixture
def mock_formatter():
    """Create a mock locale formatter with en_US symbols where every parse fails."""
    formatter = MagicMock(spec=LocaleNumberFormatter)
    formatter.available = True
    formatter.parse_integer.side_effect = LocaleFormattingError("not an integer")
    formatter.parse_scientific.side_effect = LocaleFormattingError("not scientific")
    formatter.parse_decimal.side_effect = LocaleFormattingError("not decimal")
    formatter.symbols.return_value = SeparatorSymbols(decimal=".", grouping=",")
    return formatter


@pytest.fixture
def unavailable_formatter():
    return UnavailableNumberFormatter()


@pytest.fixture
def babel_formatter():
    return BabelNumberFormatter()

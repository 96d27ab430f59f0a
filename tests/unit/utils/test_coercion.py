"""Test lenient numeric conversion."""
import pytest
from locale_number_parser.utils.coercion import is_plain_integer, leading_float, leading_int


class TestLeadingFloat:
    def test_plain_float(self):
        assert leading_float("1234.56") == 1234.56

    def test_trailing_garbage_ignored(self):
        assert leading_float("12abc") == 12.0

    def test_second_dot_stops_prefix(self):
        assert leading_float("1.2.3") == 1.2

    def test_exponent(self):
        assert leading_float("1.5e3") == 1500.0

    def test_dangling_exponent_ignored(self):
        assert leading_float("7e") == 7.0

    def test_negative(self):
        assert leading_float("-0.5") == -0.5

    def test_leading_dot(self):
        assert leading_float(".25") == 0.25

    def test_no_prefix_is_zero(self):
        assert leading_float("abc") == 0.0

    def test_empty_is_zero(self):
        assert leading_float("") == 0.0

    def test_lone_minus_is_zero(self):
        assert leading_float("-") == 0.0


class TestLeadingInt:
    def test_plain(self):
        assert leading_int("42") == 42

    def test_stops_at_dot(self):
        assert leading_int("42.9") == 42

    def test_negative(self):
        assert leading_int("-17xyz") == -17

    def test_no_prefix_is_zero(self):
        assert leading_int("x1") == 0


class TestIsPlainInteger:
    @pytest.mark.parametrize("text", ["0", "1234", "-5", "+5"])
    def test_integers(self, text):
        assert is_plain_integer(text)

    @pytest.mark.parametrize("text", ["", "-", "1e3", "12-34", "1.0"])
    def test_not_integers(self, text):
        assert not is_plain_integer(text)

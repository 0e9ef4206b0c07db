"""Tests for Number::toString layout and round-tripping."""

import math

import pytest

from jscoerce.evaluator_server.semantics import PrimitiveValue, number_to_string, to_number, to_string


class TestNumberToString:
    """Test decimal rendering of doubles."""

    @pytest.mark.parametrize(
        "number,expected",
        [
            (0.0, "0"),
            (-0.0, "0"),
            (1.0, "1"),
            (-42.0, "-42"),
            (100.0, "100"),
            (1.5, "1.5"),
            (0.5, "0.5"),
            (0.1, "0.1"),
            (0.1 + 0.2, "0.30000000000000004"),
            (123.456, "123.456"),
            (1e20, "100000000000000000000"),
            (2.0**60, "1152921504606847000"),
            (1e21, "1e+21"),
            (1.23e25, "1.23e+25"),
            (0.000001, "0.000001"),
            (0.0000015, "0.0000015"),
            (1e-7, "1e-7"),
            (1.5e-7, "1.5e-7"),
            (-1e-7, "-1e-7"),
            (5e-324, "5e-324"),
            (1.7976931348623157e308, "1.7976931348623157e+308"),
        ],
    )
    def test_layout(self, number, expected):
        """Test integer, fixed and exponential layouts."""
        assert number_to_string(number) == expected

    def test_special_values(self):
        """Test NaN and the infinities."""
        assert number_to_string(math.nan) == "NaN"
        assert number_to_string(math.inf) == "Infinity"
        assert number_to_string(-math.inf) == "-Infinity"


class TestRoundTrip:
    """Test that ToNumber(ToString(n)) recovers n."""

    @pytest.mark.parametrize(
        "number",
        [0.0, 1.0, -1.0, 0.1, 2.5, 1 / 3, 123456.789, 1e-7, 1e21, 9007199254740993.0, 6.02214076e23, -8.5e-12],
    )
    def test_round_trip(self, number):
        """Test round-tripping through the decimal rendering."""
        rendered = to_string(PrimitiveValue.number(number))
        assert to_number(PrimitiveValue.string(rendered)) == number

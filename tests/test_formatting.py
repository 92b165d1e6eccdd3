import math

import pytest

from zurich_perspectives.formatting import (
    format_chf,
    format_large_chf,
    format_number,
    format_percentage,
)


class TestFormatting:
    def test_chf(self):
        assert format_chf(85_000) == "CHF 85,000"
        assert format_chf(3464.6) == "CHF 3,465"

    @pytest.mark.parametrize("value", [None, math.nan, "abc"])
    def test_missing_values(self, value):
        assert format_chf(value) == "N/A"
        assert format_percentage(value) == "N/A"
        assert format_number(value) == "N/A"

    def test_percentage(self):
        assert format_percentage(4.08) == "4.1%"
        assert format_percentage(4.08, decimals=2) == "4.08%"

    def test_number(self):
        assert format_number(1234567) == "1,234,567"
        assert format_number(0.5, decimals=1) == "0.5"

    @pytest.mark.parametrize("value, expected", [
        (4_400_000_000, "CHF 4.4 bn"),
        (2_500_000, "CHF 2.5 m"),
        (250_000, "CHF 250k"),
        (9_500, "CHF 9,500"),
    ])
    def test_large_chf(self, value, expected):
        assert format_large_chf(value) == expected

"""Tests for the shared rounding and ratio helpers."""
import math

import pytest

from wellness_outcomes.shared.utils import round1, round_int, safe_mean, safe_percent, safe_ratio


class TestRound1:

    @pytest.mark.parametrize("value,expected", [
        (66.6666, 66.7),
        (0.25, 0.3),
        (-0.25, -0.3),
        (10.0, 10.0),
        (0.04, 0.0),
    ])
    def test_half_up(self, value, expected):
        assert round1(value) == expected

    def test_uses_exact_binary_value(self):
        # 1.45 is stored as 1.4499999999999999556...
        assert round1(1.45) == 1.4

    @pytest.mark.parametrize("value", [None, math.nan, math.inf, -math.inf])
    def test_unreportable_values(self, value):
        assert round1(value) is None


class TestRoundInt:

    @pytest.mark.parametrize("value,expected", [
        (2.5, 3),
        (-2.5, -2),
        (-0.5, 0),
        (-37.5, -37),
        (-2.6, -3),
        (7.2, 7),
        (3759.9999999, 3760),
        (0, 0),
    ])
    def test_halves_toward_positive_infinity(self, value, expected):
        assert round_int(value) == expected

    def test_returns_int(self):
        assert isinstance(round_int(12.4), int)

    def test_unreportable(self):
        assert round_int(None) is None
        assert round_int(math.nan) is None


class TestRatios:

    def test_safe_mean(self):
        assert safe_mean([1, 2, 3, 4]) == 2.5
        assert safe_mean(x for x in [5]) == 5.0

    def test_safe_mean_empty_is_zero(self):
        assert safe_mean([]) == 0.0

    def test_safe_ratio(self):
        assert safe_ratio(3, 4) == 0.75
        assert safe_ratio(3, 0) is None

    def test_safe_percent(self):
        assert safe_percent(1, 4) == 25.0
        assert safe_percent(0, 4) == 0.0
        assert safe_percent(1, 0) is None

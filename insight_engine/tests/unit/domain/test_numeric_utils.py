"""
Unit tests for the numeric helpers.
"""

import pytest

from insight_engine.domain.utils.numeric import clamp, mean, population_std_dev, round_half_up, weighted_mean


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, places, expected",
        [(2.345, 2, 2.35), (0.125, 2, 0.13), (58.3333, 2, 58.33), (2.5, 0, 3.0), (20.05, 1, 20.1)],
    )
    def test_ties_round_up(self, value, places, expected):
        assert round_half_up(value, places) == expected


class TestAggregates:
    def test_mean_of_nothing(self):
        assert mean([]) == 0.0

    def test_weighted_mean(self):
        assert weighted_mean([80, 40], [75, 25]) == 70.0
        assert weighted_mean([80], [0]) is None

    def test_population_std_dev(self):
        assert population_std_dev([2, 4, 4, 4, 5, 5, 7, 9]) == 2.0
        assert population_std_dev([70]) == 0.0

    def test_clamp(self):
        assert clamp(-3) == 0
        assert clamp(140) == 100
        assert clamp(55.5) == 55.5

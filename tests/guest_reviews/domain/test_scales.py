"""Tests for rating scale helpers."""

import pytest
from guest_reviews.shared.scales import mean, round_rating, to_display_scale


@pytest.mark.parametrize(
    "value, expected",
    [(4.25, 4.3), (4.35, 4.4), (4.24, 4.2), (0, 0.0), (5, 5.0)],
)
def test_round_rating_half_up(value, expected):
    assert round_rating(value) == expected


def test_to_display_scale():
    assert to_display_scale(10) == 5
    assert to_display_scale(9) == 4.5


def test_mean_of_nothing_is_zero():
    assert mean([]) == 0.0
    assert mean(iter([2, 4])) == 3.0

"""Tests for display formatting helpers."""

import pytest

from tycoonengine.helpers import format_number, format_percentage, format_time


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0"),
        (5555, "5,555"),
        (9999, "9,999"),
        (10_000, "1.0만"),
        (57_500, "5.8만"),
        (250_000_000, "2.5억"),
        (3_000_000_000_000, "3.0조"),
        (12.5, "12.5"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "seconds, expected",
    [(0, "0초"), (59, "59초"), (65, "1분 5초"), (3725, "1시간 2분"), (-3, "0초")],
)
def test_format_time(seconds, expected):
    assert format_time(seconds) == expected


def test_format_percentage():
    assert format_percentage(0.125) == "12.5%"
    assert format_percentage(1.0) == "100.0%"

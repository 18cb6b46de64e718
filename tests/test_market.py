"""Tests for symbol and time frame helpers."""

import pytest

from chartmanager.market import SymbolInfo, TimeFrame


@pytest.mark.parametrize(
    "time_frame, shorthand",
    [
        (TimeFrame.MINUTE, "m1"),
        (TimeFrame.MINUTE15, "m15"),
        (TimeFrame.HOUR, "h1"),
        (TimeFrame.HOUR4, "h4"),
        (TimeFrame.DAILY, "D1"),
        (TimeFrame.WEEKLY, "W1"),
    ],
)
def test_shorthand(time_frame, shorthand):
    assert time_frame.shorthand == shorthand


def test_time_frames_order_by_duration():
    assert TimeFrame.MINUTE5 <= TimeFrame.MINUTE15
    assert TimeFrame.HOUR > TimeFrame.MINUTE15
    assert sorted([TimeFrame.DAILY, TimeFrame.MINUTE, TimeFrame.HOUR]) == [
        TimeFrame.MINUTE,
        TimeFrame.HOUR,
        TimeFrame.DAILY,
    ]


def test_round_price_uses_digits():
    symbol = SymbolInfo(name="USDJPY", digits=3, pip_size=0.01)

    assert symbol.round_price(151.23456) == 151.235


def test_spread_in_pips():
    symbol = SymbolInfo(name="EURUSD", digits=5, pip_size=0.0001, bid=1.08001, ask=1.08016)

    assert symbol.spread_in_pips() == pytest.approx(1.5)


@pytest.mark.parametrize("digits, pip_size", [(-1, 0.0001), (5, 0), (5, -0.1)])
def test_invalid_symbol(digits, pip_size):
    with pytest.raises(ValueError):
        SymbolInfo(name="BAD", digits=digits, pip_size=pip_size)

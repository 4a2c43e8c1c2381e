from __future__ import annotations

import pytest

from streaming_ta.domain.data_item import DataItem
from streaming_ta.errors import DataItemIncompleteError, DataItemInvalidError


def test_data_item_fields():
    item = DataItem(open="2", high=3, low=1.0, close=2.5, volume=100)

    assert item.open == 2.0
    assert item.high == 3.0
    assert item.low == 1.0
    assert item.close == 2.5
    assert item.volume == 100.0


def test_data_item_volume_is_optional():
    item = DataItem(open=1.0, high=1.0, low=1.0, close=1.0)

    assert item.volume is None
    assert str(item) == "DataItem(OHLC=1.0/1.0/1.0/1.0)"


@pytest.mark.parametrize("missing", ["open", "high", "low", "close"])
def test_data_item_incomplete(missing):
    prices = {"open": 2.0, "high": 3.0, "low": 1.0, "close": 2.5}
    del prices[missing]

    with pytest.raises(DataItemIncompleteError, match=rf"\${missing}"):
        DataItem(**prices)


@pytest.mark.parametrize(
    "prices",
    [
        {"open": 2.0, "high": 1.5, "low": 1.0, "close": 1.2},  # high below open
        {"open": 2.0, "high": 3.0, "low": 2.5, "close": 2.8},  # low above open
        {"open": 2.0, "high": 3.0, "low": 1.0, "close": 3.5},  # close above high
        {"open": 2.0, "high": 3.0, "low": 1.0, "close": 0.5},  # close below low
    ],
)
def test_data_item_invalid_prices(prices):
    with pytest.raises(DataItemInvalidError):
        DataItem(**prices)


def test_data_item_negative_volume():
    with pytest.raises(DataItemInvalidError, match="volume"):
        DataItem(open=1.0, high=1.0, low=1.0, close=1.0, volume=-1)


def test_data_item_equality():
    a = DataItem(open=1.0, high=2.0, low=0.5, close=1.5, volume=10)
    b = DataItem(open="1", high="2", low="0.5", close="1.5", volume="10")

    assert a == b
    assert hash(a) == hash(b)
    assert a != DataItem(open=1.0, high=2.0, low=0.5, close=1.5)

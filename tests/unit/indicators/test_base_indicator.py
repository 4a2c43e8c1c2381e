from __future__ import annotations

import logging

import pytest

from streaming_ta.errors import InvalidParameterError
from streaming_ta.indicators.base import BaseIndicator
from streaming_ta.indicators.library.maximum import Maximum
from streaming_ta.indicators.protocol import Indicator


def test_indicator_protocol():
    """Verify that library indicators satisfy the `Indicator` protocol."""
    maximum = Maximum(3)

    assert isinstance(maximum, Indicator)
    assert isinstance(maximum, BaseIndicator)


def test_indexing_history():
    """Verify that [0] is the latest value and older values follow."""
    maximum = Maximum(period=2, max_history=3)

    maximum.update(10.0)  # Val: 10
    maximum.update(5.0)  # Val: 10
    maximum.update(3.0)  # Val: 5
    maximum.update(7.0)  # Val: 7

    assert maximum[0] == 7.0
    assert maximum[1] == 5.0
    assert maximum[2] == 10.0
    assert maximum[3] is None  # Dropped by $max_history
    assert maximum[-1] is None


def test_indexing_components():
    maximum = Maximum(4)
    maximum.update(2.0)

    assert maximum["period"] == 4
    assert maximum["name"] == "MAX(4)"
    assert maximum["value"] == 2.0
    assert maximum["_buffer"] is None
    assert maximum["update"] is None
    assert maximum["missing"] is None


def test_indexing_invalid_key_type():
    maximum = Maximum(2)

    with pytest.raises(TypeError, match="must be int or str"):
        maximum[1.5]


def test_invalid_max_history():
    with pytest.raises(InvalidParameterError, match=r"max_history.*< 1"):
        Maximum(period=3, max_history=0)


def test_repr_contains_state():
    maximum = Maximum(2)
    maximum.update(1.5)

    assert repr(maximum) == "Maximum(name='MAX(2)', value=1.5, updates=1)"


def test_update_and_reset_are_logged(caplog):
    maximum = Maximum(2)

    with caplog.at_level(logging.DEBUG, logger="streaming_ta.indicators.base"):
        maximum.update(1.0)
        maximum.reset()

    messages = [record.getMessage() for record in caplog.records]
    assert "Updated Indicator named 'MAX(2)' (count=1, val=1.0)" in messages
    assert "Reset Indicator named 'MAX(2)'" in messages

"""Adapters that turn price bars into the scalar samples indicators consume."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from streaming_ta.errors import DataItemIncompleteError
from streaming_ta.utils.numeric_tools import FloatLike


@runtime_checkable
class HasHigh(Protocol):
    @property
    def high(self) -> FloatLike: ...


@runtime_checkable
class HasLow(Protocol):
    @property
    def low(self) -> FloatLike: ...


def extract_field(item: Any, field: str) -> float:
    """Returns $field of $item as `float`.

    Plain numbers (and numeric strings) are passed through unchanged. The returned value
    is not validated, so NaN and infinities are returned as they are.

    Args:
        item: A numeric sample or an object exposing $field (e.g. a `DataItem`).
        field: Name of the attribute to read, usually "high" or "low".

    Returns:
        The sample as a primitive float.

    Raises:
        DataItemIncompleteError: If $item is neither numeric nor exposes $field.
    """
    # Data items expose the field directly
    if hasattr(item, field):
        result = float(getattr(item, field))
        return result

    try:
        result = float(item)
    except TypeError as e:
        raise DataItemIncompleteError(field, item) from e

    return result

from __future__ import annotations

from streaming_ta.errors import DataItemIncompleteError, DataItemInvalidError
from streaming_ta.utils.numeric_tools import FloatLike


class DataItem:
    """Represents one price bar with OHLC prices and optional volume.

    Indicators that read a single field (e.g. `Maximum` reads `high`, `Minimum` reads `low`)
    accept a `DataItem` anywhere they accept a number.

    Attributes:
        open (float): The opening price for the period.
        high (float): The highest price reached during the period.
        low (float): The lowest price reached during the period.
        close (float): The closing price for the period.
        volume (Optional[float]): The trading volume during the period (optional).
    """

    __slots__ = ("_open", "_high", "_low", "_close", "_volume")

    def __init__(
        self,
        open: FloatLike | None = None,
        high: FloatLike | None = None,
        low: FloatLike | None = None,
        close: FloatLike | None = None,
        volume: FloatLike | None = None,
    ):
        """Initialize a new data item.

        Args:
            open: The opening price for the period.
            high: The highest price reached during the period.
            low: The lowest price reached during the period.
            close: The closing price for the period.
            volume: The trading volume during the period (optional).

        Raises:
            DataItemIncompleteError: If any of the OHLC prices is missing.
            DataItemInvalidError: If OHLC price relationships are invalid or $volume is negative.
        """
        # Raise: all prices are required
        for field, price in (("open", open), ("high", high), ("low", low), ("close", close)):
            if price is None:
                raise DataItemIncompleteError(field, self)

        # Explicit type conversion for prices
        self._open = float(open)
        self._high = float(high)
        self._low = float(low)
        self._close = float(close)
        self._volume = float(volume) if volume is not None else None

        # Validate high price
        if self._high < self._open or self._high < self._low or self._high < self._close:
            raise DataItemInvalidError(f"$high price ({self._high}) must be greater than or equal to all other prices: open={self._open}, low={self._low}, close={self._close}")

        # Validate low price
        if self._low > self._open or self._low > self._close:
            raise DataItemInvalidError(f"$low price ({self._low}) must be less than or equal to all other prices: open={self._open}, high={self._high}, close={self._close}")

        # Validate volume
        if self._volume is not None and self._volume < 0:
            raise DataItemInvalidError(f"$volume ({self._volume}) must not be negative")

    @property
    def open(self) -> float:
        """Get the opening price."""
        return self._open

    @property
    def high(self) -> float:
        """Get the high price."""
        return self._high

    @property
    def low(self) -> float:
        """Get the low price."""
        return self._low

    @property
    def close(self) -> float:
        """Get the closing price."""
        return self._close

    @property
    def volume(self) -> float | None:
        """Get the volume."""
        return self._volume

    def __str__(self) -> str:
        volume_str = f", volume={self.volume}" if self.volume is not None else ""
        return f"{self.__class__.__name__}(OHLC={self.open}/{self.high}/{self.low}/{self.close}{volume_str})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(open={self.open}, high={self.high}, low={self.low}, close={self.close}, volume={self.volume})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, DataItem):
            return False
        return self.open == other.open and self.high == other.high and self.low == other.low and self.close == other.close and self.volume == other.volume

    def __hash__(self) -> int:
        return hash((self.open, self.high, self.low, self.close, self.volume))

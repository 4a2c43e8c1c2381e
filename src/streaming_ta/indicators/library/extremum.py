from __future__ import annotations

from typing import Any, Callable, ClassVar

from streaming_ta.errors import InvalidParameterError
from streaming_ta.indicators.base import BaseIndicator
from streaming_ta.indicators.inputs import extract_field

DEFAULT_PERIOD = 14


class ExtremumIndicator(BaseIndicator):
    """Tracks the extreme value (maximum or minimum) of the last $period samples.

    Samples live in a fixed circular buffer of $period slots, pre-filled with a sentinel
    that can never win a comparison. The buffer index of the current extreme is cached,
    so each update costs O(1). The whole buffer is rescanned only when the sample holding
    the extreme is overwritten (evicted) and the incoming sample does not beat it.

    Subclasses pick the polarity via `_is_more_extreme` (a strict comparison),
    `_sentinel`, and `_bar_field` (attribute read from data items such as bars).

    Note: NaN samples are accepted. Every comparison with NaN is False, so a NaN can
    stay in the buffer without ever being reported as the extreme. The exception is a
    rescan where no slot beats the sentinel: slot 0 is taken, whatever it holds.
    """

    _is_more_extreme: ClassVar[Callable[[float, float], bool]]
    _sentinel: ClassVar[float]
    _bar_field: ClassVar[str]
    _label: ClassVar[str]

    # region Init

    def __init__(self, period: int = DEFAULT_PERIOD, max_history: int = 100):
        """Initializes the indicator with a specific period.

        Args:
            period: Number of most recent samples the extreme is taken from.
            max_history: Number of last calculated values stored.

        Raises:
            InvalidParameterError: If $period is not a positive int.
        """
        # Raise: period must be an int
        if isinstance(period, bool) or not isinstance(period, int):
            raise InvalidParameterError("period", period, "is not an int", self.__class__.__name__)

        # Raise: period must be positive
        if period < 1:
            raise InvalidParameterError("period", period, "< 1", self.__class__.__name__)

        super().__init__(max_history)

        self._period = period
        self._buffer: list[float] = [self._sentinel] * period
        self._extreme_index = 0
        self._cursor = 0

    # endregion

    # region Protocol Indicator

    def update(self, value: Any) -> float:
        """Implements: Indicator.update

        Args:
            value: A numeric sample, or a data item exposing the polarity's field
                (`high` for maximum, `low` for minimum).

        Returns:
            The extreme of the last $period samples (fewer until the window fills).
        """
        return super().update(value)

    def reset(self) -> None:
        """Implements: Indicator.reset"""
        super().reset()
        for i in range(self._period):
            self._buffer[i] = self._sentinel
        self._extreme_index = 0
        self._cursor = 0

    # endregion

    # region Properties

    @property
    def period(self) -> int:
        return self._period

    @property
    def extreme_index(self) -> int:
        """Buffer slot currently holding the extreme."""
        return self._extreme_index

    @property
    def cursor(self) -> int:
        """Buffer slot the next sample is written to."""
        return self._cursor

    # endregion

    # region Utilities

    def _to_float(self, value: Any) -> float:
        result = extract_field(value, self._bar_field)
        return result

    def _calculate(self, value: float) -> float:
        """Computes the extreme after writing $value over the oldest sample."""
        buffer = self._buffer
        buffer[self._cursor] = value

        # Beating the incumbent takes precedence over the eviction rescan
        if self._is_more_extreme(value, buffer[self._extreme_index]):
            self._extreme_index = self._cursor
        elif self._extreme_index == self._cursor:
            # EVICTION: previous extreme was just overwritten
            self._extreme_index = self._find_extreme_index()

        self._cursor = self._cursor + 1 if self._cursor + 1 < self._period else 0

        result = buffer[self._extreme_index]
        return result

    def _find_extreme_index(self) -> int:
        """Scans the whole buffer; ties resolve to the lowest index."""
        best = self._sentinel
        result = 0

        for i, val in enumerate(self._buffer):
            if self._is_more_extreme(val, best):
                best = val
                result = i

        return result

    def _build_name(self) -> str:
        result = f"{self._label}({self._period})"
        return result

    # endregion

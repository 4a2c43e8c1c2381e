from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Any

from streaming_ta.errors import InvalidParameterError
from streaming_ta.indicators.protocol import Indicator

logger = logging.getLogger(__name__)


class BaseIndicator(Indicator, ABC):
    """Abstract base class for streaming technical indicators.

    Handles input conversion, result history, warmup tracking, and naming.
    """

    # region Init

    def __init__(self, max_history: int = 100):
        """Initializes the base indicator.

        Args:
            max_history: Number of recent results to store.
        """
        # Raise: max_history must be positive
        if max_history < 1:
            raise InvalidParameterError("max_history", max_history, "< 1", self.__class__.__name__)

        self._max_history = max_history
        self._values: deque[Any] = deque(maxlen=max_history)
        self._update_count = 0

    # endregion

    # region Protocol Indicator

    @property
    def name(self) -> str:
        return self._build_name()

    @property
    def value(self) -> Any | None:
        # Skip: no results in history yet
        if not self._values:
            return None

        result = self._values[0]
        return result

    @property
    def is_warmed_up(self) -> bool:
        return self._update_count >= self._compute_warmup_period()

    def update(self, value: Any) -> Any | None:
        """Implements: Indicator.update

        Updates the indicator with a new sample and returns the latest result.
        """
        # Performance Boundary: Convert to primitive float once at the entry point
        val_as_float = self._to_float(value)
        result = self._calculate(val_as_float)

        # Store result if ready; [0] is always the latest
        if result is not None:
            self._values.appendleft(result)

        self._update_count += 1
        logger.debug(f"Updated Indicator named '{self.name}' (count={self._update_count}, val={result})")

        return result

    def reset(self) -> None:
        """Implements: Indicator.reset

        Resets the indicator to its initial state.
        """
        self._values.clear()
        self._update_count = 0
        logger.info(f"Reset Indicator named '{self.name}'")

    def __getitem__(self, key: int | str) -> Any | None:
        """Implements: Indicator.__getitem__

        Accesses previous values by index or components by name.
        """
        if isinstance(key, int):
            # Skip: index out of range
            if key < 0 or key >= len(self._values):
                return None

            result = self._values[key]
            return result

        if isinstance(key, str):
            # Skip: only allow access to public, non-callable attributes
            if key.startswith("_"):
                return None

            result = getattr(self, key, None)

            # Skip: do not return methods via the indexer
            if callable(result):
                return None

            return result

        raise TypeError(f"Cannot call `__getitem__` because $key must be int or str, got {type(key).__name__}")

    # endregion

    # region Magic

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, value={self.value}, updates={self._update_count})"

    # endregion

    # region Utilities

    @abstractmethod
    def _calculate(self, value: float) -> Any | None:
        """Computes the core indicator value from the latest numeric $value."""

    def _to_float(self, value: Any) -> float:
        result = float(value)
        return result

    def _build_name(self) -> str:
        result = self.__class__.__name__
        return result

    def _compute_warmup_period(self) -> int:
        # Justification: Most indicators use a 'period' attribute for warmup
        period = getattr(self, "period", None)
        result = int(period) if period is not None else 1
        return result

    # endregion

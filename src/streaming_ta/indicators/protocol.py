from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Indicator(Protocol):
    """Protocol defining the public interface for streaming indicators.

    Indicators consume one sample at a time and maintain a history of calculated values.
    They support streaming-style indexing where [0] is the latest value.
    """

    @property
    def name(self) -> str:
        """Return the descriptive name of this indicator."""
        ...

    @property
    def period(self) -> int:
        """Return the number of most recent samples the indicator looks at."""
        ...

    @property
    def value(self) -> Any | None:
        """Return the latest calculated value, or None if nothing was calculated yet."""
        ...

    @property
    def is_warmed_up(self) -> bool:
        """Return True if the indicator has processed at least $period samples."""
        ...

    def update(self, value: Any) -> Any:
        """Update the indicator with a new sample and return the latest result.

        Args:
            value: The latest numeric value, or a data item the indicator knows how to read.
        """
        ...

    def reset(self) -> None:
        """Reset the indicator to its initial state."""
        ...

    def __getitem__(self, key: int | str) -> Any | None:
        """Access previous values (int index) or components (str key)."""
        ...

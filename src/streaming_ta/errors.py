"""Error types raised by indicators and data items."""

from __future__ import annotations


class TaError(Exception):
    """Base class for all errors raised by this package."""


class InvalidParameterError(TaError, ValueError):
    """Raised when an indicator is constructed with an invalid parameter."""

    def __init__(self, parameter: str, value: object, reason: str, owner: str):
        self.parameter = parameter
        self.value = value
        self.reason = reason

        super().__init__(f"Cannot create `{owner}` because ${parameter} ({value}) {reason}")


class DataItemIncompleteError(TaError):
    """Raised when a data item lacks a field required by the consumer."""

    def __init__(self, field: str, item: object):
        self.field = field
        self.item = item

        super().__init__(f"Cannot read ${field} because it is missing on `{type(item).__name__}`")


class DataItemInvalidError(TaError, ValueError):
    """Raised when data item fields are inconsistent (e.g. $low above $high)."""

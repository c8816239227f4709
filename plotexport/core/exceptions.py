# plotexport/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all plotexport exceptions."""


# ---- Validation / construction errors ----
class InvalidTime(CoreError):
    """Raised when a Time stamp is constructed with invalid inputs."""


class InvalidDatum(CoreError):
    """Raised when a Datum is constructed with invalid inputs."""


class InvalidDataset(CoreError):
    """Raised when a Dataset is constructed with invalid inputs."""


# ---- Export errors (also behave like ValueError for callers) ----
class ConfigurationError(CoreError, ValueError):
    """Raised for an unknown axis kind, policy or an invalid layout."""


class DegenerateRangeError(CoreError, ValueError):
    """Raised when the bounding box collapses to zero width or height."""

    def __init__(self, axis: str, value: float) -> None:
        self.axis = axis
        self.value = value
        super().__init__(
            f"Cannot scale the {axis} axis: every finite {axis} coordinate equals {value!r}."
        )


class RangeOverflowError(CoreError, ValueError):
    """Raised when an axis range is too wide to be represented as a float."""

    def __init__(self, axis: str, low: float, high: float) -> None:
        self.axis = axis
        self.low = low
        self.high = high
        super().__init__(
            f"Cannot scale the {axis} axis: the range [{low!r}, {high!r}] overflows."
        )

# plotexport/core/dataset.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import Iterator, Sequence

import numpy as np

from .exceptions import ConfigurationError, InvalidDataset, InvalidDatum
from .time import Time


class AxisKind(str, Enum):
    """What the plot's x axis represents. Only affects the displayed column name."""

    TIMESTAMP = "timestamp"
    INDEX = "index"
    CUSTOM = "custom"
    CURRENT_CUSTOM = "currentCustom"

    @classmethod
    def parse(cls, value: "AxisKind | str") -> "AxisKind":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            allowed = ", ".join(k.value for k in cls)
            raise ConfigurationError(
                f"Unknown axis kind {value!r}; expected one of: {allowed}"
            ) from e


def _is_real(v: object) -> bool:
    return isinstance(v, Real) and not isinstance(v, bool)


@dataclass(frozen=True, slots=True)
class Datum:
    """
    One plotted sample.

    - x, y: plot coordinates (may be non-finite; the renderer skips those)
    - value: raw message value shown in the table (number or text)
    - receive_time / header_stamp: when the message arrived / its header stamp
    """
    x: float
    y: float
    value: float | str
    receive_time: Time
    header_stamp: Time | None = None

    def __post_init__(self) -> None:
        if not _is_real(self.x) or not _is_real(self.y):
            raise InvalidDatum("Datum.x and Datum.y must be real numbers.")
        if not isinstance(self.value, str) and not _is_real(self.value):
            raise InvalidDatum("Datum.value must be a number or a string.")
        if not isinstance(self.receive_time, Time):
            raise InvalidDatum("Datum.receive_time must be a Time instance.")
        if self.header_stamp is not None and not isinstance(self.header_stamp, Time):
            raise InvalidDatum("Datum.header_stamp must be a Time instance or None.")


@dataclass(frozen=True, slots=True)
class Dataset:
    """
    An ordered, optionally labelled sequence of Datum (one plotted series).

    Immutable snapshot: `data` is frozen to a tuple and its order is kept
    in every export.
    """
    label: str | None = None
    data: Sequence[Datum] = field(default_factory=tuple, repr=False)

    def __post_init__(self) -> None:
        if self.label is not None and not isinstance(self.label, str):
            raise InvalidDataset("Dataset.label must be a string or None.")
        if isinstance(self.data, (str, bytes)) or not isinstance(self.data, Sequence):
            raise InvalidDataset("Dataset.data must be a sequence of Datum.")

        frozen = tuple(self.data)
        for d in frozen:
            if not isinstance(d, Datum):
                raise InvalidDataset("Dataset.data items must be Datum instances.")
        object.__setattr__(self, "data", frozen)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[Datum]:
        return iter(self.data)

    @property
    def is_empty(self) -> bool:
        return len(self.data) == 0

    @property
    def x(self) -> np.ndarray:
        return np.fromiter((float(d.x) for d in self.data), dtype=float, count=len(self.data))

    @property
    def y(self) -> np.ndarray:
        return np.fromiter((float(d.y) for d in self.data), dtype=float, count=len(self.data))

    def to_numpy(self) -> tuple[np.ndarray, np.ndarray]:
        return self.x, self.y

# plotexport/core/time.py
from __future__ import annotations

from dataclasses import dataclass

from .exceptions import InvalidTime

NSEC_PER_SEC = 1_000_000_000


@dataclass(frozen=True, slots=True)
class Time:
    """ROS-style stamp: whole seconds plus nanoseconds."""

    sec: int
    nsec: int = 0

    def __post_init__(self) -> None:
        for name in ("sec", "nsec"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidTime(f"Time.{name} must be an int, got {type(v).__name__}.")
        if not 0 <= self.nsec < NSEC_PER_SEC:
            raise InvalidTime(f"Time.nsec must be in [0, {NSEC_PER_SEC}), got {self.nsec}.")

    def to_seconds(self) -> float:
        return self.sec + self.nsec / NSEC_PER_SEC


def format_time_raw(stamp: Time) -> str:
    """Format a stamp as ``"<sec>.<nsec>"`` with nanoseconds zero-padded to 9 digits."""
    return f"{stamp.sec}.{stamp.nsec:09d}"

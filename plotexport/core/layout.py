# plotexport/core/layout.py
from __future__ import annotations

from dataclasses import dataclass, fields, replace as dc_replace
from enum import Enum

from .exceptions import ConfigurationError


class DegeneratePolicy(str, Enum):
    """What to do when every finite point shares the same x (or y)."""

    RAISE = "raise"
    PAD = "pad"

    @classmethod
    def parse(cls, value: "DegeneratePolicy | str") -> "DegeneratePolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown degenerate-range policy {value!r}; expected 'raise' or 'pad'"
            ) from e


@dataclass(frozen=True, slots=True)
class SvgLayout:
    """
    Geometry and styling of an exported SVG plot.

    Defaults reproduce the plot panel's export: a 500x500 canvas with a
    40px margin, 11 ticks per axis and at most 1000 points per series.
    Smaller canvases are handy in tests, e.g. ``SvgLayout(width=120, height=120, margin=10)``.
    """
    width: int = 500
    height: int = 500
    margin: int = 40
    tick_size: int = 5
    tick_intervals: int = 10
    max_points: int = 1000
    font_size: int = 12
    stroke_width: float = 2
    stroke_opacity: float = 0.712203
    stroke_color: str = "#000000"
    axis_color: str = "#000000"
    x_label: str = "x"
    y_label: str = "y"
    x_precision: int = 1
    y_precision: int = 2
    on_degenerate: DegeneratePolicy = DegeneratePolicy.RAISE

    def __post_init__(self) -> None:
        for name in ("width", "height", "max_points", "tick_intervals", "font_size"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int) or v < 1:
                raise ConfigurationError(f"SvgLayout.{name} must be a positive int, got {v!r}.")
        for name in ("margin", "tick_size", "x_precision", "y_precision"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int) or v < 0:
                raise ConfigurationError(f"SvgLayout.{name} must be a non-negative int, got {v!r}.")

        if self.width - 2 * self.margin <= 0 or self.height - 2 * self.margin <= 0:
            raise ConfigurationError(
                f"SvgLayout margin {self.margin} leaves no drawable area on a "
                f"{self.width}x{self.height} canvas."
            )
        if self.stroke_width <= 0:
            raise ConfigurationError("SvgLayout.stroke_width must be > 0.")
        if not 0.0 <= self.stroke_opacity <= 1.0:
            raise ConfigurationError("SvgLayout.stroke_opacity must be in [0, 1].")

        object.__setattr__(self, "on_degenerate", DegeneratePolicy.parse(self.on_degenerate))

    @property
    def drawable_width(self) -> int:
        return self.width - 2 * self.margin

    @property
    def drawable_height(self) -> int:
        return self.height - 2 * self.margin

    def replace(self, **changes) -> "SvgLayout":
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigurationError(f"Unknown SvgLayout field(s): {', '.join(sorted(unknown))}")
        return dc_replace(self, **changes)

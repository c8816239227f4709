# plotexport/core/bounds.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from .dataset import Dataset
from .exceptions import CoreError, DegenerateRangeError, RangeOverflowError
from .layout import DegeneratePolicy

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned box around every plotted point."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def x_span(self) -> float:
        return self.x_max - self.x_min

    @property
    def y_span(self) -> float:
        return self.y_max - self.y_min

    @property
    def is_degenerate(self) -> bool:
        return not (self.x_min < self.x_max and self.y_min < self.y_max)


@dataclass(frozen=True, slots=True)
class BoundsCheck:
    """
    Outcome of validating datasets before rendering.

    - ok: True when rendering may proceed
    - bounds: box to scale against, None when there is nothing finite to draw
    - errors: why rendering may not proceed (empty when ok)
    - skipped_points: points left out because x or y is NaN/inf
    """
    bounds: Bounds | None
    errors: tuple[CoreError, ...] = field(default_factory=tuple)
    skipped_points: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        if self.errors:
            raise self.errors[0]


def compute_bounds(datasets: Iterable[Dataset]) -> tuple[Bounds | None, int]:
    """
    Global min/max of x and y across every finite point of every dataset.

    Returns (bounds, skipped) where `skipped` counts points with a
    non-finite coordinate. bounds is None if no finite point exists.
    """
    xs: list[np.ndarray] = []
    ys: list[np.ndarray] = []
    for ds in datasets:
        if ds.is_empty:
            continue
        x, y = ds.to_numpy()
        xs.append(x)
        ys.append(y)

    if not xs:
        return None, 0

    x = np.concatenate(xs)
    y = np.concatenate(ys)
    finite = np.isfinite(x) & np.isfinite(y)
    skipped = int(x.size - np.count_nonzero(finite))
    if skipped:
        _LOGGER.warning("Ignoring %d point(s) with non-finite coordinates", skipped)
    if not finite.any():
        return None, skipped

    x = x[finite]
    y = y[finite]
    bounds = Bounds(
        x_min=float(x.min()),
        x_max=float(x.max()),
        y_min=float(y.min()),
        y_max=float(y.max()),
    )
    return bounds, skipped


def _pad(value: float) -> tuple[float, float]:
    half = 0.5 * max(1.0, abs(value))
    return value - half, value + half


def _overflow_errors(bounds: Bounds) -> list[CoreError]:
    errors: list[CoreError] = []
    # Finite endpoints can still be too far apart for x_max - x_min.
    if not np.isfinite(bounds.x_span):
        errors.append(RangeOverflowError("x", bounds.x_min, bounds.x_max))
    if not np.isfinite(bounds.y_span):
        errors.append(RangeOverflowError("y", bounds.y_min, bounds.y_max))
    return errors


def check_bounds(
    datasets: Iterable[Dataset],
    on_degenerate: DegeneratePolicy | str = DegeneratePolicy.RAISE,
) -> BoundsCheck:
    """
    Validate datasets for rendering and settle the box to scale against.

    A box that collapses on one axis is either reported as a
    DegenerateRangeError (RAISE) or widened around the constant value (PAD).
    A range wider than the largest float (before or after padding) is
    always reported as a RangeOverflowError, whatever the policy.
    """
    policy = DegeneratePolicy.parse(on_degenerate)
    bounds, skipped = compute_bounds(datasets)
    if bounds is None:
        return BoundsCheck(bounds=None, skipped_points=skipped)

    overflow = _overflow_errors(bounds)
    if overflow:
        return BoundsCheck(bounds=bounds, errors=tuple(overflow), skipped_points=skipped)

    if not bounds.is_degenerate:
        return BoundsCheck(bounds=bounds, skipped_points=skipped)

    if policy is DegeneratePolicy.RAISE:
        errors: list[CoreError] = []
        if bounds.x_span == 0:
            errors.append(DegenerateRangeError("x", bounds.x_min))
        if bounds.y_span == 0:
            errors.append(DegenerateRangeError("y", bounds.y_min))
        return BoundsCheck(bounds=bounds, errors=tuple(errors), skipped_points=skipped)

    x_min, x_max = (bounds.x_min, bounds.x_max) if bounds.x_span > 0 else _pad(bounds.x_min)
    y_min, y_max = (bounds.y_min, bounds.y_max) if bounds.y_span > 0 else _pad(bounds.y_min)
    padded = Bounds(x_min=x_min, x_max=x_max, y_min=y_min, y_max=y_max)
    _LOGGER.debug("Padded degenerate bounds %s to %s", bounds, padded)
    return BoundsCheck(
        bounds=padded,
        errors=tuple(_overflow_errors(padded)),
        skipped_points=skipped,
    )

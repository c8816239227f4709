# plotexport/core/__init__.py
"""
Core domain objects for plotexport.

This module defines the read-only plot data model and what the exporters
need to agree on before producing any output:
- Time: message stamp (sec + nsec)
- Datum: one plotted sample
- Dataset: labelled, ordered series of samples
- AxisKind: what the x axis represents
- SvgLayout: canvas geometry and styling of the SVG export
- Bounds / check_bounds: bounding box and the pre-render validation step

The core layer is independent from the output formats.
"""

from .time import Time, format_time_raw
from .dataset import AxisKind, Datum, Dataset
from .layout import DegeneratePolicy, SvgLayout
from .bounds import Bounds, BoundsCheck, check_bounds, compute_bounds
from .exceptions import (
    CoreError,
    InvalidTime,
    InvalidDatum,
    InvalidDataset,
    ConfigurationError,
    DegenerateRangeError,
    RangeOverflowError,
)


__all__ = [
    # time
    "Time",
    "format_time_raw",

    # data model
    "AxisKind",
    "Datum",
    "Dataset",

    # rendering configuration
    "DegeneratePolicy",
    "SvgLayout",
    "Bounds",
    "BoundsCheck",
    "check_bounds",
    "compute_bounds",

    # exceptions
    "CoreError",
    "InvalidTime",
    "InvalidDatum",
    "InvalidDataset",
    "ConfigurationError",
    "DegenerateRangeError",
    "RangeOverflowError",
]

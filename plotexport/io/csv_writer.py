# plotexport/io/csv_writer.py
from __future__ import annotations

import csv
import io
import logging
import math
import re
from typing import Callable, Iterable

import numpy as np

from plotexport.core import AxisKind, Datum, Dataset, Time, format_time_raw

_LOGGER = logging.getLogger(__name__)

TimeFormatter = Callable[[Time], str]

_COLUMN_NAMES: dict[AxisKind, str] = {
    AxisKind.TIMESTAMP: "elapsed time",
    AxisKind.INDEX: "index",
    AxisKind.CUSTOM: "x value",
    AxisKind.CURRENT_CUSTOM: "x value",
}

HEADER_TAIL = ("receive time", "header.stamp", "topic", "value")

_EXPONENT_PADDING = re.compile(r"e([+-])0*(\d)")


def csv_column_name(axis_kind: AxisKind | str) -> str:
    """Name of the first (x) column for the given axis kind."""
    return _COLUMN_NAMES[AxisKind.parse(axis_kind)]


def _format_number(v: float | int) -> str:
    """Print a number the way the plot panel does (``10.0`` -> ``"10"``)."""
    if isinstance(v, int):
        return str(v)
    f = float(v)
    if math.isnan(f):
        return "NaN"
    if math.isinf(f):
        return "Infinity" if f > 0 else "-Infinity"
    if f.is_integer() and abs(f) < 1e21:
        return str(int(f))
    if 1e-6 <= abs(f) < 1e21:
        return np.format_float_positional(f, trim="-")
    # JS exponent form: "1e-7", "1.5e+22"
    return _EXPONENT_PADDING.sub(r"e\1\2", repr(f))


def _format_field(v: object) -> str:
    if v is None:
        return ""
    if isinstance(v, str):
        return v
    return _format_number(v)  # type: ignore[arg-type]


def _row(label: str | None, datum: Datum, format_time: TimeFormatter) -> list[str]:
    stamp = format_time(datum.header_stamp) if datum.header_stamp is not None else ""
    return [
        _format_field(datum.x),
        format_time(datum.receive_time),
        stamp,
        _format_field(label),
        _format_field(datum.value),
    ]


def generate_csv(
    datasets: Iterable[Dataset],
    axis_kind: AxisKind | str,
    *,
    format_time: TimeFormatter = format_time_raw,
) -> str:
    """
    Serialize datasets to a CSV table.

    One header row, then one row per datum: datasets in input order, points
    in input order. Fields containing a comma, quote or line break are
    quoted; everything else is written verbatim. Rows are separated by
    ``"\\n"`` with no trailing newline.

    Raises ConfigurationError for an unknown axis kind.
    """
    column = csv_column_name(axis_kind)

    buf = io.StringIO()
    writer = csv.writer(buf, delimiter=",", lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow([column, *HEADER_TAIL])

    n_rows = 0
    for ds in datasets:
        for datum in ds.data:
            writer.writerow(_row(ds.label, datum, format_time))
            n_rows += 1

    _LOGGER.debug("Encoded %d CSV row(s) with x column %r", n_rows, column)
    # Drop the terminator written after the last row.
    return buf.getvalue()[:-1]

# plotexport/io/download.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Protocol

from plotexport.core import AxisKind, Dataset, DegeneratePolicy, SvgLayout, format_time_raw

from plotexport.io.csv_writer import TimeFormatter, generate_csv
from plotexport.io.svg_writer import generate_svg

_LOGGER = logging.getLogger(__name__)

CSV_FILE_NAME = "plot_data.csv"
CSV_MIME_TYPE = "text/csv;charset=utf-8;"
SVG_FILE_NAME = "plot_data.svg"
SVG_MIME_TYPE = "image/svg+xml;charset=utf-8;"


@dataclass(frozen=True, slots=True)
class DownloadFile:
    """Encoded export ready to be saved by the host application."""

    content: str
    file_name: str
    mime_type: str


class DownloadSink(Protocol):
    """Host-side collaborator that saves files (save dialog, browser download, ...)."""

    def __call__(self, files: list[DownloadFile]) -> None:
        ...


def _send(sink: DownloadSink, file: DownloadFile) -> None:
    _LOGGER.info("Exporting %s (%s, %d chars)", file.file_name, file.mime_type, len(file.content))
    sink([file])


def download_csv(
    datasets: Iterable[Dataset],
    axis_kind: AxisKind | str,
    sink: DownloadSink,
    *,
    format_time: TimeFormatter = format_time_raw,
) -> None:
    """Encode datasets as CSV and hand ``plot_data.csv`` to `sink`.

    Encoding errors propagate before the sink is called.
    """
    content = generate_csv(datasets, axis_kind, format_time=format_time)
    _send(sink, DownloadFile(content=content, file_name=CSV_FILE_NAME, mime_type=CSV_MIME_TYPE))


def download_svg(
    datasets: Iterable[Dataset],
    sink: DownloadSink,
    *,
    layout: SvgLayout | None = None,
    on_degenerate: DegeneratePolicy | str | None = None,
) -> None:
    """Render datasets as SVG and hand ``plot_data.svg`` to `sink`.

    Encoding errors propagate before the sink is called.
    """
    content = generate_svg(datasets, layout=layout, on_degenerate=on_degenerate)
    _send(sink, DownloadFile(content=content, file_name=SVG_FILE_NAME, mime_type=SVG_MIME_TYPE))

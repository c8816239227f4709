# plotexport/io/svg_writer.py
from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from plotexport.core import (
    Bounds,
    Dataset,
    DegeneratePolicy,
    SvgLayout,
    check_bounds,
)

_LOGGER = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'

# Tick labels when there is nothing finite to draw.
_PLACEHOLDER_BOUNDS = Bounds(x_min=0.0, x_max=1.0, y_min=0.0, y_max=1.0)


def _svg_escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def _num(v: float) -> str:
    """Compact coordinate: at most 3 decimals, no trailing zeros."""
    s = f"{v:.3f}".rstrip("0").rstrip(".")
    return "0" if s == "-0" else s


def resample_factor(n_points: int, max_points: int) -> int:
    """Stride that keeps at most `max_points` of `n_points` samples."""
    if max_points < 1:
        raise ValueError("max_points must be >= 1")
    return max(1, -(-n_points // max_points))


def downsample(dataset: Dataset, max_points: int) -> tuple[np.ndarray, np.ndarray]:
    """
    Keep every k-th point (k = resample_factor), always starting at index 0.

    Plain stride decimation: peaks that fall between kept samples are lost.
    """
    x, y = dataset.to_numpy()
    step = resample_factor(x.size, max_points)
    return x[::step], y[::step]


def map_points(
    x: np.ndarray,
    y: np.ndarray,
    bounds: Bounds,
    layout: SvgLayout,
) -> np.ndarray:
    """
    Map data coordinates to canvas coordinates, shape (n, 2).

    y is flipped so larger values draw higher. Points with a non-finite
    coordinate are dropped.
    """
    x_scale = layout.drawable_width / bounds.x_span
    y_scale = layout.drawable_height / bounds.y_span

    px = layout.margin + (x - bounds.x_min) * x_scale
    py = layout.height - layout.margin - (y - bounds.y_min) * y_scale
    pts = np.column_stack((px, py))
    return pts[np.isfinite(pts).all(axis=1)]


def _line(x1: float, y1: float, x2: float, y2: float, color: str) -> str:
    return (
        f'<line x1="{_num(x1)}" y1="{_num(y1)}" x2="{_num(x2)}" y2="{_num(y2)}" '
        f'stroke="{_svg_escape(color)}" stroke-width="1"/>'
    )


def _text(x: float, y: float, label: str, layout: SvgLayout, *, anchor: str,
          baseline: str, transform: str | None = None) -> str:
    extra = f' transform="{transform}"' if transform else ""
    return (
        f'<text x="{_num(x)}" y="{_num(y)}" text-anchor="{anchor}" '
        f'dominant-baseline="{baseline}" fill="{_svg_escape(layout.axis_color)}" '
        f'font-size="{layout.font_size}"{extra}>{_svg_escape(label)}</text>'
    )


def _axes(layout: SvgLayout) -> list[str]:
    w, h, m = layout.width, layout.height, layout.margin
    return [
        _line(m, h - m, w - m, h - m, layout.axis_color),
        _text(w / 2, h - 5, layout.x_label, layout, anchor="middle", baseline="hanging"),
        _line(m, m, m, h - m, layout.axis_color),
        _text(
            5, h / 2, layout.y_label, layout, anchor="start", baseline="middle",
            transform=f"rotate(-90 5 {_num(h / 2)})",
        ),
    ]


def _ticks(bounds: Bounds, layout: SvgLayout) -> list[str]:
    h, m, t = layout.height, layout.margin, layout.tick_size
    n = layout.tick_intervals
    x_step = layout.drawable_width / n
    y_step = layout.drawable_height / n

    out = ['<g id="x-ticks">']
    for i in range(n + 1):
        pos = m + i * x_step
        value = bounds.x_min + bounds.x_span * (i / n)
        out.append(_line(pos, h - m, pos, h - m + t, layout.axis_color))
        out.append(_text(pos, h - m + t + 10, f"{value:.{layout.x_precision}f}", layout,
                         anchor="middle", baseline="hanging"))
    out.append("</g>")

    out.append('<g id="y-ticks">')
    for i in range(n + 1):
        pos = h - m - i * y_step
        value = bounds.y_min + bounds.y_span * (i / n)
        out.append(_line(m - t, pos, m, pos, layout.axis_color))
        out.append(_text(m - t - 5, pos, f"{value:.{layout.y_precision}f}", layout,
                         anchor="end", baseline="middle"))
    out.append("</g>")
    return out


def _polyline(dataset: Dataset, bounds: Bounds, layout: SvgLayout) -> str | None:
    x, y = downsample(dataset, layout.max_points)
    pts = map_points(x, y, bounds, layout)
    if len(pts) == 0:
        return None

    points = " ".join(f"{_num(px)},{_num(py)}" for px, py in pts)
    head = (
        f'<polyline fill="none" stroke="{_svg_escape(layout.stroke_color)}" '
        f'stroke-width="{layout.stroke_width}" stroke-opacity="{layout.stroke_opacity}" '
        f'points="{points}"'
    )
    if dataset.label:
        return f"{head}><title>{_svg_escape(dataset.label)}</title></polyline>"
    return f"{head}/>"


def generate_svg(
    datasets: Iterable[Dataset],
    *,
    layout: SvgLayout | None = None,
    on_degenerate: DegeneratePolicy | str | None = None,
) -> str:
    """
    Render datasets as a standalone SVG document.

    All series share one coordinate transform derived from the global
    bounding box. Each series is decimated to at most `layout.max_points`
    and drawn as one polyline, in input order (later series on top).

    With no finite point to draw the result is a valid document with axes
    and ticks only. A box with zero width or height raises
    DegenerateRangeError unless the policy (argument, else
    `layout.on_degenerate`) is PAD. A range too wide to represent raises
    RangeOverflowError.
    """
    layout = layout or SvgLayout()
    policy = layout.on_degenerate if on_degenerate is None else DegeneratePolicy.parse(on_degenerate)
    datasets = list(datasets)

    check = check_bounds(datasets, policy)
    check.raise_for_errors()
    bounds = check.bounds or _PLACEHOLDER_BOUNDS

    elements: list[str] = [
        XML_DECLARATION,
        f'<svg xmlns="{SVG_NS}" version="1.1" width="{layout.width}" height="{layout.height}" '
        f'viewBox="0 0 {layout.width} {layout.height}">',
    ]
    elements.extend(_axes(layout))
    elements.extend(_ticks(bounds, layout))

    if check.bounds is not None:
        elements.append('<g id="series">')
        for ds in datasets:
            poly = _polyline(ds, bounds, layout)
            if poly is not None:
                elements.append(poly)
        elements.append("</g>")

    elements.append("</svg>")

    _LOGGER.debug(
        "Rendered %d dataset(s) into a %dx%d SVG, bounds=%s",
        len(datasets), layout.width, layout.height, check.bounds,
    )
    return "\n".join(elements) + "\n"

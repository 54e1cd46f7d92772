"""Schema types for declarative chart configuration.

The demo chart is described by a `ChartConfig` value instead of hand-written
Highcharts options. Configs are frozen: updates build a new value, so the
rendering layer always receives a fresh object it can diff against the last.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal

AxisType = Literal["linear", "logarithmic"]

AXIS_TYPES: Final[tuple[AxisType, ...]] = ("linear", "logarithmic")

SeriesType = Literal["line"]

DashStyle = Literal[
    "Solid",
    "ShortDash",
    "ShortDot",
    "ShortDashDot",
    "Dot",
    "Dash",
    "LongDash",
    "DashDot",
    "LongDashDot",
]


@dataclass(frozen=True, slots=True)
class ChartLayout:
    """Fixed chart sizing in pixels."""

    width: int
    height: int


@dataclass(frozen=True, slots=True)
class PlotBand:
    """A labelled highlighted range along an axis.

    Args:
        label: Text drawn inside the band.
        color: CSS color of the band.
        start: Start of the band (axis units, inclusive).
        end: End of the band (axis units, inclusive).
    """

    label: str
    color: str
    start: float
    end: float


@dataclass(frozen=True, slots=True)
class PlotLine:
    """A single highlighted value along an axis."""

    color: str
    value: float
    width: int


@dataclass(frozen=True, slots=True)
class ColorZone:
    """Color applied to a series up to (excluding) a threshold value."""

    value: float
    color: str


@dataclass(frozen=True, slots=True)
class ChartSeries:
    """A named data series.

    Args:
        name: Legend name. Names need not be unique.
        data: Ordered (x, y) points.
        color: Line color.
        dash_style: Optional Highcharts dash style.
        zones: Optional value-based color overrides, ascending by threshold.
        series_type: Series type; the demo only draws lines.
    """

    name: str
    data: tuple[tuple[int, int], ...]
    color: str
    dash_style: DashStyle | None = None
    zones: tuple[ColorZone, ...] = ()
    series_type: SeriesType = "line"


@dataclass(frozen=True, slots=True)
class YAxisConfig:
    """Y-axis definition.

    On a logarithmic axis `tick_interval` is a power spacing: 1 puts a tick on
    0.1, 1, 10, 100; 2 on 0.1, 10, 1000; 0.2 on 0.1, 0.2, 0.4, ..., 1, 2, 4.
    `None` lets the charting library choose ticks.
    """

    axis_type: AxisType
    title: str
    tick_interval: float | None
    grid_line_width: int
    opposite: bool
    min: float
    max: float


@dataclass(frozen=True, slots=True)
class XAxisConfig:
    """X-axis definition (weeks)."""

    title: str
    tick_interval: float
    plot_bands: tuple[PlotBand, ...] = ()
    plot_lines: tuple[PlotLine, ...] = ()


@dataclass(frozen=True, slots=True)
class ChartConfig:
    """Declarative definition of the demo chart.

    Args:
        title: Chart title.
        subtitle: Chart subtitle.
        layout: Fixed width/height.
        y_axis: Value axis; rebuilt whenever axis type or tick interval changes.
        x_axis: Week axis with its annotations.
        series: Series drawn on the chart, in legend order.
        data_labels: Whether line points show their values.
    """

    title: str
    subtitle: str
    layout: ChartLayout
    y_axis: YAxisConfig
    x_axis: XAxisConfig
    series: tuple[ChartSeries, ...]
    data_labels: bool = True

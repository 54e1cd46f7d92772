"""Render ChartConfig values into Highcharts options payloads."""

from __future__ import annotations

from typing import Any, TypedDict

from analysis.labels import ordinal_week_label

from .schema import ChartConfig, ChartSeries, XAxisConfig, YAxisConfig


class AxisOptions(TypedDict, total=False):
    """A Highcharts axis options object."""

    type: str
    title: dict[str, str]
    tickInterval: float
    gridLineWidth: int
    opposite: bool
    min: float
    max: float
    plotBands: list[dict[str, Any]]
    plotLines: list[dict[str, Any]]
    labels: dict[str, Any]


class SeriesOptions(TypedDict, total=False):
    """A Highcharts series options object."""

    name: str
    type: str
    data: list[list[int]]
    color: str
    dashStyle: str
    zones: list[dict[str, Any]]


class HighchartsOptions(TypedDict):
    """The full options object passed to `Highcharts.chart`."""

    chart: dict[str, int]
    title: dict[str, str]
    subtitle: dict[str, str]
    plotOptions: dict[str, Any]
    yAxis: AxisOptions
    xAxis: AxisOptions
    series: list[SeriesOptions]


class ChartPayload(TypedDict):
    """Options plus the precomputed X-axis labels used by the page formatter."""

    options: HighchartsOptions
    xAxisLabels: dict[str, str]


def render_chart_options(config: ChartConfig) -> HighchartsOptions:
    """Render a ChartConfig as a Highcharts options tree.

    A new dict tree is built on every call; callers may mutate the result.

    Args:
        config: ChartConfig to render.

    Returns:
        HighchartsOptions ready for JSON serialization.
    """

    return {
        "chart": {"width": config.layout.width, "height": config.layout.height},
        "title": {"text": config.title},
        "subtitle": {"text": config.subtitle},
        "plotOptions": {"line": {"dataLabels": {"enabled": config.data_labels}}},
        "yAxis": _render_y_axis(config.y_axis),
        "xAxis": _render_x_axis(config.x_axis),
        "series": [_render_series(series) for series in config.series],
    }


def render_chart_payload(config: ChartConfig) -> ChartPayload:
    """Render options plus week labels for every week the series span.

    Label formatters are functions and cannot travel as JSON, so the page looks
    tick labels up in `xAxisLabels` instead.
    """

    return {
        "options": render_chart_options(config),
        "xAxisLabels": {str(week): ordinal_week_label(week) for week in _week_range(config)},
    }


def _render_y_axis(axis: YAxisConfig) -> AxisOptions:
    rendered: AxisOptions = {
        "type": axis.axis_type,
        "title": {"text": axis.title},
        "gridLineWidth": axis.grid_line_width,
        "opposite": axis.opposite,
        "min": axis.min,
        "max": axis.max,
    }
    if axis.tick_interval is not None:
        rendered["tickInterval"] = axis.tick_interval
    return rendered


def _render_x_axis(axis: XAxisConfig) -> AxisOptions:
    return {
        "title": {"text": axis.title},
        "tickInterval": axis.tick_interval,
        "plotBands": [
            {"label": {"text": band.label}, "color": band.color, "from": band.start, "to": band.end}
            for band in axis.plot_bands
        ],
        "plotLines": [
            {"color": line.color, "value": line.value, "width": line.width} for line in axis.plot_lines
        ],
    }


def _render_series(series: ChartSeries) -> SeriesOptions:
    rendered: SeriesOptions = {
        "name": series.name,
        "type": series.series_type,
        "data": [[x, y] for x, y in series.data],
        "color": series.color,
    }
    if series.dash_style is not None:
        rendered["dashStyle"] = series.dash_style
    if series.zones:
        rendered["zones"] = [{"value": zone.value, "color": zone.color} for zone in series.zones]
    return rendered


def _week_range(config: ChartConfig) -> range:
    """Return the inclusive range of weeks covered by any series point."""

    weeks = [x for series in config.series for x, _ in series.data]
    if not weeks:
        return range(0)
    return range(min(weeks), max(weeks) + 1)

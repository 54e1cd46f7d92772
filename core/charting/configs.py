"""Built-in ChartConfig definition for the demo page."""

from __future__ import annotations

from typing import Final

from analysis.series import SERIES_STEPS, TEAM_A_GROWTH, TEAM_B_GROWTH, generate_series

from .schema import (
    AxisType,
    ChartConfig,
    ChartLayout,
    ChartSeries,
    ColorZone,
    PlotBand,
    PlotLine,
    XAxisConfig,
    YAxisConfig,
)

INITIAL_Y_AXIS_TYPE: Final[AxisType] = "logarithmic"
INITIAL_Y_AXIS_TICK_INTERVAL: Final[float] = 1

Y_AXIS_TITLE: Final[str] = "commits"
Y_AXIS_MIN: Final[float] = 1
Y_AXIS_MAX: Final[float] = 100_000

TEAM_A_DATA: Final[tuple[tuple[int, int], ...]] = tuple(
    (point.x, point.y) for point in generate_series(TEAM_A_GROWTH, steps=SERIES_STEPS)
)
TEAM_B_DATA: Final[tuple[tuple[int, int], ...]] = tuple(
    (point.x, point.y) for point in generate_series(TEAM_B_GROWTH, steps=SERIES_STEPS)
)


def build_y_axis(axis_type: AxisType, tick_interval: float) -> YAxisConfig:
    """Build the complete Y axis from the two user-controlled fields.

    Every field is recomputed on each call, so switching axis type never drops
    the title, bounds or grid settings.

    Args:
        axis_type: "linear" or "logarithmic".
        tick_interval: Logarithmic power spacing. Not emitted on a linear axis.

    Returns:
        A fresh YAxisConfig.
    """

    return YAxisConfig(
        axis_type=axis_type,
        title=Y_AXIS_TITLE,
        tick_interval=tick_interval if axis_type == "logarithmic" else None,
        grid_line_width=1,
        opposite=True,
        min=Y_AXIS_MIN,
        max=Y_AXIS_MAX,
    )


def build_base_chart_config() -> ChartConfig:
    """Return the chart as it first appears on the page."""

    return ChartConfig(
        title="Logarithmic Axis Demo",
        subtitle="Demo of a logarithmic axis in Highcharts",
        layout=ChartLayout(width=800, height=600),
        y_axis=build_y_axis(INITIAL_Y_AXIS_TYPE, INITIAL_Y_AXIS_TICK_INTERVAL),
        x_axis=XAxisConfig(
            title="Weeks",
            tick_interval=1,
            plot_bands=(PlotBand(label="Team A", color="orange", start=3, end=6),),
            plot_lines=(PlotLine(color="brown", value=7, width=20),),
        ),
        series=(
            ChartSeries(
                name="Customer Services",
                data=TEAM_A_DATA,
                color="red",
                dash_style="ShortDot",
                zones=(
                    ColorZone(value=5, color="#f7a35c"),
                    ColorZone(value=10, color="#7cb5ec"),
                    ColorZone(value=15, color="#90ed7d"),
                ),
            ),
            ChartSeries(
                name="Infra and Data",
                data=TEAM_B_DATA,
                color="violet",
                dash_style="LongDash",
            ),
            ChartSeries(name="Check Point", data=((15, 85_000),), color="goldenrod"),
            ChartSeries(name="Check Point", data=((10, 10_000),), color="black"),
        ),
    )


BASE_CHART_CONFIG: Final[ChartConfig] = build_base_chart_config()

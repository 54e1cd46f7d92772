"""Chart state owner for the demo page.

`ChartShell` holds the axis type, tick interval and the current ChartConfig.
Each update recomputes the whole Y axis from the two stored fields and swaps
in a new config, then hands that config to the renderer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

from core.charting.configs import (
    BASE_CHART_CONFIG,
    INITIAL_Y_AXIS_TICK_INTERVAL,
    INITIAL_Y_AXIS_TYPE,
    build_y_axis,
)
from core.charting.schema import AxisType, ChartConfig
from core.charting.validator import ChartConfigError, require_axis_type, validate_chart_config

logger = logging.getLogger(__name__)

ChartRenderer = Callable[[ChartConfig], None]


@dataclass(frozen=True, slots=True)
class ChartState:
    """Snapshot of the shell's UI state.

    Attributes:
        axis_type: Current Y-axis type.
        tick_interval: Last selected logarithmic tick interval. Kept while the
            axis is linear so switching back restores it.
        config: ChartConfig derived from the two fields above.
    """

    axis_type: AxisType
    tick_interval: float
    config: ChartConfig


def initial_chart_state() -> ChartState:
    """Return the default state shown on first load."""

    return ChartState(
        axis_type=INITIAL_Y_AXIS_TYPE,
        tick_interval=INITIAL_Y_AXIS_TICK_INTERVAL,
        config=replace(
            BASE_CHART_CONFIG,
            y_axis=build_y_axis(INITIAL_Y_AXIS_TYPE, INITIAL_Y_AXIS_TICK_INTERVAL),
        ),
    )


class ChartShell:
    """Own the chart state and push every new config to a renderer."""

    def __init__(self, renderer: ChartRenderer | None = None) -> None:
        """Start from defaults and render the initial config.

        Args:
            renderer: Called with each committed ChartConfig.
        """

        self._renderer = renderer
        self._state = initial_chart_state()
        self._render()

    @property
    def state(self) -> ChartState:
        return self._state

    @property
    def config(self) -> ChartConfig:
        return self._state.config

    def update_axis_type(self, axis_type: str) -> None:
        """Switch the Y axis between linear and logarithmic.

        Raises:
            InvalidAxisTypeError: If `axis_type` is not supported; state is unchanged.
        """

        try:
            validated = require_axis_type(axis_type)
        except ValueError:
            logger.warning("Rejected Y-axis type %r", axis_type)
            raise
        self._commit(axis_type=validated, tick_interval=self._state.tick_interval)

    def update_tick_interval(self, tick_interval: float) -> None:
        """Change the logarithmic tick interval.

        Raises:
            ChartConfigError: If the interval yields an invalid config; state is unchanged.
        """

        self._commit(axis_type=self._state.axis_type, tick_interval=tick_interval)

    def _commit(self, *, axis_type: AxisType, tick_interval: float) -> None:
        # Checked even on a linear axis: the interval is kept for the next switch back.
        if not tick_interval > 0:
            raise ChartConfigError((f"Tick interval must be positive (got {tick_interval!r}).",))
        config = replace(self._state.config, y_axis=build_y_axis(axis_type, tick_interval))
        result = validate_chart_config(config)
        if not result.is_valid:
            raise ChartConfigError(result.errors)

        logger.debug(
            "Chart state %s/%s -> %s/%s",
            self._state.axis_type,
            self._state.tick_interval,
            axis_type,
            tick_interval,
        )
        self._state = ChartState(axis_type=axis_type, tick_interval=tick_interval, config=config)
        self._render()

    def _render(self) -> None:
        if self._renderer is not None:
            self._renderer(self._state.config)

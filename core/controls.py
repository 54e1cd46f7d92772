"""Axis control panel selectors.

Selectors are stateless: each one is a label, a fixed option set, the value
currently selected by the shell, and a callback. `handle_change` turns the raw
text submitted by a `<select>` into a typed value and forwards it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Final

from core.charting.schema import AXIS_TYPES, AxisType
from core.charting.validator import require_axis_type
from core.shell import ChartState

TICK_INTERVAL_OPTIONS: Final[tuple[float, ...]] = (0.2, 0.3, 0.4, 0.5, 1, 2, 3, 4, 5)


@dataclass(frozen=True, slots=True)
class Selector(ABC):
    """Base shape shared by the control panel selectors.

    Subclasses set the class-level option set and implement `coerce`.

    Args:
        selected: Value currently held by the shell.
        on_change: Callback receiving the coerced value.
    """

    key: ClassVar[str]
    label: ClassVar[str]
    doc_url: ClassVar[str]
    options: ClassVar[tuple[Any, ...]]

    selected: Any
    on_change: Callable[[Any], None]

    def choices(self) -> list[tuple[str, str]]:
        """Return `(value, display)` pairs for a `<select>` element."""

        return [(format_option(option), self.display(option)) for option in self.options]

    def display(self, option: Any) -> str:
        """Return the text shown for an option."""

        return format_option(option)

    @abstractmethod
    def coerce(self, raw: str) -> Any:
        """Turn submitted text into a typed option value, raising ValueError if it is not one."""

    def handle_change(self, raw: str) -> None:
        """Coerce a submitted value and invoke the callback."""

        self.on_change(self.coerce(raw))


@dataclass(frozen=True, slots=True)
class AxisTypeSelector(Selector):
    """Choose between a linear and a logarithmic Y axis."""

    key: ClassVar[str] = "axis_type"
    label: ClassVar[str] = "Y-Axis Type"
    doc_url: ClassVar[str] = "https://api.highcharts.com/highcharts/yAxis.type"
    options: ClassVar[tuple[AxisType, ...]] = AXIS_TYPES

    def display(self, option: Any) -> str:
        """Capitalize the axis type ("Linear")."""

        text = str(option)
        return text[:1].upper() + text[1:]

    def coerce(self, raw: str) -> AxisType:
        """Raise InvalidAxisTypeError for anything but the two axis types."""

        return require_axis_type(raw)


@dataclass(frozen=True, slots=True)
class TickIntervalSelector(Selector):
    """Choose the power spacing of ticks on a logarithmic axis."""

    key: ClassVar[str] = "tick_interval"
    label: ClassVar[str] = "Log Base"
    doc_url: ClassVar[str] = "https://api.highcharts.com/highcharts/yAxis.tickInterval"
    options: ClassVar[tuple[float, ...]] = TICK_INTERVAL_OPTIONS

    def coerce(self, raw: str) -> float:
        """Parse the submitted text and require one of the offered intervals."""

        value = float(raw)
        if value not in self.options:
            raise ValueError(f"tick interval must be one of {list(self.options)} (got {raw!r}).")
        return value


def format_option(option: Any) -> str:
    """Render an option value the way the `<select>` submits it ("1", not "1.0")."""

    if isinstance(option, float) and option.is_integer():
        return str(int(option))
    return str(option)


def build_control_panel(
    state: ChartState,
    *,
    on_axis_type: Callable[[AxisType], None],
    on_tick_interval: Callable[[float], None],
) -> tuple[Selector, ...]:
    """Return the selectors to present for the current state.

    The tick-interval selector is only part of the panel on a logarithmic axis.
    """

    panel: list[Selector] = [AxisTypeSelector(selected=state.axis_type, on_change=on_axis_type)]
    if state.axis_type == "logarithmic":
        panel.append(TickIntervalSelector(selected=state.tick_interval, on_change=on_tick_interval))
    return tuple(panel)

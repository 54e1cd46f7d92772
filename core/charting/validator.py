"""Validation for ChartConfig definitions.

Configs are rebuilt on every user selection and handed straight to the
charting library, so validation is strict and fails fast.
"""

from __future__ import annotations

from dataclasses import dataclass

from .schema import AXIS_TYPES, AxisType, ChartConfig, ChartSeries, XAxisConfig, YAxisConfig


class InvalidAxisTypeError(ValueError):
    """Raised when an axis type outside `AXIS_TYPES` reaches the chart."""


class ChartConfigError(ValueError):
    """Raised when a ChartConfig fails validation."""

    def __init__(self, errors: tuple[str, ...]) -> None:
        super().__init__("; ".join(errors) or "Invalid ChartConfig.")
        self.errors = errors


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating a chart config."""

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def require_axis_type(value: object) -> AxisType:
    """Return `value` as an AxisType or fail loudly.

    The selector only offers the supported values, so anything else signals a
    mismatch between the control and the chart rather than bad user input.

    Raises:
        InvalidAxisTypeError: If `value` is not "linear" or "logarithmic".
    """

    if value not in AXIS_TYPES:
        raise InvalidAxisTypeError(f"yAxis type must be either linear or logarithmic (got {value!r}).")
    return value  # type: ignore[return-value]


def validate_chart_config(config: ChartConfig) -> ValidationResult:
    """Validate a ChartConfig before it crosses the rendering boundary.

    Args:
        config: ChartConfig to validate.

    Returns:
        ValidationResult containing errors and warnings.
    """

    errors: list[str] = []
    warnings: list[str] = []

    if not config.title.strip():
        errors.append("ChartConfig.title must be a non-empty string.")
    if config.layout.width <= 0 or config.layout.height <= 0:
        errors.append(
            f"ChartConfig.layout must have positive dimensions (got {config.layout.width}x{config.layout.height})."
        )

    _validate_y_axis(config.y_axis, errors=errors, warnings=warnings)
    _validate_x_axis(config.x_axis, errors=errors)

    if not config.series:
        errors.append("ChartConfig.series must contain at least one entry.")
    for idx, series in enumerate(config.series):
        _validate_series(idx, series, y_axis=config.y_axis, errors=errors)

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def _validate_y_axis(axis: YAxisConfig, *, errors: list[str], warnings: list[str]) -> None:
    """Check axis type, tick spacing and bounds."""

    if axis.axis_type not in AXIS_TYPES:
        errors.append(f"ChartConfig.y_axis.axis_type is not a supported value: {axis.axis_type!r}.")
    if axis.tick_interval is not None:
        if axis.tick_interval <= 0:
            errors.append(f"ChartConfig.y_axis.tick_interval must be positive (got {axis.tick_interval!r}).")
        if axis.axis_type == "linear":
            warnings.append("ChartConfig.y_axis.tick_interval is set on a linear axis.")
    if axis.min > axis.max:
        errors.append(f"ChartConfig.y_axis.min={axis.min!r} is greater than max={axis.max!r}.")
    if axis.axis_type == "logarithmic" and axis.min <= 0:
        errors.append(f"ChartConfig.y_axis.min must be positive on a logarithmic axis (got {axis.min!r}).")


def _validate_x_axis(axis: XAxisConfig, *, errors: list[str]) -> None:
    """Check week axis spacing and annotations."""

    if axis.tick_interval <= 0:
        errors.append(f"ChartConfig.x_axis.tick_interval must be positive (got {axis.tick_interval!r}).")
    for idx, band in enumerate(axis.plot_bands):
        if band.start > band.end:
            errors.append(
                f"ChartConfig.x_axis.plot_bands[{idx}] start={band.start!r} is greater than end={band.end!r}."
            )
    for idx, line in enumerate(axis.plot_lines):
        if line.width <= 0:
            errors.append(f"ChartConfig.x_axis.plot_lines[{idx}].width must be positive.")


def _validate_series(idx: int, series: ChartSeries, *, y_axis: YAxisConfig, errors: list[str]) -> None:
    """Check a single series against the current Y axis."""

    if not series.name.strip():
        errors.append(f"ChartConfig.series[{idx}].name must be a non-empty string.")
    if not series.data:
        errors.append(f"ChartConfig.series[{idx}] ({series.name}) must contain at least one point.")

    thresholds = [zone.value for zone in series.zones]
    if any(later <= earlier for earlier, later in zip(thresholds, thresholds[1:])):
        errors.append(
            f"ChartConfig.series[{idx}] ({series.name}) zone thresholds must be strictly increasing: {thresholds}."
        )

    if y_axis.axis_type == "logarithmic":
        non_positive = [y for _, y in series.data if y <= 0]
        if non_positive:
            errors.append(
                f"ChartConfig.series[{idx}] ({series.name}) has non-positive values on a logarithmic axis: "
                f"{non_positive}."
            )

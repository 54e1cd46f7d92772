"""Synthetic series generation for the demo chart.

The demo plots two illustrative team series with different growth rates. Values
grow by an integer-truncated multiple of themselves on every step, which keeps
the points on whole numbers and makes the sequences exactly reproducible.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Final

logger = logging.getLogger(__name__)

SERIES_STEPS: Final[int] = 16
TEAM_A_GROWTH: Final[float] = 1.17
TEAM_B_GROWTH: Final[float] = 1.0


@dataclass(frozen=True, slots=True)
class SeriesPoint:
    """A single (week, value) point.

    Attributes:
        x: 1-based week index.
        y: Magnitude plotted on the Y axis.
    """

    x: int
    y: int

    def as_pair(self) -> list[int]:
        """Return the point as an `[x, y]` pair for chart payloads."""

        return [self.x, self.y]


def generate_series(growth: float, *, steps: int = SERIES_STEPS) -> tuple[SeriesPoint, ...]:
    """Generate a compounding series starting at 1.

    Each step emits the current value and then applies
    `value += trunc(value * growth)`.

    Args:
        growth: Multiplicative growth per step. 1.0 doubles the value every
            step; values below 1.0 truncate to a constant series of 1s.
        steps: Number of points to produce (defaults to 16).

    Returns:
        Points with x running from 1 to `steps`.

    Raises:
        ValueError: If `growth` or `steps` is negative.
    """

    if growth < 0:
        raise ValueError(f"growth must be non-negative (got {growth!r}).")
    if steps < 0:
        raise ValueError(f"steps must be non-negative (got {steps!r}).")

    points: list[SeriesPoint] = []
    value = 1
    for week in range(1, steps + 1):
        points.append(SeriesPoint(x=week, y=value))
        value += math.trunc(value * growth)

    logger.debug("Generated series growth=%s values=%s", growth, [p.y for p in points])
    return tuple(points)

"""Axis label formatting helpers."""

from __future__ import annotations


def ordinal_week_label(value: int | float) -> str:
    """Format an X-axis week value as a short ordinal label.

    Only 1 and 2 get their own suffixes; every other value takes "th"
    (so 3 renders as "3th Wk" and 21 as "21th Wk").

    Args:
        value: Week value from the axis. Integral floats are shown without a
            decimal part.

    Returns:
        Label text such as "1st Wk".
    """

    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if value == 1:
        ending = "st"
    elif value == 2:
        ending = "nd"
    else:
        ending = "th"
    return f"{value}{ending} Wk"

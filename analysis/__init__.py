"""Pure analysis package for the logarithmic axis demo.

This package contains deterministic, testable computations (series synthesis,
label formatting) that operate on in-memory inputs. It must not import Django.
"""

from .labels import ordinal_week_label
from .series import SeriesPoint, generate_series

__all__ = ["SeriesPoint", "generate_series", "ordinal_week_label"]

"""Utility functions for validation and numeric precision."""

from .precision import (
    double_precision_enabled,
    enable_double_precision,
    get_precision_info,
)
from .validation import (
    as_float64,
    as_float_array,
    check_vector_pair,
    check_point_sets,
)

__all__ = [
    "double_precision_enabled",
    "enable_double_precision",
    "get_precision_info",
    "as_float64",
    "as_float_array",
    "check_vector_pair",
    "check_point_sets",
]

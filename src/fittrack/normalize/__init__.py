"""Normalize ingredient quantities into standard shopping units."""

from fittrack.normalize.units import (
    STANDARD_UNITS,
    format_quantity,
    identify_unit_type,
    round_half_up,
    standardize,
)

__all__ = [
    "STANDARD_UNITS",
    "format_quantity",
    "identify_unit_type",
    "round_half_up",
    "standardize",
]

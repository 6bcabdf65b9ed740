"""Unit standardization for shopping list quantities."""

import math

from fittrack.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Unit Conversion Tables
# =============================================================================

# Weight conversions (base unit: kg)
WEIGHT_UNITS: dict[str, float] = {
    "g": 0.001,
    "gram": 0.001,
    "grams": 0.001,
    "oz": 0.0283495,
    "ounce": 0.0283495,
    "ounces": 0.0283495,
    "lb": 0.453592,
    "lbs": 0.453592,
    "pound": 0.453592,
    "pounds": 0.453592,
}

# Volume conversions (base unit: ml)
VOLUME_UNITS: dict[str, float] = {
    "ml": 1.0,
    "milliliter": 1.0,
    "milliliters": 1.0,
    "l": 1000.0,
    "liter": 1000.0,
    "liters": 1000.0,
    "cup": 236.588,
    "cups": 236.588,
    "tbsp": 14.787,
    "tablespoon": 14.787,
    "tablespoons": 14.787,
    "tsp": 4.929,
    "teaspoon": 4.929,
    "teaspoons": 4.929,
}

# Count-based units, all reported as "pieces"
COUNT_UNITS: frozenset[str] = frozenset(
    {
        "piece",
        "pieces",
        "clove",
        "cloves",
        "whole",
        "unit",
        "units",
    }
)

STANDARD_UNITS: tuple[str, ...] = ("kg", "g", "litre", "ml", "pieces")


# =============================================================================
# Rounding
# =============================================================================


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round to ``digits`` decimal places, sending exact halves towards +inf.

    Unlike the built-in ``round``, ``round_half_up(2.5) == 3``. Returns an int
    when ``digits`` is 0. Non-finite values come back unchanged.
    """
    if not math.isfinite(value):
        return value
    if digits == 0:
        return int(math.floor(value + 0.5))
    factor = 10**digits
    scaled = value * factor
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / factor


# =============================================================================
# Standardization
# =============================================================================


def identify_unit_type(measure: str | None) -> str:
    """
    Identify which conversion table a measure belongs to.

    Returns:
        One of "weight", "volume", "count" or "unknown".
    """
    unit_lower = (measure or "").lower()

    if unit_lower in WEIGHT_UNITS:
        return "weight"
    if unit_lower in VOLUME_UNITS:
        return "volume"
    if unit_lower in COUNT_UNITS:
        return "count"
    return "unknown"


def standardize(quantity: float, measure: str | None) -> tuple[float, str]:
    """
    Convert a quantity to one of the standard shopping units.

    Weights become "kg" (2 dp) at 1 kg and above, otherwise whole "g".
    Volumes become "litre" (2 dp) at 1000 ml and above, otherwise whole "ml".
    Counts become whole "pieces". Unrecognized units pass through unchanged
    with the quantity rounded to 2 dp.

    Args:
        quantity: The amount, in ``measure`` units.
        measure: Free-form unit string, matched case-insensitively.

    Returns:
        Tuple of (standardized quantity, standardized unit).
    """
    unit_type = identify_unit_type(measure)
    unit_lower = (measure or "").lower()

    if unit_type == "weight":
        kgs = quantity * WEIGHT_UNITS[unit_lower]
        if kgs >= 1:
            return round_half_up(kgs, 2), "kg"
        return round_half_up(kgs * 1000), "g"

    if unit_type == "volume":
        mls = quantity * VOLUME_UNITS[unit_lower]
        if mls >= 1000:
            return round_half_up(mls / 1000, 2), "litre"
        return round_half_up(mls), "ml"

    if unit_type == "count":
        return round_half_up(quantity), "pieces"

    logger.debug(f"Unrecognized unit {measure!r}, passing through")
    return round_half_up(quantity, 2), measure if measure is not None else ""


def format_quantity(value: float) -> str:
    """Format a quantity for display without trailing zeros."""
    return f"{value:.2f}".rstrip("0").rstrip(".")

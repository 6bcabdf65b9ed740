"""Health metric calculations."""

from fittrack.health.bmi import (
    BMI_CATEGORIES,
    BMICategory,
    calculate_bmi,
    get_bmi_category,
    get_bmi_recommendation,
)

__all__ = [
    "BMI_CATEGORIES",
    "BMICategory",
    "calculate_bmi",
    "get_bmi_category",
    "get_bmi_recommendation",
]

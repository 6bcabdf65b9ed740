"""BMI calculation and WHO category classification."""

from dataclasses import dataclass

from fittrack.normalize.units import round_half_up


@dataclass(frozen=True)
class BMICategory:
    """A WHO BMI band. ``upper`` is exclusive; ``None`` means unbounded."""

    key: str
    label: str
    color: str
    upper: float | None
    recommendation: str


# Ordered from lowest band to highest
BMI_CATEGORIES: tuple[BMICategory, ...] = (
    BMICategory(
        key="UNDERWEIGHT",
        label="Underweight",
        color="blue",
        upper=18.5,
        recommendation=(
            "Consider increasing calorie intake and consulting a healthcare provider."
        ),
    ),
    BMICategory(
        key="NORMAL",
        label="Normal Weight",
        color="green",
        upper=25.0,
        recommendation="Maintain your current weight with balanced diet and exercise.",
    ),
    BMICategory(
        key="OVERWEIGHT",
        label="Overweight",
        color="yellow",
        upper=30.0,
        recommendation="Consider increasing physical activity and reducing calorie intake.",
    ),
    BMICategory(
        key="OBESE",
        label="Obese",
        color="red",
        upper=None,
        recommendation="Consult a healthcare provider about weight management strategies.",
    ),
)

_CATEGORIES_BY_KEY = {category.key: category for category in BMI_CATEGORIES}


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """
    Calculate body mass index, rounded to one decimal place.

    Raises:
        ValueError: If weight or height is not positive.
    """
    if weight_kg <= 0:
        raise ValueError(f"Weight must be positive, got {weight_kg}")
    if height_cm <= 0:
        raise ValueError(f"Height must be positive, got {height_cm}")

    height_m = height_cm / 100
    return round_half_up(weight_kg / (height_m * height_m), 1)


def get_bmi_category(bmi: float) -> BMICategory:
    """Get the WHO category a BMI value falls into."""
    for category in BMI_CATEGORIES:
        if category.upper is None or bmi < category.upper:
            return category
    return BMI_CATEGORIES[-1]


def get_bmi_recommendation(key: str) -> str:
    """
    Get the health recommendation for a category key.

    Raises:
        KeyError: If the key is not a known category.
    """
    return _CATEGORIES_BY_KEY[key].recommendation

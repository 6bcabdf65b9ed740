"""Unit tests for BMI calculation and classification."""

import pytest

from fittrack.health.bmi import (
    BMI_CATEGORIES,
    calculate_bmi,
    get_bmi_category,
    get_bmi_recommendation,
)


class TestCalculateBMI:
    """Tests for calculate_bmi function."""

    def test_typical_adult(self):
        """Test BMI for 70 kg at 175 cm."""
        assert calculate_bmi(70, 175) == 22.9

    def test_rounds_to_one_decimal(self):
        """Test BMI is rounded to one decimal place."""
        assert calculate_bmi(50, 180) == 15.4

    @pytest.mark.parametrize(("weight", "height"), [(0, 175), (-70, 175), (70, 0), (70, -1)])
    def test_rejects_non_positive(self, weight, height):
        """Test that non-positive inputs raise ValueError."""
        with pytest.raises(ValueError):
            calculate_bmi(weight, height)


class TestGetBMICategory:
    """Tests for get_bmi_category function."""

    @pytest.mark.parametrize(
        ("bmi", "expected"),
        [
            (16.0, "UNDERWEIGHT"),
            (18.4, "UNDERWEIGHT"),
            (18.45, "UNDERWEIGHT"),
            (18.5, "NORMAL"),
            (24.9, "NORMAL"),
            (24.95, "NORMAL"),
            (25.0, "OVERWEIGHT"),
            (29.9, "OVERWEIGHT"),
            (30.0, "OBESE"),
            (45.0, "OBESE"),
        ],
    )
    def test_band_edges(self, bmi, expected):
        """Test WHO band boundaries with no gaps between bands."""
        assert get_bmi_category(bmi).key == expected

    def test_category_details(self):
        """Test label and color come with the category."""
        category = get_bmi_category(22.0)
        assert category.label == "Normal Weight"
        assert category.color == "green"

    def test_bands_ordered(self):
        """Test bands are listed from lowest to highest."""
        assert [c.key for c in BMI_CATEGORIES] == [
            "UNDERWEIGHT",
            "NORMAL",
            "OVERWEIGHT",
            "OBESE",
        ]


class TestGetBMIRecommendation:
    """Tests for get_bmi_recommendation function."""

    def test_known_category(self):
        """Test recommendation text for a known band."""
        assert get_bmi_recommendation("OBESE") == (
            "Consult a healthcare provider about weight management strategies."
        )

    def test_every_band_has_recommendation(self):
        """Test all bands carry a recommendation."""
        for category in BMI_CATEGORIES:
            assert get_bmi_recommendation(category.key)

    def test_unknown_category(self):
        """Test unknown keys raise KeyError."""
        with pytest.raises(KeyError):
            get_bmi_recommendation("HEALTHY")

"""
Tests for the health formulas.
"""

import pytest

from quantcalc.calculations.errors import InvalidArgumentError
from quantcalc.calculations.health import (
    ACTIVITY_MULTIPLIERS,
    _IDEAL_WEIGHT_COEFFICIENTS,
    bmi,
    bmi_category,
    bmr,
    ideal_weight,
    tdee,
)


class TestBMI:
    """Test Body Mass Index."""

    def test_bmi_normal(self):
        """70 kg at 175 cm."""
        result = bmi(70, 175)
        assert result.bmi == pytest.approx(22.86, abs=0.005)
        assert result.category == "Normal"

    @pytest.mark.parametrize(
        "weight, category",
        [(50, "Underweight"), (80, "Overweight"), (100, "Obese")],
    )
    def test_bmi_categories(self, weight, category):
        assert bmi(weight, 175).category == category

    @pytest.mark.parametrize(
        "value, category",
        [
            (18.49, "Underweight"),
            (18.5, "Normal"),
            (24.99, "Normal"),
            (25.0, "Overweight"),
            (29.99, "Overweight"),
            (30.0, "Obese"),
        ],
    )
    def test_category_boundaries(self, value, category):
        """Lower bounds are inclusive."""
        assert bmi_category(value) == category

    @pytest.mark.parametrize("height", [0, -170])
    def test_non_positive_height(self, height):
        """Height must be positive."""
        with pytest.raises(InvalidArgumentError):
            bmi(70, height)


class TestBMR:
    """Test Mifflin-St Jeor BMR."""

    def test_male(self):
        assert bmr(70, 175, 30, "male") == pytest.approx(1648.75)

    def test_female(self):
        assert bmr(70, 175, 30, "female") == pytest.approx(1482.75)

    @pytest.mark.parametrize("gender", ["other", "", "Male"])
    def test_non_male_uses_female_constant(self, gender):
        """Anything other than the literal "male" takes the female branch."""
        assert bmr(70, 175, 30, gender) == bmr(70, 175, 30, "female")


class TestTDEE:
    """Test activity scaling."""

    @pytest.mark.parametrize(
        "level, multiplier",
        [
            ("sedentary", 1.2),
            ("light", 1.375),
            ("moderate", 1.55),
            ("active", 1.725),
            ("very_active", 1.9),
        ],
    )
    def test_known_levels(self, level, multiplier):
        assert tdee(1500, level) == pytest.approx(1500 * multiplier)

    def test_unknown_level_defaults_to_moderate(self):
        """Unrecognized levels fall back to 1.55 instead of failing."""
        assert tdee(1500, "couch") == pytest.approx(2325.0)

    def test_table_is_read_only(self):
        """The multiplier table cannot be modified."""
        with pytest.raises(TypeError):
            ACTIVITY_MULTIPLIERS["extreme"] = 2.5
        assert len(ACTIVITY_MULTIPLIERS) == 5


class TestIdealWeight:
    """Test ideal weight formulas."""

    def test_five_feet_male(self):
        """At exactly five feet each formula returns its base."""
        result = ideal_weight(152.4, "male")
        assert result.devine == pytest.approx(50.0)
        assert result.robinson == pytest.approx(52.0)
        assert result.miller == pytest.approx(56.2)
        assert result.hamwi == pytest.approx(48.0)

    def test_five_feet_female(self):
        result = ideal_weight(152.4, "female")
        assert result.to_dict() == pytest.approx(
            {"devine": 45.5, "robinson": 49.0, "miller": 53.1, "hamwi": 45.5}
        )

    def test_per_inch_slope(self):
        """Eleven inches over five feet."""
        result = ideal_weight(152.4 + 11 * 2.54, "male")
        assert result.devine == pytest.approx(50 + 2.3 * 11)
        assert result.hamwi == pytest.approx(48 + 2.7 * 11)

    def test_unknown_gender_uses_female_coefficients(self):
        assert ideal_weight(170, "x") == ideal_weight(170, "female")

    def test_coefficient_tables_are_read_only(self):
        """Per-gender coefficient tables cannot be modified."""
        with pytest.raises(TypeError):
            _IDEAL_WEIGHT_COEFFICIENTS["male"]["devine"] = (0.0, 0.0)
        with pytest.raises(TypeError):
            _IDEAL_WEIGHT_COEFFICIENTS["female"]["extra"] = (1.0, 1.0)
        assert ideal_weight(152.4, "male").devine == pytest.approx(50.0)

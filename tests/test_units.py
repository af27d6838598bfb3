"""Tests for unit conversion."""

import math

import pytest

from nutrition_engine.domain.nutrition import ConfidenceLevel, IngredientRequest
from nutrition_engine.domain.unit_table import UNIT_OVERRIDES, normalize_unit
from nutrition_engine.services.units import UnitConverter


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Cups", "cup"),
        (" Tbsp. ", "tbsp"),
        ("tablespoons", "tbsp"),
        ("lbs", "lb"),
        ("grams", "g"),
        ("handful", "handful"),
    ],
)
def test_normalize_unit(raw: str, expected: str) -> None:
    assert normalize_unit(raw) == expected


def test_food_specific_override_is_high_confidence(converter: UnitConverter) -> None:
    result = converter.convert_to_grams(2, "cups", "spinach")

    assert result.grams == 60
    assert result.confidence is ConfidenceLevel.HIGH
    assert result.conversion_used == "food-specific: spinach[cup] = 30g"
    assert result.warnings == ()


def test_override_applies_to_cooked_form_of_dry_food(converter: UnitConverter) -> None:
    result = converter.convert_to_grams(1, "cup", "quinoa")

    assert result.grams == 185
    assert result.confidence is ConfidenceLevel.HIGH


def test_generic_volume_for_named_food_is_medium(converter: UnitConverter) -> None:
    result = converter.convert_to_grams(1, "cup", "zaatar spice blend")

    assert result.grams == 180
    assert result.confidence is ConfidenceLevel.MEDIUM
    assert result.conversion_used == "generic: cup = 180g"


def test_generic_units_without_food_are_high(converter: UnitConverter) -> None:
    assert converter.convert_to_grams(1, "Tbsp.", None).grams == 15
    pounds = converter.convert_to_grams(2, "lbs", None)
    assert pounds.grams == 907.2
    assert pounds.confidence is ConfidenceLevel.HIGH


def test_mass_units_stay_high_for_named_food(converter: UnitConverter) -> None:
    result = converter.convert_to_grams(150, "g", "zaatar spice blend")

    assert result.grams == 150
    assert result.confidence is ConfidenceLevel.HIGH


def test_unknown_unit_falls_back_to_100g(converter: UnitConverter) -> None:
    result = converter.convert_to_grams(3, "handfuls", "spinach")

    assert result.grams == 300
    assert result.confidence is ConfidenceLevel.LOW
    assert "Unknown unit 'handfuls', assuming 100g per unit" in result.warnings


@pytest.mark.parametrize("amount", [0, -2, math.nan, math.inf])
def test_invalid_amount_never_raises(converter: UnitConverter, amount: float) -> None:
    result = converter.convert_to_grams(amount, "cup", "rice")

    assert result.grams == 100
    assert result.confidence is ConfidenceLevel.LOW
    assert result.warnings[0].startswith("Invalid amount")


def test_huge_amount_falls_back_instead_of_overflowing(
    converter: UnitConverter,
) -> None:
    result = converter.convert_to_grams(1e307, "lb", "chicken breast")

    assert result.grams == 100
    assert result.confidence is ConfidenceLevel.LOW
    assert result.warnings == ("Amount too large: 1e+307 lb",)


def test_unknown_unit_without_food_name(converter: UnitConverter) -> None:
    result = converter.convert_to_grams(2, "unknown_unit_xyz")

    assert result.grams == 200
    assert result.confidence is ConfidenceLevel.LOW
    assert result.warnings == (
        "Unknown unit 'unknown_unit_xyz', assuming 100g per unit",
    )


def test_mixed_greens_cup_uses_food_density(converter: UnitConverter) -> None:
    result = converter.convert_to_grams(1, "cup", "mixed greens")

    assert result.grams == 47
    assert result.confidence is ConfidenceLevel.HIGH
    assert result.warnings == ()


def test_half_cup_cooked_quinoa(converter: UnitConverter) -> None:
    result = converter.convert_to_grams(0.5, "cup", "cooked quinoa")

    assert result.grams == 92.5
    assert result.confidence is ConfidenceLevel.HIGH


def test_liquid_with_generic_cup_is_flagged(converter: UnitConverter) -> None:
    result = converter.convert_to_grams(1, "cup", "vegetable broth")

    assert result.grams == 180
    assert result.confidence is ConfidenceLevel.LOW
    assert any(warning.startswith("Liquid should be") for warning in result.warnings)


def test_water_chestnuts_are_not_a_liquid(converter: UnitConverter) -> None:
    result = converter.convert_to_grams(1, "cup", "water chestnuts")

    assert result.confidence is ConfidenceLevel.MEDIUM
    assert result.warnings == ()


def test_curated_herb_spoon_weights_skip_generic_range(converter: UnitConverter) -> None:
    result = converter.convert_to_grams(1, "tsp", "dried oregano")

    assert result.grams == 1
    assert result.confidence is ConfidenceLevel.HIGH


def test_convert_many_preserves_order(converter: UnitConverter) -> None:
    results = converter.convert_many(
        [
            IngredientRequest("spinach", 1, "cup"),
            IngredientRequest("chicken breast", 4, "oz"),
        ]
    )

    assert [result.grams for result in results] == [30, 113.4]


def test_available_units_lists_food_specific_first(converter: UnitConverter) -> None:
    units = converter.available_units("olive oil")

    assert units[:3] == ["tsp", "tbsp", "cup"]
    assert "g" in units
    assert converter.available_units(None)[0] == "g"


def test_conversion_info_reports_both_values(converter: UnitConverter) -> None:
    info = converter.conversion_info("cup", "black beans")

    assert info.food_key == "black beans"
    assert info.specific_grams_per_unit == 180
    assert info.generic_grams_per_unit == 180
    assert info.has_specific_conversion
    assert converter.conversion_info("handful").recommended_grams_per_unit == 100


def test_every_override_is_positive() -> None:
    assert all(grams > 0 for grams in UNIT_OVERRIDES.values())

"""Tests for the canonical food and unit tables."""

import math

import pytest

from nutrition_engine.domain.food_table import CANONICAL_FOODS, DRY_WEIGHT_COOKED_FORMS
from nutrition_engine.domain.unit_table import UNIT_OVERRIDES
from nutrition_engine.services.matcher import DEFAULT_ALIASES


def test_table_values_are_finite_and_non_negative() -> None:
    for food in CANONICAL_FOODS.values():
        for value in food.per_100g.as_dict().values():
            assert math.isfinite(value)
            assert value >= 0


def test_keys_are_lowercase_and_trimmed() -> None:
    for key, food in CANONICAL_FOODS.items():
        assert key == key.strip().lower()
        assert food.key == key


def test_dry_weight_foods_point_at_cooked_entries() -> None:
    for dry, cooked in DRY_WEIGHT_COOKED_FORMS.items():
        assert CANONICAL_FOODS[dry].dry_weight
        assert not CANONICAL_FOODS[cooked].dry_weight
        assert "cooked" in cooked


def test_override_and_alias_targets_exist() -> None:
    assert {key for key, _unit in UNIT_OVERRIDES} <= set(CANONICAL_FOODS)
    assert set(DEFAULT_ALIASES.values()) <= set(CANONICAL_FOODS)


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        CANONICAL_FOODS["new food"] = CANONICAL_FOODS["tofu"]  # type: ignore[index]

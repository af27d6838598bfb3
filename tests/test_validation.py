"""Tests for nutrition plausibility checks."""

from nutrition_engine.domain.nutrition import (
    ConfidenceLevel,
    IngredientContext,
    MacroProfile,
)
from nutrition_engine.services.validation import (
    check_calorie_consistency,
    check_sanity,
    describe_compatibility,
    display_warning,
    estimate_glycemic_index,
    ingredient_text_warnings,
    suggest_improvements,
    validate_ingredient,
    validate_meal,
)


def test_check_sanity_flags_negative_and_extreme_values() -> None:
    issues = check_sanity(
        MacroProfile(calories=2500, protein_g=-1, fat_g=10, carbs_g=5, fiber_g=60)
    )

    assert issues[0] == "Negative nutrition values detected: protein_g"
    assert any("Extremely high fiber" in issue for issue in issues)
    assert any("Extremely high calories" in issue for issue in issues)


def test_calorie_consistency_ignores_small_portions() -> None:
    tiny = MacroProfile(calories=40, protein_g=0, fat_g=0, carbs_g=0)
    wrong = MacroProfile(calories=400, protein_g=5, fat_g=1, carbs_g=10)

    assert check_calorie_consistency(tiny) == []
    assert check_calorie_consistency(wrong)[0].startswith(
        "Calorie calculation doesn't match macros"
    )


def test_valid_chicken_portion_passes() -> None:
    result = validate_ingredient(
        MacroProfile(calories=247.5, protein_g=46.5, fat_g=5.4, carbs_g=0),
        IngredientContext(name="chicken breast", grams=150, amount=150, unit="g"),
    )

    assert result.valid
    assert result.confidence is ConfidenceLevel.HIGH
    assert result.warnings == ()


def test_implausible_protein_density_is_flagged() -> None:
    result = validate_ingredient(
        MacroProfile(calories=165, protein_g=95, fat_g=3.6, carbs_g=0),
        IngredientContext(name="chicken breast", grams=100, amount=100, unit="g"),
    )

    assert not result.valid
    assert result.confidence is ConfidenceLevel.LOW
    assert any("Unrealistic protein density" in warning for warning in result.warnings)
    assert any("High protein content" in warning for warning in result.warnings)


def test_protein_band_skips_excluded_names() -> None:
    result = validate_ingredient(
        MacroProfile(calories=31, protein_g=1.8, fat_g=0.2, carbs_g=7, fiber_g=2.7),
        IngredientContext(name="green beans", grams=100),
    )

    assert result.warnings == ()


def test_low_protein_band_for_salmon() -> None:
    result = validate_ingredient(
        MacroProfile(calories=40, protein_g=5, fat_g=1, carbs_g=1),
        IngredientContext(name="salmon", grams=100),
    )

    assert result.valid
    assert result.warnings[0].startswith("Low protein content (5.0g/100g) for salmon")


def test_conversion_warnings_are_carried() -> None:
    result = validate_ingredient(
        MacroProfile(calories=20, protein_g=1, fat_g=0, carbs_g=4),
        IngredientContext(
            name="broth", conversion_warnings=("Liquid should be ~240g per cup",)
        ),
    )

    assert result.warnings == ("Liquid should be ~240g per cup",)


def test_ingredient_text_warnings_detect_instructions() -> None:
    assert ingredient_text_warnings("add oil then fry for 5 minutes")
    assert ingredient_text_warnings("Step 2 mix well")
    assert ingredient_text_warnings("chicken breast") == []


def test_balanced_meal_scores_full_marks() -> None:
    result = validate_meal(
        MacroProfile(calories=520, protein_g=35, fat_g=18, carbs_g=50, fiber_g=9)
    )

    assert result.valid
    assert result.score == 100
    assert result.confidence is ConfidenceLevel.HIGH
    assert describe_compatibility(result).startswith("Excellent GLP-1 compliance")
    assert display_warning(result) is None
    assert suggest_improvements(result) == []


def test_inadequate_meal_collects_penalties() -> None:
    result = validate_meal(
        MacroProfile(calories=300, protein_g=10, fat_g=10, carbs_g=40, fiber_g=2)
    )

    assert not result.valid
    assert result.score == 15
    assert result.confidence is ConfidenceLevel.LOW
    assert [issue.split(":")[0] for issue in result.issues] == [
        "Protein too low",
        "Fiber too low",
        "Calories too low",
        "Protein percentage too low",
    ]
    assert len(suggest_improvements(result)) == 3
    assert describe_compatibility(result).startswith("Low GLP-1 compatibility")
    assert display_warning(result) is not None


def test_oversized_meal_loses_fewer_points() -> None:
    result = validate_meal(
        MacroProfile(calories=750, protein_g=40, fat_g=30, carbs_g=70, fiber_g=10)
    )

    assert result.score == 75
    assert result.issues[0].startswith("Calories too high")
    assert describe_compatibility(result).startswith("Moderate GLP-1 compatibility")


def test_impossible_meal_values_cost_half_the_score() -> None:
    result = validate_meal(
        MacroProfile(calories=550, protein_g=150, fat_g=5, carbs_g=10, fiber_g=8)
    )

    assert result.score == 45
    assert "Impossible nutrition values detected (likely data corruption)" in result.issues


def test_meal_density_warnings_use_total_grams() -> None:
    result = validate_meal(
        MacroProfile(calories=500, protein_g=30, fat_g=20, carbs_g=50, fiber_g=6),
        [IngredientContext(name="granola", grams=100)],
    )

    assert result.warnings == ("Meal calorie density (500 cal/100g) is very high",)


def test_meal_score_never_negative() -> None:
    result = validate_meal(
        MacroProfile(calories=2500, protein_g=-5, fat_g=0, carbs_g=0, fiber_g=0)
    )

    assert result.score == 0


def test_fiberless_meal_only_misses_fiber() -> None:
    nutrition = MacroProfile(calories=420, protein_g=35, fat_g=14, carbs_g=40)

    result = validate_meal(nutrition)

    assert result.score == 75
    assert len(result.issues) == 1
    assert result.issues[0].startswith("Fiber too low")
    assert nutrition == MacroProfile(calories=420, protein_g=35, fat_g=14, carbs_g=40)


def test_protein_heavy_meal_loses_balance_points() -> None:
    result = validate_meal(
        MacroProfile(calories=450, protein_g=50, fat_g=10, carbs_g=30, fiber_g=6)
    )

    assert result.score == 95
    assert result.issues == (
        "Protein percentage too high: 44.4% (may be hard to digest)",
    )


def test_protein_light_meal_loses_balance_points() -> None:
    result = validate_meal(
        MacroProfile(calories=500, protein_g=25, fat_g=20, carbs_g=50, fiber_g=6)
    )

    assert result.score == 90
    assert result.issues == ("Protein percentage too low: 20.0% (aim for 25-35%)",)


def test_high_glycemic_ingredients_cost_points() -> None:
    result = validate_meal(
        MacroProfile(calories=520, protein_g=35, fat_g=18, carbs_g=50, fiber_g=9),
        [
            IngredientContext(name="white rice", amount=1, unit="cup"),
            IngredientContext(name="honey", amount=1, unit="tbsp"),
        ],
    )

    assert result.score == 85
    assert result.issues == (
        "High glycemic index: 80 (prefer <55 for blood sugar control)",
    )
    assert suggest_improvements(result) == [
        "Replace refined carbs with whole grains or vegetables"
    ]


def test_glycemic_index_weights_named_ingredients_by_amount() -> None:
    contexts = [
        IngredientContext(name="chicken breast", amount=150, unit="g"),
        IngredientContext(name="sugar", amount=1, unit="tsp"),
        IngredientContext(name="  ", amount=500, unit="g"),
    ]

    assert estimate_glycemic_index(contexts) == 85 / 151


def test_glycemic_index_defaults() -> None:
    assert estimate_glycemic_index([]) == 50
    assert estimate_glycemic_index([IngredientContext(name="sweet potato")]) == 50
    assert estimate_glycemic_index([IngredientContext(name="russet potato")]) == 70
    assert estimate_glycemic_index([IngredientContext(name="meal", amount=-2)]) == 50

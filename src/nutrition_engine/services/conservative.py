"""Last-resort nutrition estimates from broad food categories."""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from nutrition_engine.domain.nutrition import (
    ConfidenceLevel,
    IngredientRequest,
    MacroProfile,
    NutritionEstimate,
    NutritionSource,
)
from nutrition_engine.services.units import UnitConverter


@dataclass(frozen=True)
class ConservativeProfile:
    """Per-100g values assumed for any food in a category."""

    category: str
    pattern: re.Pattern[str] | None
    per_100g: MacroProfile


def _profile(
    category: str,
    pattern: str | None,
    calories: float,
    protein: float,
    fat: float,
    carbs: float,
    fiber: float,
) -> ConservativeProfile:
    return ConservativeProfile(
        category=category,
        pattern=re.compile(pattern) if pattern else None,
        per_100g=MacroProfile(
            calories=calories,
            protein_g=protein,
            fat_g=fat,
            carbs_g=carbs,
            fiber_g=fiber,
        ),
    )


# First matching category wins: plant milks are dairy-like and nut butters
# resolve before fats.
CONSERVATIVE_PROFILES: tuple[ConservativeProfile, ...] = (
    _profile(
        "dairy",
        r"\b(milk|yogurt|kefir)\b|\bcream\b(?!\s*cheese)",
        61, 3.3, 3.2, 4.8, 0,
    ),
    _profile(
        "nuts and seeds",
        r"\b(nuts?|peanuts?|almonds?|walnuts?|cashews?|pecans?|pistachios?"
        r"|hazelnuts?|seeds?|peanut butter|tahini)\b",
        580, 18, 50, 20, 8,
    ),
    _profile("poultry", r"\b(chicken|turkey|duck|hen|poultry)\b", 165, 25, 3.6, 0, 0),
    _profile(
        "seafood",
        r"\b(fish|salmon|tuna|cod|shrimp|prawns?|crab|lobster|tilapia|scallops?"
        r"|halibut|trout|mussels|clams|sardines)\b",
        140, 22, 6, 0, 0,
    ),
    _profile(
        "red meat",
        r"\b(beef|pork|lamb|steak|veal|bison|venison|ham|bacon|sausages?)\b",
        200, 24, 11, 0, 0,
    ),
    _profile("eggs", r"\beggs?\b", 155, 13, 11, 1.1, 0),
    _profile(
        "legumes",
        r"\b(beans?|lentils?|chickpeas?|peas|hummus|edamame|legumes?)\b",
        130, 8.5, 0.5, 22, 7.5,
    ),
    _profile(
        "grains",
        r"\b(rice|pasta|quinoa|oats|oatmeal|noodles|couscous|barley|bread"
        r"|tortillas?|grains?|cereal)\b",
        125, 3.5, 1, 25, 2,
    ),
    _profile(
        "fats", r"\b(oil|butter|ghee|lard|shortening|margarine)\b", 880, 0, 100, 0, 0
    ),
    _profile(
        "cheese", r"\b(cheese|cheddar|mozzarella|parmesan|feta)\b", 350, 22, 28, 3, 0
    ),
    _profile(
        "leafy greens",
        r"\b(spinach|kale|greens|lettuce|arugula|chard|cabbage|collards)\b",
        23, 2.5, 0.4, 3.6, 2.2,
    ),
    _profile(
        "produce",
        r"\b(vegetables?|veggies|fruits?|berries|apples?|tomato(es)?|peppers?"
        r"|onions?|carrots?|squash|mushrooms?|zucchini|broccoli|cauliflower"
        r"|potato(es)?)\b",
        40, 1, 0.2, 9, 2,
    ),
)
DEFAULT_PROFILE = _profile("unknown food", None, 50, 2, 2, 8, 1)


def classify(name: str) -> ConservativeProfile:
    """Return the first category whose pattern matches the name."""
    lowered = name.lower()
    for profile in CONSERVATIVE_PROFILES:
        if profile.pattern is not None and profile.pattern.search(lowered):
            return profile
    return DEFAULT_PROFILE


@dataclass
class ConservativeEstimator:
    """Produce an estimate for any ingredient. Never raises."""

    converter: UnitConverter

    def estimate(
        self, request: IngredientRequest, notes: Iterable[str] = ()
    ) -> NutritionEstimate:
        conversion = self.converter.convert_to_grams(
            request.amount, request.unit, request.name or None
        )
        profile = classify(request.name)
        confidence = ConfidenceLevel.LOW
        reliable_grams = conversion.confidence is ConfidenceLevel.HIGH
        if profile is not DEFAULT_PROFILE and reliable_grams:
            confidence = ConfidenceLevel.MEDIUM
        return NutritionEstimate(
            macros=profile.per_100g.scaled(conversion.grams / 100),
            source=NutritionSource.CONSERVATIVE,
            confidence=confidence,
            warnings=(
                *notes,
                *conversion.warnings,
                f"Conservative estimate using {profile.category} profile",
            ),
            name=request.name,
            amount=request.amount,
            unit=request.unit,
            grams=conversion.grams,
        )

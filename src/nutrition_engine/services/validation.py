"""Plausibility checks for ingredient and meal nutrition."""

import math
import re
from collections.abc import Sequence
from dataclasses import dataclass

from nutrition_engine.domain.nutrition import (
    ConfidenceLevel,
    IngredientContext,
    MacroProfile,
    ValidationResult,
)

MAX_PROTEIN_G = 100.0
MAX_FIBER_G = 50.0
MAX_CALORIES = 2000.0
MAX_PROTEIN_PER_100G = 90.0
CALORIE_MISMATCH_RATIO = 0.30
CALORIE_CHECK_MINIMUM = 50.0
BAND_TOLERANCE = 0.30

MEAL_MIN_PROTEIN_G = 20.0
MEAL_MIN_FIBER_G = 4.0
MEAL_MIN_CALORIES = 400.0
MEAL_MAX_CALORIES = 600.0
MEAL_MAX_PROTEIN_PER_100G = 50.0
MEAL_MAX_FIBER_PER_100G = 25.0
MEAL_MAX_CALORIES_PER_100G = 400.0
MEAL_MIN_PROTEIN_CALORIE_PCT = 25.0
MEAL_MAX_PROTEIN_CALORIE_PCT = 40.0
MEAL_MAX_GLYCEMIC_INDEX = 55.0
DEFAULT_GLYCEMIC_INDEX = 50.0

_PROTEIN_PENALTY = 30
_FIBER_PENALTY = 25
_LOW_CALORIE_PENALTY = 20
_HIGH_CALORIE_PENALTY = 15
_IMPOSSIBLE_VALUES_PENALTY = 50
_LOW_PROTEIN_SHARE_PENALTY = 10
_HIGH_PROTEIN_SHARE_PENALTY = 5
_HIGH_GLYCEMIC_PENALTY = 15


@dataclass(frozen=True)
class _ProteinBand:
    category: str
    pattern: re.Pattern[str]
    low: float
    high: float
    exclude: re.Pattern[str] | None = None

    def applies_to(self, name: str) -> bool:
        if not self.pattern.search(name):
            return False
        return self.exclude is None or not self.exclude.search(name)


_FISH = (
    r"\b(fish|cod|halibut|tilapia|trout|snapper|pollock|sea bass|flounder|sole"
    r"|catfish|mahi mahi|mackerel|sardines|anchovies)\b"
)

# Expected protein per 100g; first matching category wins.
_PROTEIN_BANDS: tuple[_ProteinBand, ...] = (
    _ProteinBand("chicken", re.compile(r"\bchicken\b"), 20, 35),
    _ProteinBand("turkey", re.compile(r"\bturkey\b"), 20, 35),
    _ProteinBand("beef", re.compile(r"\bbeef\b"), 15, 35),
    _ProteinBand("pork", re.compile(r"\bpork\b"), 20, 30),
    _ProteinBand("salmon", re.compile(r"\bsalmon\b"), 20, 30),
    _ProteinBand("tuna", re.compile(r"\btuna\b"), 25, 35),
    _ProteinBand("shrimp", re.compile(r"\bshrimp\b"), 15, 25),
    _ProteinBand("fish", re.compile(_FISH), 15, 30),
    _ProteinBand("egg", re.compile(r"\beggs?\b"), 10, 15),
    _ProteinBand("tofu", re.compile(r"\btofu\b"), 10, 20),
    _ProteinBand("quinoa", re.compile(r"\bquinoa\b"), 3, 6),
    _ProteinBand(
        "beans",
        re.compile(r"\b(beans|chickpeas)\b"),
        6,
        12,
        exclude=re.compile(r"\b(green|string|coffee|jelly)\s+beans\b"),
    ),
    _ProteinBand("lentils", re.compile(r"\blentils\b"), 8, 12),
    _ProteinBand(
        "nuts",
        re.compile(r"\b(nuts|almonds|walnuts|cashews|pecans|pistachios)\b"),
        10,
        30,
    ),
    _ProteinBand("cheese", re.compile(r"\bcheese\b"), 15, 35),
    _ProteinBand("yogurt", re.compile(r"\byogurt\b"), 3, 15),
    _ProteinBand(
        "milk",
        re.compile(r"\bmilk\b"),
        2,
        5,
        exclude=re.compile(r"\b(almond|oat|soy|coconut|cashew|rice|hemp|pea)\s+milk\b"),
    ),
)

_INSTRUCTION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^\d+[a-z]", re.IGNORECASE),
    re.compile(
        r"\b(add|fry|cook|boil|serve|ready|then|till|flame|minutes?|degrees?)\b",
        re.IGNORECASE,
    ),
    re.compile(r"step \d+", re.IGNORECASE),
    re.compile(r"\d+\.\s"),
)

# Substring rules checked in order; unmatched names get the moderate default.
_GLYCEMIC_INDEX_RULES: tuple[tuple[re.Pattern[str], float], ...] = (
    (re.compile(r"sugar|honey|syrup"), 85.0),
    (re.compile(r"white bread|white rice"), 75.0),
    (re.compile(r"^(?!.*sweet).*potato"), 70.0),
    (re.compile(r"brown rice|whole wheat"), 60.0),
    (re.compile(r"banana|orange juice"), 55.0),
    (re.compile(r"broccoli|spinach|lettuce"), 15.0),
    (re.compile(r"chicken|fish|eggs"), 0.0),
    (re.compile(r"avocado|olive oil|nuts"), 10.0),
    (re.compile(r"quinoa|steel-cut oats"), 35.0),
)

_SUGGESTIONS: tuple[tuple[str, str], ...] = (
    ("Protein too low", "Add lean protein: chicken breast, fish, eggs, or Greek yogurt"),
    (
        "Fiber too low",
        "Include high-fiber vegetables: broccoli, spinach, or cauliflower",
    ),
    ("Calories too high", "Reduce portion sizes or use lower-calorie ingredients"),
    (
        "Calories too low",
        "Add a whole grain, legume or healthy fat to reach a full meal portion",
    ),
    ("High glycemic index", "Replace refined carbs with whole grains or vegetables"),
)


def check_sanity(nutrition: MacroProfile, label: str = "") -> list[str]:
    """Return issues for negative or physically implausible portion values."""
    issues: list[str] = []
    suffix = f" for {label}" if label else ""
    negative = nutrition.negative_fields()
    if negative:
        issues.append(f"Negative nutrition values detected: {', '.join(negative)}")
    if nutrition.protein_g > MAX_PROTEIN_G:
        issues.append(f"Extremely high protein ({nutrition.protein_g:.1f}g){suffix}")
    if nutrition.fiber_g > MAX_FIBER_G:
        issues.append(f"Extremely high fiber ({nutrition.fiber_g:.1f}g){suffix}")
    if nutrition.calories > MAX_CALORIES:
        issues.append(f"Extremely high calories ({nutrition.calories:.0f}){suffix}")
    return issues


def check_calorie_consistency(nutrition: MacroProfile) -> list[str]:
    """Compare reported calories against 4/4/9 kcal per gram of macros."""
    if nutrition.calories <= CALORIE_CHECK_MINIMUM:
        return []
    computed = 4 * nutrition.protein_g + 4 * nutrition.carbs_g + 9 * nutrition.fat_g
    difference = abs(nutrition.calories - computed) / nutrition.calories
    if difference > CALORIE_MISMATCH_RATIO:
        return [
            f"Calorie calculation doesn't match macros: {nutrition.calories:.0f} vs "
            f"{computed:.0f} calculated ({difference * 100:.1f}% difference)"
        ]
    return []


def ingredient_text_warnings(name: str) -> list[str]:
    """Flag ingredient names that look like pasted recipe instructions."""
    if any(pattern.search(name) for pattern in _INSTRUCTION_PATTERNS):
        return [f"Ingredient name looks like instruction text: {name!r}"]
    return []


def validate_ingredient(
    nutrition: MacroProfile, context: IngredientContext
) -> ValidationResult:
    """Validate one ingredient portion against sanity and density rules."""
    issues = check_sanity(nutrition, _portion_label(context))
    issues.extend(check_calorie_consistency(nutrition))

    warnings: list[str] = []
    if context.grams:
        density = nutrition.protein_g / context.grams * 100
        if density > MAX_PROTEIN_PER_100G:
            warnings.append(
                f"Unrealistic protein density ({density:.1f}g per 100g) "
                f"for {context.name}"
            )
        warnings.extend(_protein_band_warnings(context.name, density))
    warnings.extend(context.conversion_warnings)

    confidence = _confidence_for(issues, warnings, score=100)
    if issues:
        confidence = ConfidenceLevel.LOW
    return ValidationResult(
        valid=not issues,
        confidence=confidence,
        warnings=tuple(warnings),
        issues=tuple(issues),
    )


def validate_meal(
    nutrition: MacroProfile, contexts: Sequence[IngredientContext] = ()
) -> ValidationResult:
    """Grade summed meal nutrition for sanity and GLP-1 adequacy.

    The numbers are never changed. Issues lower the 0-100 score used to
    grade a meal; they do not block resolution.
    """
    issues: list[str] = []
    warnings: list[str] = []
    score = 100

    sanity = check_sanity(nutrition, "meal")
    if sanity:
        issues.extend(sanity)
        issues.append("Impossible nutrition values detected (likely data corruption)")
        score -= _IMPOSSIBLE_VALUES_PENALTY

    if nutrition.protein_g < MEAL_MIN_PROTEIN_G:
        issues.append(
            f"Protein too low: {nutrition.protein_g:.1f}g "
            "(need 20g+ for GLP-1 satiety)"
        )
        score -= _PROTEIN_PENALTY
    if nutrition.fiber_g < MEAL_MIN_FIBER_G:
        issues.append(
            f"Fiber too low: {nutrition.fiber_g:.1f}g "
            "(need 4g+ for blood sugar control)"
        )
        score -= _FIBER_PENALTY
    if nutrition.calories < MEAL_MIN_CALORIES:
        issues.append(
            f"Calories too low: {nutrition.calories:.0f} "
            "(need 400+ for adequate nutrition)"
        )
        score -= _LOW_CALORIE_PENALTY
    elif nutrition.calories > MEAL_MAX_CALORIES:
        issues.append(
            f"Calories too high: {nutrition.calories:.0f} "
            "(max 600 for GLP-1 portion control)"
        )
        score -= _HIGH_CALORIE_PENALTY

    if nutrition.calories > 0:
        protein_share = nutrition.protein_g * 4 / nutrition.calories * 100
        if protein_share < MEAL_MIN_PROTEIN_CALORIE_PCT:
            issues.append(
                f"Protein percentage too low: {protein_share:.1f}% (aim for 25-35%)"
            )
            score -= _LOW_PROTEIN_SHARE_PENALTY
        elif protein_share > MEAL_MAX_PROTEIN_CALORIE_PCT:
            issues.append(
                f"Protein percentage too high: {protein_share:.1f}% "
                "(may be hard to digest)"
            )
            score -= _HIGH_PROTEIN_SHARE_PENALTY

    glycemic_index = estimate_glycemic_index(contexts)
    if glycemic_index > MEAL_MAX_GLYCEMIC_INDEX:
        issues.append(
            f"High glycemic index: {glycemic_index:.0f} "
            "(prefer <55 for blood sugar control)"
        )
        score -= _HIGH_GLYCEMIC_PENALTY

    total_grams = sum(context.grams or 0.0 for context in contexts)
    if total_grams > 0:
        warnings.extend(_meal_density_warnings(nutrition, total_grams))

    score = max(0, score)
    return ValidationResult(
        valid=not issues,
        confidence=_confidence_for(issues, warnings, score),
        warnings=tuple(warnings),
        issues=tuple(issues),
        score=score,
    )


def estimate_glycemic_index(contexts: Sequence[IngredientContext]) -> float:
    """Estimate a meal's glycemic index from ingredient names.

    Each named ingredient is weighted by its amount, counting 1 when the
    amount is missing or not positive.
    """
    total = 0.0
    weight = 0.0
    for context in contexts:
        if not context.name.strip():
            continue
        amount = context.amount
        if amount is None or not math.isfinite(amount) or amount <= 0:
            amount = 1.0
        total += _glycemic_index(context.name.lower()) * amount
        weight += amount
    if weight <= 0:
        return DEFAULT_GLYCEMIC_INDEX
    return total / weight


def _glycemic_index(name: str) -> float:
    for pattern, value in _GLYCEMIC_INDEX_RULES:
        if pattern.search(name):
            return value
    return DEFAULT_GLYCEMIC_INDEX


def display_warning(result: ValidationResult) -> str | None:
    """Return a short user-facing caveat for the result's confidence."""
    if result.confidence is ConfidenceLevel.LOW:
        return "Nutrition data may be inaccurate. Please verify ingredients and portions."
    if result.confidence is ConfidenceLevel.MEDIUM:
        return "Nutrition estimates - actual values may vary."
    return None


def describe_compatibility(result: ValidationResult) -> str:
    """Summarize a meal score as a GLP-1 compatibility tier."""
    if result.valid and result.score >= 90:
        return "Excellent GLP-1 compliance - optimized for satiety and blood sugar control"
    if result.valid and result.score >= 75:
        return "Good GLP-1 compatibility - meets core protein and fiber requirements"
    if result.score >= 60:
        return "Moderate GLP-1 compatibility - consider modifications for better results"
    return "Low GLP-1 compatibility - may not provide optimal medication synergy"


def suggest_improvements(result: ValidationResult) -> list[str]:
    """Map meal issues to actionable suggestions."""
    suggestions: list[str] = []
    for issue in result.issues:
        for prefix, suggestion in _SUGGESTIONS:
            if issue.startswith(prefix) and suggestion not in suggestions:
                suggestions.append(suggestion)
    return suggestions


def _portion_label(context: IngredientContext) -> str:
    if context.amount is not None and context.unit:
        return f"{context.amount:g} {context.unit} {context.name}".strip()
    return context.name


def _protein_band_warnings(name: str, protein_per_100g: float) -> list[str]:
    lowered = name.lower()
    for band in _PROTEIN_BANDS:
        if not band.applies_to(lowered):
            continue
        expected = f"expected {band.low:g}-{band.high:g}g/100g"
        if protein_per_100g < band.low * (1 - BAND_TOLERANCE):
            return [
                f"Low protein content ({protein_per_100g:.1f}g/100g) "
                f"for {name}, {expected}"
            ]
        if protein_per_100g > band.high * (1 + BAND_TOLERANCE):
            return [
                f"High protein content ({protein_per_100g:.1f}g/100g) "
                f"for {name}, {expected}"
            ]
        return []
    return []


def _meal_density_warnings(nutrition: MacroProfile, total_grams: float) -> list[str]:
    warnings: list[str] = []
    protein_density = nutrition.protein_g / total_grams * 100
    if protein_density > MEAL_MAX_PROTEIN_PER_100G:
        warnings.append(
            f"Meal protein density ({protein_density:.1f}g/100g) is extremely high"
        )
    fiber_density = nutrition.fiber_g / total_grams * 100
    if fiber_density > MEAL_MAX_FIBER_PER_100G:
        warnings.append(
            f"Meal fiber density ({fiber_density:.1f}g/100g) is extremely high"
        )
    calorie_density = nutrition.calories / total_grams * 100
    if calorie_density > MEAL_MAX_CALORIES_PER_100G:
        warnings.append(
            f"Meal calorie density ({calorie_density:.0f} cal/100g) is very high"
        )
    return warnings


def _confidence_for(
    issues: Sequence[str], warnings: Sequence[str], score: int
) -> ConfidenceLevel:
    if len(issues) > 2 or score < 50:
        return ConfidenceLevel.LOW
    if len(warnings) > 3 or score < 75:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.HIGH

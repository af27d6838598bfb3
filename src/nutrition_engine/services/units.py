"""Convert recipe amounts and units into grams."""

import logging
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

from nutrition_engine.domain.nutrition import (
    ConfidenceLevel,
    ConversionResult,
    IngredientRequest,
)
from nutrition_engine.domain.unit_table import (
    GENERIC_GRAMS_PER_UNIT,
    MASS_UNITS,
    UNIT_OVERRIDES,
    normalize_unit,
)
from nutrition_engine.services.matcher import FoodMatcher

_logger = logging.getLogger(__name__)

FALLBACK_GRAMS_PER_UNIT = 100.0
# One tonne; larger conversions are treated as invalid amounts.
MAX_GRAMS = 1_000_000.0

# Food-independent grams-per-unit bounds.
_UNIT_RANGES: dict[str, tuple[float, float]] = {
    "oz": (15.0, 40.0),
    "cup": (20.0, 500.0),
    "tbsp": (3.0, 30.0),
    "tsp": (2.0, 15.0),
    "lb": (400.0, 500.0),
}
_LIQUID_CUP_RANGE = (200.0, 250.0)
_DENSE_CUP_MINIMUM = 100.0
_LIGHT_CUP_MAXIMUM = 100.0

_LIQUID_PATTERN = re.compile(
    r"\b(?:milk|juice|broth|stock)\b|\bwater\b(?!\s*chestnut)"
)
_DENSE_PATTERN = re.compile(r"nuts|seeds")
_LIGHT_PATTERN = re.compile(
    r"lettuce|spinach|greens|arugula|kale|herbs|cilantro|parsley|basil"
)
_PREPARED_PATTERN = re.compile(r"cooked|steamed|sauteed|sautéed|wilted|braised")


@dataclass(frozen=True)
class ConversionInfo:
    """Side-by-side view of the conversions available for a unit."""

    unit: str
    food_key: str | None
    specific_grams_per_unit: float | None
    generic_grams_per_unit: float | None
    recommended_grams_per_unit: float

    @property
    def has_specific_conversion(self) -> bool:
        return self.specific_grams_per_unit is not None


@dataclass
class UnitConverter:
    """Resolve grams for an amount, preferring food-specific densities."""

    matcher: FoodMatcher
    debug: bool = False

    def convert_to_grams(
        self, amount: float, unit: str, food_name: str | None = None
    ) -> ConversionResult:
        """Convert an amount to grams. Never raises."""
        if not math.isfinite(amount) or amount <= 0:
            return ConversionResult(
                grams=FALLBACK_GRAMS_PER_UNIT,
                confidence=ConfidenceLevel.LOW,
                conversion_used="fallback",
                warnings=(f"Invalid amount: {amount:g}",),
            )

        canonical_unit = normalize_unit(unit)
        food_key = self.matcher.match(food_name) if food_name else None
        warnings: list[str] = []
        override = (
            UNIT_OVERRIDES.get((food_key, canonical_unit)) if food_key else None
        )
        if override is not None:
            grams_per_unit = override
            conversion_used = (
                f"food-specific: {food_key}[{canonical_unit}] = {override:g}g"
            )
            confidence = ConfidenceLevel.HIGH
        elif canonical_unit in GENERIC_GRAMS_PER_UNIT:
            grams_per_unit = GENERIC_GRAMS_PER_UNIT[canonical_unit]
            conversion_used = f"generic: {canonical_unit} = {grams_per_unit:g}g"
            if food_name and canonical_unit not in MASS_UNITS:
                confidence = ConfidenceLevel.MEDIUM
            else:
                confidence = ConfidenceLevel.HIGH
        else:
            grams_per_unit = FALLBACK_GRAMS_PER_UNIT
            conversion_used = f"fallback: unknown unit '{unit}' = 100g"
            confidence = ConfidenceLevel.LOW
            warnings.append(f"Unknown unit '{unit}', assuming 100g per unit")

        grams = amount * grams_per_unit
        if grams > MAX_GRAMS:
            return ConversionResult(
                grams=FALLBACK_GRAMS_PER_UNIT,
                confidence=ConfidenceLevel.LOW,
                conversion_used="fallback",
                warnings=(f"Amount too large: {amount:g} {unit}",),
            )
        plausibility = _plausibility_warnings(
            amount,
            canonical_unit,
            grams,
            food_name,
            check_unit_range=override is None,
        )
        if plausibility:
            warnings.extend(plausibility)
            confidence = ConfidenceLevel.LOW

        if self.debug:
            _logger.info(
                "Unit conversion: %s %s %s = %.1fg (%s)",
                amount,
                unit,
                food_name or "",
                grams,
                conversion_used,
            )
        return ConversionResult(
            grams=round(grams, 1),
            confidence=confidence,
            conversion_used=conversion_used,
            warnings=tuple(warnings),
        )

    def convert_many(
        self, requests: Iterable[IngredientRequest]
    ) -> list[ConversionResult]:
        """Convert a batch of ingredients, preserving order."""
        return [
            self.convert_to_grams(request.amount, request.unit, request.name)
            for request in requests
        ]

    def available_units(self, food_name: str | None = None) -> list[str]:
        """List units with a known gram weight, food-specific units first."""
        generic_units = list(GENERIC_GRAMS_PER_UNIT)
        food_key = self.matcher.match(food_name) if food_name else None
        if food_key is None:
            return generic_units
        specific_units = [unit for key, unit in UNIT_OVERRIDES if key == food_key]
        return list(dict.fromkeys([*specific_units, *generic_units]))

    def conversion_info(
        self, unit: str, food_name: str | None = None
    ) -> ConversionInfo:
        """Explain which grams-per-unit value a conversion would use."""
        canonical_unit = normalize_unit(unit)
        food_key = self.matcher.match(food_name) if food_name else None
        specific = (
            UNIT_OVERRIDES.get((food_key, canonical_unit)) if food_key else None
        )
        generic = GENERIC_GRAMS_PER_UNIT.get(canonical_unit)
        if specific is not None:
            recommended = specific
        elif generic is not None:
            recommended = generic
        else:
            recommended = FALLBACK_GRAMS_PER_UNIT
        return ConversionInfo(
            unit=canonical_unit,
            food_key=food_key,
            specific_grams_per_unit=specific,
            generic_grams_per_unit=generic,
            recommended_grams_per_unit=recommended,
        )


def _plausibility_warnings(
    amount: float,
    unit: str,
    grams: float,
    food_name: str | None,
    *,
    check_unit_range: bool,
) -> list[str]:
    """Flag grams-per-unit ratios outside the expected range for the unit.

    Curated food-specific densities skip the generic ranges since dried herbs
    legitimately weigh well under 2g per teaspoon.
    """
    warnings: list[str] = []
    ratio = grams / amount
    bounds = _UNIT_RANGES.get(unit)
    if check_unit_range and bounds is not None:
        low, high = bounds
        if ratio < low or ratio > high:
            warnings.append(
                f"Suspicious {unit} conversion: {amount:g} {unit} = {grams:.1f}g "
                f"({ratio:.1f}g/{unit})"
            )
    if not food_name or unit != "cup":
        return warnings

    name = food_name.lower()
    low, high = _LIQUID_CUP_RANGE
    if _LIQUID_PATTERN.search(name) and (ratio < low or ratio > high):
        warnings.append(
            f"Liquid should be ~240g per cup, got {ratio:.1f}g/cup for {food_name}"
        )
    if _DENSE_PATTERN.search(name) and ratio < _DENSE_CUP_MINIMUM:
        warnings.append(f"Dense foods like {food_name} seem light at {ratio:.1f}g/cup")
    if (
        _LIGHT_PATTERN.search(name)
        and not _PREPARED_PATTERN.search(name)
        and ratio > _LIGHT_CUP_MAXIMUM
    ):
        warnings.append(f"Light foods like {food_name} seem heavy at {ratio:.1f}g/cup")
    return warnings

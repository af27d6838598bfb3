"""Nutrition domain models."""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction

DEFAULT_AMOUNT = 1.0
DEFAULT_UNIT = "serving"


class InvalidIngredientError(ValueError):
    """Raised when an ingredient payload breaks the input contract."""


class ConfidenceLevel(Enum):
    """How far an estimate can be trusted."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Higher rank means more trustworthy."""
        return _CONFIDENCE_RANK[self]


_CONFIDENCE_RANK = {
    ConfidenceLevel.LOW: 0,
    ConfidenceLevel.MEDIUM: 1,
    ConfidenceLevel.HIGH: 2,
}


def lowest_confidence(levels: Iterable[ConfidenceLevel]) -> ConfidenceLevel:
    """Return the most pessimistic level, HIGH when nothing is given."""
    return min(levels, key=lambda level: level.rank, default=ConfidenceLevel.HIGH)


class NutritionSource(Enum):
    """Where an estimate came from."""

    CACHE = "cache"
    CANONICAL_TABLE = "canonical-table"
    EXTERNAL_LOOKUP = "external-lookup"
    CONSERVATIVE = "conservative"

    @property
    def trust(self) -> int:
        """Higher trust means a more authoritative source."""
        return _SOURCE_TRUST[self]


_SOURCE_TRUST = {
    NutritionSource.CONSERVATIVE: 0,
    NutritionSource.EXTERNAL_LOOKUP: 1,
    NutritionSource.CACHE: 2,
    NutritionSource.CANONICAL_TABLE: 3,
}


class ResolutionStage(Enum):
    """Progress of a single ingredient through the resolution tiers."""

    PENDING = "pending"
    CACHE_CHECKED = "cache-checked"
    LOCAL_CHECKED = "local-checked"
    EXTERNAL_CHECKED = "external-checked"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient profile for a food portion."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float
    fiber_g: float = 0.0

    @classmethod
    def zero(cls) -> "MacroProfile":
        return cls(calories=0.0, protein_g=0.0, fat_g=0.0, carbs_g=0.0, fiber_g=0.0)

    def scaled(self, factor: float) -> "MacroProfile":
        """Return every field multiplied by factor."""
        return MacroProfile(
            calories=self.calories * factor,
            protein_g=self.protein_g * factor,
            fat_g=self.fat_g * factor,
            carbs_g=self.carbs_g * factor,
            fiber_g=self.fiber_g * factor,
        )

    def plus(self, other: "MacroProfile") -> "MacroProfile":
        """Return the field-wise sum of two profiles."""
        return MacroProfile(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            fat_g=self.fat_g + other.fat_g,
            carbs_g=self.carbs_g + other.carbs_g,
            fiber_g=self.fiber_g + other.fiber_g,
        )

    def rounded(self, digits: int = 1) -> "MacroProfile":
        return MacroProfile(
            calories=round(self.calories, digits),
            protein_g=round(self.protein_g, digits),
            fat_g=round(self.fat_g, digits),
            carbs_g=round(self.carbs_g, digits),
            fiber_g=round(self.fiber_g, digits),
        )

    def as_dict(self) -> dict[str, float]:
        return {
            "calories": self.calories,
            "protein_g": self.protein_g,
            "fat_g": self.fat_g,
            "carbs_g": self.carbs_g,
            "fiber_g": self.fiber_g,
        }

    def negative_fields(self) -> list[str]:
        """Return the names of fields holding a negative value."""
        return [name for name, value in self.as_dict().items() if value < 0]


@dataclass(frozen=True)
class CanonicalFood:
    """Curated per-100g nutrition for one food."""

    key: str
    per_100g: MacroProfile
    cooked_form: str | None = None

    @property
    def dry_weight(self) -> bool:
        """Dry-weight entries carry the key of the cooked food to prefer."""
        return self.cooked_form is not None


@dataclass(frozen=True)
class IngredientRequest:
    """One ingredient line as supplied by recipe text."""

    name: str
    amount: float = DEFAULT_AMOUNT
    unit: str = DEFAULT_UNIT

    @classmethod
    def from_mapping(cls, payload: object) -> "IngredientRequest":
        """Build a request from a raw mapping, applying input defaults.

        Empty names and non-positive amounts are accepted here and degrade
        to low-confidence estimates later. Anything structurally wrong raises
        InvalidIngredientError.
        """
        if not isinstance(payload, Mapping):
            raise InvalidIngredientError(
                f"Ingredient must be a mapping, got {type(payload).__name__}"
            )
        name = payload.get("name")
        if name is None:
            name = ""
        if not isinstance(name, str):
            raise InvalidIngredientError(
                f"Ingredient name must be a string, got {type(name).__name__}"
            )
        unit = payload.get("unit")
        if unit is None or (isinstance(unit, str) and not unit.strip()):
            unit = DEFAULT_UNIT
        if not isinstance(unit, str):
            raise InvalidIngredientError(
                f"Ingredient unit must be a string, got {type(unit).__name__}"
            )
        return cls(name=name, amount=parse_amount(payload.get("amount")), unit=unit)

    def line(self) -> str:
        """Render the ingredient as an "amount unit name" line."""
        return f"{self.amount:g} {self.unit} {self.name}".strip()


def parse_amount(value: object) -> float:
    """Parse a numeric amount, accepting strings such as "1/2" or "1 1/2"."""
    if value is None:
        return DEFAULT_AMOUNT
    if isinstance(value, bool):
        raise InvalidIngredientError("Ingredient amount must be numeric, got bool")
    if isinstance(value, int | float):
        return float(value)
    if not isinstance(value, str):
        raise InvalidIngredientError(
            f"Ingredient amount must be numeric, got {type(value).__name__}"
        )
    cleaned = value.strip()
    if not cleaned:
        return DEFAULT_AMOUNT
    try:
        return float(sum(Fraction(part) for part in cleaned.split()))
    except (ValueError, ZeroDivisionError) as exc:
        raise InvalidIngredientError(
            f"Unparseable ingredient amount: {value!r}"
        ) from exc


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting an amount and unit into grams."""

    grams: float
    confidence: ConfidenceLevel
    conversion_used: str
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class IngredientContext:
    """What the validator knows about the portion behind a nutrition value."""

    name: str
    grams: float | None = None
    amount: float | None = None
    unit: str | None = None
    conversion_warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class ValidationResult:
    """Validator verdict: issues invalidate, warnings only annotate."""

    valid: bool
    confidence: ConfidenceLevel
    warnings: tuple[str, ...] = ()
    issues: tuple[str, ...] = ()
    score: int = 100


@dataclass(frozen=True)
class NutritionEstimate:
    """Resolved nutrition for one ingredient or a whole meal."""

    macros: MacroProfile
    source: NutritionSource
    confidence: ConfidenceLevel
    warnings: tuple[str, ...] = ()
    name: str = ""
    amount: float | None = None
    unit: str | None = None
    grams: float | None = None
    matched_food: str | None = None

    def __post_init__(self) -> None:
        values = self.macros.as_dict().values()
        if not all(math.isfinite(value) for value in values):
            raise ValueError("Nutrition estimate fields must be finite")
        negative = self.macros.negative_fields()
        if negative:
            raise ValueError(
                f"Nutrition estimate fields must be non-negative: {', '.join(negative)}"
            )

    def to_payload(self) -> dict[str, object]:
        """Serialize to a JSON-compatible cache payload."""
        return {
            **self.macros.as_dict(),
            "source": self.source.value,
            "confidence": self.confidence.value,
            "warnings": list(self.warnings),
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "grams": self.grams,
            "matched_food": self.matched_food,
        }

    @classmethod
    def from_payload(
        cls, payload: Mapping[str, object], source: NutritionSource | None = None
    ) -> "NutritionEstimate":
        """Rebuild an estimate from a cache payload.

        Raises KeyError, TypeError or ValueError when the payload is malformed.
        """
        macros = MacroProfile(
            calories=float(payload["calories"]),
            protein_g=float(payload["protein_g"]),
            fat_g=float(payload["fat_g"]),
            carbs_g=float(payload["carbs_g"]),
            fiber_g=float(payload.get("fiber_g") or 0.0),
        )
        grams = payload.get("grams")
        amount = payload.get("amount")
        return cls(
            macros=macros,
            source=source or NutritionSource(payload["source"]),
            confidence=ConfidenceLevel(payload["confidence"]),
            warnings=tuple(str(item) for item in payload.get("warnings") or []),
            name=str(payload.get("name") or ""),
            amount=float(amount) if amount is not None else None,
            unit=payload.get("unit"),
            grams=float(grams) if grams is not None else None,
            matched_food=payload.get("matched_food"),
        )


@dataclass(frozen=True)
class MealNutrition:
    """Per-ingredient estimates, their total and the meal-level verdict."""

    individual: tuple[NutritionEstimate, ...]
    total: NutritionEstimate
    validation: ValidationResult

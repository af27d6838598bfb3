"""Nutrition service resolving recipe ingredients into meal nutrition."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from nutrition_engine.adapters.spoonacular_client import NutritionLookupClient
from nutrition_engine.domain.nutrition import (
    IngredientContext,
    IngredientRequest,
    InvalidIngredientError,
    MacroProfile,
    MealNutrition,
    ValidationResult,
)
from nutrition_engine.services.cache import ResultCache
from nutrition_engine.services.conservative import ConservativeEstimator
from nutrition_engine.services.external_lookup import ExternalLookupService
from nutrition_engine.services.matcher import FoodMatcher
from nutrition_engine.services.resolution import (
    CacheTier,
    CanonicalTableTier,
    ConservativeTier,
    ExternalLookupTier,
    ResolutionOrchestrator,
    aggregate,
)
from nutrition_engine.services.units import UnitConverter
from nutrition_engine.services.validation import validate_meal

_logger = logging.getLogger(__name__)


@dataclass
class NutritionService:
    """Resolve ingredients, total them and grade the meal."""

    orchestrator: ResolutionOrchestrator
    matcher: FoodMatcher
    converter: UnitConverter
    debug: bool = False

    @classmethod
    def create(
        cls,
        cache: ResultCache,
        lookup: ExternalLookupService | NutritionLookupClient,
        cache_ttl_seconds: int | None = None,
        debug: bool = False,
    ) -> "NutritionService":
        """Wire the default tiers around a cache and an external lookup."""
        if not isinstance(lookup, ExternalLookupService):
            lookup = ExternalLookupService(client=lookup, debug=debug)
        matcher = FoodMatcher()
        converter = UnitConverter(matcher, debug=debug)
        estimator = ConservativeEstimator(converter)
        orchestrator = ResolutionOrchestrator(
            cache=cache,
            tiers=(
                CacheTier(cache),
                CanonicalTableTier(matcher, converter),
                ExternalLookupTier(lookup, converter),
                ConservativeTier(estimator),
            ),
            fallback=estimator,
            cache_ttl_seconds=cache_ttl_seconds,
            debug=debug,
        )
        return cls(
            orchestrator=orchestrator, matcher=matcher, converter=converter, debug=debug
        )

    async def resolve_ingredients(
        self, ingredients: Sequence[IngredientRequest | Mapping[str, object]]
    ) -> MealNutrition:
        """Resolve every ingredient and grade the summed meal.

        Raises InvalidIngredientError for structurally invalid input only.
        """
        requests = [
            item
            if isinstance(item, IngredientRequest)
            else IngredientRequest.from_mapping(item)
            for item in ingredients
        ]
        individual = await self.orchestrator.resolve_ingredients(requests)
        total = aggregate(individual)
        contexts = [
            IngredientContext(
                name=estimate.name,
                grams=estimate.grams,
                amount=estimate.amount,
                unit=estimate.unit,
            )
            for estimate in individual
        ]
        validation = validate_meal(total.macros, contexts)
        if self.debug:
            _logger.info(
                "Resolved meal: ingredients=%s calories=%.0f confidence=%s score=%s",
                len(individual),
                total.macros.calories,
                total.confidence.value,
                validation.score,
            )
        return MealNutrition(
            individual=tuple(individual), total=total, validation=validation
        )

    def validate_meal(
        self,
        nutrition: MacroProfile,
        contexts: Sequence[IngredientContext] = (),
    ) -> ValidationResult:
        """Grade an already-summed meal."""
        return validate_meal(nutrition, contexts)

    @staticmethod
    def parse_ingredients(payload: object) -> list[IngredientRequest]:
        """Parse a raw list of ingredient mappings."""
        if not isinstance(payload, Sequence) or isinstance(payload, str | bytes):
            raise InvalidIngredientError("Ingredients must be a list")
        return [IngredientRequest.from_mapping(item) for item in payload]

    async def wait_for_cache_writes(self) -> None:
        await self.orchestrator.wait_for_cache_writes()

"""Tests for tiered ingredient resolution and aggregation."""

import asyncio
from dataclasses import dataclass

import pytest

from nutrition_engine.domain.nutrition import (
    ConfidenceLevel,
    IngredientRequest,
    MacroProfile,
    NutritionEstimate,
    NutritionSource,
    ResolutionStage,
)
from nutrition_engine.services.cache import InMemoryCacheStore, ResultCache
from nutrition_engine.services.conservative import ConservativeEstimator
from nutrition_engine.services.resolution import (
    CACHE_TAG,
    CacheTier,
    CanonicalTableTier,
    PendingIngredient,
    ResolutionOrchestrator,
    aggregate,
    ingredient_cache_key,
)
from nutrition_engine.services.units import UnitConverter
from tests.conftest import FailingCacheStore


def _estimate(calories: float, confidence: ConfidenceLevel, source: NutritionSource):
    return NutritionEstimate(
        macros=MacroProfile(calories=calories, protein_g=10, fat_g=5, carbs_g=20, fiber_g=3),
        source=source,
        confidence=confidence,
        warnings=(f"{calories:g} kcal",),
        grams=100,
    )


@dataclass
class ExplodingTier:
    stage: ResolutionStage = ResolutionStage.LOCAL_CHECKED
    cacheable: bool = True

    async def attempt(self, pending):  # type: ignore[no-untyped-def]
        raise RuntimeError("tier down")


def test_cache_key_normalizes_name_and_unit() -> None:
    first = ingredient_cache_key(IngredientRequest(" Chicken  Breast", 150, "Grams"))
    second = ingredient_cache_key(IngredientRequest("chicken breast", 150, "g"))

    assert first == second
    assert first != ingredient_cache_key(IngredientRequest("chicken breast", 100, "g"))


def test_canonical_tier_resolves_table_foods(matcher, converter: UnitConverter) -> None:
    tier = CanonicalTableTier(matcher, converter)
    pending = [
        PendingIngredient(0, IngredientRequest("quinoa", 1, "cup"), "k0"),
        PendingIngredient(1, IngredientRequest("zaatar spice blend", 1, "tbsp"), "k1"),
        PendingIngredient(2, IngredientRequest("", 1, "cup"), "k2"),
    ]

    results = asyncio.run(tier.attempt(pending))

    assert results[0] is not None
    assert results[0].matched_food == "cooked quinoa"
    assert results[0].grams == 185
    assert results[0].macros.protein_g == pytest.approx(8.14)
    assert results[0].confidence is ConfidenceLevel.HIGH
    assert results[1] is None
    assert results[2] is None


def test_failing_tier_falls_through_to_fallback(converter: UnitConverter) -> None:
    cache = ResultCache(InMemoryCacheStore())
    orchestrator = ResolutionOrchestrator(
        cache=cache,
        tiers=(ExplodingTier(),),
        fallback=ConservativeEstimator(converter),
    )

    results = asyncio.run(
        orchestrator.resolve_ingredients([IngredientRequest("chicken breast", 100, "g")])
    )

    assert len(results) == 1
    assert results[0].source is NutritionSource.CONSERVATIVE


def test_cache_outage_does_not_block_resolution(
    matcher, converter: UnitConverter
) -> None:
    cache = ResultCache(FailingCacheStore())
    estimator = ConservativeEstimator(converter)
    orchestrator = ResolutionOrchestrator(
        cache=cache,
        tiers=(CacheTier(cache), CanonicalTableTier(matcher, converter)),
        fallback=estimator,
    )

    async def scenario() -> list[NutritionEstimate]:
        results = await orchestrator.resolve_ingredients(
            [IngredientRequest("chicken breast", 100, "g")]
        )
        await orchestrator.wait_for_cache_writes()
        return results

    results = asyncio.run(scenario())

    assert results[0].source is NutritionSource.CANONICAL_TABLE
    assert results[0].macros.protein_g == pytest.approx(31)


def test_canonical_results_are_cached_with_tag(matcher, converter: UnitConverter) -> None:
    store = InMemoryCacheStore()
    cache = ResultCache(store)
    orchestrator = ResolutionOrchestrator(
        cache=cache,
        tiers=(CanonicalTableTier(matcher, converter),),
        fallback=ConservativeEstimator(converter),
    )
    request = IngredientRequest("chicken breast", 100, "g")

    async def scenario() -> None:
        await orchestrator.resolve_ingredients([request, IngredientRequest("", 1, "cup")])
        await orchestrator.wait_for_cache_writes()

    asyncio.run(scenario())

    entry = store.get(ingredient_cache_key(request))
    assert entry is not None
    assert entry.tags == (CACHE_TAG,)
    assert len(store._entries) == 1


def test_aggregate_sums_and_takes_lowest_confidence() -> None:
    total = aggregate(
        [
            _estimate(200, ConfidenceLevel.HIGH, NutritionSource.CANONICAL_TABLE),
            _estimate(150, ConfidenceLevel.MEDIUM, NutritionSource.EXTERNAL_LOOKUP),
            _estimate(50, ConfidenceLevel.HIGH, NutritionSource.CACHE),
        ]
    )

    assert total.macros.calories == 400
    assert total.macros.protein_g == 30
    assert total.grams == 300
    assert total.confidence is ConfidenceLevel.MEDIUM
    assert total.source is NutritionSource.EXTERNAL_LOOKUP
    assert total.warnings == ("200 kcal", "150 kcal", "50 kcal")


def test_aggregate_empty_meal() -> None:
    total = aggregate([])

    assert total.macros == MacroProfile.zero()
    assert total.confidence is ConfidenceLevel.LOW
    assert total.warnings == ("No ingredients to aggregate",)


def test_aggregate_flags_impossible_totals() -> None:
    total = aggregate(
        [
            _estimate(1500, ConfidenceLevel.HIGH, NutritionSource.CANONICAL_TABLE),
            _estimate(900, ConfidenceLevel.HIGH, NutritionSource.CANONICAL_TABLE),
        ]
    )

    assert total.confidence is ConfidenceLevel.LOW
    assert total.warnings[-1] == "Extremely high calories (2400) for meal total"


def test_aggregate_never_raises_confidence_above_inputs() -> None:
    levels = [ConfidenceLevel.HIGH, ConfidenceLevel.LOW, ConfidenceLevel.MEDIUM]
    for level in levels:
        total = aggregate(
            [
                _estimate(100, ConfidenceLevel.HIGH, NutritionSource.CACHE),
                _estimate(100, level, NutritionSource.CACHE),
            ]
        )
        assert total.confidence.rank <= level.rank

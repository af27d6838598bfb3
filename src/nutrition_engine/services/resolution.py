"""Tiered ingredient resolution: cache, canonical table, external lookup, fallback."""

import asyncio
import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from functools import reduce
from typing import Protocol

from nutrition_engine.domain.nutrition import (
    ConfidenceLevel,
    IngredientContext,
    IngredientRequest,
    MacroProfile,
    NutritionEstimate,
    NutritionSource,
    ResolutionStage,
    lowest_confidence,
)
from nutrition_engine.domain.unit_table import normalize_unit
from nutrition_engine.services.cache import ResultCache
from nutrition_engine.services.conservative import ConservativeEstimator
from nutrition_engine.services.external_lookup import ExternalLookupService
from nutrition_engine.services.matcher import FoodMatcher, normalize_name
from nutrition_engine.services.units import UnitConverter
from nutrition_engine.services.validation import (
    check_sanity,
    ingredient_text_warnings,
    validate_ingredient,
)

_logger = logging.getLogger(__name__)

CACHE_TAG = "ingredient-nutrition"
EMPTY_NAME_WARNING = "Ingredient name is empty"


@dataclass
class PendingIngredient:
    """An ingredient still moving through the tiers."""

    index: int
    request: IngredientRequest
    cache_key: str
    stage: ResolutionStage = ResolutionStage.PENDING
    notes: tuple[str, ...] = ()


class ResolutionTier(Protocol):
    """One step of the resolution pipeline."""

    stage: ResolutionStage
    cacheable: bool

    async def attempt(
        self, pending: Sequence[PendingIngredient]
    ) -> list[NutritionEstimate | None]:
        """Return one result per pending item, None where unresolved."""


def ingredient_cache_key(request: IngredientRequest) -> str:
    """Cache key for a name, amount and unit, insensitive to spelling variants."""
    return ResultCache.generate_key(
        {
            "name": normalize_name(request.name),
            "amount": request.amount,
            "unit": normalize_unit(request.unit),
        }
    )


@dataclass
class CacheTier(ResolutionTier):
    cache: ResultCache
    stage: ResolutionStage = ResolutionStage.CACHE_CHECKED
    cacheable: bool = False

    async def attempt(
        self, pending: Sequence[PendingIngredient]
    ) -> list[NutritionEstimate | None]:
        payloads = await asyncio.gather(
            *(self.cache.get(item.cache_key) for item in pending)
        )
        return [
            _estimate_from_cache(item, payload)
            for item, payload in zip(pending, payloads, strict=True)
        ]


def _estimate_from_cache(
    item: PendingIngredient, payload: object
) -> NutritionEstimate | None:
    if not isinstance(payload, Mapping):
        return None
    try:
        return NutritionEstimate.from_payload(payload, source=NutritionSource.CACHE)
    except (KeyError, TypeError, ValueError):
        _logger.warning("Ignoring malformed cache entry for %s", item.request.line())
        return None


@dataclass
class CanonicalTableTier(ResolutionTier):
    """Resolve names found in the curated per-100g table."""

    matcher: FoodMatcher
    converter: UnitConverter
    stage: ResolutionStage = ResolutionStage.LOCAL_CHECKED
    cacheable: bool = True

    async def attempt(
        self, pending: Sequence[PendingIngredient]
    ) -> list[NutritionEstimate | None]:
        return [self._resolve(item) for item in pending]

    def _resolve(self, item: PendingIngredient) -> NutritionEstimate | None:
        request = item.request
        if not request.name.strip():
            return None
        match = self.matcher.explain(request.name)
        if match is None:
            return None
        food = self.matcher.foods[match.key]
        conversion = self.converter.convert_to_grams(
            request.amount, request.unit, request.name
        )
        macros = food.per_100g.scaled(conversion.grams / 100)
        validation = validate_ingredient(
            macros,
            IngredientContext(
                name=request.name,
                grams=conversion.grams,
                amount=request.amount,
                unit=request.unit,
                conversion_warnings=conversion.warnings,
            ),
        )
        return NutritionEstimate(
            macros=macros,
            source=NutritionSource.CANONICAL_TABLE,
            confidence=lowest_confidence(
                [conversion.confidence, validation.confidence]
            ),
            warnings=(*item.notes, *validation.warnings, *validation.issues),
            name=request.name,
            amount=request.amount,
            unit=request.unit,
            grams=conversion.grams,
            matched_food=match.key,
        )


@dataclass
class ExternalLookupTier(ResolutionTier):
    """Send the remaining ingredients to the provider in one batch."""

    lookup: ExternalLookupService
    converter: UnitConverter
    stage: ResolutionStage = ResolutionStage.EXTERNAL_CHECKED
    cacheable: bool = True

    async def attempt(
        self, pending: Sequence[PendingIngredient]
    ) -> list[NutritionEstimate | None]:
        results: list[NutritionEstimate | None] = [None] * len(pending)
        eligible = [
            position
            for position, item in enumerate(pending)
            if item.request.name.strip()
            and math.isfinite(item.request.amount)
            and item.request.amount > 0
        ]
        if not eligible:
            return results
        found = await self.lookup.lookup(
            [pending[position].request for position in eligible]
        )
        for position, nutrients in zip(eligible, found, strict=True):
            if nutrients is None:
                continue
            item = pending[position]
            request = item.request
            conversion = self.converter.convert_to_grams(
                request.amount, request.unit, request.name
            )
            # Density checks only make sense when the gram weight is reliable.
            grams = None
            if conversion.confidence is ConfidenceLevel.HIGH:
                grams = conversion.grams
            validation = validate_ingredient(
                nutrients.macros,
                IngredientContext(
                    name=request.name,
                    grams=grams,
                    amount=request.amount,
                    unit=request.unit,
                ),
            )
            confidence = ConfidenceLevel.HIGH
            if nutrients.missing_fields:
                confidence = ConfidenceLevel.MEDIUM
            results[position] = NutritionEstimate(
                macros=nutrients.macros,
                source=NutritionSource.EXTERNAL_LOOKUP,
                confidence=lowest_confidence([confidence, validation.confidence]),
                warnings=(
                    *item.notes,
                    *nutrients.warnings,
                    *validation.warnings,
                    *validation.issues,
                ),
                name=request.name,
                amount=request.amount,
                unit=request.unit,
                grams=grams,
            )
        return results


@dataclass
class ConservativeTier(ResolutionTier):
    """Category-based estimate for anything still unresolved."""

    estimator: ConservativeEstimator
    stage: ResolutionStage = ResolutionStage.RESOLVED
    cacheable: bool = False

    async def attempt(
        self, pending: Sequence[PendingIngredient]
    ) -> list[NutritionEstimate | None]:
        return [self.estimator.estimate(item.request, item.notes) for item in pending]


@dataclass
class ResolutionOrchestrator:
    """Run ingredients through the tiers in order.

    Every input gets exactly one estimate, in input order. A tier that fails
    leaves its items for the next tier. Estimates from cacheable tiers are
    written back without blocking the response.
    """

    cache: ResultCache
    tiers: Sequence[ResolutionTier]
    fallback: ConservativeEstimator
    cache_ttl_seconds: int | None = None
    debug: bool = False
    _pending_writes: set[asyncio.Task[bool]] = field(
        default_factory=set, init=False, repr=False
    )

    async def resolve_ingredients(
        self, requests: Sequence[IngredientRequest]
    ) -> list[NutritionEstimate]:
        pending = [_prepare(index, request) for index, request in enumerate(requests)]
        results: list[NutritionEstimate | None] = [None] * len(pending)

        remaining = pending
        for tier in self.tiers:
            if not remaining:
                break
            outcomes = await self._attempt(tier, remaining)
            unresolved: list[PendingIngredient] = []
            for item, estimate in zip(remaining, outcomes, strict=True):
                if estimate is None:
                    item.stage = tier.stage
                    unresolved.append(item)
                    continue
                item.stage = ResolutionStage.RESOLVED
                results[item.index] = estimate
                if tier.cacheable:
                    self._schedule_cache_write(item.cache_key, estimate)
            if self.debug:
                _logger.info(
                    "Resolution tier %s: resolved=%s remaining=%s",
                    tier.stage.value,
                    len(remaining) - len(unresolved),
                    len(unresolved),
                )
            remaining = unresolved

        for item in remaining:
            results[item.index] = self.fallback.estimate(item.request, item.notes)
            item.stage = ResolutionStage.RESOLVED
        return [estimate for estimate in results if estimate is not None]

    async def wait_for_cache_writes(self) -> None:
        """Wait for background cache writes scheduled so far."""
        if self._pending_writes:
            await asyncio.gather(*list(self._pending_writes), return_exceptions=True)

    async def _attempt(
        self, tier: ResolutionTier, pending: Sequence[PendingIngredient]
    ) -> list[NutritionEstimate | None]:
        try:
            outcomes = await tier.attempt(pending)
        except Exception:
            _logger.warning(
                "Resolution tier %s failed for %s ingredients",
                tier.stage.value,
                len(pending),
                exc_info=True,
            )
            return [None] * len(pending)
        if len(outcomes) != len(pending):
            _logger.warning(
                "Resolution tier %s returned %s results for %s ingredients",
                tier.stage.value,
                len(outcomes),
                len(pending),
            )
            return [None] * len(pending)
        return list(outcomes)

    def _schedule_cache_write(self, key: str, estimate: NutritionEstimate) -> None:
        task = asyncio.create_task(
            self.cache.set(
                key,
                estimate.to_payload(),
                ttl_seconds=self.cache_ttl_seconds,
                tags=(CACHE_TAG,),
            )
        )
        self._pending_writes.add(task)
        task.add_done_callback(self._pending_writes.discard)


def _prepare(index: int, request: IngredientRequest) -> PendingIngredient:
    notes: list[str] = []
    if not request.name.strip():
        notes.append(EMPTY_NAME_WARNING)
    else:
        notes.extend(ingredient_text_warnings(request.name))
    return PendingIngredient(
        index=index,
        request=request,
        cache_key=ingredient_cache_key(request),
        notes=tuple(notes),
    )


def aggregate(estimates: Sequence[NutritionEstimate]) -> NutritionEstimate:
    """Sum estimates into a meal total.

    Confidence is the lowest input confidence and the source is the least
    trusted input source. Total sanity issues are appended and force LOW.
    """
    if not estimates:
        return NutritionEstimate(
            macros=MacroProfile.zero(),
            source=NutritionSource.CONSERVATIVE,
            confidence=ConfidenceLevel.LOW,
            warnings=("No ingredients to aggregate",),
            name="total",
        )
    macros = reduce(
        lambda total, estimate: total.plus(estimate.macros),
        estimates,
        MacroProfile.zero(),
    )
    warnings = [warning for estimate in estimates for warning in estimate.warnings]
    confidence = lowest_confidence(estimate.confidence for estimate in estimates)
    issues = check_sanity(macros, "meal total")
    if issues:
        warnings.extend(issues)
        confidence = ConfidenceLevel.LOW
    grams = None
    if all(estimate.grams is not None for estimate in estimates):
        grams = sum(estimate.grams or 0.0 for estimate in estimates)
    return NutritionEstimate(
        macros=macros,
        source=min((estimate.source for estimate in estimates), key=lambda s: s.trust),
        confidence=confidence,
        warnings=tuple(warnings),
        name="total",
        grams=grams,
    )

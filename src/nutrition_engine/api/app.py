"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request

from nutrition_engine.api.admin import router as admin_router
from nutrition_engine.api.models import ConvertRequest, ResolveRequest, ValidateRequest
from nutrition_engine.app_logging import configure_logging
from nutrition_engine.containers import AppContainer
from nutrition_engine.domain.nutrition import (
    IngredientContext,
    InvalidIngredientError,
    MacroProfile,
    NutritionEstimate,
    ValidationResult,
)
from nutrition_engine.services.validation import (
    describe_compatibility,
    display_warning,
    suggest_improvements,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/nutrition/resolve")
    async def resolve(payload: ResolveRequest, request: Request) -> dict[str, object]:
        """Resolve a meal's ingredients into per-ingredient and total nutrition."""
        state_container: AppContainer = request.app.state.container
        service = state_container.nutrition_service
        try:
            requests = service.parse_ingredients(
                [item.model_dump() for item in payload.ingredients]
            )
        except InvalidIngredientError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        meal = await service.resolve_ingredients(requests)
        logger.info(
            "Resolved %s ingredients: confidence=%s score=%s",
            len(meal.individual),
            meal.total.confidence.value,
            meal.validation.score,
        )
        return {
            "ingredients": [
                _estimate_payload(estimate) for estimate in meal.individual
            ],
            "total": _estimate_payload(meal.total),
            "validation": _validation_payload(meal.validation),
        }

    @app.post("/nutrition/validate")
    async def validate(payload: ValidateRequest, request: Request) -> dict[str, object]:
        """Grade already-summed meal nutrition."""
        state_container: AppContainer = request.app.state.container
        nutrition = MacroProfile(
            calories=payload.calories,
            protein_g=payload.protein_g,
            fat_g=payload.fat_g,
            carbs_g=payload.carbs_g,
            fiber_g=payload.fiber_g,
        )
        contexts = []
        if payload.total_grams is not None:
            contexts.append(IngredientContext(name="meal", grams=payload.total_grams))
        result = state_container.nutrition_service.validate_meal(nutrition, contexts)
        return _validation_payload(result)

    @app.post("/nutrition/convert")
    async def convert(payload: ConvertRequest, request: Request) -> dict[str, object]:
        """Convert an amount and unit into grams."""
        state_container: AppContainer = request.app.state.container
        converter = state_container.nutrition_service.converter
        result = converter.convert_to_grams(
            payload.amount, payload.unit, payload.food_name
        )
        return {
            "grams": result.grams,
            "confidence": result.confidence.value,
            "conversion_used": result.conversion_used,
            "warnings": list(result.warnings),
        }

    @app.get("/nutrition/match")
    async def match(name: str, request: Request) -> dict[str, object]:
        """Explain which canonical food a name resolves to."""
        state_container: AppContainer = request.app.state.container
        service = state_container.nutrition_service
        found = service.matcher.explain(name)
        return {
            "name": name,
            "match": found.key if found else None,
            "rule": found.rule.value if found else None,
            "redirected_from": found.redirected_from if found else None,
            "units": service.converter.available_units(name),
        }

    return app


def _estimate_payload(estimate: NutritionEstimate) -> dict[str, object]:
    payload = estimate.to_payload()
    payload.update(estimate.macros.rounded().as_dict())
    return payload


def _validation_payload(result: ValidationResult) -> dict[str, object]:
    return {
        "valid": result.valid,
        "confidence": result.confidence.value,
        "score": result.score,
        "issues": list(result.issues),
        "warnings": list(result.warnings),
        "display_warning": display_warning(result),
        "compatibility": describe_compatibility(result),
        "suggestions": suggest_improvements(result),
    }

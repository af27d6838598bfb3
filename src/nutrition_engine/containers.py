"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutrition_engine.adapters.spoonacular_client import (
    HttpxSpoonacularClient,
    NutritionLookupClient,
)
from nutrition_engine.adapters.supabase_cache_store import SupabaseCacheStore
from nutrition_engine.config import Settings
from nutrition_engine.services.cache import ResultCache
from nutrition_engine.services.external_lookup import ExternalLookupService
from nutrition_engine.services.nutrition import NutritionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    result_cache: ResultCache
    lookup_client: NutritionLookupClient
    nutrition_service: NutritionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    result_cache = ResultCache(
        store=SupabaseCacheStore(supabase_client, table=resolved_settings.cache_table),
        default_ttl_seconds=resolved_settings.cache_ttl_seconds,
    )
    lookup_client = HttpxSpoonacularClient.create(
        api_key=resolved_settings.spoonacular_api_key,
        base_url=resolved_settings.spoonacular_base_url,
    )
    lookup = ExternalLookupService(
        client=lookup_client,
        min_interval_seconds=resolved_settings.external_min_interval_seconds,
        rate_limit_cooldown_seconds=(
            resolved_settings.external_rate_limit_cooldown_seconds
        ),
        debug=resolved_settings.debug,
    )
    nutrition_service = NutritionService.create(
        cache=result_cache,
        lookup=lookup,
        cache_ttl_seconds=resolved_settings.cache_ttl_seconds,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await nutrition_service.wait_for_cache_writes()
        await lookup_client.close()

    return AppContainer(
        settings=resolved_settings,
        result_cache=result_cache,
        lookup_client=lookup_client,
        nutrition_service=nutrition_service,
        close_resources=close_resources,
    )

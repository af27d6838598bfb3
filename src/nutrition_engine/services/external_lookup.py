"""Throttled, batched nutrition lookups against an external provider."""

import asyncio
import logging
import math
import time
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field

from nutrition_engine.adapters.spoonacular_client import (
    NutritionLookupClient,
    RateLimitExceededError,
)
from nutrition_engine.domain.nutrition import IngredientRequest, MacroProfile

_logger = logging.getLogger(__name__)

# Provider nutrient names, matched case-insensitively and exactly.
_NUTRIENT_NAMES: dict[str, tuple[str, ...]] = {
    "calories": ("calories", "energy"),
    "protein_g": ("protein",),
    "fat_g": ("fat", "total lipid (fat)", "total lipid"),
    "carbs_g": ("carbohydrates", "carbohydrate, by difference", "carbs"),
    "fiber_g": ("fiber", "dietary fiber", "fiber, total dietary"),
}


@dataclass(frozen=True)
class ExternalNutrients:
    """Nutrition for one ingredient line as reported by the provider."""

    macros: MacroProfile
    missing_fields: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


@dataclass
class ExternalLookupService:
    """Serialize and space out batched calls to the lookup provider.

    Only one batch is in flight at a time. A rate-limit answer is never
    retried and blocks further calls until the cooldown has passed.
    """

    client: NutritionLookupClient
    min_interval_seconds: float = 1.1
    rate_limit_cooldown_seconds: float = 60.0
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3
    debug: bool = False
    clock: Callable[[], float] = time.monotonic
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)
    _last_request_at: float | None = field(default=None, init=False, repr=False)
    _blocked_until: float = field(default=0.0, init=False, repr=False)

    async def lookup(
        self, requests: Sequence[IngredientRequest]
    ) -> list[ExternalNutrients | None]:
        """Look up a batch in one call; results align with the input order."""
        if not requests:
            return []
        lines = [request.line() for request in requests]
        async with self._lock:
            if self.clock() < self._blocked_until:
                raise RateLimitExceededError(
                    "External lookup cooling down after a rate limit"
                )
            await self._throttle()
            try:
                items = await self._call_with_retry(
                    lambda: self.client.parse_ingredients(lines),
                    action=f"parse_ingredients:{len(lines)}",
                )
            except RateLimitExceededError:
                self._blocked_until = self.clock() + self.rate_limit_cooldown_seconds
                raise
            finally:
                self._last_request_at = self.clock()

        if len(items) != len(lines):
            _logger.warning(
                "External lookup returned %s items for %s lines", len(items), len(lines)
            )
        results = [
            _parse_item(items[index], line) if index < len(items) else None
            for index, line in enumerate(lines)
        ]
        if self.debug:
            _logger.info(
                "External lookup: lines=%s resolved=%s",
                len(lines),
                sum(result is not None for result in results),
            )
        return results

    async def _throttle(self) -> None:
        if self._last_request_at is None:
            return
        wait = self.min_interval_seconds - (self.clock() - self._last_request_at)
        if wait > 0:
            await self.sleep(wait)

    async def _call_with_retry(
        self,
        func: Callable[[], Awaitable[list[dict[str, object]]]],
        *,
        action: str,
    ) -> list[dict[str, object]]:
        """Call an async function with a short retry.

        Rate limits and other 4xx responses are raised without retrying.
        """
        attempt = 0
        while True:
            try:
                return await func()
            except RateLimitExceededError:
                _logger.warning("External %s rate limited", action)
                raise
            except Exception as exc:
                attempt += 1
                status_code = _status_code_from_exception(exc)
                if self.debug:
                    _logger.warning(
                        "External %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        status_code,
                        exc,
                    )
                if attempt > self.retry_attempts or status_code.startswith("4"):
                    raise
                await self.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _parse_item(item: object, line: str) -> ExternalNutrients | None:
    """Extract the five macros from one provider item.

    Missing fields count as 0 and are flagged; an item with no usable
    nutrients at all is treated as unresolved.
    """
    if not isinstance(item, Mapping):
        return None
    nutrition = item.get("nutrition")
    nutrients = nutrition.get("nutrients") if isinstance(nutrition, Mapping) else None
    if not isinstance(nutrients, list):
        return None

    amounts: dict[str, float] = {}
    for nutrient in nutrients:
        if not isinstance(nutrient, Mapping):
            continue
        name = str(nutrient.get("name", "")).strip().lower()
        try:
            amount = float(nutrient.get("amount"))
        except (TypeError, ValueError):
            continue
        if not math.isfinite(amount):
            continue
        amounts.setdefault(name, amount)

    values: dict[str, float] = {}
    missing: list[str] = []
    warnings: list[str] = []
    for field_name, aliases in _NUTRIENT_NAMES.items():
        value = next((amounts[alias] for alias in aliases if alias in amounts), None)
        if value is None:
            missing.append(field_name)
            value = 0.0
        elif value < 0:
            warnings.append(
                f"External lookup returned negative {field_name} for {line}"
            )
            value = 0.0
        values[field_name] = value

    if len(missing) == len(_NUTRIENT_NAMES):
        return None
    if missing:
        warnings.append(
            f"External lookup missing {', '.join(missing)} for {line}; counted as 0"
        )
    return ExternalNutrients(
        macros=MacroProfile(**values),
        missing_fields=tuple(missing),
        warnings=tuple(warnings),
    )

"""Spoonacular batched ingredient parsing client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class RateLimitExceededError(RuntimeError):
    """Raised when the lookup provider answers with HTTP 429 or 402 (daily quota)."""


class NutritionLookupClient(Protocol):
    """Interface for batched external nutrition lookups."""

    async def parse_ingredients(self, lines: list[str]) -> list[dict[str, object]]:
        """Parse "amount unit name" lines and return one raw item per line."""


@dataclass
class HttpxSpoonacularClient(NutritionLookupClient):
    """HTTPX-backed Spoonacular client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxSpoonacularClient":
        """Create a Spoonacular client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def parse_ingredients(self, lines: list[str]) -> list[dict[str, object]]:
        """Parse ingredient lines with nutrition included."""
        url = f"{self.base_url}/recipes/parseIngredients"
        response = await self.http_client.post(
            url,
            params={"apiKey": self.api_key, "includeNutrition": "true"},
            data={"ingredientList": "\n".join(lines), "servings": "1"},
            timeout=15,
        )
        if response.status_code == httpx.codes.TOO_MANY_REQUESTS:
            raise RateLimitExceededError("Spoonacular rate limit exceeded")
        if response.status_code == httpx.codes.PAYMENT_REQUIRED:
            raise RateLimitExceededError("Spoonacular daily quota exhausted")
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, list):
            raise RuntimeError("Spoonacular returned an unexpected payload")
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

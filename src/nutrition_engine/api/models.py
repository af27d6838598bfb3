"""Pydantic models for nutrition API payloads."""

from pydantic import BaseModel, Field


class IngredientPayload(BaseModel):
    """One recipe ingredient line."""

    name: str | None = None
    amount: float | str | None = None
    unit: str | None = None


class ResolveRequest(BaseModel):
    """Ingredients of one meal."""

    ingredients: list[IngredientPayload]


class ValidateRequest(BaseModel):
    """Summed meal nutrition to grade."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float
    fiber_g: float = 0.0
    total_grams: float | None = Field(default=None, gt=0)


class ConvertRequest(BaseModel):
    """Amount and unit to convert, optionally for a specific food."""

    amount: float
    unit: str
    food_name: str | None = None

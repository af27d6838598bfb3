"""Gram weights for recipe units, generic and per food."""

from collections.abc import Mapping
from types import MappingProxyType

MASS_UNITS = frozenset({"g", "kg", "oz", "lb"})

GENERIC_GRAMS_PER_UNIT: Mapping[str, float] = MappingProxyType(
    {
        "g": 1.0,
        "kg": 1000.0,
        "oz": 28.35,
        "lb": 453.59,
        # Deliberately below the 240 g of water; most cup-measured foods are lighter.
        "cup": 180.0,
        "tbsp": 15.0,
        "tsp": 5.0,
        "ml": 1.0,
        "l": 1000.0,
        "small": 100.0,
        "medium": 150.0,
        "large": 200.0,
        "serving": 100.0,
        "piece": 100.0,
    }
)

UNIT_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "gram": "g",
        "grams": "g",
        "gr": "g",
        "kilogram": "kg",
        "kilograms": "kg",
        "kgs": "kg",
        "ounce": "oz",
        "ounces": "oz",
        "ozs": "oz",
        "pound": "lb",
        "pounds": "lb",
        "lbs": "lb",
        "cups": "cup",
        "c": "cup",
        "tablespoon": "tbsp",
        "tablespoons": "tbsp",
        "tbsps": "tbsp",
        "tbs": "tbsp",
        "tbl": "tbsp",
        "teaspoon": "tsp",
        "teaspoons": "tsp",
        "tsps": "tsp",
        "milliliter": "ml",
        "milliliters": "ml",
        "millilitre": "ml",
        "millilitres": "ml",
        "mls": "ml",
        "liter": "l",
        "liters": "l",
        "litre": "l",
        "litres": "l",
        "servings": "serving",
        "pieces": "piece",
        "pcs": "piece",
        "pc": "piece",
    }
)


_LEAFY_CUP = {
    "mixed greens": 47,
    "spinach": 30,
    "kale": 20,
    "arugula": 25,
    "romaine lettuce": 40,
    "iceberg lettuce": 35,
    "butter lettuce": 25,
}

_COOKED_GRAIN_CUP = {
    "cooked oatmeal": 234,
    "cooked quinoa": 185,
    "cooked brown rice": 195,
    "cooked white rice": 185,
    "cooked wild rice": 165,
    "cooked barley": 157,
    "cooked bulgur": 182,
    "cooked farro": 194,
    "cooked millet": 174,
}

_COOKED_BEAN_CUP = {
    "black beans": 180,
    "chickpeas": 165,
    "kidney beans": 175,
    "lentils": 200,
    "cooked lentils": 200,
    "pinto beans": 180,
    "navy beans": 175,
    "lima beans": 170,
    "white beans": 175,
    "cannellini beans": 175,
    "garbanzo beans": 165,
    "cooked split peas": 196,
}

_NUT_CUP = {
    "almonds": 140,
    "walnuts": 120,
    "cashews": 135,
    "chopped almonds": 95,
    "sliced almonds": 70,
    "chopped walnuts": 100,
    "pine nuts": 135,
    "sunflower seeds": 140,
    "pumpkin seeds": 130,
}

_CHOPPED_VEGETABLE_CUP = {
    "bell pepper": 150,
    "red bell pepper": 150,
    "onion": 160,
    "red onion": 160,
    "tomato": 180,
    "cherry tomatoes": 150,
    "cucumber": 120,
    "carrots": 130,
    "baby carrots": 130,
    "celery": 110,
}

_COOKED_VEGETABLE_CUP = {
    "cooked spinach": 180,
    "steamed broccoli": 156,
    "steamed kale": 130,
    "cooked asparagus": 180,
    "steamed cauliflower": 125,
    "cooked green beans": 135,
    "sauteed mushrooms": 70,
}

_PASTA_CUP = {
    "cooked pasta": 125,
    "cooked whole wheat pasta": 125,
    "cooked soba noodles": 95,
    "cooked rice noodles": 85,
}

_LIQUID_CUP = {
    "whole milk": 244,
    "2% milk": 244,
    "1% milk": 244,
    "skim milk": 245,
    "buttermilk": 245,
    "almond milk": 240,
    "oat milk": 240,
    "soy milk": 243,
    "cashew milk": 240,
    "rice milk": 240,
    "coconut milk": 226,
    "half and half": 242,
    "heavy cream": 238,
}

# (tsp, tbsp) for dried spices, fresh herbs and seeds
_SPOON = {
    "oregano": (1, 3),
    "thyme": (1, 3),
    "rosemary": (1, 3),
    "basil": (0.5, 1.5),
    "fresh basil": (0.5, 1.5),
    "cilantro": (0.5, 1.5),
    "fresh cilantro": (0.5, 1.5),
    "parsley": (0.5, 1.5),
    "dill": (0.5, 1.5),
    "mint": (0.5, 1.5),
    "cinnamon": (2, 6),
    "cumin": (2, 6),
    "paprika": (2, 6),
    "black pepper": (2, 6),
    "cayenne pepper": (2, 6),
    "chili powder": (3, 9),
    "turmeric": (3, 9),
    "garlic powder": (3, 9),
    "onion powder": (3, 9),
    "chia seeds": (4, 12),
    "flax seeds": (3.3, 10),
    "hemp seeds": (3.3, 10),
    "sesame seeds": (3, 9),
    "olive oil": (4.5, 13.5),
    "coconut oil": (4.5, 13.6),
    "lemon juice": (5, 15),
    "lime juice": (5, 15),
}

_DICED_PROTEIN = {
    "chicken breast": {"cup": 140, "oz": 28.35},
    "cooked chicken": {"cup": 140, "oz": 28.35},
    "cooked shrimp": {"cup": 110, "oz": 28.35},
    "salmon": {"cup": 145, "oz": 28.35},
    "cooked salmon": {"cup": 145, "oz": 28.35},
    "tuna": {"cup": 145, "oz": 28.35},
    "cooked tuna": {"cup": 145, "oz": 28.35},
    "diced tofu": {"cup": 120},
    "crumbled tofu": {"cup": 90},
}


def _build_overrides() -> dict[tuple[str, str], float]:
    overrides: dict[tuple[str, str], float] = {}
    for table in (
        _LEAFY_CUP,
        _COOKED_GRAIN_CUP,
        _COOKED_BEAN_CUP,
        _NUT_CUP,
        _CHOPPED_VEGETABLE_CUP,
        _COOKED_VEGETABLE_CUP,
        _PASTA_CUP,
        _LIQUID_CUP,
    ):
        for food, grams in table.items():
            overrides[(food, "cup")] = float(grams)
    for food, (tsp, tbsp) in _SPOON.items():
        overrides[(food, "tsp")] = float(tsp)
        overrides[(food, "tbsp")] = float(tbsp)
    for food, units in _DICED_PROTEIN.items():
        for unit, grams in units.items():
            overrides[(food, unit)] = float(grams)
    overrides[("lemon juice", "cup")] = 244.0
    overrides[("lime juice", "cup")] = 246.0
    overrides[("olive oil", "cup")] = 216.0
    return overrides


UNIT_OVERRIDES: Mapping[tuple[str, str], float] = MappingProxyType(_build_overrides())


def normalize_unit(unit: str) -> str:
    """Lowercase, trim, drop a trailing period and fold aliases."""
    cleaned = " ".join(unit.lower().split()).rstrip(".")
    return UNIT_ALIASES.get(cleaned, cleaned)

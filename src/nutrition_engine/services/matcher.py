"""Map free-text ingredient names onto canonical food keys."""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from nutrition_engine.domain.food_table import CANONICAL_FOODS
from nutrition_engine.domain.nutrition import CanonicalFood

_TOKEN_PATTERN = re.compile(r"[a-z0-9%/]+")
_RAW_QUALIFIERS = frozenset({"dry", "dried", "raw", "uncooked"})

DEFAULT_KEYWORDS: tuple[str, ...] = (
    "salmon",
    "chicken",
    "turkey",
    "beef",
    "pork",
    "shrimp",
    "tuna",
    "egg",
    "tofu",
    "quinoa",
    "rice",
    "beans",
    "lentils",
    "spinach",
    "kale",
    "broccoli",
)

# Staples point at their cooked form: recipe text saying "rice" means cooked rice.
DEFAULT_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "chicken": "chicken breast",
        "turkey": "ground turkey",
        "fish": "tuna",
        "beans": "black beans",
        "lettuce": "mixed greens",
        "tomatoes": "tomato",
        "peppers": "bell pepper",
        "oil": "olive oil",
        "cheese": "cheddar cheese",
        "yogurt": "greek yogurt",
        "oats": "cooked oatmeal",
        "oatmeal": "cooked oatmeal",
        "rice": "cooked brown rice",
        "brown rice": "cooked brown rice",
        "white rice": "cooked white rice",
        "barley": "cooked barley",
        "bulgur": "cooked bulgur",
        "farro": "cooked farro",
        "millet": "cooked millet",
        "pasta": "cooked pasta",
        "spaghetti": "cooked pasta",
        "noodles": "cooked pasta",
        "whole wheat pasta": "cooked whole wheat pasta",
        "quinoa": "cooked quinoa",
        "lentils": "cooked lentils",
        "split peas": "cooked split peas",
    }
)


class MatchRule(Enum):
    """Which matching rule produced a result."""

    EXACT = "exact"
    TOKEN = "token"
    SUBSTRING = "substring"
    KEYWORD = "keyword"
    ALIAS = "alias"


@dataclass(frozen=True)
class FoodMatch:
    """A resolved food key with the rule that found it."""

    key: str
    rule: MatchRule
    redirected_from: str | None = None


def normalize_name(name: str) -> str:
    """Lowercase, trim and collapse inner whitespace."""
    return " ".join(name.lower().split())


def tokenize(text: str) -> list[str]:
    """Split text into lowercase word tokens, keeping % and / inside words."""
    return _TOKEN_PATTERN.findall(text.lower())


def _is_cooked(key: str) -> bool:
    return "cooked" in key.split()


@dataclass
class FoodMatcher:
    """Layered literal matcher: exact, token, substring, keyword, alias.

    Every rule is literal so a result can always be traced back to the rule
    that fired. Dry-weight foods are swapped for their cooked form unless the
    input explicitly asks for dry or raw food.
    """

    foods: Mapping[str, CanonicalFood] = field(default_factory=lambda: CANONICAL_FOODS)
    aliases: Mapping[str, str] = field(default_factory=lambda: DEFAULT_ALIASES)
    keywords: tuple[str, ...] = DEFAULT_KEYWORDS

    def __post_init__(self) -> None:
        targets = set(self.aliases.values())
        targets.update(
            food.cooked_form for food in self.foods.values() if food.cooked_form
        )
        missing = sorted(target for target in targets if target not in self.foods)
        if missing:
            raise ValueError(
                f"Unknown canonical foods referenced: {', '.join(missing)}"
            )
        self._table_order = list(self.foods)
        self._by_specificity = sorted(self.foods, key=lambda key: (-len(key), key))
        self._key_tokens = {key: tokenize(key) for key in self.foods}
        self._alias_patterns = [
            (re.compile(rf"\b{re.escape(variant)}\b"), target)
            for variant, target in sorted(
                self.aliases.items(), key=lambda item: (-len(item[0]), item[0])
            )
        ]

    def match(self, name: str) -> str | None:
        """Return the canonical key for an ingredient name, if any."""
        found = self.explain(name)
        return found.key if found else None

    def explain(self, name: str) -> FoodMatch | None:
        """Return the match together with the rule that produced it."""
        normalized = normalize_name(name)
        if not normalized:
            return None
        tokens = tokenize(normalized)
        wants_raw = any(token in _RAW_QUALIFIERS for token in tokens)
        found = self._find(normalized, tokens, wants_raw)
        if found is None:
            return None
        food = self.foods[found.key]
        if wants_raw or food.cooked_form is None:
            return found
        return FoodMatch(
            key=food.cooked_form, rule=found.rule, redirected_from=found.key
        )

    def _find(
        self, normalized: str, tokens: list[str], wants_raw: bool
    ) -> FoodMatch | None:
        if normalized in self.foods:
            return FoodMatch(key=normalized, rule=MatchRule.EXACT)

        candidates = [
            key
            for key in self._by_specificity
            if not (wants_raw and _is_cooked(key))
        ]
        for key in candidates:
            if all(
                any(key_token in token for token in tokens)
                for key_token in self._key_tokens[key]
            ):
                return FoodMatch(key=key, rule=MatchRule.TOKEN)
        for key in candidates:
            if key in normalized:
                return FoodMatch(key=key, rule=MatchRule.SUBSTRING)

        keyword_key = self._match_keyword(tokens, wants_raw)
        if keyword_key is not None:
            return FoodMatch(key=keyword_key, rule=MatchRule.KEYWORD)

        for pattern, target in self._alias_patterns:
            if pattern.search(normalized):
                return FoodMatch(key=target, rule=MatchRule.ALIAS)
        return None

    def _match_keyword(self, tokens: list[str], wants_raw: bool) -> str | None:
        wants_cooked = "cooked" in tokens
        for keyword in self.keywords:
            if not any(keyword in token for token in tokens):
                continue
            containing = [
                key
                for key in self._table_order
                if keyword in key and not (wants_raw and _is_cooked(key))
            ]
            for key in containing:
                if _is_cooked(key) == wants_cooked:
                    return key
            if containing:
                return containing[0]
        return None

# -*- coding: utf-8 -*-
"""Derived display data for soup recipes.

The presenter never touches the catalog file; it reads a CatalogStore and the
static lookup tables below. Everything here is a pure function of its inputs,
so the HTML layer (ui.py), the JSON API and the CLI share the same views.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .catalog_store import CatalogStore, SoupRecipe

logger = logging.getLogger(__name__)


DEFAULT_DESCRIPTION = "Delicious traditional Chinese soup recipe."
DEFAULT_IMAGE = "Pictures/AbcSoup.jpg"

_DESCRIPTIONS: Dict[str, str] = {
    "ABC Soup": "Classic comfort soup with corn, carrots, tomatoes, and potatoes in a naturally sweet broth.",
    "Watercress Soup": "Refreshing and nutritious soup with tender watercress and flavorful pork ribs.",
    "Lotus Root with Peanut Soup": "Hearty and nourishing soup with lotus root and peanuts in a rich, fragrant broth.",
    "Old Cucumber Soup": "Light and clear soup with softened old cucumber, perfect for hot weather.",
    "Herbal Chicken Soup": "Traditional Chinese herbal soup with chicken, promoting wellness and vitality.",
}

_IMAGES: Dict[str, str] = {
    "ABC Soup": "Pictures/AbcSoup.jpg",
    "Watercress Soup": "Pictures/watercress.jpg",
    "Lotus Root with Peanut Soup": "Pictures/lotus.jpg",
    "Old Cucumber Soup": "Pictures/oldcucumbersoup.jpg",
    "Herbal Chicken Soup": "Pictures/chinesechickenherbalsoup.jpg",
}

_STEP_NUMBER_RE = re.compile(r"[0-9]+\)\s*")


def recipe_description(name: str) -> str:
    return _DESCRIPTIONS.get(name, DEFAULT_DESCRIPTION)


def recipe_image(name: str) -> str:
    return _IMAGES.get(name, DEFAULT_IMAGE)


# ----------------- cook time -----------------


class DurationError(ValueError):
    pass


def format_cook_time(minutes: Any) -> str:
    """90 -> '1 hour 30 minutes', 120 -> '2 hours', 45 -> '45 minutes'.

    Raises DurationError for nan, negative or non-integral input.
    """
    if isinstance(minutes, bool) or not isinstance(minutes, (int, float)):
        raise DurationError(f"cook time must be a number of minutes, got {minutes!r}")
    if isinstance(minutes, float):
        if math.isnan(minutes) or not minutes.is_integer():
            raise DurationError(f"cook time must be a whole number of minutes, got {minutes!r}")
        minutes = int(minutes)
    if minutes < 0:
        raise DurationError(f"cook time must not be negative, got {minutes!r}")

    if minutes < 60:
        return f"{minutes} minutes"
    hours, mins = divmod(minutes, 60)
    unit = "hours" if hours > 1 else "hour"
    if mins == 0:
        return f"{hours} {unit}"
    return f"{hours} {unit} {mins} minutes"


def _safe_cook_time(recipe: SoupRecipe) -> Optional[str]:
    try:
        return format_cook_time(recipe.cook_time_minutes)
    except DurationError as e:
        logger.error("Bad cook time for %r: %s", recipe.name, e)
        return None


# ----------------- text segmentation -----------------


class InstructionFormat(str, Enum):
    NUMBERED = "numbered"
    SENTENCES = "sentences"


def classify_instructions(raw: str) -> InstructionFormat:
    """Any ')' selects NUMBERED, even one inside an ordinary sentence."""
    return InstructionFormat.NUMBERED if ")" in (raw or "") else InstructionFormat.SENTENCES


def split_ingredients(raw: str) -> List[str]:
    return [p.strip() for p in (raw or "").split(",") if p.strip()]


def _as_step(text: str) -> str:
    if text.endswith("."):
        text = text[:-1]
    return f"{text}."


def split_instructions(raw: str) -> List[str]:
    """'1) Boil. 2) Simmer.' and 'Boil. Simmer.' both give ['Boil.', 'Simmer.']."""
    raw = raw or ""
    if classify_instructions(raw) is InstructionFormat.NUMBERED:
        pieces = _STEP_NUMBER_RE.split(raw)
    else:
        pieces = raw.split(".")
    return [_as_step(p.strip()) for p in pieces if p.strip()]


# ----------------- views -----------------


@dataclass(frozen=True)
class RecipeCard:
    name: str
    image: str
    description: str
    cook_time: Optional[str]
    difficulty: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RecipeDetail:
    name: str
    image: str
    cook_time: Optional[str]
    difficulty: str
    source: str
    instruction_format: InstructionFormat
    ingredients: List[str] = field(default_factory=list)
    instructions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["instruction_format"] = self.instruction_format.value
        return d


def card_for(recipe: SoupRecipe) -> RecipeCard:
    return RecipeCard(
        name=recipe.name,
        image=recipe_image(recipe.name),
        description=recipe_description(recipe.name),
        cook_time=_safe_cook_time(recipe),
        difficulty=recipe.difficulty.upper(),
    )


def render_cards(store: CatalogStore) -> List[RecipeCard]:
    return [card_for(r) for r in store.recipes()]


def detail_for(recipe: SoupRecipe) -> RecipeDetail:
    return RecipeDetail(
        name=recipe.name,
        image=recipe_image(recipe.name),
        cook_time=_safe_cook_time(recipe),
        difficulty=recipe.difficulty,
        source=recipe.source,
        instruction_format=classify_instructions(recipe.instructions_raw),
        ingredients=split_ingredients(recipe.ingredients_raw),
        instructions=split_instructions(recipe.instructions_raw),
    )


def render_detail(store: CatalogStore, name: str) -> Optional[RecipeDetail]:
    recipe = store.get(name)
    if recipe is None:
        logger.warning("Recipe not found: %r", name)
        return None
    return detail_for(recipe)

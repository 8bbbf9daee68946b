"""
Template-based recipe generator.

There is no real generation algorithm: every call fabricates exactly two
recipes from two fixed templates, filled in with the user's ingredients.

- Template A ("Fusion Delight"): titled after the first ingredient, uses all
  ingredients plus basic aromatics. Easy, 25 min, serves 4.
- Template B ("Gourmet Bowl"): titled after a randomly picked ingredient, uses
  the first three ingredients plus herbs, spices and broth. Medium, 30 min,
  serves 2.

Randomness (Template B's title) comes from an injected random.Random, and ids
come from an injected IdSource, so results can be made reproducible in tests.

generate_recipes() wraps build_recipes() behind a simulated asynchronous delay
(asyncio.sleep) that stands in for a generation backend call.
"""

import asyncio
import logging
import random
import time
from typing import Callable, List, Optional, Sequence

from recipe_workbench.models import ANY, Recipe

logger = logging.getLogger(__name__)

FUSION_AROMATICS = ["olive oil", "salt", "pepper", "garlic"]
BOWL_FILLERS = ["herbs", "spices", "broth"]
BOWL_MAX_USER_INGREDIENTS = 3

FUSION_DEFAULT_CUISINE = "Fusion"
BOWL_DEFAULT_CUISINE = "Contemporary"


def _now_ms() -> int:
    return int(time.time() * 1000)


class IdSource:
    """
    Monotonic recipe id source.

    Ids are millisecond timestamps rendered as strings. When the clock has not
    advanced past the last issued id (two recipes in the same batch, a fast
    second click, a clock step backwards) the previous id plus one is used, so
    every id is strictly greater than all ids issued before it.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or _now_ms
        self._last: Optional[int] = None

    def next_id(self) -> str:
        candidate = int(self._clock())
        if self._last is not None and candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return str(candidate)


def _resolve_cuisine(cuisine: str, default: str) -> str:
    return default if cuisine == ANY else cuisine


def _resolve_dietary(dietary: str) -> List[str]:
    return [] if dietary == ANY else [dietary]


def _fusion_delight(
    ingredients: Sequence[str],
    cuisine: str,
    dietary: str,
    recipe_id: str,
) -> Recipe:
    main = ingredients[0]
    return Recipe(
        id=recipe_id,
        title=f"{main} Fusion Delight",
        ingredients=[*ingredients, *FUSION_AROMATICS],
        instructions=[
            "Heat olive oil in a large pan over medium heat",
            f"Add {main} and cook for 5-7 minutes",
            "Season with salt, pepper, and minced garlic",
            "Add remaining ingredients and cook for 10-12 minutes",
            "Serve hot and enjoy!",
        ],
        cooking_time=25,
        servings=4,
        difficulty="Easy",
        cuisine=_resolve_cuisine(cuisine, FUSION_DEFAULT_CUISINE),
        dietary=_resolve_dietary(dietary),
        is_favorite=False,
    )


def _gourmet_bowl(
    ingredients: Sequence[str],
    cuisine: str,
    dietary: str,
    recipe_id: str,
    rng: random.Random,
) -> Recipe:
    featured = ingredients[rng.randrange(len(ingredients))]
    return Recipe(
        id=recipe_id,
        title=f"Gourmet {featured} Bowl",
        ingredients=[*ingredients[:BOWL_MAX_USER_INGREDIENTS], *BOWL_FILLERS],
        instructions=[
            "Prepare all ingredients by washing and chopping",
            "In a large pot, combine broth with main ingredients",
            "Simmer for 15-20 minutes until tender",
            "Add herbs and spices to taste",
            "Serve in bowls with fresh garnish",
        ],
        cooking_time=30,
        servings=2,
        difficulty="Medium",
        cuisine=_resolve_cuisine(cuisine, BOWL_DEFAULT_CUISINE),
        dietary=_resolve_dietary(dietary),
        is_favorite=False,
    )


def build_recipes(
    ingredients: Sequence[str],
    cuisine: str = ANY,
    dietary: str = ANY,
    rng: Optional[random.Random] = None,
    id_source: Optional[IdSource] = None,
) -> List[Recipe]:
    """
    Fabricate one recipe per template from the given ingredients.

    Args:
        ingredients: User ingredients (order matters: the first one names Template A)
        cuisine: Selected cuisine, or "any" for the template defaults
        dietary: Selected dietary preference, or "any" for none
        rng: Randomness source for Template B's featured ingredient
        id_source: Source of unique recipe ids

    Returns:
        [Fusion Delight, Gourmet Bowl], or an empty list if no ingredients were given
    """
    if not ingredients:
        return []

    rng = rng or random.Random()
    id_source = id_source or IdSource()
    ingredients = list(ingredients)

    return [
        _fusion_delight(ingredients, cuisine, dietary, id_source.next_id()),
        _gourmet_bowl(ingredients, cuisine, dietary, id_source.next_id(), rng),
    ]


async def generate_recipes(
    ingredients: Sequence[str],
    cuisine: str = ANY,
    dietary: str = ANY,
    *,
    delay_seconds: float = 2.0,
    rng: Optional[random.Random] = None,
    id_source: Optional[IdSource] = None,
) -> List[Recipe]:
    """
    Simulate an asynchronous generation call, then build recipes from templates.

    Returns immediately with an empty list when there are no ingredients.
    The delay is a plain asyncio.sleep: cancelling the awaiting task cancels
    the generation and nothing is produced.
    """
    if not ingredients:
        return []

    # Snapshot inputs before suspending so later edits don't leak into this batch
    ingredients = list(ingredients)
    logger.debug("Simulating generation delay of %.2fs", delay_seconds)
    await asyncio.sleep(delay_seconds)

    return build_recipes(ingredients, cuisine, dietary, rng=rng, id_source=id_source)

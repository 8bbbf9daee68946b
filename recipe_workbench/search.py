"""
Search view over generated recipes.

This module derives what the gallery shows from the current recipes and search
term. Nothing here mutates state or remembers anything between calls.

# NOTE: Only the search term filters the gallery. The cuisine and dietary
    selectors affect recipes generated afterwards, not the ones already shown.
"""

from typing import List, Optional, Tuple

import pandas as pd

from recipe_workbench.models import Recipe

# Card preview sizes
PREVIEW_INGREDIENT_LIMIT = 4
PREVIEW_INSTRUCTION_LIMIT = 3

DATAFRAME_COLUMNS = [
    "title",
    "cuisine",
    "cooking_time",
    "servings",
    "difficulty",
    "dietary",
    "is_favorite",
]


def matches_search(recipe: Recipe, search_term: Optional[str]) -> bool:
    """
    Check whether a recipe matches a search term.

    A recipe matches when the term is a case-insensitive substring of its title
    or of any of its ingredients. An empty term matches every recipe.
    """
    if not search_term:
        return True
    needle = search_term.lower()
    if needle in recipe.title.lower():
        return True
    return any(needle in ingredient.lower() for ingredient in recipe.ingredients)


def filter_recipes(recipes: List[Recipe], search_term: Optional[str] = None) -> List[Recipe]:
    """
    Filter recipes by search term.

    Args:
        recipes: Recipes in display order (newest first)
        search_term: Free-text search; empty or None keeps all recipes

    Returns:
        Matching recipes in their original order
    """
    return [recipe for recipe in recipes if matches_search(recipe, search_term)]


def preview_ingredients(recipe: Recipe, limit: int = PREVIEW_INGREDIENT_LIMIT) -> Tuple[List[str], int]:
    """
    Split a recipe's ingredients for card display.

    Returns:
        (ingredients to show, number of hidden ingredients for a "+N more" hint)
    """
    shown = recipe.ingredients[:limit]
    return shown, len(recipe.ingredients) - len(shown)


def preview_instructions(recipe: Recipe, limit: int = PREVIEW_INSTRUCTION_LIMIT) -> Tuple[List[str], int]:
    """
    Split a recipe's steps for card display.

    Returns:
        (steps to show, number of hidden steps for a "+N more steps" hint)
    """
    shown = recipe.instructions[:limit]
    return shown, len(recipe.instructions) - len(shown)


def recipes_to_dataframe(recipes: List[Recipe]) -> pd.DataFrame:
    """
    Build a tabular overview of recipes.

    The dietary list is flattened to a comma-separated string so the frame
    renders cleanly in st.dataframe.

    Returns:
        DataFrame with DATAFRAME_COLUMNS, one row per recipe, indexed by recipe id
    """
    rows = []
    for recipe in recipes:
        row = recipe.model_dump(include=set(DATAFRAME_COLUMNS) | {"id"})
        row["dietary"] = ", ".join(recipe.dietary)
        rows.append(row)

    df = pd.DataFrame(rows, columns=["id"] + DATAFRAME_COLUMNS)
    return df.set_index("id")

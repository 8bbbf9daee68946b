"""
Favorite toggling for generated recipes.
"""

from typing import List

from recipe_workbench.models import Recipe


def toggle_favorite(recipes: List[Recipe], recipe_id: str) -> List[Recipe]:
    """
    Flip is_favorite on the recipe with the given id.

    Returns a new list; the matching recipe is replaced by an updated copy and
    all other recipes are passed through untouched. Unknown ids are ignored and
    the original list is returned.
    """
    if not any(recipe.id == recipe_id for recipe in recipes):
        return recipes
    return [
        recipe.model_copy(update={"is_favorite": not recipe.is_favorite})
        if recipe.id == recipe_id
        else recipe
        for recipe in recipes
    ]


def favorite_recipes(recipes: List[Recipe]) -> List[Recipe]:
    """Favorited recipes, in display order."""
    return [recipe for recipe in recipes if recipe.is_favorite]

"""
Ingredient list management.

Pure functions over the ingredient list. Both return a new list and never
mutate the one passed in. Invalid input (empty, whitespace-only, duplicate,
absent) is a silent no-op: the original list is returned unchanged.
"""

from typing import List, Optional


def normalize_ingredient(raw: Optional[str]) -> str:
    """Trim surrounding whitespace; None becomes an empty string."""
    if raw is None:
        return ""
    return raw.strip()


def add_ingredient(ingredients: List[str], raw: Optional[str]) -> List[str]:
    """
    Append a trimmed ingredient to the end of the list.

    Duplicates are detected by exact, case-sensitive comparison
    ("Tomato" and "tomato" are different ingredients).

    Args:
        ingredients: Current ingredient list
        raw: Raw text as typed by the user

    Returns:
        A new list with the ingredient appended, or the original list if the
        trimmed value is empty or already present.
    """
    value = normalize_ingredient(raw)
    if not value or value in ingredients:
        return ingredients
    return [*ingredients, value]


def remove_ingredient(ingredients: List[str], value: str) -> List[str]:
    """
    Remove an ingredient by exact match.

    Returns:
        A new list without the value, or the original list if it was absent.
    """
    if value not in ingredients:
        return ingredients
    return [item for item in ingredients if item != value]

"""
Recipe and workbench state models.

This module defines the canonical data shapes used throughout the workbench:
- Recipe: a generated recipe card shown in the gallery
- WorkbenchState: the single explicit state struct for one user session

It also holds the selector enumerations (cuisine and dietary options) and the
"any" sentinel that means "no preference".

# NOTE: Recipes are never persisted. They live only as long as the session that
    created them (in the Streamlit app: st.session_state).
"""

from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

# Sentinel selector value meaning "no preference"
ANY = "any"

CUISINE_OPTIONS = [
    ANY,
    "Italian",
    "Mexican",
    "Asian",
    "Indian",
    "Mediterranean",
    "American",
    "French",
]

DIETARY_OPTIONS = [
    ANY,
    "Vegetarian",
    "Vegan",
    "Gluten-Free",
    "Keto",
    "Low-Carb",
    "Dairy-Free",
]

Difficulty = Literal["Easy", "Medium", "Hard"]


def format_option_label(value: str) -> str:
    """
    Display label for a selector option (first character upper-cased).

    Examples:
        >>> format_option_label("any")
        'Any'
        >>> format_option_label("Gluten-Free")
        'Gluten-Free'
    """
    if not value:
        return value
    return value[0].upper() + value[1:]


class Recipe(BaseModel):
    """
    A generated recipe card.

    Recipes are created only by the generator. The only field that changes
    after creation is is_favorite (see favorites.toggle_favorite).
    """
    id: str = Field(..., description="Unique recipe identifier within the session")
    title: str = Field(..., description="Generated recipe title")
    ingredients: List[str] = Field(default_factory=list, description="User ingredients plus template filler items")
    instructions: List[str] = Field(default_factory=list, description="Ordered preparation steps")
    cooking_time: int = Field(..., ge=0, description="Cooking time in minutes")
    servings: int = Field(..., ge=1, description="Number of servings")
    difficulty: Difficulty = Field(..., description="Difficulty level (Easy, Medium, Hard)")
    cuisine: str = Field(..., description="Selected cuisine, or the template default when 'any'")
    dietary: List[str] = Field(default_factory=list, description="Zero or one dietary preference")
    is_favorite: bool = Field(default=False, description="Whether the user marked this recipe as favorite")

    @field_validator("dietary")
    @classmethod
    def _single_dietary_choice(cls, value: List[str]) -> List[str]:
        if len(value) > 1:
            raise ValueError("dietary supports a single choice (at most one entry)")
        return value


class WorkbenchState(BaseModel):
    """
    All state for one workbench session.

    Attributes:
        input_ingredient: Pending value of the ingredient text field
        ingredients: Ordered, de-duplicated ingredient list
        recipes: Generated recipes, newest first
        selected_cuisine: Cuisine used for the next generation
        selected_dietary: Dietary preference used for the next generation
        is_generating: True while a generation is in flight
        search_term: Current gallery search text
        show_filters: Whether the filter panel is visible (pure UI state)
    """
    input_ingredient: str = ""
    ingredients: List[str] = Field(default_factory=list)
    recipes: List[Recipe] = Field(default_factory=list)
    selected_cuisine: str = ANY
    selected_dietary: str = ANY
    is_generating: bool = False
    search_term: str = ""
    show_filters: bool = False


"""
Recipe Workbench state container.

RecipeWorkbench owns a single WorkbenchState and applies the pure transition
functions from ingredients, generator, favorites and search to it. The
rendering layer (the Streamlit app) reads `workbench.state` and can subscribe
to be told when it changes.

Flow for one generation:
    generate() -> guard (no ingredients / already in flight / disposed)
               -> is_generating = True
               -> asyncio.Task(generate_recipes(...))   # simulated delay
               -> prepend results, is_generating = False

Teardown:
    dispose() cancels a pending generation task. Its result is discarded, the
    in-flight flag is cleared and the awaiting caller sees CancelledError.
    A disposed workbench ignores further generate() calls.
"""

import asyncio
import logging
import random
from typing import Callable, List, Optional

from recipe_workbench import events
from recipe_workbench.config import WorkbenchConfig
from recipe_workbench.favorites import toggle_favorite
from recipe_workbench.generator import IdSource, generate_recipes
from recipe_workbench.ingredients import add_ingredient, normalize_ingredient, remove_ingredient
from recipe_workbench.models import CUISINE_OPTIONS, DIETARY_OPTIONS, Recipe, WorkbenchState
from recipe_workbench.search import filter_recipes

logger = logging.getLogger(__name__)

Subscriber = Callable[[WorkbenchState], None]


class RecipeWorkbench:
    """
    Session-scoped state container for the recipe generator.

    Args:
        state: Initial state (default: empty WorkbenchState)
        rng: Randomness source for templates (default: seeded from RECIPE_RANDOM_SEED)
        id_source: Recipe id source (default: millisecond clock)
        delay_seconds: Simulated generation delay (default: from RECIPE_GENERATION_DELAY_MS)
        session_id: Optional session identifier attached to logged events
    """

    def __init__(
        self,
        state: Optional[WorkbenchState] = None,
        *,
        rng: Optional[random.Random] = None,
        id_source: Optional[IdSource] = None,
        delay_seconds: Optional[float] = None,
        session_id: Optional[str] = None,
    ):
        self.state = state if state is not None else WorkbenchState()
        self.session_id = session_id
        self._rng = rng if rng is not None else random.Random(WorkbenchConfig.get_random_seed())
        self._id_source = id_source or IdSource()
        self._delay_seconds = (
            delay_seconds if delay_seconds is not None else WorkbenchConfig.get_generation_delay_seconds()
        )
        self._subscribers: List[Subscriber] = []
        self._task: Optional[asyncio.Task] = None
        self._disposed = False

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback invoked with the state after every change.

        Returns:
            A function that removes the callback again
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            callback(self.state)

    # ------------------------------------------------------------------
    # Ingredients
    # ------------------------------------------------------------------

    def set_input_ingredient(self, value: str) -> None:
        """Update the pending ingredient text field value."""
        if value == self.state.input_ingredient:
            return
        self.state.input_ingredient = value
        self._notify()

    def add_ingredient(self, raw: Optional[str] = None) -> bool:
        """
        Add an ingredient (defaults to the pending input value).

        The pending input is cleared only when the ingredient was added;
        empty and duplicate entries are ignored and leave the input as typed.

        Returns:
            True if the ingredient list changed
        """
        if raw is None:
            raw = self.state.input_ingredient
        updated = add_ingredient(self.state.ingredients, raw)
        if updated is self.state.ingredients:
            logger.debug("Ignored ingredient %r (empty or duplicate)", raw)
            return False

        value = normalize_ingredient(raw)
        self.state.ingredients = updated
        self.state.input_ingredient = ""
        logger.debug("Added ingredient %r (%d total)", value, len(updated))
        events.log_ingredient_added(self.session_id, value, len(updated))
        self._notify()
        return True

    def remove_ingredient(self, value: str) -> bool:
        """
        Remove an ingredient by exact match.

        Returns:
            True if the ingredient was present and removed
        """
        updated = remove_ingredient(self.state.ingredients, value)
        if updated is self.state.ingredients:
            return False

        self.state.ingredients = updated
        logger.debug("Removed ingredient %r (%d left)", value, len(updated))
        events.log_ingredient_removed(self.session_id, value, len(updated))
        self._notify()
        return True

    # ------------------------------------------------------------------
    # Selectors and UI flags
    # ------------------------------------------------------------------

    def set_cuisine(self, cuisine: str) -> None:
        """
        Select the cuisine for future generations.

        Raises:
            ValueError: If cuisine is not in CUISINE_OPTIONS
        """
        if cuisine not in CUISINE_OPTIONS:
            raise ValueError(f"Invalid cuisine: {cuisine}. Must be one of {CUISINE_OPTIONS}")
        if cuisine == self.state.selected_cuisine:
            return
        self.state.selected_cuisine = cuisine
        self._notify()

    def set_dietary(self, dietary: str) -> None:
        """
        Select the dietary preference for future generations.

        Raises:
            ValueError: If dietary is not in DIETARY_OPTIONS
        """
        if dietary not in DIETARY_OPTIONS:
            raise ValueError(f"Invalid dietary preference: {dietary}. Must be one of {DIETARY_OPTIONS}")
        if dietary == self.state.selected_dietary:
            return
        self.state.selected_dietary = dietary
        self._notify()

    def toggle_filters(self) -> None:
        """Show or hide the filter panel."""
        self.state.show_filters = not self.state.show_filters
        self._notify()

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def set_search_term(self, term: str) -> None:
        """Update the gallery search term."""
        term = term or ""
        if term == self.state.search_term:
            return
        self.state.search_term = term
        if term:
            events.log_search_performed(self.session_id, term, len(self.visible_recipes()))
        self._notify()

    def visible_recipes(self) -> List[Recipe]:
        """Recipes matching the current search term, newest first."""
        return filter_recipes(self.state.recipes, self.state.search_term)

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    def toggle_favorite(self, recipe_id: str) -> bool:
        """
        Flip the favorite flag of a recipe.

        Returns:
            True if a recipe with this id exists
        """
        updated = toggle_favorite(self.state.recipes, recipe_id)
        if updated is self.state.recipes:
            logger.debug("Ignored favorite toggle for unknown recipe %r", recipe_id)
            return False

        self.state.recipes = updated
        is_favorite = next(r.is_favorite for r in updated if r.id == recipe_id)
        events.log_favorite_toggled(self.session_id, recipe_id, is_favorite)
        self._notify()
        return True

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    @property
    def disposed(self) -> bool:
        return self._disposed

    def can_generate(self) -> bool:
        """Whether the Generate control should be enabled."""
        return bool(self.state.ingredients) and not self.state.is_generating and not self._disposed

    async def generate(self) -> List[Recipe]:
        """
        Generate two recipes from the current ingredients and selectors.

        Inputs are read when the call starts. New recipes are prepended to
        the existing ones.

        Returns:
            The newly created recipes, or an empty list if generation was
            skipped (no ingredients, already in flight, or disposed)

        Raises:
            asyncio.CancelledError: If dispose() was called while pending
        """
        if self._disposed:
            logger.debug("Ignored generate() on disposed workbench")
            return []
        if not self.state.ingredients:
            logger.debug("Ignored generate() with no ingredients")
            return []
        if self.state.is_generating:
            logger.debug("Ignored generate() while a generation is in flight")
            return []

        ingredients = list(self.state.ingredients)
        cuisine = self.state.selected_cuisine
        dietary = self.state.selected_dietary

        self.state.is_generating = True
        self._notify()
        logger.info(
            "Generating recipes from %d ingredient(s) (cuisine=%s, dietary=%s)",
            len(ingredients), cuisine, dietary,
        )

        self._task = asyncio.create_task(
            generate_recipes(
                ingredients,
                cuisine,
                dietary,
                delay_seconds=self._delay_seconds,
                rng=self._rng,
                id_source=self._id_source,
            )
        )
        try:
            new_recipes = await self._task
        except asyncio.CancelledError:
            logger.info("Generation cancelled, pending result discarded")
            self._end_generation(notify=not self._disposed)
            raise
        except Exception:
            logger.exception("Generation failed")
            self._end_generation(notify=not self._disposed)
            raise
        self._end_generation(notify=False)

        if self._disposed:
            logger.info("Workbench disposed during generation, result discarded")
            return []

        self.state.recipes = [*new_recipes, *self.state.recipes]
        logger.info("Generated %d recipe(s), %d total", len(new_recipes), len(self.state.recipes))
        events.log_recipes_generated(
            self.session_id,
            [recipe.id for recipe in new_recipes],
            cuisine,
            dietary,
            len(ingredients),
        )
        self._notify()
        return new_recipes

    def _end_generation(self, notify: bool) -> None:
        """Clear the in-flight flag; notify when no finishing notification follows."""
        self._task = None
        self.state.is_generating = False
        if notify:
            self._notify()

    def dispose(self) -> None:
        """
        Tear down the workbench.

        Cancels a pending generation (its result is discarded), clears the
        in-flight flag and drops all subscribers.
        """
        self._disposed = True
        if self._task is not None and not self._task.done():
            logger.debug("Cancelling pending generation on dispose")
            self._task.cancel()
        self.state.is_generating = False
        self._subscribers.clear()

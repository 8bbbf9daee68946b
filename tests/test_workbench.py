"""
Tests for the RecipeWorkbench state container.

This module tests the workbench end to end:
- Ingredient add/remove and pending input handling
- Generation: prepending, selectors, in-flight guard, teardown
- Favorites, search and selector setters
- Subscriber notifications
"""

import asyncio
import json
import random

import pytest

from recipe_workbench.generator import IdSource
from recipe_workbench.workbench import RecipeWorkbench


def make_workbench(**kwargs) -> RecipeWorkbench:
    """Workbench with no delay, seeded randomness and a frozen id clock."""
    kwargs.setdefault("delay_seconds", 0)
    kwargs.setdefault("rng", random.Random(42))
    kwargs.setdefault("id_source", IdSource(clock=lambda: 1_000))
    return RecipeWorkbench(**kwargs)


class TestIngredients:
    """Ingredient handling through the workbench."""

    def test_add_from_pending_input_clears_it(self):
        wb = make_workbench()
        wb.set_input_ingredient("  chicken ")
        assert wb.add_ingredient() is True
        assert wb.state.ingredients == ["chicken"]
        assert wb.state.input_ingredient == ""

    def test_rejected_add_keeps_pending_input(self):
        wb = make_workbench()
        wb.add_ingredient("chicken")
        wb.set_input_ingredient("chicken")
        assert wb.add_ingredient() is False
        assert wb.state.input_ingredient == "chicken"
        assert wb.state.ingredients == ["chicken"]

    def test_remove(self):
        wb = make_workbench()
        wb.add_ingredient("chicken")
        wb.add_ingredient("rice")
        assert wb.remove_ingredient("chicken") is True
        assert wb.remove_ingredient("chicken") is False
        assert wb.state.ingredients == ["rice"]


class TestGenerate:
    """Generation through the workbench."""

    def test_no_ingredients_leaves_recipes_unchanged(self):
        wb = make_workbench()
        assert asyncio.run(wb.generate()) == []
        assert wb.state.recipes == []
        assert wb.state.is_generating is False

    def test_generates_two_recipes_with_defaults(self):
        wb = make_workbench()
        wb.add_ingredient("chicken")

        new = asyncio.run(wb.generate())

        assert len(new) == 2
        assert "chicken Fusion Delight" in new[0].title
        assert [r.cuisine for r in new] == ["Fusion", "Contemporary"]
        assert all(r.dietary == [] for r in new)
        assert wb.state.is_generating is False

    def test_new_recipes_are_prepended(self):
        wb = make_workbench()
        wb.add_ingredient("chicken")
        first = asyncio.run(wb.generate())
        second = asyncio.run(wb.generate())

        assert wb.state.recipes == second + first
        ids = [r.id for r in wb.state.recipes]
        assert len(set(ids)) == 4

    def test_cuisine_change_only_affects_later_generations(self):
        wb = make_workbench()
        wb.add_ingredient("pasta")
        old = asyncio.run(wb.generate())

        wb.set_cuisine("Italian")
        wb.set_dietary("Vegetarian")
        new = asyncio.run(wb.generate())

        assert [r.cuisine for r in new] == ["Italian", "Italian"]
        assert [r.dietary for r in new] == [["Vegetarian"], ["Vegetarian"]]
        assert [r.cuisine for r in wb.state.recipes[2:]] == ["Fusion", "Contemporary"]
        assert wb.state.recipes[2:] == old

    def test_second_call_while_in_flight_is_ignored(self):
        async def scenario():
            wb = make_workbench(delay_seconds=0.05)
            wb.add_ingredient("rice")
            first = asyncio.create_task(wb.generate())
            await asyncio.sleep(0)

            assert wb.state.is_generating is True
            assert wb.can_generate() is False
            second = await wb.generate()
            first_result = await first
            return wb, first_result, second

        wb, first_result, second = asyncio.run(scenario())

        assert second == []
        assert len(first_result) == 2
        assert len(wb.state.recipes) == 2
        assert wb.state.is_generating is False

    def test_inputs_are_read_when_generation_starts(self):
        async def scenario():
            wb = make_workbench(delay_seconds=0.05)
            wb.add_ingredient("rice")
            pending = asyncio.create_task(wb.generate())
            await asyncio.sleep(0)
            wb.add_ingredient("beans")
            wb.set_cuisine("Mexican")
            return await pending

        fusion, _ = asyncio.run(scenario())

        assert "beans" not in fusion.ingredients
        assert fusion.cuisine == "Fusion"

    def test_dispose_discards_pending_result(self):
        async def scenario():
            wb = make_workbench(delay_seconds=3600)
            wb.add_ingredient("rice")
            pending = asyncio.create_task(wb.generate())
            await asyncio.sleep(0)
            assert wb.state.is_generating is True

            wb.dispose()
            with pytest.raises(asyncio.CancelledError):
                await pending
            return wb

        wb = asyncio.run(scenario())

        assert wb.state.recipes == []
        assert wb.state.is_generating is False
        assert wb.disposed is True

    def test_disposed_workbench_ignores_generate(self):
        wb = make_workbench()
        wb.add_ingredient("rice")
        wb.dispose()
        assert wb.can_generate() is False
        assert asyncio.run(wb.generate()) == []
        assert wb.state.recipes == []

    def test_generation_is_logged(self, isolated_event_log):
        wb = make_workbench(session_id="session-1")
        wb.add_ingredient("chicken")
        new = asyncio.run(wb.generate())

        records = [json.loads(line) for line in isolated_event_log.read_text(encoding="utf-8").splitlines()]
        generated = [r for r in records if r["event"] == "recipes_generated"]
        assert len(generated) == 1
        assert generated[0]["session_id"] == "session-1"
        assert generated[0]["payload"]["recipe_ids"] == [r.id for r in new]


class TestFavoritesAndSearch:
    """Favorite toggling and search through the workbench."""

    def test_toggle_favorite_twice_restores(self):
        wb = make_workbench()
        wb.add_ingredient("chicken")
        recipe_id = asyncio.run(wb.generate())[0].id

        assert wb.toggle_favorite(recipe_id) is True
        assert wb.state.recipes[0].is_favorite is True
        assert wb.state.recipes[1].is_favorite is False
        wb.toggle_favorite(recipe_id)
        assert wb.state.recipes[0].is_favorite is False

    def test_toggle_unknown_id(self):
        wb = make_workbench()
        assert wb.toggle_favorite("missing") is False

    def test_visible_recipes_follow_search_term(self):
        wb = make_workbench()
        wb.add_ingredient("chicken")
        wb.add_ingredient("tomato")
        asyncio.run(wb.generate())

        wb.set_search_term("FUSION")
        assert [r.title for r in wb.visible_recipes()] == ["chicken Fusion Delight"]

        wb.set_search_term("")
        assert wb.visible_recipes() == wb.state.recipes


class TestSelectors:
    """Selector and UI flag setters."""

    def test_invalid_cuisine_raises(self):
        with pytest.raises(ValueError):
            make_workbench().set_cuisine("Martian")

    def test_invalid_dietary_raises(self):
        with pytest.raises(ValueError):
            make_workbench().set_dietary("Carnivore")

    def test_toggle_filters(self):
        wb = make_workbench()
        wb.toggle_filters()
        assert wb.state.show_filters is True
        wb.toggle_filters()
        assert wb.state.show_filters is False


class TestSubscribe:
    """Subscriber notifications."""

    def test_notifies_on_change_only(self):
        wb = make_workbench()
        calls = []
        wb.subscribe(calls.append)

        wb.add_ingredient("egg")
        wb.add_ingredient("egg")
        wb.remove_ingredient("milk")
        wb.set_cuisine("any")

        assert len(calls) == 1
        assert calls[0] is wb.state

    def test_generation_notifies_start_and_finish(self):
        wb = make_workbench()
        wb.add_ingredient("egg")
        flags = []
        wb.subscribe(lambda state: flags.append(state.is_generating))

        asyncio.run(wb.generate())

        assert flags == [True, False]

    def test_cancelled_generation_notifies_finish(self):
        wb = make_workbench(delay_seconds=3600)
        wb.add_ingredient("egg")
        flags = []
        wb.subscribe(lambda state: flags.append(state.is_generating))

        async def scenario():
            with pytest.raises(asyncio.TimeoutError):
                await asyncio.wait_for(wb.generate(), timeout=0.01)

        asyncio.run(scenario())

        assert flags == [True, False]
        assert wb.state.is_generating is False
        assert wb.state.recipes == []
        assert wb.can_generate() is True

    def test_unsubscribe(self):
        wb = make_workbench()
        calls = []
        unsubscribe = wb.subscribe(calls.append)
        unsubscribe()
        wb.add_ingredient("egg")
        assert calls == []

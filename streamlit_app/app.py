"""
Recipe Workbench - Streamlit Frontend Main Entry Point.

Single-page recipe generator: the user adds ingredients, optionally picks a
cuisine and dietary preference, and generates recipe suggestions that appear
in a searchable card gallery where they can be marked as favorites.

All state lives in the session's RecipeWorkbench (see utils/state.py). Each
script run renders from that state; widget actions call workbench methods, and
if a run changed the state the script reruns once so every widget reflects it.

Run with:
    streamlit run streamlit_app/app.py
"""

import logging
import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import recipe_workbench
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from recipe_workbench.config import LoggingConfig, get_config_summary

import streamlit as st

from recipe_workbench.favorites import favorite_recipes
from recipe_workbench.models import (
    CUISINE_OPTIONS,
    DIETARY_OPTIONS,
    Recipe,
    format_option_label,
)
from recipe_workbench.search import preview_ingredients, preview_instructions, recipes_to_dataframe
from recipe_workbench.workbench import RecipeWorkbench
from utils.state import get_revision, get_workbench, reset_workbench, run_generation
from ui.styles import load_global_styles
from ui.layout import page_header, section, card, pill_tag
from ui.feedback import show_empty_state, working_spinner

INGREDIENT_INPUT_KEY = "ingredient_input"
SEARCH_INPUT_KEY = "recipe_search"
GALLERY_COLUMNS = 3

logging.basicConfig(
    level=LoggingConfig.get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Generator",
    page_icon="👨‍🍳",
    layout="wide",
    initial_sidebar_state="collapsed",
)

load_global_styles()

workbench = get_workbench()
revision_at_start = get_revision()


def _handle_add_ingredient() -> None:
    """Form submit callback: add the typed ingredient and clear the field on success."""
    wb = get_workbench()
    raw = st.session_state.get(INGREDIENT_INPUT_KEY, "")
    wb.set_input_ingredient(raw)
    if wb.add_ingredient():
        # Widget values may only be reset from a callback, before the widget is rendered
        st.session_state[INGREDIENT_INPUT_KEY] = wb.state.input_ingredient


def _render_header_controls() -> None:
    """Search box and filter panel toggle shown at the right of the header."""
    search_col, filter_col = st.columns([3, 1])
    with search_col:
        search_term = st.text_input(
            "Search recipes",
            key=SEARCH_INPUT_KEY,
            placeholder="Search recipes...",
            label_visibility="collapsed",
        )
        workbench.set_search_term(search_term)
    with filter_col:
        if st.button("⚙️ Filters", use_container_width=True):
            workbench.toggle_filters()


def render_ingredient_input(wb: RecipeWorkbench) -> None:
    """Ingredient text field (Enter or the Add button commits) plus selected tags."""
    with st.form("add_ingredient_form", border=False):
        input_col, button_col = st.columns([5, 1])
        with input_col:
            st.text_input(
                "Add Ingredients",
                key=INGREDIENT_INPUT_KEY,
                placeholder="Enter an ingredient (e.g., chicken, tomatoes, pasta)",
            )
        with button_col:
            st.markdown("<div style='height: 1.75rem'></div>", unsafe_allow_html=True)
            st.form_submit_button("➕ Add", on_click=_handle_add_ingredient, use_container_width=True)

    ingredients = wb.state.ingredients
    if not ingredients:
        return

    st.markdown(f"**Selected Ingredients ({len(ingredients)})**")
    tag_cols = st.columns(min(len(ingredients), 6))
    for idx, ingredient in enumerate(ingredients):
        with tag_cols[idx % len(tag_cols)]:
            if st.button(f"{ingredient}  ✕", key=f"remove_ingredient_{idx}_{ingredient}", help="Remove"):
                wb.remove_ingredient(ingredient)


def render_filter_panel(wb: RecipeWorkbench) -> None:
    """Cuisine and dietary selectors; they apply to the next generation only."""
    cuisine_col, dietary_col = st.columns(2)
    with cuisine_col:
        cuisine = st.selectbox(
            "Cuisine Type",
            options=CUISINE_OPTIONS,
            index=CUISINE_OPTIONS.index(wb.state.selected_cuisine),
            format_func=format_option_label,
        )
        wb.set_cuisine(cuisine)
    with dietary_col:
        dietary = st.selectbox(
            "Dietary Preferences",
            options=DIETARY_OPTIONS,
            index=DIETARY_OPTIONS.index(wb.state.selected_dietary),
            format_func=format_option_label,
        )
        wb.set_dietary(dietary)
    st.caption("Preferences apply to newly generated recipes.")


def render_generate_button(wb: RecipeWorkbench) -> None:
    """Generate control, disabled while there are no ingredients or a generation is running."""
    # Generation blocks this script run, so the spinner is the in-flight indicator
    clicked = st.button(
        "👨‍🍳 Generate Recipes",
        type="primary",
        use_container_width=True,
        disabled=not wb.can_generate(),
    )
    if clicked:
        with working_spinner("Creating your recipes…"):
            new_recipes = run_generation(wb)
        if new_recipes:
            st.toast(f"✅ {len(new_recipes)} new recipes ready", icon="✅")


def render_recipe_card(recipe: Recipe, wb: RecipeWorkbench) -> None:
    """
    Render a compact recipe card with a favorite toggle.

    Args:
        recipe: Recipe to display
        wb: Workbench that owns the recipe
    """
    with card():
        title_col, fav_col = st.columns([4, 1])
        with title_col:
            st.markdown(f"### {recipe.title}")
        with fav_col:
            heart = "❤️" if recipe.is_favorite else "🤍"
            if st.button(heart, key=f"favorite_{recipe.id}", help="Toggle favorite"):
                wb.toggle_favorite(recipe.id)

        st.caption(f"⏱ {recipe.cooking_time} min · 👥 {recipe.servings} · 🍽 {recipe.difficulty}")

        tags = [pill_tag(recipe.cuisine, "cuisine")] + [pill_tag(diet, "dietary") for diet in recipe.dietary]
        st.markdown(" ".join(tags), unsafe_allow_html=True)

        st.markdown("**Ingredients:**")
        shown, hidden = preview_ingredients(recipe)
        pills = [pill_tag(item, "muted") for item in shown]
        if hidden:
            pills.append(pill_tag(f"+{hidden} more"))
        st.markdown(" ".join(pills), unsafe_allow_html=True)

        st.markdown("**Instructions:**")
        steps, hidden_steps = preview_instructions(recipe)
        st.markdown("\n".join(f"{i}. {step}" for i, step in enumerate(steps, start=1)))
        if hidden_steps:
            with st.expander(f"+{hidden_steps} more steps", expanded=False):
                for i, step in enumerate(recipe.instructions, start=1):
                    st.markdown(f"{i}. {step}")


def render_gallery(wb: RecipeWorkbench) -> None:
    """Searchable recipe gallery, or the empty state before anything was generated."""
    if not wb.state.recipes:
        show_empty_state(
            title="Ready to Cook Something Amazing?",
            subtitle=(
                "Add your available ingredients above and let our AI chef "
                "create personalized recipes just for you!"
            ),
        )
        return

    visible = wb.visible_recipes()
    if not visible:
        st.caption(f"No recipes match **'{wb.state.search_term}'**. Try a different search term.")
        return

    section(f"Your Generated Recipes ({len(visible)})")
    favorites = favorite_recipes(visible)
    if favorites:
        st.caption(f"❤️ {len(favorites)} favorite(s)")

    with st.expander("Table view", expanded=False):
        st.dataframe(recipes_to_dataframe(visible), use_container_width=True)

    cols = st.columns(GALLERY_COLUMNS, gap="large")
    for idx, recipe in enumerate(visible):
        with cols[idx % GALLERY_COLUMNS]:
            render_recipe_card(recipe, wb)


# Sidebar with session controls and effective configuration
with st.sidebar:
    st.markdown("### 👨‍🍳 **Recipe Generator**")
    st.divider()
    st.markdown(f"**Recipes:** {len(workbench.state.recipes)}")
    st.markdown(f"**Favorites:** {len(favorite_recipes(workbench.state.recipes))}")
    if st.button("Start over", use_container_width=True):
        reset_workbench()
        st.session_state[INGREDIENT_INPUT_KEY] = ""
        st.session_state[SEARCH_INPUT_KEY] = ""
        st.rerun()
    with st.expander("Configuration", expanded=False):
        st.json(get_config_summary())

page_header(
    title="Recipe Generator",
    subtitle="Turn what's in your kitchen into recipe ideas.",
    right=_render_header_controls,
)

with card():
    section("Generate Your Perfect Recipe")
    render_ingredient_input(workbench)
    if workbench.state.show_filters:
        render_filter_panel(workbench)
    render_generate_button(workbench)

render_gallery(workbench)

# Rerun once if this pass changed state, so widgets rendered earlier reflect it
if get_revision() != revision_at_start:
    logger.debug("State changed during render, rerunning")
    st.rerun()

"""
Searched recipes screen for the Ingredily application.

Draws the screen model produced by project_ui_state: placeholders for the
initial, loading and error states, and the list/detail panes with recipe
cards on success.
"""

import html
import streamlit as st
import streamlit.components.v1 as components
from typing import Callable, Optional

from models import RecipesUiState, SearchedRecipe
from utils import get_logger
from .image import build_image_html
from .layout import ResponsiveDesign
from .navigation import ListDetailNavigator
from .screen_model import (
    ScreenKind, ScreenModel, RecipeCardModel, ListPaneModel, DetailPaneModel, project_ui_state
)

logger = get_logger(__name__)

DetailRenderer = Callable[[SearchedRecipe], None]


def render_default_detail(recipe: SearchedRecipe):
    """Placeholder detail content keyed to the selected recipe"""
    st.text(f"detail pane for recipe {recipe.title}")


class RecipesScreen:
    """
    Streamlit renderer for the searched recipes screen.

    Rendering is a function of the current UI state and navigator; call
    render() on every script run.
    """

    def __init__(self, navigator: ListDetailNavigator, responsive: ResponsiveDesign,
                 detail_renderer: Optional[DetailRenderer] = None):
        self.navigator = navigator
        self.responsive = responsive
        self.detail_renderer = detail_renderer or render_default_detail

    def render(self, ui_state: RecipesUiState) -> ScreenModel:
        """Project the state and draw the resulting screen"""
        screen = project_ui_state(ui_state.searched_recipes_data_state, self.navigator.snapshot())
        logger.debug(f"Rendering {screen.kind.name} screen")

        if screen.kind is not ScreenKind.SUCCESS and self.navigator.selected_recipe is not None:
            # Selection belongs to the result set it was made in
            self.navigator.reset()

        if screen.kind is ScreenKind.INITIAL:
            self._render_initial_screen()
        elif screen.kind is ScreenKind.LOADING:
            self._render_loading_screen()
        elif screen.kind is ScreenKind.SUCCESS:
            self._render_success_screen(screen)
        elif screen.kind is ScreenKind.ERROR:
            self._render_error_screen()
        return screen

    def _render_placeholder(self, icon: str, title: str, message: str):
        st.markdown(f"""
        <div class="screen-placeholder">
            <div class="placeholder-icon">{icon}</div>
            <h3>{title}</h3>
            <p>{message}</p>
        </div>
        """, unsafe_allow_html=True)

    def _render_initial_screen(self):
        self._render_placeholder(
            "🥕", "Find recipes", "Pick the ingredients you have and search for recipes."
        )

    def _render_loading_screen(self):
        self._render_placeholder("⏳", "Loading recipes", "Looking for recipes that match your ingredients...")

    def _render_error_screen(self):
        self._render_placeholder("⚠️", "Something went wrong", "Recipes could not be loaded.")

    def _render_success_screen(self, screen: ScreenModel):
        if screen.list_pane is not None and screen.detail_pane is not None:
            list_col, detail_col = st.columns([1, 1], gap="large")
            with list_col:
                self._render_list_pane(screen.list_pane)
            with detail_col:
                self._render_detail_pane(screen.detail_pane)
        elif screen.list_pane is not None:
            self._render_list_pane(screen.list_pane)
        elif screen.detail_pane is not None:
            self._render_back_control()
            self._render_detail_pane(screen.detail_pane)

    def _render_back_control(self):
        """Back button; only shown while there is a back step"""
        if not self.navigator.can_navigate_back():
            return
        if st.button("← Back to recipes", key="recipes_back"):
            if self.navigator.navigate_back():
                st.rerun()

    def _render_list_pane(self, list_pane: ListPaneModel):
        st.markdown(f'<div class="recipes-heading">{html.escape(list_pane.heading)}</div>',
                    unsafe_allow_html=True)

        if not list_pane.cards:
            st.caption("No recipes match your ingredients.")
            return

        for card in list_pane.cards:
            self._render_recipe_card(card)

    def _render_recipe_card(self, card: RecipeCardModel):
        """Image, title with likes, and the ingredient match rows"""
        policy = self.responsive.image_policy
        components.html(build_image_html(card.image_url, card.title, policy),
                        height=policy.frame_height_px)
        title = html.escape(card.title)

        st.markdown(f"""
        <div class="recipe-card">
            <div class="recipe-title-row">
                <span class="recipe-title">{title}</span>
                <span class="recipe-likes"><span class="icon-like">♡</span> {card.likes_text}</span>
            </div>
            <div class="icon-text-row"><span class="icon-ok">✓</span> {card.used_ingredients_text}</div>
            <div class="icon-text-row"><span class="icon-missing">✕</span> {card.missed_ingredients_text}</div>
        </div>
        """, unsafe_allow_html=True)

        if st.button("View recipe", key=card.key, width="stretch"):
            self.navigator.select_recipe(card.recipe)
            st.rerun()

    def _render_detail_pane(self, detail_pane: DetailPaneModel):
        if detail_pane.recipe is None:
            st.caption("Select a recipe to see its details.")
            return
        self.detail_renderer(detail_pane.recipe)


def create_recipes_screen(navigator: ListDetailNavigator, responsive: ResponsiveDesign,
                          detail_renderer: Optional[DetailRenderer] = None) -> RecipesScreen:
    """Factory function to create the recipes screen"""
    return RecipesScreen(navigator, responsive, detail_renderer)

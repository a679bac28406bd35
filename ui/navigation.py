"""
List/detail navigation for the recipes screen.

Tracks the selected recipe and which panes are visible. State lives in a
mutable mapping (st.session_state in the app) so it survives reruns; the
layout mode is recomputed from every width signal and never touches the
selection.
"""

import streamlit as st
from dataclasses import dataclass
from enum import Enum
from typing import MutableMapping, Optional, Any

from models import SearchedRecipe
from utils import get_logger
from .layout import LayoutMode, layout_mode_for_width

logger = get_logger(__name__)


class PaneState(Enum):
    """Which panes are currently shown"""
    LIST_ONLY = "list_only"
    DETAIL_ONLY = "detail_only"
    LIST_AND_DETAIL = "list_and_detail"


@dataclass(frozen=True)
class NavigationSnapshot:
    """Immutable view of the navigator used for rendering"""
    layout_mode: LayoutMode
    pane_state: PaneState
    selected_recipe: Optional[SearchedRecipe] = None

    @property
    def shows_list(self) -> bool:
        return self.pane_state in (PaneState.LIST_ONLY, PaneState.LIST_AND_DETAIL)

    @property
    def shows_detail(self) -> bool:
        return self.pane_state in (PaneState.DETAIL_ONLY, PaneState.LIST_AND_DETAIL)

    @property
    def can_navigate_back(self) -> bool:
        return self.pane_state is PaneState.DETAIL_ONLY


class ListDetailNavigator:
    """
    Navigator for the list and detail panes.

    Narrow layouts show one pane at a time: the list, or the detail of the
    selected recipe. Wide layouts always show both, with the detail pane
    empty until something is selected.
    """

    SELECTED_KEY = 'recipes_selected_recipe'
    WIDTH_KEY = 'recipes_viewport_width'

    def __init__(self, state: Optional[MutableMapping[str, Any]] = None,
                 initial_width: int = 412, dual_pane_min_width: Optional[int] = None):
        if state is None:
            state = st.session_state
        self.state = state
        self.dual_pane_min_width = dual_pane_min_width

        if self.WIDTH_KEY not in self.state:
            self.state[self.WIDTH_KEY] = initial_width
        if self.SELECTED_KEY not in self.state:
            self.state[self.SELECTED_KEY] = None

    @property
    def selected_recipe(self) -> Optional[SearchedRecipe]:
        return self.state.get(self.SELECTED_KEY)

    @property
    def width(self) -> int:
        return self.state[self.WIDTH_KEY]

    @property
    def layout_mode(self) -> LayoutMode:
        return layout_mode_for_width(self.width, self.dual_pane_min_width)

    @property
    def pane_state(self) -> PaneState:
        if self.layout_mode is LayoutMode.DUAL_PANE:
            return PaneState.LIST_AND_DETAIL
        if self.selected_recipe is not None:
            return PaneState.DETAIL_ONLY
        return PaneState.LIST_ONLY

    def select_recipe(self, recipe: SearchedRecipe):
        """Make a recipe the current selection and show its detail"""
        self.state[self.SELECTED_KEY] = recipe
        logger.debug(f"Selected recipe {recipe.id} -> {self.pane_state.name}")

    def can_navigate_back(self) -> bool:
        """Whether a back step exists; decides if back input is intercepted"""
        return self.pane_state is PaneState.DETAIL_ONLY

    def navigate_back(self) -> bool:
        """
        Return from the detail pane to the list.

        Returns:
            True if navigation happened, False when there is no back step
        """
        if not self.can_navigate_back():
            logger.debug("Back navigation ignored, no back step")
            return False

        self.state[self.SELECTED_KEY] = None
        logger.debug("Navigated back to recipe list")
        return True

    def update_width(self, width: int) -> LayoutMode:
        """Apply a viewport width signal, keeping the selection"""
        current = layout_mode_for_width(width, self.dual_pane_min_width)
        previous = self.layout_mode
        self.state[self.WIDTH_KEY] = width
        if current is not previous:
            logger.info(f"Layout changed {previous.name} -> {current.name} at width {width}px")
        return current

    def reset(self):
        """Clear the selection"""
        self.state[self.SELECTED_KEY] = None

    def snapshot(self) -> NavigationSnapshot:
        return NavigationSnapshot(
            layout_mode=self.layout_mode,
            pane_state=self.pane_state,
            selected_recipe=self.selected_recipe
        )

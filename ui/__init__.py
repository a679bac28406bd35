"""
UI components for the Ingredily recipes screen.

Contains the list/detail navigator, the state-to-screen projection and the
Streamlit renderer for recipe cards and panes.
"""

from .layout import LayoutMode, ResponsiveDesign, layout_mode_for_width, create_responsive_layout
from .image import ImagePolicy, build_image_html
from .navigation import ListDetailNavigator, NavigationSnapshot, PaneState
from .screen_model import (
    ScreenKind, ScreenModel, RecipeCardModel, ListPaneModel, DetailPaneModel,
    build_recipe_cards, project_ui_state
)
from .recipes_screen import RecipesScreen, create_recipes_screen, render_default_detail

__all__ = [
    'LayoutMode',
    'ResponsiveDesign',
    'layout_mode_for_width',
    'create_responsive_layout',
    'ImagePolicy',
    'build_image_html',
    'ListDetailNavigator',
    'NavigationSnapshot',
    'PaneState',
    'ScreenKind',
    'ScreenModel',
    'RecipeCardModel',
    'ListPaneModel',
    'DetailPaneModel',
    'build_recipe_cards',
    'project_ui_state',
    'RecipesScreen',
    'create_recipes_screen',
    'render_default_detail'
]

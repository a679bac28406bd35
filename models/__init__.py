"""
Data models for the Ingredily recipes screen.

Contains the searched recipe value type and the screen state union.
"""

from .recipe_models import SearchedRecipe
from .ui_state import DataStatus, SearchedRecipesDataState, RecipesUiState

__all__ = [
    'SearchedRecipe',
    'DataStatus',
    'SearchedRecipesDataState',
    'RecipesUiState'
]

"""
Services package for the Ingredily recipes screen.

Contains the observable search-state provider and the search result loader.
"""

from .search_state_provider import (
    SearchStateProvider,
    get_search_state_provider,
    parse_searched_recipes,
    load_searched_recipes
)

__all__ = [
    'SearchStateProvider',
    'get_search_state_provider',
    'parse_searched_recipes',
    'load_searched_recipes'
]

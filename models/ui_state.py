"""
Screen state models for the searched-recipes screen.

The data state is a closed set of four variants. It is represented as a
status enum plus payload so renderers can match on the status exhaustively.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Tuple

from .recipe_models import SearchedRecipe


class DataStatus(Enum):
    """Status of the last recipe search"""
    INITIAL = "initial"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class SearchedRecipesDataState:
    """
    Current searched-recipes data state.

    Build through the named constructors; only SUCCESS carries recipes and
    their order is the list order on screen.
    """
    status: DataStatus
    recipes: Tuple[SearchedRecipe, ...] = ()

    def __post_init__(self):
        if not isinstance(self.status, DataStatus):
            raise ValueError(f"Unknown data status: {self.status!r}")
        if self.status is not DataStatus.SUCCESS and self.recipes:
            raise ValueError(f"{self.status.name} state cannot carry recipes")
        for recipe in self.recipes:
            if not isinstance(recipe, SearchedRecipe):
                raise ValueError(f"Expected SearchedRecipe, got {type(recipe).__name__}")

    @classmethod
    def initial(cls) -> 'SearchedRecipesDataState':
        return cls(DataStatus.INITIAL)

    @classmethod
    def loading(cls) -> 'SearchedRecipesDataState':
        return cls(DataStatus.LOADING)

    @classmethod
    def success(cls, recipes: Iterable[SearchedRecipe]) -> 'SearchedRecipesDataState':
        return cls(DataStatus.SUCCESS, tuple(recipes))

    @classmethod
    def error(cls) -> 'SearchedRecipesDataState':
        return cls(DataStatus.ERROR)


@dataclass(frozen=True)
class RecipesUiState:
    """State emitted by the search-state provider for the recipes screen"""
    searched_recipes_data_state: SearchedRecipesDataState = field(default_factory=SearchedRecipesDataState.initial)

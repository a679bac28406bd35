"""
Projection of screen state into a renderable model.

project_ui_state is a pure function of the searched-recipes data state and a
navigation snapshot. The Streamlit renderer only draws what it returns.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from models import DataStatus, SearchedRecipe, SearchedRecipesDataState
from .navigation import NavigationSnapshot

LIST_HEADING = "Recipes for you"


class ScreenKind(Enum):
    """The four mutually exclusive screens"""
    INITIAL = "initial"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


_SCREEN_FOR_STATUS = {
    DataStatus.INITIAL: ScreenKind.INITIAL,
    DataStatus.LOADING: ScreenKind.LOADING,
    DataStatus.SUCCESS: ScreenKind.SUCCESS,
    DataStatus.ERROR: ScreenKind.ERROR,
}


@dataclass(frozen=True)
class RecipeCardModel:
    """One clickable card in the list pane"""
    key: str
    recipe: SearchedRecipe

    @property
    def image_url(self) -> str:
        return self.recipe.image

    @property
    def title(self) -> str:
        return self.recipe.title

    @property
    def likes_text(self) -> str:
        return self.recipe.likes_text

    @property
    def used_ingredients_text(self) -> str:
        return self.recipe.used_ingredients_text

    @property
    def missed_ingredients_text(self) -> str:
        return self.recipe.missed_ingredients_text


@dataclass(frozen=True)
class ListPaneModel:
    heading: str
    cards: Tuple[RecipeCardModel, ...]


@dataclass(frozen=True)
class DetailPaneModel:
    """Detail pane; recipe is None while nothing is selected"""
    recipe: Optional[SearchedRecipe] = None


@dataclass(frozen=True)
class ScreenModel:
    kind: ScreenKind
    navigation: Optional[NavigationSnapshot] = None
    list_pane: Optional[ListPaneModel] = None
    detail_pane: Optional[DetailPaneModel] = None


def build_recipe_cards(recipes: Sequence[SearchedRecipe]) -> Tuple[RecipeCardModel, ...]:
    """
    Build cards in result order.

    Keys are positional, so equal recipes still get separate cards.
    """
    return tuple(
        RecipeCardModel(key=f"recipe_card_{index}_{recipe.id}", recipe=recipe)
        for index, recipe in enumerate(recipes)
    )


def project_ui_state(state: SearchedRecipesDataState,
                     navigation: NavigationSnapshot) -> ScreenModel:
    """
    Map the data state to exactly one screen.

    Raises:
        ValueError: for a status outside the four known variants
    """
    kind = _SCREEN_FOR_STATUS.get(state.status)
    if kind is None:
        raise ValueError(f"No screen for data status {state.status!r}")

    if kind is not ScreenKind.SUCCESS:
        return ScreenModel(kind=kind)

    list_pane = None
    if navigation.shows_list:
        list_pane = ListPaneModel(heading=LIST_HEADING, cards=build_recipe_cards(state.recipes))

    detail_pane = None
    if navigation.shows_detail:
        detail_pane = DetailPaneModel(recipe=navigation.selected_recipe)

    return ScreenModel(
        kind=kind,
        navigation=navigation,
        list_pane=list_pane,
        detail_pane=detail_pane
    )

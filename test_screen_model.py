#!/usr/bin/env python3
"""
Test script for the state-to-screen projection.
Tests that each data state maps to exactly one screen and that the
success screen carries the right panes and cards.
"""

import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from models import SearchedRecipe, SearchedRecipesDataState
from ui.navigation import ListDetailNavigator
from ui.screen_model import ScreenKind, LIST_HEADING, build_recipe_cards, project_ui_state


def make_recipe(recipe_id: int = 1) -> SearchedRecipe:
    return SearchedRecipe(
        id=recipe_id,
        image="https://eatitandlikeit.com/wp-content/uploads/2023/02/IMG-0420-1024x1022-1.jpg",
        title="Example Recipe",
        used_ingredient_count=4,
        missed_ingredient_count=2,
        likes=4
    )


def make_navigator(width: int = 412) -> ListDetailNavigator:
    return ListDetailNavigator(state={}, initial_width=width, dual_pane_min_width=840)


def test_each_state_maps_to_one_screen():
    """Test the four data states project to four distinct screens"""
    snapshot = make_navigator().snapshot()
    cases = {
        ScreenKind.INITIAL: SearchedRecipesDataState.initial(),
        ScreenKind.LOADING: SearchedRecipesDataState.loading(),
        ScreenKind.SUCCESS: SearchedRecipesDataState.success([make_recipe()]),
        ScreenKind.ERROR: SearchedRecipesDataState.error(),
    }

    for expected_kind, state in cases.items():
        screen = project_ui_state(state, snapshot)
        assert screen.kind is expected_kind
        if expected_kind is ScreenKind.SUCCESS:
            assert screen.list_pane is not None
        else:
            assert screen.list_pane is None
            assert screen.detail_pane is None
            assert screen.navigation is None
        print(f"[OK] {state.status.name} -> {screen.kind.name}")


def test_projection_is_deterministic():
    """Test projecting the same inputs twice gives equal screens"""
    navigator = make_navigator()
    state = SearchedRecipesDataState.success([make_recipe(1), make_recipe(2)])
    assert project_ui_state(state, navigator.snapshot()) == project_ui_state(state, navigator.snapshot())


def test_empty_success_renders_empty_list():
    """Test success with no recipes is an empty list, not an error"""
    screen = project_ui_state(SearchedRecipesDataState.success([]), make_navigator().snapshot())
    assert screen.kind is ScreenKind.SUCCESS
    assert screen.list_pane.heading == LIST_HEADING
    assert screen.list_pane.cards == ()


def test_cards_follow_result_order():
    """Test card order matches the search result order"""
    recipes = [make_recipe(3), make_recipe(1), make_recipe(2)]
    screen = project_ui_state(SearchedRecipesDataState.success(recipes), make_navigator().snapshot())
    assert [card.recipe.id for card in screen.list_pane.cards] == [3, 1, 2]


def test_identical_recipes_give_independent_cards():
    """Test three equal recipes produce three separately keyed cards"""
    recipe = make_recipe()
    cards = build_recipe_cards([recipe, recipe, recipe])

    assert len(cards) == 3
    assert len({card.key for card in cards}) == 3

    for card in cards:
        navigator = make_navigator()
        navigator.select_recipe(card.recipe)
        assert navigator.selected_recipe.id == recipe.id
    print("[OK] Identical recipes are independently clickable")


def test_card_texts():
    """Test card labels for likes and ingredient counts"""
    card = build_recipe_cards([make_recipe()])[0]
    assert card.title == "Example Recipe"
    assert card.likes_text == "4 likes"
    assert card.used_ingredients_text == "You have 4 ingredients"
    assert card.missed_ingredients_text == "You need 2 ingredients"
    assert card.image_url.startswith("https://")


def test_narrow_detail_hides_list():
    """Test narrow layout with a selection shows only the detail pane"""
    navigator = make_navigator()
    recipe = make_recipe()
    state = SearchedRecipesDataState.success([recipe])

    navigator.select_recipe(recipe)
    screen = project_ui_state(state, navigator.snapshot())
    assert screen.list_pane is None
    assert screen.detail_pane.recipe == recipe

    navigator.navigate_back()
    screen = project_ui_state(state, navigator.snapshot())
    assert screen.detail_pane is None
    assert len(screen.list_pane.cards) == 1


def test_wide_layout_shows_list_and_detail():
    """Test wide layout renders both panes, detail empty until selection"""
    navigator = make_navigator(1280)
    recipe = make_recipe()
    state = SearchedRecipesDataState.success([recipe])

    screen = project_ui_state(state, navigator.snapshot())
    assert screen.list_pane is not None
    assert screen.detail_pane.recipe is None

    navigator.select_recipe(recipe)
    screen = project_ui_state(state, navigator.snapshot())
    assert screen.list_pane is not None
    assert screen.detail_pane.recipe == recipe

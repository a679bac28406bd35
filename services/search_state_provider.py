"""
Search-state provider for the recipes screen.

Holds the current RecipesUiState and pushes every change to subscribers.
The real search (network, matching, ranking) lives elsewhere; this provider
is what the screen observes, and the bundled app feeds it sample results.
"""

import json
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from models import RecipesUiState, SearchedRecipe, SearchedRecipesDataState
from utils import get_logger, log_operation

logger = get_logger(__name__)

StateListener = Callable[[RecipesUiState], None]


class SearchStateProvider:
    """
    Observable holder of the recipes screen state.

    Listeners are called synchronously, in subscription order, on each
    change.
    """

    def __init__(self, initial_state: Optional[RecipesUiState] = None):
        self._state = initial_state or RecipesUiState()
        self._listeners: List[StateListener] = []

    @property
    def ui_state(self) -> RecipesUiState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener and return a callable that removes it.

        The listener does not receive the current state on subscription.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_data_state(self, data_state: SearchedRecipesDataState):
        """Replace the data state and notify listeners"""
        self._state = RecipesUiState(searched_recipes_data_state=data_state)
        logger.info(f"Search state -> {data_state.status.name}")

        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception as e:
                logger.error(f"State listener {listener!r} failed: {e}")
                raise

    def start_search(self):
        self.set_data_state(SearchedRecipesDataState.loading())

    def publish_results(self, recipes: Iterable[SearchedRecipe]):
        self.set_data_state(SearchedRecipesDataState.success(recipes))

    def publish_error(self):
        self.set_data_state(SearchedRecipesDataState.error())

    def reset(self):
        self.set_data_state(SearchedRecipesDataState.initial())


def parse_searched_recipes(payload: Union[str, bytes]) -> List[SearchedRecipe]:
    """
    Decode a search API response body (a JSON array of results).

    Raises:
        ValueError: if the body is not a JSON array of valid recipe objects
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid recipe search JSON: {e}") from e

    if not isinstance(data, list):
        raise ValueError("Recipe search response must be a JSON array")

    return [SearchedRecipe.from_dict(entry) for entry in data]


def load_searched_recipes(path: Union[str, Path]) -> List[SearchedRecipe]:
    """Load recipe search results from a JSON file"""
    path = Path(path)
    with log_operation(logger, f"Loading search results from {path.name}"):
        try:
            payload = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ValueError(f"Cannot read recipe results file {path}: {e}") from e
        recipes = parse_searched_recipes(payload)

    logger.info(f"Loaded {len(recipes)} recipes from {path}")
    return recipes


def get_search_state_provider(initial_state: Optional[RecipesUiState] = None) -> SearchStateProvider:
    """Factory function to get search-state provider instance"""
    return SearchStateProvider(initial_state)

"""
Recipe-related data models for the Ingredily recipes screen.

SearchedRecipe mirrors one entry of an ingredient-based recipe search result.
Values are immutable; they are produced by the search-state provider and only
read by the UI layer.
"""

from dataclasses import dataclass
from typing import Any, Dict


# Wire keys used by the recipe search API
_FIELD_KEYS = {
    'id': 'id',
    'image': 'image',
    'title': 'title',
    'used_ingredient_count': 'usedIngredientCount',
    'missed_ingredient_count': 'missedIngredientCount',
    'likes': 'likes',
}


def _require_count(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


@dataclass(frozen=True)
class SearchedRecipe:
    """
    A recipe returned by an ingredient search.

    Counts describe how the recipe matches the ingredients the user has:
    used_ingredient_count are already available, missed_ingredient_count
    still need to be bought.
    """
    id: int
    image: str
    title: str
    used_ingredient_count: int
    missed_ingredient_count: int
    likes: int

    def __post_init__(self):
        """Validate identifier and counts"""
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError(f"id must be an integer, got {self.id!r}")
        if not isinstance(self.image, str):
            raise ValueError(f"image must be a string, got {self.image!r}")
        if not isinstance(self.title, str):
            raise ValueError(f"title must be a string, got {self.title!r}")
        _require_count('used_ingredient_count', self.used_ingredient_count)
        _require_count('missed_ingredient_count', self.missed_ingredient_count)
        _require_count('likes', self.likes)

    @property
    def likes_text(self) -> str:
        return f"{self.likes} likes"

    @property
    def used_ingredients_text(self) -> str:
        return f"You have {self.used_ingredient_count} ingredients"

    @property
    def missed_ingredients_text(self) -> str:
        return f"You need {self.missed_ingredient_count} ingredients"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SearchedRecipe':
        """
        Build a recipe from a search API result object.

        Unknown keys are ignored so newer API responses still decode.

        Raises:
            ValueError: if a required key is missing or a value is invalid
        """
        if not isinstance(data, dict):
            raise ValueError(f"Recipe entry must be an object, got {type(data).__name__}")

        values = {}
        for field_name, key in _FIELD_KEYS.items():
            if key not in data:
                raise ValueError(f"Recipe entry is missing '{key}'")
            values[field_name] = data[key]
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the search API shape"""
        return {key: getattr(self, field_name) for field_name, key in _FIELD_KEYS.items()}

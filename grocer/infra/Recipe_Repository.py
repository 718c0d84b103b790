import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from grocer.domain.Recipe import Recipe
from grocer.infra.paths import RECIPES_FILE

logger = logging.getLogger(__name__)


def reading_from_recipes(path: Path = RECIPES_FILE) -> List[Recipe]:
    """Read recipes from JSON file with proper error handling."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            recipes_data = json.load(f)
        return [Recipe.from_dict(entry) for entry in recipes_data]
    except FileNotFoundError:
        logger.warning("Recipes file not found: %s. Returning empty list.", path)
        return []
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in recipes file: %s", e)
        return []


class RecipeCatalog:
    """Read-only recipe table seeded once at startup."""

    def __init__(self, recipes: Optional[Iterable[Recipe]] = None):
        self._recipes: List[Recipe] = list(recipes or [])
        self._index = {r.id: r for r in self._recipes}

    @classmethod
    def from_json(cls, path: Path = RECIPES_FILE) -> "RecipeCatalog":
        catalog = cls(reading_from_recipes(path))
        logger.info("Loaded %d recipes from %s", len(catalog), path)
        return catalog

    def list_recipes(self) -> List[dict]:
        return [r.to_summary() for r in self._recipes]

    def get_recipe(self, recipe_id) -> Optional[Recipe]:
        if not isinstance(recipe_id, str):
            return None
        return self._index.get(recipe_id)

    def __len__(self):
        return len(self._recipes)

from fastapi import APIRouter

from grocer.api.services import failure_response, recipe_catalog
from grocer.domain.Failure import Failure
from grocer.utilities.constants import RECIPE_NOT_FOUND

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("")
def list_recipes():
    """Recipe summaries (no ingredient lines)."""
    return {"recipes": recipe_catalog.list_recipes()}


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str):
    recipe = recipe_catalog.get_recipe(recipe_id)
    if recipe is None:
        return failure_response(Failure(RECIPE_NOT_FOUND, "Recipe not found.", {"recipe_id": recipe_id}))
    return recipe.to_dict()

import logging
from typing import Optional

from fastapi import APIRouter, Response

from grocer.api.services import (
    failure_response, meal_plan_manager, recipe_catalog, shopping_bridge
)
from grocer.domain.Failure import Failure, is_failure
from grocer.infra.pdf_utils import generate_pdf_for_grocery_list
from grocer.utilities.constants import MEAL_PLAN_NOT_FOUND
from grocer.utilities.validators import CartFromPlanInput, MealPlanInput

router = APIRouter(prefix="/api/meal-plans", tags=["meal-plans"])
logger = logging.getLogger(__name__)


def _plan_not_found(plan_id: str):
    return failure_response(Failure(MEAL_PLAN_NOT_FOUND, "Meal plan not found.", {"plan_id": plan_id}))


@router.post("", status_code=201)
def create_meal_plan(payload: MealPlanInput):
    """Create a plan; partially invalid entries come back as invalid_entries."""
    plan = meal_plan_manager.create_meal_plan(payload.start_date, payload.entries)
    if is_failure(plan):
        return failure_response(plan)
    return plan.to_dict()


@router.get("")
def list_meal_plans():
    return {"meal_plans": [p.to_dict() for p in meal_plan_manager.list_meal_plans()]}


@router.get("/{plan_id}")
def get_meal_plan(plan_id: str):
    plan = meal_plan_manager.get_meal_plan(plan_id)
    if plan is None:
        return _plan_not_found(plan_id)
    return plan.to_dict()


@router.get("/{plan_id}/grocery-list")
def grocery_list(plan_id: str):
    result = meal_plan_manager.build_grocery_list(plan_id)
    if is_failure(result):
        return failure_response(result)
    return result.to_dict()


@router.get("/{plan_id}/grocery-list.pdf")
def grocery_list_pdf(plan_id: str):
    plan = meal_plan_manager.get_meal_plan(plan_id)
    result = meal_plan_manager.build_grocery_list(plan_id)
    if plan is None or is_failure(result):
        return _plan_not_found(plan_id)

    def title_for(recipe_id: str) -> str:
        recipe = recipe_catalog.get_recipe(recipe_id)
        return recipe.title if recipe else recipe_id

    pdf_bytes = generate_pdf_for_grocery_list(plan, result, recipe_title=title_for)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=grocery_list_{plan_id}.pdf"
        },
    )


@router.post("/{plan_id}/cart", status_code=201)
def build_cart_from_meal_plan(plan_id: str, payload: Optional[CartFromPlanInput] = None):
    """Stage a retailer cart from the plan's grocery list (no purchase is made)."""
    payload = payload or CartFromPlanInput()
    result = shopping_bridge.build_cart_from_meal_plan(plan_id, payload.store_id, payload.zipcode)
    if is_failure(result):
        return failure_response(result)
    if result.unmatched_ingredients:
        logger.info("Cart %s staged with %d unmatched ingredients",
                    result.cart.id, len(result.unmatched_ingredients))
    return result.to_dict()

"""Process-wide service instances shared by the API routers.

Seed tables are loaded once at import; meal plans and carts live in memory
for the lifetime of the process.
"""
import logging

from fastapi.responses import JSONResponse

from grocer.domain.Failure import Failure
from grocer.infra.Assistant_Repository import reading_from_assistant_config
from grocer.infra.Recipe_Repository import RecipeCatalog
from grocer.infra.Retail_Repository import reading_from_catalog, reading_from_stores
from grocer.logic.planning.meal_plans import MealPlanManager
from grocer.logic.retail.cart_engine import CartEngine
from grocer.logic.shopping.bridge import ShoppingBridge
from grocer.utilities.constants import (
    CART_NOT_FOUND, MEAL_PLAN_NOT_FOUND, NO_VALID_ENTRIES, RECIPE_NOT_FOUND, STORE_NOT_FOUND
)

logger = logging.getLogger(__name__)

recipe_catalog = RecipeCatalog.from_json()
cart_engine = CartEngine(reading_from_stores(), reading_from_catalog())
meal_plan_manager = MealPlanManager(recipe_catalog)
shopping_bridge = ShoppingBridge(meal_plan_manager, cart_engine)
assistant_config = reading_from_assistant_config()

FAILURE_STATUS = {
    NO_VALID_ENTRIES: 400,
    MEAL_PLAN_NOT_FOUND: 404,
    RECIPE_NOT_FOUND: 404,
    STORE_NOT_FOUND: 404,
    CART_NOT_FOUND: 404,
}


def failure_response(failure: Failure) -> JSONResponse:
    """Map a tagged Failure onto its HTTP status and error body."""
    status = FAILURE_STATUS.get(failure.kind, 400)
    logger.debug("Responding %s for %s", status, failure)
    return JSONResponse(status_code=status, content=failure.to_dict())

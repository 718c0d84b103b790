"""Shopping bridge: turn a meal plan's grocery list into a staged retailer cart.

Provides ShoppingBridge.build_cart_from_meal_plan(plan_id, store_id, zipcode).
"""
import logging
import math
from typing import Dict, List, Optional, Tuple, Union

from grocer.domain.Cart import CartFromPlan, Product
from grocer.domain.Failure import Failure, is_failure
from grocer.domain.Ingredient import IngredientLine
from grocer.logic.planning.meal_plans import MealPlanManager
from grocer.logic.retail.cart_engine import CartEngine
from grocer.utilities.constants import CART_UNIT, INGREDIENT_SEARCH_TERMS

logger = logging.getLogger(__name__)


def _normalize(name: str) -> str:
    return (name or '').strip().lower()


def search_term_for(ingredient: str, aliases: Optional[Dict[str, str]] = None) -> str:
    """Retailer search term for an ingredient; the ingredient itself when no alias exists."""
    table = INGREDIENT_SEARCH_TERMS if aliases is None else aliases
    return table.get(_normalize(ingredient)) or ingredient


def cart_quantity(quantity, package_size) -> int:
    """Whole packages needed to cover quantity, at least one.

    Units are not reconciled: a 1.5 lb requirement against a 2 lb package is
    treated numerically.
    """
    size = package_size or 1
    return max(1, math.ceil(quantity / size))


class ShoppingBridge:
    def __init__(self, meal_plans: MealPlanManager, cart_engine: CartEngine,
                 aliases: Optional[Dict[str, str]] = None):
        self.meal_plans = meal_plans
        self.cart_engine = cart_engine
        self.aliases = aliases

    def map_ingredient_to_product(self, ingredient: IngredientLine, store_id: Optional[str] = None,
                                  zipcode: Optional[str] = None) -> Optional[Product]:
        """First in-stock match, else the first match regardless of stock, else None."""
        query = search_term_for(ingredient.ingredient, self.aliases)
        products = self.cart_engine.search_products(
            query=query,
            store_id=store_id,
            zipcode=None if store_id else zipcode,
        )
        in_stock = next((p for p in products if p.in_stock), None)
        return in_stock or (products[0] if products else None)

    def resolve_items(self, ingredients: List[IngredientLine], store_id: Optional[str] = None,
                      zipcode: Optional[str] = None) -> Tuple[List[dict], List[IngredientLine]]:
        items, unmatched = [], []
        for ingredient in ingredients:
            product = self.map_ingredient_to_product(ingredient, store_id, zipcode)
            if product is None:
                unmatched.append(ingredient)
                continue
            items.append({
                "sku": product.sku,
                "quantity": cart_quantity(ingredient.quantity, product.package_size),
                "unit": CART_UNIT,
            })
        return items, unmatched

    def build_cart_from_meal_plan(self, plan_id: str, store_id: Optional[str] = None,
                                  zipcode: Optional[str] = None) -> Union[CartFromPlan, Failure]:
        """
        Stage a cart for every ingredient of the plan's grocery list.

        meal_plan_not_found and store_not_found Failures pass through unchanged;
        ingredients without a matching product are reported, not fatal.
        """
        grocery_list = self.meal_plans.build_grocery_list(plan_id)
        if is_failure(grocery_list):
            return grocery_list

        items, unmatched = self.resolve_items(grocery_list.ingredients, store_id, zipcode)
        if unmatched:
            logger.warning("Plan %s: no product found for %s", plan_id,
                           ", ".join(i.ingredient for i in unmatched))

        cart = self.cart_engine.create_cart(store_id, zipcode, items)
        if is_failure(cart):
            return cart

        return CartFromPlan(
            plan_id=plan_id,
            store_id=cart.store_id,
            zipcode=cart.zipcode,
            cart=cart,
            unmatched_ingredients=unmatched,
        )


__all__ = ['ShoppingBridge', 'search_term_for', 'cart_quantity']

import logging
from fastapi import APIRouter, Query

from grocer.api.services import cart_engine, failure_response
from grocer.domain.Failure import Failure, is_failure
from grocer.utilities.constants import CART_NOT_FOUND
from grocer.utilities.validators import AddItemsInput, CartInput

router = APIRouter(prefix="/api", tags=["retail"])
logger = logging.getLogger(__name__)


def _cart_not_found(cart_id: str):
    return failure_response(Failure(CART_NOT_FOUND, "Cart not found.", {"cart_id": cart_id}))


# -------------------- Stores & products --------------------
@router.get("/stores")
def list_stores(zipcode: str = Query(default="")):
    stores = cart_engine.find_stores_by_zip(zipcode)
    return {"zipcode": zipcode, "stores": [s.to_dict() for s in stores]}


@router.get("/products/search")
def search_products(query: str = Query(default=""),
                    zipcode: str = Query(default=""),
                    store_id: str = Query(default="")):
    products = cart_engine.search_products(query=query, store_id=store_id, zipcode=zipcode)
    return {
        "query": query,
        "zipcode": zipcode,
        "store_id": store_id,
        "products": [p.to_dict() for p in products],
    }


# -------------------- Carts --------------------
@router.post("/cart", status_code=201)
def create_cart(payload: CartInput):
    cart = cart_engine.create_cart(
        payload.store_id,
        payload.zipcode,
        [item.model_dump() for item in payload.items],
    )
    if is_failure(cart):
        return failure_response(cart)
    return cart.to_dict()


@router.get("/cart/{cart_id}")
def get_cart(cart_id: str):
    cart = cart_engine.get_cart(cart_id)
    if cart is None:
        return _cart_not_found(cart_id)
    return cart.to_dict()


@router.post("/cart/{cart_id}/items")
def add_items(cart_id: str, payload: AddItemsInput):
    cart = cart_engine.add_items(cart_id, [item.model_dump() for item in payload.items])
    if is_failure(cart):
        return failure_response(cart)
    return cart.to_dict()


@router.post("/cart/{cart_id}/checkout")
def checkout(cart_id: str):
    """Handoff links only; the order itself is submitted by a human on the retailer side."""
    cart = cart_engine.get_cart(cart_id)
    if cart is None:
        return _cart_not_found(cart_id)
    urls = cart_engine.build_checkout_urls(cart)
    logger.info("Checkout handoff prepared for cart %s", cart_id)
    return {"cart_id": cart_id, **urls}

"""Retailer catalog and cart engine.

Store lookup, product search, SKU validation with substitution fallbacks,
cart totals and checkout handoff links. Nothing here places an order: carts
stay in draft for a human to review and submit.
"""
import logging
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Union
from urllib.parse import urlencode

from grocer.domain.Cart import Cart, Product, Store
from grocer.domain.Failure import Failure
from grocer.infra.Repository import InMemoryRepository
from grocer.logic.grocery.aggregator import round_quantity
from grocer.utilities.config import (
    DEEP_LINK_SCHEME, DEFAULT_CURRENCY, DEFAULT_HANDOFF_DOMAIN, MAX_ALTERNATIVES
)
from grocer.utilities.constants import (
    CART_NOT_FOUND, CART_STATUS_DRAFT, CART_UNIT, OUT_OF_STOCK, SKU_NOT_FOUND, STORE_NOT_FOUND
)

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class CartEngine:
    def __init__(self, stores: Iterable[Store], catalog: Dict[str, List[Product]],
                 repository: Optional[InMemoryRepository] = None):
        self.stores: List[Store] = list(stores)
        self.catalog = catalog
        self.carts: InMemoryRepository = repository if repository is not None else InMemoryRepository()

    def get_assistant_capabilities(self) -> Dict[str, Any]:
        return {
            "automatic_shopping": False,
            "description": (
                "The prototype can search products, stage carts, and build checkout links, "
                "but a human must confirm and submit orders."
            ),
            "requires_user_review": True,
            "supported_flows": ["store_lookup", "product_search", "cart_building", "checkout_handoff"],
            "unsupported_flows": ["auto_purchase", "payment_processing"],
        }

    # ============== Stores & products ==============

    def find_stores_by_zip(self, zipcode: Optional[str]) -> List[Store]:
        if not zipcode:
            return []
        return [s for s in self.stores if s.zipcode == zipcode]

    def get_store(self, store_id: Optional[str]) -> Optional[Store]:
        return next((s for s in self.stores if s.id == store_id), None)

    def _stores_for_lookup(self, store_id: Optional[str], zipcode: Optional[str]) -> List[Store]:
        if store_id:
            store = self.get_store(store_id)
            return [store] if store else []
        if zipcode:
            return self.find_stores_by_zip(zipcode)
        return list(self.stores)

    def search_products(self, query: Optional[str] = None, store_id: Optional[str] = None,
                        zipcode: Optional[str] = None) -> List[Product]:
        """Products matching query in the given store, else the zipcode's stores, else every store."""
        results = []
        for store in self._stores_for_lookup(store_id, zipcode):
            for item in self.catalog.get(store.id, []):
                if item.matches(query or ""):
                    results.append(item.for_store(store.id))
        return results

    def find_product(self, store_id: str, sku: str) -> Optional[Product]:
        return next((p for p in self.catalog.get(store_id, []) if p.sku == sku), None)

    # ============== Validation & fallbacks ==============

    def generate_alternatives(self, store_id: str, category: Optional[str],
                              exclude_sku: Optional[str] = None) -> List[Dict[str, Any]]:
        alternatives = [
            p for p in self.catalog.get(store_id, [])
            if p.in_stock and p.category == category and p.sku != exclude_sku
        ][:MAX_ALTERNATIVES]
        return [
            {"sku": p.sku, "name": p.name, "price": p.price, "currency": p.currency, "size": p.size}
            for p in alternatives
        ]

    def validate_items(self, store_id: str, items: Optional[List[Dict[str, Any]]] = None):
        """Split requested lines into validated cart items and substitution fallbacks."""
        validated, fallbacks = [], []
        for item in items or []:
            sku = item.get("sku")
            product = self.find_product(store_id, sku)
            if product is None:
                fallbacks.append({
                    "sku_requested": sku,
                    "reason": SKU_NOT_FOUND,
                    "alternatives": self.generate_alternatives(store_id, item.get("category")),
                    "allow_manual_edit": True,
                })
                continue
            if not product.in_stock:
                fallbacks.append({
                    "sku_requested": sku,
                    "reason": OUT_OF_STOCK,
                    "alternatives": self.generate_alternatives(store_id, product.category, product.sku),
                    "allow_manual_edit": True,
                })
                continue
            validated.append({
                "sku": product.sku,
                "name": product.name,
                "quantity": item.get("quantity") or 1,
                "unit": item.get("unit") or CART_UNIT,
                "price": product.price,
                "currency": product.currency,
                "store_id": store_id,
            })
        if fallbacks:
            logger.info("Store %s: %d requested SKUs need substitution", store_id, len(fallbacks))
        return validated, fallbacks

    def build_cart_totals(self, items: List[Dict[str, Any]]) -> Dict[str, Any]:
        subtotal = sum((Decimal(str(i["price"])) * Decimal(str(i["quantity"])) for i in items), Decimal(0))
        currency = items[0]["currency"] if items else DEFAULT_CURRENCY
        return {"subtotal": round_quantity(subtotal), "currency": currency}

    # ============== Cart lifecycle ==============

    def create_cart(self, store_id: Optional[str], zipcode: Optional[str] = None,
                    items: Optional[List[Dict[str, Any]]] = None) -> Union[Cart, Failure]:
        store = self.get_store(store_id)
        if store is None:
            return Failure(STORE_NOT_FOUND, "Store not found for cart creation.", {"store_id": store_id})

        validated, fallbacks = self.validate_items(store.id, items)
        cart = Cart(
            id=str(uuid.uuid4()),
            store_id=store.id,
            zipcode=zipcode or store.zipcode,
            items=validated,
            fallbacks=fallbacks,
            totals=self.build_cart_totals(validated),
            created_at=_now(),
            status=CART_STATUS_DRAFT,
        )
        self.carts.put(cart.id, cart)
        logger.info("Created cart %s at %s with %d items", cart.id, store.id, len(validated))
        return cart

    def get_cart(self, cart_id: str) -> Optional[Cart]:
        return self.carts.get(cart_id)

    def add_items(self, cart_id: str, items: Optional[List[Dict[str, Any]]]) -> Union[Cart, Failure]:
        # Carts are never removed, so only ids that exist get an entity lock
        if cart_id not in self.carts:
            return Failure(CART_NOT_FOUND, "Cart not found.", {"cart_id": cart_id})

        with self.carts.lock_for(cart_id):
            cart = self.get_cart(cart_id)
            validated, fallbacks = self.validate_items(cart.store_id, items)
            cart.items.extend(validated)
            cart.fallbacks.extend(fallbacks)
            cart.totals = self.build_cart_totals(cart.items)
            cart.updated_at = _now()
            return cart

    def build_checkout_urls(self, cart: Cart) -> Dict[str, str]:
        store = self.get_store(cart.store_id)
        base = (store.handoff_domain if store else "") or DEFAULT_HANDOFF_DOMAIN
        query = urlencode({"cartId": cart.id, "storeId": cart.store_id})
        return {
            "web_url": f"{base}/checkout?{query}",
            "deep_link": f"{DEEP_LINK_SCHEME}://checkout?{query}",
        }

"""Retail domain entities: Store, Product, staged Cart and the cart-from-plan result."""
from typing import Any, Dict, List, Optional

from grocer.domain.Ingredient import IngredientLine


class Store:
    def __init__(self, id: str = "", name: str = "", zipcode: str = "", handoff_domain: str = ""):
        self.id = id
        self.name = name
        self.zipcode = zipcode
        self.handoff_domain = handoff_domain

    def __str__(self) -> str:
        return f"{self.name} ({self.id}, {self.zipcode})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Store(
            id=d.get("id", ""),
            name=d.get("name", ""),
            zipcode=str(d.get("zipcode", "")),
            handoff_domain=d.get("handoff_domain", "") or "",
        )

    def to_dict(self):
        return {"id": self.id, "name": self.name, "zipcode": self.zipcode,
                "handoff_domain": self.handoff_domain}


class Product:
    def __init__(self, sku: str = "", name: str = "", brand: str = "", category: str = "",
                 price: float = 0.0, currency: str = "USD", in_stock: bool = True,
                 package_size: Optional[float] = None, size: str = "", store_id: str = ""):
        self.sku = sku
        self.name = name
        self.brand = brand
        self.category = category
        self.price = price
        self.currency = currency
        self.in_stock = in_stock
        self.package_size = package_size
        self.size = size
        self.store_id = store_id

    def matches(self, query: str) -> bool:
        '''Case-insensitive substring match on name, brand or category; empty query matches all.'''
        if not query:
            return True
        q = query.lower()
        return q in self.name.lower() or q in self.brand.lower() or q in self.category.lower()

    def for_store(self, store_id: str) -> "Product":
        return Product(self.sku, self.name, self.brand, self.category, self.price, self.currency,
                       self.in_stock, self.package_size, self.size, store_id)

    def __str__(self) -> str:
        stock = "in stock" if self.in_stock else "out of stock"
        return f"{self.name} [{self.sku}] {self.price} {self.currency} ({stock})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        allowed = {"sku", "name", "brand", "category", "price", "currency", "in_stock",
                   "package_size", "size", "store_id"}
        return Product(**{k: v for k, v in d.items() if k in allowed})

    def to_dict(self):
        return {
            "sku": self.sku,
            "name": self.name,
            "brand": self.brand,
            "category": self.category,
            "price": self.price,
            "currency": self.currency,
            "in_stock": self.in_stock,
            "package_size": self.package_size,
            "size": self.size,
            "store_id": self.store_id,
        }


class Cart:
    """Staged, human-reviewable cart. Items and fallbacks only ever grow."""

    def __init__(self, id: str, store_id: str, zipcode: str, items: List[Dict[str, Any]],
                 fallbacks: List[Dict[str, Any]], totals: Dict[str, Any], created_at: str,
                 status: str = "draft", updated_at: Optional[str] = None):
        self.id = id
        self.store_id = store_id
        self.zipcode = zipcode
        self.items = items
        self.fallbacks = fallbacks
        self.totals = totals
        self.status = status
        self.created_at = created_at
        self.updated_at = updated_at

    def __str__(self) -> str:
        return f"Cart {self.id} @ {self.store_id}: {len(self.items)} items, {len(self.fallbacks)} fallbacks"

    __repr__ = __str__

    def to_dict(self):
        d = {
            "id": self.id,
            "store_id": self.store_id,
            "zipcode": self.zipcode,
            "items": list(self.items),
            "fallbacks": list(self.fallbacks),
            "totals": dict(self.totals),
            "status": self.status,
            "created_at": self.created_at,
        }
        if self.updated_at:
            d["updated_at"] = self.updated_at
        return d


class CartFromPlan:
    def __init__(self, plan_id: str, store_id: str, zipcode: str, cart: Cart,
                 unmatched_ingredients: Optional[List[IngredientLine]] = None):
        self.plan_id = plan_id
        self.store_id = store_id
        self.zipcode = zipcode
        self.cart = cart
        self.unmatched_ingredients = unmatched_ingredients or []

    def to_dict(self):
        return {
            "plan_id": self.plan_id,
            "store_id": self.store_id,
            "zipcode": self.zipcode,
            "cart": self.cart.to_dict(),
            "unmatched_ingredients": [ing.to_dict() for ing in self.unmatched_ingredients],
        }

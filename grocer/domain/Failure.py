"""Failure result: returned in place of a domain object when an operation cannot complete.

Kinds (see grocer.utilities.constants):
  no_valid_entries    -> detail {"invalid_entries": [...]}
  meal_plan_not_found -> detail {"plan_id": ...}
  store_not_found     -> detail {"store_id": ...}
  cart_not_found      -> detail {"cart_id": ...}
  recipe_not_found    -> detail {"recipe_id": ...}

Partial failures never produce a Failure; they travel as companion data on the
successful result (invalid_entries, unmatched_ingredients, fallbacks).
"""
from typing import Any, Dict, Optional


class Failure:
    def __init__(self, kind: str, message: str = "", detail: Optional[Dict[str, Any]] = None):
        self.kind = kind
        self.message = message
        self.detail = detail or {}

    def __str__(self) -> str:
        return f"Failure({self.kind}: {self.message})"

    __repr__ = __str__

    def to_dict(self):
        return {"error": self.kind, "message": self.message, **self.detail}


def is_failure(result) -> bool:
    return isinstance(result, Failure)

"""MealPlan domain entity: dated recipe entries spanning at least one week."""
from datetime import date
from typing import Any, Dict, List, Optional, Union

from grocer.utilities.constants import DATE_FORMAT


class MealPlanEntry:
    def __init__(self, id: str, recipe_id: str, servings: Union[int, float],
                 date: Optional[date] = None, meal_type: str = ""):
        self.id = id
        self.recipe_id = recipe_id
        self.servings = servings
        self.date = date
        self.meal_type = meal_type or ""

    def sort_key(self):
        return (self.date, self.meal_type)

    def __str__(self) -> str:
        return f"{self.date} {self.meal_type or '-'}: {self.recipe_id} x{self.servings}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "id": self.id,
            "recipe_id": self.recipe_id,
            "date": self.date.strftime(DATE_FORMAT) if self.date else None,
            "meal_type": self.meal_type,
            "servings": self.servings,
        }


class MealPlan:
    def __init__(self, id: str, start_date: date, end_date: date, entries: List[MealPlanEntry],
                 created_at: str, invalid_entries: Optional[List[Dict[str, Any]]] = None):
        self.id = id
        self.start_date = start_date
        self.end_date = end_date
        self.entries = entries
        self.created_at = created_at
        # Only populated when some raw entries were rejected
        self.invalid_entries = invalid_entries or []

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def __str__(self) -> str:
        return f"MealPlan {self.id} {self.start_date} -> {self.end_date} ({len(self.entries)} entries)"

    __repr__ = __str__

    def to_dict(self):
        d = {
            "id": self.id,
            "start_date": self.start_date.strftime(DATE_FORMAT),
            "end_date": self.end_date.strftime(DATE_FORMAT),
            "entries": [e.to_dict() for e in self.entries],
            "created_at": self.created_at,
        }
        if self.invalid_entries:
            d["invalid_entries"] = list(self.invalid_entries)
        return d

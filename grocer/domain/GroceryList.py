"""GroceryList aggregate: merged, scaled ingredient lines derived from one meal plan."""
from typing import List, Optional

from grocer.domain.Ingredient import IngredientLine


class GroceryList:
    def __init__(self, plan_id: str, ingredients: Optional[List[IngredientLine]] = None):
        self.plan_id = plan_id
        self.ingredients = ingredients[:] if ingredients else []

    def find(self, ingredient: str, unit: Optional[str] = None) -> Optional[IngredientLine]:
        '''
        Returns the first line for the ingredient (optionally restricted to a unit).
        '''
        for line in self.ingredients:
            if line.ingredient == ingredient and (unit is None or line.unit == unit):
                return line
        return None

    def __len__(self):
        return len(self.ingredients)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.ingredients)
        return f"Grocery List {self.plan_id}:\n\t{items_str}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "plan_id": self.plan_id,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
        }

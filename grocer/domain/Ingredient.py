"""IngredientLine domain entity: normalized ingredient name, decimal quantity, unit."""
from typing import Union

Number = Union[int, float]


class IngredientLine:
    def __init__(self, ingredient: str = "", quantity: Number = 0, unit: str = ""):
        self.ingredient = ingredient
        self.quantity = quantity
        self.unit = unit

    @property
    def key(self):
        '''Aggregation key: same ingredient in different units stays distinct.'''
        return (self.ingredient, self.unit)

    def with_quantity(self, quantity: Number) -> "IngredientLine":
        return IngredientLine(self.ingredient, quantity, self.unit)

    def __eq__(self, other):
        if not isinstance(other, IngredientLine):
            return NotImplemented
        return (self.ingredient, self.quantity, self.unit) == (other.ingredient, other.quantity, other.unit)

    def __str__(self) -> str:
        return f"{self.ingredient} - {self.quantity} {self.unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an IngredientLine from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        quantity = d.get("quantity", 0) or 0
        try:
            quantity = float(quantity) if not isinstance(quantity, int) else quantity
        except (TypeError, ValueError):
            quantity = 0
        return IngredientLine(
            ingredient=str(d.get("ingredient", "")).strip().lower(),
            quantity=quantity,
            unit=str(d.get("unit", "") or ""),
        )

    def to_dict(self):
        return {
            "ingredient": self.ingredient,
            "quantity": self.quantity,
            "unit": self.unit,
        }

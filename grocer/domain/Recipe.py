"""Recipe domain entity: id, title, base servings, timing, tags, ingredient lines."""
from grocer.domain.Ingredient import IngredientLine
from typing import List, Optional


class Recipe:
    def __init__(self, id: str = "", title: str = "", description: str = "", servings: int = 0,
                 prep_time_minutes: int = 0, cook_time_minutes: int = 0,
                 tags: Optional[List[str]] = None, ingredients: Optional[List[IngredientLine]] = None):
        self.id = id
        self.title = title
        self.description = description
        self.servings = servings
        self.prep_time_minutes = prep_time_minutes
        self.cook_time_minutes = cook_time_minutes
        self.tags = tags[:] if tags else []
        self.ingredients = ingredients[:] if ingredients else []

    def __str__(self) -> str:
        return f"{self.title} ({self.id}) - {self.servings} servings - Tags: {', '.join(self.tags)}"

    __repr__ = __str__

    @property
    def total_time_minutes(self) -> int:
        return (self.prep_time_minutes or 0) + (self.cook_time_minutes or 0)

    @staticmethod
    def from_dict(data):
        d = dict(data)
        allowed = {"id", "title", "description", "servings", "prep_time_minutes",
                   "cook_time_minutes", "tags", "ingredients"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        filtered['ingredients'] = [IngredientLine.from_dict(ing) for ing in d.get('ingredients', [])]
        return Recipe(**filtered)

    def to_summary(self):
        '''Catalog listing view: everything except the ingredient lines.'''
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "servings": self.servings,
            "prep_time_minutes": self.prep_time_minutes,
            "cook_time_minutes": self.cook_time_minutes,
            "tags": self.tags,
        }

    def to_dict(self):
        d = self.to_summary()
        d["ingredients"] = [ing.to_dict() for ing in self.ingredients]
        return d

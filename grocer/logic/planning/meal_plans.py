"""Meal plan management.

Provides MealPlanManager for:
- Creating meal plans from raw entries (validation, ids, date normalization)
- Looking up and listing stored plans
- Building the aggregated grocery list for a plan
"""
import logging
import math
import uuid
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional, Union

from grocer.domain.Failure import Failure
from grocer.domain.GroceryList import GroceryList
from grocer.domain.MealPlan import MealPlan, MealPlanEntry
from grocer.infra.Recipe_Repository import RecipeCatalog
from grocer.infra.Repository import InMemoryRepository
from grocer.logic.grocery.aggregator import aggregate, scale, serving_factor
from grocer.utilities.constants import (
    DATE_INPUT_FORMATS, MEAL_PLAN_NOT_FOUND, NO_VALID_ENTRIES, PLAN_MIN_DAYS
)

logger = logging.getLogger(__name__)


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def parse_date(value) -> Optional[date]:
    """Normalize a calendar date; None when the value cannot be parsed."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    raw = value.strip()
    for fmt in DATE_INPUT_FORMATS:
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(raw).date()
    except ValueError:
        return None


def _field(entry: Dict[str, Any], *names: str):
    for name in names:
        if name in entry:
            return entry[name]
    return None


def _positive_servings(value) -> Optional[Union[int, float]]:
    """Positive servings as given (2.5 stays 2.5); None when missing or unusable."""
    if isinstance(value, bool):
        return None
    try:
        n = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(n) or n <= 0:
        return None
    return int(n) if n.is_integer() else n


class MealPlanManager:
    def __init__(self, recipes: RecipeCatalog, repository: Optional[InMemoryRepository] = None,
                 today: Optional[Callable[[], date]] = None):
        self.recipes = recipes
        self.plans: InMemoryRepository = repository if repository is not None else InMemoryRepository()
        self._today = today or _utc_today

    # ============== Creation ==============

    def _accept_entry(self, raw: Dict[str, Any]) -> Optional[MealPlanEntry]:
        recipe = self.recipes.get_recipe(_field(raw, "recipe_id", "recipeId"))
        if recipe is None:
            return None
        meal_type = _field(raw, "meal_type", "mealType")
        return MealPlanEntry(
            id=str(uuid.uuid4()),
            recipe_id=recipe.id,
            servings=_positive_servings(raw.get("servings")) or recipe.servings,
            date=parse_date(raw.get("date")),
            meal_type=meal_type if isinstance(meal_type, str) else "",
        )

    def create_meal_plan(self, start_date=None,
                         entries: Optional[List[Dict[str, Any]]] = None) -> Union[MealPlan, Failure]:
        """
        Create and store a meal plan.

        Entries whose recipe cannot be resolved are kept verbatim in
        invalid_entries. When none remain valid nothing is stored and a
        no_valid_entries Failure carries the rejected entries.

        Dates: start is start_date if parseable, else the earliest entry date,
        else today (UTC). Undated entries land on start. The plan ends on the
        later of start + 6 days and the latest entry date.
        """
        valid: List[MealPlanEntry] = []
        invalid: List[Any] = []
        for raw in entries or []:
            entry = self._accept_entry(raw) if isinstance(raw, dict) else None
            if entry is None:
                invalid.append(raw)
            else:
                valid.append(entry)

        if not valid:
            logger.warning("Meal plan rejected: none of %d entries reference a known recipe", len(invalid))
            return Failure(
                NO_VALID_ENTRIES,
                "Meal plan must include at least one entry with a known recipe.",
                {"invalid_entries": invalid},
            )

        dated = [e.date for e in valid if e.date is not None]
        start = parse_date(start_date) or (min(dated) if dated else None) or self._today()
        for entry in valid:
            if entry.date is None:
                entry.date = start
        valid.sort(key=MealPlanEntry.sort_key)

        latest = max((e.date for e in valid), default=start)
        end = max(latest, start + timedelta(days=PLAN_MIN_DAYS - 1))

        plan = MealPlan(
            id=str(uuid.uuid4()),
            start_date=start,
            end_date=end,
            entries=valid,
            created_at=datetime.now(timezone.utc).isoformat(),
            invalid_entries=invalid,
        )
        self.plans.put(plan.id, plan)
        if invalid:
            logger.warning("Meal plan %s created with %d invalid entries", plan.id, len(invalid))
        logger.info("Created meal plan %s covering %d days (%d entries)", plan.id, plan.days, len(valid))
        return plan

    # ============== Lookup ==============

    def get_meal_plan(self, plan_id: str) -> Optional[MealPlan]:
        return self.plans.get(plan_id)

    def list_meal_plans(self) -> List[MealPlan]:
        return self.plans.list()

    # ============== Grocery list ==============

    def build_grocery_list(self, plan_id: str) -> Union[GroceryList, Failure]:
        """Scale every entry's recipe to its servings and aggregate once across the plan."""
        plan = self.get_meal_plan(plan_id)
        if plan is None:
            return Failure(MEAL_PLAN_NOT_FOUND, "Meal plan not found.", {"plan_id": plan_id})

        combined = []
        for entry in plan.entries:
            recipe = self.recipes.get_recipe(entry.recipe_id)
            if recipe is None:
                continue
            combined.extend(scale(recipe.ingredients, serving_factor(entry.servings, recipe.servings)))

        return GroceryList(plan.id, aggregate(combined))

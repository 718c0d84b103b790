import unittest
from datetime import date

from grocer.domain.Failure import is_failure
from grocer.infra.Recipe_Repository import RecipeCatalog
from grocer.logic.planning.meal_plans import MealPlanManager, parse_date
from grocer.utilities.constants import MEAL_PLAN_NOT_FOUND, NO_VALID_ENTRIES, PLAN_MIN_DAYS


class TestParseDate(unittest.TestCase):

    def test_accepts_iso_and_timestamps(self):
        self.assertEqual(parse_date("2024-06-12"), date(2024, 6, 12))
        self.assertEqual(parse_date("2024-06-12T18:30:00Z"), date(2024, 6, 12))
        self.assertEqual(parse_date(date(2024, 6, 12)), date(2024, 6, 12))

    def test_unparseable_is_none(self):
        self.assertIsNone(parse_date("next tuesday"))
        self.assertIsNone(parse_date(""))
        self.assertIsNone(parse_date(None))


class TestMealPlanCreation(unittest.TestCase):

    def setUp(self):
        self.manager = MealPlanManager(RecipeCatalog.from_json(), today=lambda: date(2025, 1, 10))

    def test_start_defaults_to_earliest_entry_and_spans_a_week(self):
        plan = self.manager.create_meal_plan(entries=[
            {"recipe_id": "recipe-veg-stirfry", "servings": 3, "date": "2024-04-02"},
            {"recipe_id": "recipe-italian-pasta", "servings": 4, "date": "2024-04-01"},
        ])
        self.assertFalse(is_failure(plan))
        self.assertEqual(plan.start_date, date(2024, 4, 1))
        self.assertEqual(plan.end_date, date(2024, 4, 7))
        self.assertEqual(plan.days, 7)

    def test_undated_entry_lands_on_start_and_entries_are_sorted(self):
        plan = self.manager.create_meal_plan("2024-06-12", [
            {"recipe_id": "recipe-chicken-tacos", "date": "2024-06-15", "meal_type": "dinner"},
            {"recipe_id": "recipe-italian-pasta", "meal_type": "lunch"},
            {"recipe_id": "recipe-veg-stirfry", "date": "2024-06-12", "meal_type": "dinner"},
        ])
        self.assertEqual(plan.start_date, date(2024, 6, 12))
        self.assertEqual(plan.end_date, date(2024, 6, 18))
        self.assertEqual(
            [(e.date, e.meal_type, e.recipe_id) for e in plan.entries],
            [
                (date(2024, 6, 12), "dinner", "recipe-veg-stirfry"),
                (date(2024, 6, 12), "lunch", "recipe-italian-pasta"),
                (date(2024, 6, 15), "dinner", "recipe-chicken-tacos"),
            ],
        )

    def test_end_extends_to_latest_entry(self):
        plan = self.manager.create_meal_plan(entries=[
            {"recipe_id": "recipe-italian-pasta", "date": "2024-06-01"},
            {"recipe_id": "recipe-italian-pasta", "date": "2024-06-20"},
        ])
        self.assertEqual(plan.start_date, date(2024, 6, 1))
        self.assertEqual(plan.end_date, date(2024, 6, 20))
        self.assertEqual(plan.days, 20)

    def test_no_dates_anywhere_uses_today(self):
        plan = self.manager.create_meal_plan(entries=[{"recipe_id": "recipe-italian-pasta"}])
        self.assertEqual(plan.start_date, date(2025, 1, 10))
        self.assertEqual(plan.end_date, date(2025, 1, 16))
        self.assertEqual(plan.entries[0].date, date(2025, 1, 10))

    def test_unparseable_start_falls_back_to_earliest_entry(self):
        plan = self.manager.create_meal_plan("next tuesday", [
            {"recipe_id": "recipe-italian-pasta", "date": "2024-03-05"},
        ])
        self.assertEqual(plan.start_date, date(2024, 3, 5))

    def test_camel_case_entry_fields(self):
        plan = self.manager.create_meal_plan(entries=[
            {"recipeId": "recipe-chicken-tacos", "mealType": "dinner", "date": "2024-05-01"},
        ])
        self.assertEqual(plan.entries[0].recipe_id, "recipe-chicken-tacos")
        self.assertEqual(plan.entries[0].meal_type, "dinner")

    def test_missing_or_bad_servings_use_recipe_yield(self):
        plan = self.manager.create_meal_plan(entries=[
            {"recipe_id": "recipe-chicken-tacos"},
            {"recipe_id": "recipe-italian-pasta", "servings": 0},
            {"recipe_id": "recipe-veg-stirfry", "servings": "lots"},
        ])
        self.assertEqual(sorted(e.servings for e in plan.entries), [2, 2, 4])

    def test_fractional_and_numeric_string_servings_are_kept(self):
        plan = self.manager.create_meal_plan("2024-06-12", [
            {"recipe_id": "recipe-italian-pasta", "servings": 2.9},
            {"recipe_id": "recipe-veg-stirfry", "servings": "3"},
        ])
        self.assertEqual([e.servings for e in plan.entries], [2.9, 3])

    def test_plan_spans_at_least_one_week(self):
        plan = self.manager.create_meal_plan("2024-06-12", [{"recipe_id": "recipe-italian-pasta"}])
        self.assertEqual(PLAN_MIN_DAYS, 7)
        self.assertEqual(plan.days, PLAN_MIN_DAYS)

    def test_partial_success_keeps_invalid_entries(self):
        bad = {"recipe_id": "recipe-unknown", "servings": 2}
        plan = self.manager.create_meal_plan("2024-06-12", [
            {"recipe_id": "recipe-italian-pasta", "servings": 2},
            bad,
            {"recipe_id": "recipe-veg-stirfry", "servings": 2},
        ])
        self.assertEqual(len(plan.entries), 2)
        self.assertEqual(plan.invalid_entries, [bad])
        self.assertEqual(plan.to_dict()["invalid_entries"], [bad])

    def test_fully_valid_plan_omits_invalid_entries(self):
        plan = self.manager.create_meal_plan(entries=[{"recipe_id": "recipe-italian-pasta"}])
        self.assertNotIn("invalid_entries", plan.to_dict())

    def test_no_valid_entries_is_a_failure_and_not_stored(self):
        entries = [{"recipe_id": "nope"}, "not-an-entry", {"servings": 2}]
        result = self.manager.create_meal_plan("2024-06-12", entries)
        self.assertTrue(is_failure(result))
        self.assertEqual(result.kind, NO_VALID_ENTRIES)
        self.assertEqual(result.detail["invalid_entries"], entries)
        self.assertEqual(self.manager.list_meal_plans(), [])

    def test_empty_entries_is_a_failure(self):
        result = self.manager.create_meal_plan("2024-06-12", [])
        self.assertTrue(is_failure(result))
        self.assertEqual(result.detail["invalid_entries"], [])

    def test_plans_are_retrievable_and_listed_in_creation_order(self):
        first = self.manager.create_meal_plan(entries=[{"recipe_id": "recipe-italian-pasta"}])
        second = self.manager.create_meal_plan(entries=[{"recipe_id": "recipe-veg-stirfry"}])
        self.assertIs(self.manager.get_meal_plan(first.id), first)
        self.assertEqual([p.id for p in self.manager.list_meal_plans()], [first.id, second.id])
        self.assertIsNone(self.manager.get_meal_plan("missing"))

    def test_entries_sorted_for_any_input_order(self):
        raw = [
            {"recipe_id": "recipe-italian-pasta", "date": "2024-06-14", "meal_type": "lunch"},
            {"recipe_id": "recipe-italian-pasta", "date": "2024-06-12", "meal_type": "lunch"},
            {"recipe_id": "recipe-veg-stirfry", "date": "2024-06-14", "meal_type": "breakfast"},
            {"recipe_id": "recipe-veg-stirfry", "date": "2024-06-13"},
        ]
        for shift in range(len(raw)):
            plan = self.manager.create_meal_plan(entries=raw[shift:] + raw[:shift])
            keys = [e.sort_key() for e in plan.entries]
            self.assertEqual(keys, sorted(keys))
            self.assertLessEqual(plan.start_date, plan.end_date)
            self.assertGreaterEqual(plan.days, 7)


class TestGroceryList(unittest.TestCase):

    def setUp(self):
        self.manager = MealPlanManager(RecipeCatalog.from_json())

    def test_garlic_merges_across_recipes(self):
        plan = self.manager.create_meal_plan(entries=[
            {"recipe_id": "recipe-italian-pasta", "servings": 4, "date": "2024-04-01"},
            {"recipe_id": "recipe-veg-stirfry", "servings": 3, "date": "2024-04-02"},
        ])
        grocery = self.manager.build_grocery_list(plan.id)
        self.assertEqual(grocery.plan_id, plan.id)
        self.assertEqual(grocery.find("garlic", "clove").quantity, 9)
        self.assertEqual(grocery.find("spaghetti").quantity, 16)
        self.assertEqual(grocery.find("broccoli florets").quantity, 3)
        self.assertEqual(grocery.find("soy sauce").quantity, 4.5)
        self.assertEqual(len([i for i in grocery.ingredients if i.ingredient == "garlic"]), 1)

    def test_scaling_rounds_half_up(self):
        plan = self.manager.create_meal_plan(entries=[{"recipe_id": "recipe-chicken-tacos", "servings": 3}])
        grocery = self.manager.build_grocery_list(plan.id)
        self.assertEqual(grocery.find("boneless chicken thighs").quantity, 1.13)
        self.assertEqual(grocery.find("red cabbage").quantity, 0.19)
        self.assertEqual(grocery.find("orange juice").quantity, 0.38)
        self.assertEqual(grocery.find("corn tortillas").quantity, 9)

    def test_fractional_servings_scale_exactly(self):
        plan = self.manager.create_meal_plan(entries=[{"recipe_id": "recipe-italian-pasta", "servings": 2.9}])
        grocery = self.manager.build_grocery_list(plan.id)
        self.assertEqual(grocery.find("garlic").quantity, 4.35)
        self.assertEqual(grocery.find("spaghetti").quantity, 11.6)
        self.assertEqual(grocery.find("olive oil").quantity, 4.35)

    def test_same_recipe_twice_sums(self):
        plan = self.manager.create_meal_plan(entries=[
            {"recipe_id": "recipe-italian-pasta", "servings": 2},
            {"recipe_id": "recipe-italian-pasta", "servings": 1},
        ])
        grocery = self.manager.build_grocery_list(plan.id)
        self.assertEqual(grocery.find("fresh basil").quantity, 0.75)
        self.assertEqual(grocery.find("garlic").quantity, 4.5)
        self.assertEqual(len(grocery), 7)

    def test_unknown_plan(self):
        result = self.manager.build_grocery_list("missing")
        self.assertTrue(is_failure(result))
        self.assertEqual(result.kind, MEAL_PLAN_NOT_FOUND)
        self.assertEqual(result.detail, {"plan_id": "missing"})


if __name__ == "__main__":
    unittest.main()

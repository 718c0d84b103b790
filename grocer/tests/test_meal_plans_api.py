import unittest
from fastapi.testclient import TestClient
from grocer.api.api_run import app


class TestMealPlansAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def _create(self, body):
        return self.client.post("/api/meal-plans", json=body)

    def test_health(self):
        r = self.client.get("/api/health")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"status": "ok"})

    def test_create_plan_and_grocery_list(self):
        r = self._create({"entries": [
            {"recipe_id": "recipe-italian-pasta", "servings": 4, "date": "2024-04-01", "meal_type": "dinner"},
            {"recipe_id": "recipe-veg-stirfry", "servings": 3, "date": "2024-04-02", "meal_type": "dinner"},
        ]})
        self.assertEqual(r.status_code, 201)
        plan = r.json()
        self.assertEqual(plan["start_date"], "2024-04-01")
        self.assertEqual(plan["end_date"], "2024-04-07")
        self.assertNotIn("invalid_entries", plan)

        r = self.client.get(f"/api/meal-plans/{plan['id']}/grocery-list")
        self.assertEqual(r.status_code, 200)
        data = r.json()
        self.assertEqual(data["plan_id"], plan["id"])
        garlic = [i for i in data["ingredients"] if i["ingredient"] == "garlic"]
        self.assertEqual(garlic, [{"ingredient": "garlic", "quantity": 9, "unit": "clove"}])

    def test_camel_case_body(self):
        r = self._create({"startDate": "2024-06-12", "entries": [
            {"recipeId": "recipe-chicken-tacos", "date": "2024-06-15", "mealType": "dinner"},
            {"recipeId": "recipe-italian-pasta", "mealType": "lunch"},
        ]})
        self.assertEqual(r.status_code, 201)
        plan = r.json()
        self.assertEqual((plan["start_date"], plan["end_date"]), ("2024-06-12", "2024-06-18"))
        self.assertEqual([e["date"] for e in plan["entries"]], ["2024-06-12", "2024-06-15"])
        self.assertEqual(plan["entries"][0]["servings"], 2)

    def test_partially_invalid_plan(self):
        r = self._create({"start_date": "2024-06-12", "entries": [
            {"recipe_id": "recipe-italian-pasta", "servings": 2},
            {"recipe_id": "recipe-missing", "servings": 2},
            {"recipe_id": "recipe-veg-stirfry", "servings": 2},
        ]})
        self.assertEqual(r.status_code, 201)
        plan = r.json()
        self.assertEqual(len(plan["entries"]), 2)
        self.assertEqual(plan["invalid_entries"], [{"recipe_id": "recipe-missing", "servings": 2}])

    def test_no_valid_entries(self):
        before = len(self.client.get("/api/meal-plans").json()["meal_plans"])
        r = self._create({"entries": [{"recipe_id": "recipe-missing"}]})
        self.assertEqual(r.status_code, 400)
        body = r.json()
        self.assertEqual(body["error"], "no_valid_entries")
        self.assertEqual(body["invalid_entries"], [{"recipe_id": "recipe-missing"}])
        after = len(self.client.get("/api/meal-plans").json()["meal_plans"])
        self.assertEqual(before, after)

    def test_non_object_entries_are_echoed_as_invalid(self):
        r = self._create({"start_date": "2024-06-12", "entries": [
            {"recipe_id": "recipe-italian-pasta"}, "oops", 42,
        ]})
        self.assertEqual(r.status_code, 201)
        self.assertEqual(r.json()["invalid_entries"], ["oops", 42])

        r = self._create({"entries": ["oops"]})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["invalid_entries"], ["oops"])

    def test_fractional_servings_survive_the_api(self):
        plan = self._create({"entries": [{"recipe_id": "recipe-italian-pasta", "servings": 2.9}]}).json()
        self.assertEqual(plan["entries"][0]["servings"], 2.9)

    def test_get_and_list_plan(self):
        plan = self._create({"entries": [{"recipe_id": "recipe-italian-pasta"}]}).json()
        r = self.client.get(f"/api/meal-plans/{plan['id']}")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), plan)
        ids = [p["id"] for p in self.client.get("/api/meal-plans").json()["meal_plans"]]
        self.assertIn(plan["id"], ids)

    def test_unknown_plan(self):
        for path in ("/api/meal-plans/missing", "/api/meal-plans/missing/grocery-list",
                     "/api/meal-plans/missing/grocery-list.pdf"):
            r = self.client.get(path)
            self.assertEqual(r.status_code, 404, path)
            self.assertEqual(r.json()["error"], "meal_plan_not_found")
        r = self.client.post("/api/meal-plans/missing/cart", json={"store_id": "store-100"})
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.json(), {"error": "meal_plan_not_found", "message": "Meal plan not found.",
                                    "plan_id": "missing"})

    def test_grocery_list_pdf(self):
        plan = self._create({"entries": [{"recipe_id": "recipe-chicken-tacos", "servings": 3}]}).json()
        r = self.client.get(f"/api/meal-plans/{plan['id']}/grocery-list.pdf")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.headers["content-type"], "application/pdf")
        self.assertIn(f"grocery_list_{plan['id']}.pdf", r.headers["content-disposition"])
        self.assertTrue(r.content.startswith(b"%PDF"))

    def test_cart_from_plan(self):
        plan = self._create({"entries": [{"recipe_id": "recipe-chicken-tacos", "servings": 4}]}).json()
        r = self.client.post(f"/api/meal-plans/{plan['id']}/cart", json={"storeId": "store-200", "zipcode": "94124"})
        self.assertEqual(r.status_code, 201)
        body = r.json()
        self.assertEqual(body["plan_id"], plan["id"])
        self.assertEqual(body["store_id"], "store-200")
        self.assertEqual([u["ingredient"] for u in body["unmatched_ingredients"]], ["red cabbage"])
        self.assertEqual(body["cart"]["status"], "draft")
        self.assertEqual([f["reason"] for f in body["cart"]["fallbacks"]], ["out_of_stock"])

        cart = self.client.get(f"/api/cart/{body['cart']['id']}")
        self.assertEqual(cart.status_code, 200)

    def test_cart_from_plan_without_store(self):
        plan = self._create({"entries": [{"recipe_id": "recipe-italian-pasta"}]}).json()
        r = self.client.post(f"/api/meal-plans/{plan['id']}/cart")
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.json()["error"], "store_not_found")


if __name__ == "__main__":
    unittest.main()

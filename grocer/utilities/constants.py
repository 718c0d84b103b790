from typing import Final, Tuple

DATE_FORMAT: Final[str] = "%Y-%m-%d"
# Accepted inputs when normalizing entry / plan dates
DATE_INPUT_FORMATS: Final[Tuple[str, ...]] = (
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S.%fZ",
    "%Y/%m/%d",
)

# Plans always cover at least one week
PLAN_MIN_DAYS: Final[int] = 7
QUANTITY_PRECISION: Final[str] = "0.01"
CART_UNIT: Final[str] = "ea"
CART_STATUS_DRAFT: Final[str] = "draft"

# Failure kinds
NO_VALID_ENTRIES: Final[str] = "no_valid_entries"
MEAL_PLAN_NOT_FOUND: Final[str] = "meal_plan_not_found"
RECIPE_NOT_FOUND: Final[str] = "recipe_not_found"
STORE_NOT_FOUND: Final[str] = "store_not_found"
CART_NOT_FOUND: Final[str] = "cart_not_found"

# Fallback reasons
SKU_NOT_FOUND: Final[str] = "sku_not_found"
OUT_OF_STOCK: Final[str] = "out_of_stock"

# Ingredient name -> retailer search term
INGREDIENT_SEARCH_TERMS: Final[dict[str, str]] = {
    "spaghetti": "spaghetti pasta",
    "cherry tomatoes": "cherry tomatoes",
    "fresh basil": "basil",
    "garlic": "garlic",
    "olive oil": "olive oil",
    "salt": "sea salt",
    "black pepper": "black pepper",
    "boneless chicken thighs": "chicken thighs",
    "corn tortillas": "corn tortillas",
    "lime": "limes",
    "orange juice": "orange juice",
    "red cabbage": "red cabbage",
    "cilantro": "cilantro",
    "carrots": "carrots",
    "snow peas": "snow peas",
    "bell pepper": "bell pepper",
    "ginger": "ginger",
    "soy sauce": "soy sauce",
    "sesame oil": "sesame oil",
    "rice vinegar": "rice vinegar",
    "broccoli florets": "broccoli",
}

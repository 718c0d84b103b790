from grocer.utilities.config import DATA_DIR

# Centralized paths for seed data files (single source of truth)
RECIPES_FILE = DATA_DIR / 'recipes.json'
STORES_FILE = DATA_DIR / 'stores.json'
CATALOG_FILE = DATA_DIR / 'catalog.json'
ASSISTANT_FILE = DATA_DIR / 'assistant.json'

__all__ = ['DATA_DIR', 'RECIPES_FILE', 'STORES_FILE', 'CATALOG_FILE', 'ASSISTANT_FILE']

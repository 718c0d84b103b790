"""Retailer seed data helpers (stores and per-store product catalog)."""

import json
import logging
from pathlib import Path
from typing import Dict, List

from grocer.domain.Cart import Product, Store
from grocer.infra.paths import CATALOG_FILE, STORES_FILE

logger = logging.getLogger(__name__)


def _read_json(path: Path, default):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.warning("Retail data file not found: %s", path)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s: %s", path, e)
    return default


def reading_from_stores(path: Path = STORES_FILE) -> List[Store]:
    """Load the store directory."""
    return [Store.from_dict(entry) for entry in _read_json(path, [])]


def reading_from_catalog(path: Path = CATALOG_FILE) -> Dict[str, List[Product]]:
    """Load products keyed by store id."""
    data = _read_json(path, {})
    return {
        store_id: [Product.from_dict(item) for item in items]
        for store_id, items in data.items()
    }

"""Assistant prompt and guardrail configuration, served verbatim."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from grocer.infra.paths import ASSISTANT_FILE

logger = logging.getLogger(__name__)


def reading_from_assistant_config(path: Path = ASSISTANT_FILE) -> Dict[str, Any]:
    """Return {"prompts": {...}, "guardrails": {...}}; empty sections when unreadable."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f) or {}
    except FileNotFoundError:
        logger.warning("Assistant config not found: %s", path)
        data = {}
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in assistant config: %s", e)
        data = {}
    return {"prompts": data.get("prompts", {}), "guardrails": data.get("guardrails", {})}

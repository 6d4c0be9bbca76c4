from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CATEGORIES = [
    "Electronics",
    "Furniture",
    "Clothing",
    "Books",
    "Kitchen",
    "Tools",
    "Sports",
    "Toys",
    "Home Decor",
    "Automotive",
    "Other",
]

CONDITIONS = [
    "New",
    "Like New",
    "Good",
    "Fair",
    "Poor",
    "Not Working",
]

# initial slider bounds in the UI; the API itself is unbounded by default
DEFAULT_PRICE_RANGE = (0, 1000)


def _string_list(value: Any, fallback: list[str]) -> list[str]:
    if not isinstance(value, list):
        return list(fallback)
    out = [str(v) for v in value if isinstance(v, str) and v.strip()]
    return out or list(fallback)


def load_catalog_config(path: Path | None) -> dict[str, list[str]]:
    """Categories and conditions, optionally overridden by a JSON file.

    The file may carry either key; a missing or broken file falls back to
    the built-in lists.
    """
    cfg = {"categories": list(CATEGORIES), "conditions": list(CONDITIONS)}
    if path is None:
        return cfg
    if not path.exists():
        logger.warning("Catalog config %s not found, using defaults", path)
        return cfg
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.error("Error loading catalog config %s: %s", path, e)
        return cfg
    if not isinstance(data, dict):
        logger.error("Catalog config %s must be a JSON object", path)
        return cfg
    cfg["categories"] = _string_list(data.get("categories"), CATEGORIES)
    cfg["conditions"] = _string_list(data.get("conditions"), CONDITIONS)
    return cfg

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Iterable, Optional

logger = logging.getLogger(__name__)

SUPPORTED_IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".heic")
ITEM_FILE = "item.json"


def is_image_file(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in SUPPORTED_IMAGE_EXTENSIONS


def list_images(item_path: Path) -> list[str]:
    return sorted(p.name for p in item_path.iterdir() if is_image_file(p))


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-standard JSON constant {token}")


def _finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {token}")
    return value


def has_required_fields(data: Any) -> bool:
    # price may be null, but the key has to be there
    return isinstance(data, dict) and bool(data.get("id")) and bool(data.get("name")) and "price" in data


def parse_item_dir(item_path: Path) -> Optional[dict[str, Any]]:
    """Read one item folder. Returns None for folders that are not valid items.

    Read and JSON errors propagate so the caller can log them per folder.
    """
    json_file = item_path / ITEM_FILE
    if not json_file.is_file():
        logger.warning("No item.json found in %s", item_path.name)
        return None

    data = json.loads(json_file.read_text(encoding="utf-8"), parse_constant=_reject_constant, parse_float=_finite_float)
    if not has_required_fields(data):
        logger.warning("Skipping invalid item in %s: missing required fields", item_path.name)
        return None

    data["images"] = list_images(item_path)
    logger.info("Loaded item: %s (%d images)", data["name"], len(data["images"]))
    return data


def _item_dirs(items_dir: Path) -> list[Path]:
    dirs = [p for p in items_dir.iterdir() if p.is_dir() and not p.name.startswith(".")]
    return sorted(dirs, key=lambda p: p.name)


def parse_items(items_dir: str | Path) -> list[dict[str, Any]]:
    """Scan every item folder under items_dir and return the valid descriptors.

    A missing items_dir is created and yields an empty list. A broken folder
    is logged and skipped; it never aborts the scan.
    """
    items_dir = Path(items_dir)
    items: list[dict[str, Any]] = []

    if not items_dir.exists():
        logger.info("Items directory %s does not exist, creating...", items_dir)
        items_dir.mkdir(parents=True, exist_ok=True)
        return items

    try:
        item_dirs = _item_dirs(items_dir)
    except OSError as e:
        logger.error("Error reading items directory %s: %s", items_dir, e)
        return items

    for item_path in item_dirs:
        try:
            item = parse_item_dir(item_path)
        except (OSError, ValueError) as e:
            logger.error("Error parsing item in %s: %s", item_path.name, e)
            continue
        if item is not None:
            items.append(item)

    return items


def item_id(item: dict[str, Any]) -> str:
    return str(item.get("id"))


def find_item(items: Iterable[dict[str, Any]], wanted: str) -> Optional[dict[str, Any]]:
    for it in items:
        if item_id(it) == str(wanted):
            return it
    return None


def item_categories(item: dict[str, Any]) -> list[str]:
    cat = item.get("category")
    if cat is None:
        return []
    if isinstance(cat, str):
        return [cat]
    if isinstance(cat, (list, tuple)):
        return [str(c) for c in cat if c is not None]
    return [str(cat)]

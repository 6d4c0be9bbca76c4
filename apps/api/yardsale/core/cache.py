from __future__ import annotations

import logging
import threading
import time
from pathlib import Path
from typing import Any, Optional

from .items import find_item, parse_items

logger = logging.getLogger(__name__)


class ItemsCache:
    """In-memory copy of the items directory, replaced wholesale on refresh."""

    def __init__(self, items_dir: str | Path):
        self.items_dir = Path(items_dir)
        self.loaded_at: Optional[float] = None
        self._items: list[dict[str, Any]] = []
        self._lock = threading.Lock()

    def refresh(self) -> int:
        new_items = parse_items(self.items_dir)
        with self._lock:
            self._items = new_items
            self.loaded_at = time.time()
        logger.info("Refreshed items cache: %d items", len(new_items))
        return len(new_items)

    load = refresh

    def items(self) -> list[dict[str, Any]]:
        with self._lock:
            return list(self._items)

    def get(self, wanted: str) -> Optional[dict[str, Any]]:
        return find_item(self.items(), wanted)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

logger = logging.getLogger(__name__)


class FavoritesStore:
    """Ordered list of favorite item ids persisted to a local JSON file.

    Ids are kept even when the item is no longer in the catalog, so a
    favorite survives an item folder being moved out and back in.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.Lock()
        self._favorites: list[str] = self._load()

    def _load(self) -> list[str]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error("Error loading favorites from %s: %s", self.path, e)
            return []
        raw = data.get("favorites") if isinstance(data, dict) else None
        if not isinstance(raw, list):
            logger.error("Ignoring malformed favorites file %s", self.path)
            return []
        out: list[str] = []
        for v in raw:
            s = str(v)
            if s not in out:
                out.append(s)
        return out

    def _save(self, favorites: list[str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps({"favorites": favorites}, ensure_ascii=False, indent=2)
        fd, tmp_name = tempfile.mkstemp(prefix=".favorites-", suffix=".tmp", dir=str(self.path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise

    def _commit(self, favorites: list[str]) -> None:
        # state changes only once the file is written
        self._save(favorites)
        self._favorites = favorites

    def ids(self) -> list[str]:
        with self._lock:
            return list(self._favorites)

    def is_favorite(self, item_id: str) -> bool:
        with self._lock:
            return str(item_id) in self._favorites

    def toggle(self, item_id: str) -> bool:
        item_id = str(item_id)
        with self._lock:
            if item_id in self._favorites:
                self._commit([f for f in self._favorites if f != item_id])
                return False
            self._commit(self._favorites + [item_id])
            return True

    def add(self, item_id: str) -> None:
        item_id = str(item_id)
        with self._lock:
            if item_id not in self._favorites:
                self._commit(self._favorites + [item_id])

    def remove(self, item_id: str) -> None:
        item_id = str(item_id)
        with self._lock:
            if item_id in self._favorites:
                self._commit([f for f in self._favorites if f != item_id])

    def clear(self) -> None:
        with self._lock:
            self._commit([])

    def __len__(self) -> int:
        with self._lock:
            return len(self._favorites)

from __future__ import annotations

import json
import os

import pytest

from yardsale.core.favorites import FavoritesStore


def test_missing_file_is_empty(tmp_path):
    store = FavoritesStore(tmp_path / "favorites.json")
    assert store.ids() == []
    assert not store.is_favorite("x")


def test_toggle_adds_then_removes(tmp_path):
    store = FavoritesStore(tmp_path / "favorites.json")
    assert store.toggle("a") is True
    assert store.toggle("b") is True
    assert store.toggle("a") is False
    assert store.ids() == ["b"]


def test_persisted_across_instances(tmp_path):
    path = tmp_path / "nested" / "favorites.json"
    store = FavoritesStore(path)
    store.add("a")
    store.add("b")
    store.add("a")
    assert json.loads(path.read_text(encoding="utf-8")) == {"favorites": ["a", "b"]}
    assert FavoritesStore(path).ids() == ["a", "b"]


def test_remove_keeps_order_of_the_rest(tmp_path):
    store = FavoritesStore(tmp_path / "favorites.json")
    for i in ("a", "b", "c"):
        store.add(i)
    store.remove("b")
    store.remove("missing")
    assert store.ids() == ["a", "c"]


def test_clear(tmp_path):
    store = FavoritesStore(tmp_path / "favorites.json")
    store.add("a")
    store.clear()
    assert len(store) == 0


def test_corrupt_file_loads_empty_and_recovers(tmp_path, caplog):
    path = tmp_path / "favorites.json"
    path.write_text("{oops", encoding="utf-8")
    store = FavoritesStore(path)
    assert store.ids() == []
    assert "Error loading favorites" in caplog.text
    store.add("z")
    assert FavoritesStore(path).ids() == ["z"]


def test_ids_are_strings(tmp_path):
    path = tmp_path / "favorites.json"
    path.write_text(json.dumps({"favorites": [1, "1", 2]}), encoding="utf-8")
    assert FavoritesStore(path).ids() == ["1", "2"]


def test_failed_write_keeps_previous_file_and_state(tmp_path, monkeypatch):
    path = tmp_path / "favorites.json"
    store = FavoritesStore(path)
    store.add("a")

    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", broken_replace)
    with pytest.raises(OSError):
        store.add("b")

    assert store.ids() == ["a"]
    assert json.loads(path.read_text(encoding="utf-8")) == {"favorites": ["a"]}
    assert [p.name for p in tmp_path.iterdir()] == ["favorites.json"]

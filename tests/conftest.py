from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from yardsale.main import create_app


def write_item(items_dir: Path, folder: str, data, images=()) -> Path:
    d = items_dir / folder
    d.mkdir(parents=True, exist_ok=True)
    if data is not None:
        text = data if isinstance(data, str) else json.dumps(data)
        (d / "item.json").write_text(text, encoding="utf-8")
    for name in images:
        (d / name).write_bytes(b"\x89PNG\r\n\x1a\nfake")
    return d


@pytest.fixture
def items_dir(tmp_path: Path) -> Path:
    d = tmp_path / "items"
    d.mkdir()
    return d


@pytest.fixture
def sample_items(items_dir: Path) -> Path:
    write_item(items_dir, "lamp", {
        "id": "lamp",
        "name": "Desk Lamp",
        "price": 15,
        "description": "Warm light, works fine",
        "condition": "Good",
        "category": ["Home Decor", "Electronics"],
    }, images=["b.jpg", "a.PNG", "notes.txt"])
    write_item(items_dir, "sofa", {
        "id": "sofa",
        "name": "Leather Sofa",
        "price": 450,
        "description": "Three seater",
        "condition": "Fair",
        "category": ["Furniture"],
        "link": "https://example.com/sofa",
    }, images=["sofa.jpeg"])
    write_item(items_dir, "tv", {
        "id": "tv",
        "name": "Old TV",
        "price": 1200,
        "description": "Big screen",
        "condition": "Not Working",
        "category": ["Electronics"],
    })
    return items_dir


@pytest.fixture
def web_dir(tmp_path: Path) -> Path:
    d = tmp_path / "web"
    d.mkdir()
    (d / "index.html").write_text("<html><body>yardsale ui</body></html>", encoding="utf-8")
    return d


@pytest.fixture
def client(sample_items: Path, tmp_path: Path, web_dir: Path):
    app = create_app(
        items_dir=sample_items,
        favorites_path=tmp_path / "state" / "favorites.json",
        web_dir=web_dir,
    )
    with TestClient(app) as c:
        yield c

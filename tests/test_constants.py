from __future__ import annotations

import json
import logging

import pytest

from yardsale.core.constants import CATEGORIES, CONDITIONS, load_catalog_config


def test_no_override_path_uses_defaults():
    assert load_catalog_config(None) == {"categories": CATEGORIES, "conditions": CONDITIONS}


def test_missing_file_uses_defaults(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        cfg = load_catalog_config(tmp_path / "nope.json")
    assert cfg["categories"] == CATEGORIES
    assert "not found" in caplog.text


@pytest.mark.parametrize("raw", ["{broken", "[1, 2, 3]", '"just a string"'])
def test_broken_or_non_object_file_uses_defaults(tmp_path, caplog, raw):
    path = tmp_path / "catalog.json"
    path.write_text(raw, encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        cfg = load_catalog_config(path)
    assert cfg == {"categories": CATEGORIES, "conditions": CONDITIONS}
    assert str(path) in caplog.text


def test_bad_value_types_fall_back_per_key(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"categories": "Cables", "conditions": ["Mint", 3, " "]}), encoding="utf-8")
    cfg = load_catalog_config(path)
    assert cfg["categories"] == CATEGORIES
    assert cfg["conditions"] == ["Mint"]

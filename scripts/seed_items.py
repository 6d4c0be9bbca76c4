#!/usr/bin/env python3
"""
Write a few demo item folders (item.json + placeholder images) so the UI
has something to show without real data.

Usage:
  python scripts/seed_items.py --items-dir items --count 6
"""
from __future__ import annotations

import argparse
import json
import random
import textwrap
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from yardsale.core import config
from yardsale.core.constants import CATEGORIES, CONDITIONS

NOUNS = ["Lamp", "Desk", "Bike", "Kettle", "Drill", "Jacket", "Monitor", "Bookshelf", "Skates", "Puzzle"]
ADJECTIVES = ["Vintage", "Compact", "Sturdy", "Blue", "Classic", "Portable", "Oak", "Wireless"]


def _write_image(out_path: Path, title: str, shade: int, size: tuple[int, int] = (640, 480)) -> None:
    w, h = size
    img = Image.new("RGB", (w, h), (shade, shade, shade + 20))
    d = ImageDraw.Draw(img)
    try:
        font = ImageFont.truetype("arial.ttf", 32)
    except OSError:
        font = ImageFont.load_default()
    d.text((24, h // 2 - 20), textwrap.fill(title, width=28), font=font, fill=(240, 240, 240))
    out_path.parent.mkdir(parents=True, exist_ok=True)
    img.save(out_path)


def seed(items_dir: Path, count: int, seed_value: int | None = None) -> list[dict]:
    rng = random.Random(seed_value)
    created = []
    for n in range(1, count + 1):
        name = f"{rng.choice(ADJECTIVES)} {rng.choice(NOUNS)}"
        item_id = f"demo-{n:03d}"
        item = {
            "id": item_id,
            "name": name,
            "price": rng.choice([5, 10, 15, 25, 40, 75, 120, 250, 600]),
            "description": f"Demo listing for a {name.lower()}.",
            "condition": rng.choice(CONDITIONS),
            "category": rng.sample(CATEGORIES, k=rng.randint(1, 2)),
        }
        folder = items_dir / item_id
        folder.mkdir(parents=True, exist_ok=True)
        (folder / "item.json").write_text(json.dumps(item, ensure_ascii=False, indent=2), encoding="utf-8")
        for i in range(rng.randint(1, 3)):
            _write_image(folder / f"photo_{i + 1}.png", f"{name} #{i + 1}", rng.randint(30, 90))
        created.append(item)
    return created


def main() -> None:
    ap = argparse.ArgumentParser(description="Create demo item folders")
    ap.add_argument("--items-dir", default=str(config.ITEMS_DIR))
    ap.add_argument("--count", type=int, default=6)
    ap.add_argument("--seed", type=int, default=None, help="Random seed for repeatable output")
    args = ap.parse_args()

    items = seed(Path(args.items_dir), max(1, args.count), args.seed)
    print(f"[ok] wrote {len(items)} demo items to {args.items_dir}")


if __name__ == "__main__":
    main()

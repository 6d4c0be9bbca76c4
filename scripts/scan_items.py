#!/usr/bin/env python3
"""
Scan an items folder the same way the API does and print what it found.

Usage (from the repo root):
  python scripts/scan_items.py
  python scripts/scan_items.py --items-dir /data/yardsale --json
"""
from __future__ import annotations

import argparse
import json
import sys

from yardsale.core import config
from yardsale.core.items import parse_items
from yardsale.core.log import setup_logging


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Scan item folders and report valid items")
    ap.add_argument("--items-dir", default=str(config.ITEMS_DIR))
    ap.add_argument("--json", action="store_true", help="Print the parsed items as JSON")
    ap.add_argument("--quiet", action="store_true", help="Only warnings and errors from the scanner")
    args = ap.parse_args(argv)

    setup_logging("WARNING" if args.quiet else config.LOG_LEVEL)
    items = parse_items(args.items_dir)

    if args.json:
        print(json.dumps(items, ensure_ascii=False, indent=2))
    else:
        for it in items:
            print(f"{it['id']}\t{it['name']}\t${it.get('price')}\t{len(it['images'])} images")
        print(f"[ok] {len(items)} items in {args.items_dir}")

    return 0 if items else 1


if __name__ == "__main__":
    sys.exit(main())

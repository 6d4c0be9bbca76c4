from __future__ import annotations
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

ROOT = Path(__file__).resolve().parents[4]  # repo root
WEB_DIR = ROOT / "apps" / "web"

def get_env(name: str, default: str | None = None) -> str | None:
    v = os.getenv(name)
    return v if v is not None and v != "" else default

def resolve_path(value: str | Path) -> Path:
    p = Path(value).expanduser()
    return p if p.is_absolute() else ROOT / p

API_HOST = get_env("API_HOST", "127.0.0.1") or "127.0.0.1"
API_PORT = int(get_env("API_PORT", "5000") or "5000")
ITEMS_DIR = resolve_path(get_env("ITEMS_DIR", "items") or "items")
FAVORITES_PATH = resolve_path(get_env("FAVORITES_PATH", "storage/favorites.json") or "storage/favorites.json")

_catalog_cfg = get_env("CATALOG_CONFIG_PATH")
CATALOG_CONFIG_PATH = resolve_path(_catalog_cfg) if _catalog_cfg else None

CORS_ORIGINS = [o.strip() for o in (get_env("CORS_ORIGINS", "*") or "*").split(",") if o.strip()]
LOG_LEVEL = (get_env("LOG_LEVEL", "INFO") or "INFO").upper()

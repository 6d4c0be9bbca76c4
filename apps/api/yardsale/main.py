from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse, PlainTextResponse

from . import __version__
from .core import config
from .core.cache import ItemsCache
from .core.constants import DEFAULT_PRICE_RANGE, load_catalog_config
from .core.export import NoFavoritesError, format_favorites
from .core.favorites import FavoritesStore
from .core.filters import ItemFilter, apply_filters
from .core.log import setup_logging
from .utils.fs import safe_join

logger = logging.getLogger(__name__)

api = APIRouter(prefix="/api")


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message})


def item_filter(
    search: str = "",
    category: str = "",
    condition: str = "",
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    favorites_only: bool = False,
) -> ItemFilter:
    if min_price is not None and max_price is not None and min_price > max_price:
        raise HTTPException(status_code=422, detail="min_price must not exceed max_price")
    return ItemFilter(
        search=search,
        category=category,
        condition=condition,
        min_price=min_price,
        max_price=max_price,
        favorites_only=favorites_only,
    )


def _cache(request: Request) -> ItemsCache:
    return request.app.state.cache


def _favorites(request: Request) -> FavoritesStore:
    return request.app.state.favorites


@api.get("/items")
def get_items(request: Request, flt: ItemFilter = Depends(item_filter)):
    try:
        items = _cache(request).items()
        return apply_filters(items, flt, _favorites(request).ids())
    except Exception:
        logger.exception("Error getting items")
        return _error(500, "Failed to get items")


@api.get("/items/{item_id}")
def get_item(request: Request, item_id: str) -> dict[str, Any]:
    item = _cache(request).get(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return item


@api.post("/refresh")
def refresh_items(request: Request):
    try:
        count = _cache(request).refresh()
    except Exception:
        logger.exception("Error refreshing items")
        return _error(500, "Failed to refresh items")
    return {"message": "Items refreshed successfully", "count": count}


@api.get("/config")
def get_config(request: Request):
    try:
        cfg = load_catalog_config(request.app.state.catalog_config_path)
    except Exception:
        logger.exception("Error getting config")
        return _error(500, "Failed to load configuration")
    return {**cfg, "price_range": list(DEFAULT_PRICE_RANGE)}


@api.get("/images/{item_id}/{filename:path}")
def get_image(request: Request, item_id: str, filename: str):
    base: Path = _cache(request).items_dir
    p = safe_join(base, f"{item_id}/{filename}")
    if not p.exists() or not p.is_file():
        raise HTTPException(status_code=404, detail="Image not found")
    return FileResponse(str(p))


@api.get("/favorites")
def list_favorites(request: Request) -> dict[str, Any]:
    return {"favorites": _favorites(request).ids()}


@api.get("/favorites/export", response_class=PlainTextResponse)
def export_favorites(request: Request, flt: ItemFilter = Depends(item_filter)):
    favs = _favorites(request).ids()
    visible = apply_filters(_cache(request).items(), flt, favs)
    try:
        return PlainTextResponse(format_favorites(visible, favs))
    except NoFavoritesError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _favorite_state(store: FavoritesStore, item_id: str, favorite: bool) -> dict[str, Any]:
    return {"id": item_id, "favorite": favorite, "favorites": store.ids()}


@api.post("/favorites/{item_id}/toggle")
def toggle_favorite(request: Request, item_id: str):
    store = _favorites(request)
    try:
        state = store.toggle(item_id)
    except OSError:
        logger.exception("Error toggling favorite %s", item_id)
        return _error(500, "Failed to update favorites")
    return _favorite_state(store, item_id, state)


@api.put("/favorites/{item_id}")
def add_favorite(request: Request, item_id: str):
    store = _favorites(request)
    try:
        store.add(item_id)
    except OSError:
        logger.exception("Error adding favorite %s", item_id)
        return _error(500, "Failed to update favorites")
    return _favorite_state(store, item_id, True)


@api.delete("/favorites/{item_id}")
def remove_favorite(request: Request, item_id: str):
    store = _favorites(request)
    try:
        store.remove(item_id)
    except OSError:
        logger.exception("Error removing favorite %s", item_id)
        return _error(500, "Failed to update favorites")
    return _favorite_state(store, item_id, False)


def create_app(
    items_dir: Optional[Path] = None,
    favorites_path: Optional[Path] = None,
    catalog_config_path: Optional[Path] = None,
    web_dir: Optional[Path] = None,
) -> FastAPI:
    setup_logging(config.LOG_LEVEL)

    app = FastAPI(title="yardsale API", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    items_dir = Path(items_dir) if items_dir is not None else config.ITEMS_DIR
    app.state.cache = ItemsCache(items_dir)
    app.state.favorites = FavoritesStore(favorites_path or config.FAVORITES_PATH)
    app.state.catalog_config_path = catalog_config_path or config.CATALOG_CONFIG_PATH
    app.state.web_dir = Path(web_dir) if web_dir is not None else config.WEB_DIR

    logger.info("Initializing items from: %s", items_dir)
    app.state.cache.load()

    @app.get("/health")
    def health() -> dict[str, Any]:
        cache: ItemsCache = app.state.cache
        return {
            "ok": True,
            "items": len(cache),
            "items_dir": str(cache.items_dir),
            "loaded_at": cache.loaded_at,
        }

    app.include_router(api)

    api_methods = ["GET", "POST", "PUT", "PATCH", "DELETE"]

    @app.api_route("/api", methods=api_methods, include_in_schema=False)
    @app.api_route("/api/{rest:path}", methods=api_methods, include_in_schema=False)
    def api_not_found(rest: str = ""):
        raise HTTPException(status_code=404, detail="Not Found")

    # registered last so it never shadows the API
    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    @app.get("/{full_path:path}", response_class=HTMLResponse, include_in_schema=False)
    def ui_root(full_path: str = ""):
        index_path = app.state.web_dir / "index.html"
        if not index_path.exists():
            raise HTTPException(status_code=404, detail="UI not found")
        return HTMLResponse(index_path.read_text(encoding="utf-8"))

    return app

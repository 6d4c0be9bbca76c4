from __future__ import annotations

from typing import Any, Iterable

from .items import item_id

HEADER = "My Favorite Items:"
FOOTER = "Contact me for more details!"


class NoFavoritesError(ValueError):
    pass


def format_price(price: Any) -> str:
    if price is None:
        return "N/A"
    if isinstance(price, bool):
        return "true" if price else "false"
    if isinstance(price, float) and price.is_integer():
        return str(int(price))
    return str(price)


def format_line(item: dict[str, Any]) -> str:
    condition = item.get("condition") or ""
    return f"• {item.get('name')} - ${format_price(item.get('price'))} ({condition})"


def favorite_items(items: Iterable[dict[str, Any]], favorites: Iterable[str]) -> list[dict[str, Any]]:
    favs = set(favorites)
    return [it for it in items if item_id(it) in favs]


def format_favorites(items: Iterable[dict[str, Any]], favorites: Iterable[str]) -> str:
    """Shareable plain-text list of the favorites found in items, catalog order."""
    picked = favorite_items(items, favorites)
    if not picked:
        raise NoFavoritesError("No favorite items to export!")
    body = "\n".join(format_line(it) for it in picked)
    return f"{HEADER}\n\n{body}\n\n{FOOTER}"

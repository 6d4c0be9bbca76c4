from __future__ import annotations

from typing import Any, Iterable, Optional

from pydantic import BaseModel, Field, model_validator

from .items import item_categories, item_id


class ItemFilter(BaseModel):
    search: str = Field("", description="Case-insensitive match on name, description or category")
    category: str = Field("", description="Exact category, empty for all")
    condition: str = Field("", description="Exact condition, empty for all")
    min_price: Optional[float] = Field(None, description="Inclusive lower bound")
    max_price: Optional[float] = Field(None, description="Inclusive upper bound")
    favorites_only: bool = False

    @model_validator(mode="after")
    def _check_range(self) -> "ItemFilter":
        if self.min_price is not None and self.max_price is not None and self.min_price > self.max_price:
            raise ValueError("min_price must not exceed max_price")
        return self


def _comparable_price(value: Any) -> Optional[float]:
    """Price as a number, or None when it cannot be compared.

    null counts as 0, booleans as 0/1 and numeric strings are parsed.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip() or 0)
        except ValueError:
            return None
    return None


def _matches_search(item: dict[str, Any], query: str) -> bool:
    q = query.lower()
    fields = [str(item.get("name") or ""), str(item.get("description") or "")]
    fields.extend(item_categories(item))
    return any(q in f.lower() for f in fields)


def matches(item: dict[str, Any], flt: ItemFilter, favorites: Iterable[str] = ()) -> bool:
    if flt.search and not _matches_search(item, flt.search):
        return False
    if flt.category and flt.category not in item_categories(item):
        return False
    if flt.condition and item.get("condition") != flt.condition:
        return False

    price = _comparable_price(item.get("price"))
    if price is not None:
        if flt.min_price is not None and price < flt.min_price:
            return False
        if flt.max_price is not None and price > flt.max_price:
            return False

    if flt.favorites_only and item_id(item) not in set(favorites):
        return False
    return True


def apply_filters(items: Iterable[dict[str, Any]], flt: ItemFilter, favorites: Iterable[str] = ()) -> list[dict[str, Any]]:
    favs = set(favorites)
    return [it for it in items if matches(it, flt, favs)]

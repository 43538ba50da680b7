"""
Client-side catalog browsing over product dicts returned by the API.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Iterable

SORT_KEYS = ("newest", "price_asc", "price_desc", "name")

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _price(product: dict[str, Any]) -> Decimal:
    return Decimal(str(product.get("price", 0)))


def _created_at(product: dict[str, Any]) -> datetime:
    value = product.get("created_at")
    if not value:
        return _EPOCH
    parsed = value if isinstance(value, datetime) else datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def filter_products(
    products: Iterable[dict[str, Any]],
    category: str | None = None,
    search: str | None = None,
    min_price: Decimal | float | None = None,
    max_price: Decimal | float | None = None,
) -> list[dict[str, Any]]:
    """
    Keep products matching every given criterion.

    Category matches exactly; search is a case-insensitive substring of
    name, description or brand; price bounds are inclusive.
    """
    term = search.strip().lower() if search else ""
    low = Decimal(str(min_price)) if min_price is not None else None
    high = Decimal(str(max_price)) if max_price is not None else None

    result = []
    for product in products:
        if category and product.get("category") != category:
            continue
        if term:
            haystack = " ".join(str(product.get(key) or "") for key in ("name", "description", "brand")).lower()
            if term not in haystack:
                continue
        price = _price(product)
        if low is not None and price < low:
            continue
        if high is not None and price > high:
            continue
        result.append(product)
    return result


def sort_products(products: Iterable[dict[str, Any]], sort_by: str = "newest") -> list[dict[str, Any]]:
    """
    Raises:
        ValueError: Unknown sort key
    """
    if sort_by == "newest":
        return sorted(products, key=_created_at, reverse=True)
    if sort_by == "price_asc":
        return sorted(products, key=_price)
    if sort_by == "price_desc":
        return sorted(products, key=_price, reverse=True)
    if sort_by == "name":
        return sorted(products, key=lambda product: str(product.get("name", "")).lower())
    raise ValueError(f"Unknown sort key: {sort_by} (expected one of {', '.join(SORT_KEYS)})")


def browse(
    products: Iterable[dict[str, Any]],
    category: str | None = None,
    search: str | None = None,
    min_price: Decimal | float | None = None,
    max_price: Decimal | float | None = None,
    sort_by: str = "newest",
) -> list[dict[str, Any]]:
    """Filter then sort."""
    filtered = filter_products(products, category=category, search=search, min_price=min_price, max_price=max_price)
    return sort_products(filtered, sort_by)


def list_categories(products: Iterable[dict[str, Any]]) -> list[str]:
    return sorted({product["category"] for product in products if product.get("category")})

# services/filters.py

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, Dict, Iterable, List, Sequence

from core.models import HOTEL_CATEGORIES, Dish, Hotel
from services.pricing import ParsedPrice, parse_price


@dataclass
class PricedItem:
    item: Any
    price: ParsedPrice

    @property
    def parsed_price(self) -> int:
        return self.price.value

    @property
    def category(self) -> str:
        return getattr(self.item, "category", "")


def price_items(items: Iterable[Any], price_text: Callable[[Any], str]) -> List[PricedItem]:
    return [PricedItem(item, parse_price(price_text(item))) for item in items]


def filter_by_price(
    items: Iterable[Any],
    ceiling: float,
    key: Callable[[Any], int] = attrgetter("parsed_price"),
) -> list:
    """Keep items at or under `ceiling`. A price of 0 is unknown and always kept."""
    kept = []
    for item in items:
        value = key(item)
        if value == 0 or value <= ceiling:
            kept.append(item)
    return kept


def partition_by_category(
    items: Iterable[Any],
    categories: Sequence[str],
    key: Callable[[Any], str] = attrgetter("category"),
) -> Dict[str, list]:
    buckets: Dict[str, list] = {c: [] for c in categories}
    for item in items:
        bucket = buckets.get(key(item))
        if bucket is not None:
            bucket.append(item)
    return buckets


def price_hotels(hotels: Iterable[Hotel]) -> List[PricedItem]:
    return price_items(hotels, attrgetter("price_estimate"))


def hotel_buckets(hotels: Iterable[Hotel], ceiling: float) -> Dict[str, List[PricedItem]]:
    """Luxury and Budget stays within the ceiling, in source order."""
    return partition_by_category(filter_by_price(price_hotels(hotels), ceiling), HOTEL_CATEGORIES)


def dishes_for(dishes: Iterable[Dish], category: str) -> List[Dish]:
    return [d for d in dishes if d.category == category]

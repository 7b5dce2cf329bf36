# tests/test_filters.py

from operator import itemgetter

from core.models import Dish, Hotel
from services.filters import (
    dishes_for,
    filter_by_price,
    hotel_buckets,
    partition_by_category,
    price_hotels,
)


def test_filter_keeps_unknown_prices():
    hotels = [{"price": 5000}, {"price": 0}, {"price": 12000}]
    kept = filter_by_price(hotels, 6000, key=itemgetter("price"))
    assert kept == [{"price": 5000}, {"price": 0}]


def test_filter_ceiling_is_inclusive():
    assert filter_by_price([{"price": 6000}], 6000, key=itemgetter("price")) == [{"price": 6000}]


def test_partition_keeps_source_order_and_empty_buckets():
    items = [
        {"name": "a", "category": "Budget"},
        {"name": "b", "category": "Luxury"},
        {"name": "c", "category": "Budget"},
        {"name": "d", "category": "Mid-range"},
    ]
    buckets = partition_by_category(items, ["Luxury", "Budget", "Premium"], key=itemgetter("category"))
    assert [i["name"] for i in buckets["Budget"]] == ["a", "c"]
    assert [i["name"] for i in buckets["Luxury"]] == ["b"]
    assert buckets["Premium"] == []
    assert "Mid-range" not in buckets


def _hotel(name, category, price):
    return Hotel(name=name, category=category, price_estimate=price)


def test_hotel_buckets_apply_price_ceiling():
    hotels = [
        _hotel("Hostel", "Budget", "₹900"),
        _hotel("Guesthouse", "Budget", "Ask at desk"),
        _hotel("Palace", "Luxury", "₹45,000 ($540)"),
        _hotel("Resort", "Luxury", "₹12,000"),
    ]
    buckets = hotel_buckets(hotels, 15000)
    assert [p.item.name for p in buckets["Budget"]] == ["Hostel", "Guesthouse"]
    assert [p.item.name for p in buckets["Luxury"]] == ["Resort"]


def test_price_hotels_attaches_parsed_price():
    priced = price_hotels([_hotel("Palace", "Luxury", "₹45,000 ($540)")])
    assert priced[0].parsed_price == 45000
    assert priced[0].price.currency_symbol == "₹"
    assert priced[0].category == "Luxury"


def test_dishes_for_meal():
    dishes = [
        Dish(name="Poha", category="Breakfast"),
        Dish(name="Thali", category="Lunch"),
        Dish(name="Kachori", category="Breakfast"),
    ]
    assert [d.name for d in dishes_for(dishes, "Breakfast")] == ["Poha", "Kachori"]
    assert dishes_for(dishes, "Dinner") == []

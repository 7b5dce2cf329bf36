# services/pricing.py

from __future__ import annotations

import re
from typing import Iterable, NamedTuple

BASE_SYMBOL = "$"

# Tried in order; the first pattern that matches wins
_PRICE_PATTERNS = [
    ("₹", re.compile(r"₹\s?([\d,]+)")),
    ("$", re.compile(r"\$\s?([\d,]+)")),
    (None, re.compile(r"(\d[\d,]*)")),
]


class ParsedPrice(NamedTuple):
    value: int
    currency_symbol: str


def currency_symbol(text: str) -> str:
    for symbol in ("₹", "€", "£", "¥"):
        if symbol in (text or ""):
            return symbol
    return BASE_SYMBOL


def parse_price(text: str) -> ParsedPrice:
    """
    Pull a whole-number magnitude out of a free-text price such as
    "₹9,900 ($120) / night". Unparseable text gives value 0, which the
    filters treat as "unknown" (it also covers genuinely free items).
    """
    text = text or ""
    for symbol, pattern in _PRICE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        digits = match.group(1).replace(",", "")
        if not digits:
            continue
        return ParsedPrice(int(digits), symbol or currency_symbol(text))
    return ParsedPrice(0, BASE_SYMBOL)


def collection_currency(price_texts: Iterable[str]) -> str:
    """Symbol of the first price in the collection, used for the whole range."""
    for text in price_texts:
        return currency_symbol(text)
    return BASE_SYMBOL


def price_bounds(values: Iterable[int]) -> tuple[int, int]:
    positive = [v for v in values if v > 0]
    if not positive:
        return 0, 500
    return min(positive), max(positive)

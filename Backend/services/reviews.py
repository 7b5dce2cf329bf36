# services/reviews.py

from __future__ import annotations

import uuid
from typing import Callable, Dict, List

from core.models import Review

# Shown when no generated reviews are available for a hotel
SEED_REVIEWS = [
    {"id": "1", "author": "Alex J.", "rating": 5, "date": "2 months ago",
     "comment": "Absolutely stunning views and great service. Worth every penny!", "likes": 12},
    {"id": "2", "author": "Sarah M.", "rating": 4, "date": "3 months ago",
     "comment": "Clean rooms and good location. Breakfast was a bit repetitive though.", "likes": 4},
    {"id": "3", "author": "Mike T.", "rating": 5, "date": "1 week ago",
     "comment": "Best stay of our trip. Highly recommend!", "likes": 8},
]


def seed_reviews() -> List[Review]:
    return [Review.model_validate(r) for r in SEED_REVIEWS]


def _new_id() -> str:
    return uuid.uuid4().hex


def _with_unique_ids(reviews: List[Review]) -> List[Review]:
    # Generated reviews may omit or repeat ids; likes are keyed by id
    seen = set()
    for review in reviews:
        if not review.id or review.id in seen:
            review.id = _new_id()
        seen.add(review.id)
    return reviews


class ReviewBoard:
    """Reviews per hotel name, kept in memory for the current session only."""

    def __init__(self):
        self._by_hotel: Dict[str, List[Review]] = {}

    def __contains__(self, hotel_name: str) -> bool:
        return hotel_name in self._by_hotel

    def get(self, hotel_name: str) -> List[Review]:
        return self._by_hotel.get(hotel_name, [])

    def open(self, hotel_name: str, fetch: Callable[[], List[Review]] | None = None) -> List[Review]:
        # Already opened once: never fetch again
        if hotel_name in self._by_hotel:
            return self._by_hotel[hotel_name]
        reviews = list(fetch() or []) if fetch else []
        self._by_hotel[hotel_name] = _with_unique_ids(reviews or seed_reviews())
        return self._by_hotel[hotel_name]

    def add(self, hotel_name: str, author: str, comment: str, rating: float = 5) -> Review:
        if not (author or "").strip() or not (comment or "").strip():
            raise ValueError("Name and comment are required.")
        review = Review(
            id=_new_id(),
            author=author.strip(),
            rating=rating,
            date="Just now",
            comment=comment.strip(),
            likes=0,
        )
        self._by_hotel[hotel_name] = [review] + self.get(hotel_name)
        return review

    def like(self, hotel_name: str, review_id: str) -> int:
        for review in self.get(hotel_name):
            if review.id == review_id:
                review.likes += 1
                return review.likes
        raise KeyError(review_id)

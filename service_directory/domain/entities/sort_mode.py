from __future__ import annotations

from enum import Enum


class SortMode(str, Enum):
    rating = "rating"
    reviews = "reviews"
    name = "name"
    price = "price"


DEFAULT_SORT_MODE = SortMode.rating.value

# Offered to users in this order
SORT_MODE_LABELS: dict[str, str] = {
    SortMode.rating.value: "Top Rated",
    SortMode.reviews.value: "Most Reviews",
    SortMode.name.value: "Name A-Z",
    SortMode.price.value: "Price",
}

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable
from typing import Any

from service_directory.domain.entities.service_record import ServiceRecord
from service_directory.domain.entities.sort_mode import SortMode


def _name_key(record: ServiceRecord) -> tuple[str, str, str]:
    name = record.name or ""
    folded = name.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base, folded, name)


def _rating_key(record: ServiceRecord) -> float:
    return -record.rating


def _reviews_key(record: ServiceRecord) -> int:
    return -record.reviews


def _price_key(record: ServiceRecord) -> int:
    return len(record.price or "")


SORT_KEYS: dict[str, Callable[[ServiceRecord], Any]] = {
    SortMode.name.value: _name_key,
    SortMode.rating.value: _rating_key,
    SortMode.reviews.value: _reviews_key,
    SortMode.price.value: _price_key,
}


def sort_records(records: Iterable[ServiceRecord], mode: str) -> list[ServiceRecord]:
    """
    Stable sort by the ranking key for `mode`.

    Ties keep their input order. An unknown mode leaves the order untouched.
    """
    key = SORT_KEYS.get(_mode_value(mode))
    if key is None:
        return list(records)
    return sorted(records, key=key)


def compare(a: ServiceRecord, b: ServiceRecord, mode: str) -> int:
    """Three-way comparison consistent with sort_records: -1 if a sorts first."""
    key = SORT_KEYS.get(_mode_value(mode))
    if key is None:
        return 0
    key_a, key_b = key(a), key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def _mode_value(mode: Any) -> Any:
    if isinstance(mode, SortMode):
        return mode.value
    return mode

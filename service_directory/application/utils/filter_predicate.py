from __future__ import annotations

from service_directory.domain.entities.catalog_state import ALL
from service_directory.domain.entities.service_record import ServiceRecord


def matches(record: ServiceRecord, search_term: str, category: str, city: str) -> bool:
    return (
        matches_search(record, search_term)
        and matches_category(record, category)
        and matches_city(record, city)
    )


def matches_search(record: ServiceRecord, search_term: str) -> bool:
    """Case-insensitive substring match against name, tagline or description."""
    if not search_term:
        return True
    needle = search_term.lower()
    return any(needle in (text or "").lower() for text in (record.name, record.tagline, record.description))


def matches_category(record: ServiceRecord, category: str) -> bool:
    return category == ALL or record.category == category


def matches_city(record: ServiceRecord, city: str) -> bool:
    return city == ALL or record.city == city

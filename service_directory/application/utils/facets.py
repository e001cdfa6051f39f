from __future__ import annotations

from collections.abc import Iterable

from service_directory.domain.entities.catalog_state import ALL
from service_directory.domain.entities.service_record import ServiceRecord


def distinct_categories(records: Iterable[ServiceRecord]) -> list[str]:
    return _distinct(record.category for record in records)


def distinct_cities(records: Iterable[ServiceRecord]) -> list[str]:
    return _distinct(record.city for record in records)


def with_all_sentinel(values: Iterable[str]) -> list[str]:
    """Prefix filter options with the "All" sentinel."""
    return [ALL, *values]


def _distinct(values: Iterable[str]) -> list[str]:
    # dict keeps first-occurrence order
    return list(dict.fromkeys(values))

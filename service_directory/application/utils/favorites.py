from __future__ import annotations

from collections.abc import Iterable

from service_directory.domain.entities.service_record import RecordId


def toggle(favorites: Iterable[RecordId], record_id: RecordId) -> frozenset[RecordId]:
    """Return a new favorites set with `record_id` flipped. The input is never mutated."""
    current = frozenset(favorites)
    if record_id in current:
        return current - {record_id}
    return current | {record_id}

from __future__ import annotations

from dataclasses import dataclass

from service_directory.domain.entities.service_record import RecordId


@dataclass(frozen=True)
class SelectionState:
    status: str = "none"  # "none", "open"
    record_id: RecordId | None = None

    @property
    def is_open(self) -> bool:
        return self.status == "open"

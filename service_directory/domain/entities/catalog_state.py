from __future__ import annotations

from dataclasses import dataclass, field

from service_directory.domain.entities.selection_state import SelectionState
from service_directory.domain.entities.service_record import RecordId, ServiceRecord
from service_directory.domain.entities.sort_mode import DEFAULT_SORT_MODE

ALL = "All"


@dataclass(frozen=True)
class CatalogState:
    records: tuple[ServiceRecord, ...] = ()
    search_term: str = ""
    selected_category: str = ALL
    selected_city: str = ALL
    sort_mode: str = DEFAULT_SORT_MODE
    favorites: frozenset[RecordId] = field(default_factory=frozenset)
    selection: SelectionState = SelectionState()

    def view_inputs(self) -> tuple[object, ...]:
        """The five inputs the derived view depends on."""
        return (
            self.records,
            self.search_term,
            self.selected_category,
            self.selected_city,
            self.sort_mode,
        )

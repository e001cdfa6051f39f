from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Any

from service_directory.application.dto.service_record_payload import parse_records
from service_directory.application.exceptions import UnknownRecordError
from service_directory.application.use_cases.derive_view import (
    DeriveViewUseCase,
    ViewSummary,
    summarize_view,
)
from service_directory.application.use_cases.selection import SelectionUseCase
from service_directory.application.utils import favorites as favorites_utils
from service_directory.application.utils.facets import (
    distinct_categories,
    distinct_cities,
    with_all_sentinel,
)
from service_directory.application.utils.state_helpers import reset_filters
from service_directory.domain.entities.catalog_state import CatalogState
from service_directory.domain.entities.selection_state import SelectionState
from service_directory.domain.entities.service_record import RecordId, ServiceRecord
from service_directory.domain.entities.sort_mode import DEFAULT_SORT_MODE


class CatalogSession:
    """
    One user's browsing session over an immutable catalog.

    Every setter replaces the CatalogState snapshot and re-derives the view
    before returning, so `view` always reflects the latest inputs.
    """

    def __init__(
        self,
        records: Sequence[ServiceRecord] | Sequence[dict[str, Any]],
        sort_mode: str = DEFAULT_SORT_MODE,
    ) -> None:
        records = parse_records(records)
        self._default_sort_mode = sort_mode
        self._state = CatalogState(records=records, sort_mode=sort_mode)
        self._by_id: dict[RecordId, ServiceRecord] = {record.id: record for record in records}
        self._categories = with_all_sentinel(distinct_categories(records))
        self._cities = with_all_sentinel(distinct_cities(records))
        self._derive = DeriveViewUseCase()
        self._selection = SelectionUseCase()
        self._lock = threading.RLock()
        self._view = self._derive.execute(self._state)
        self._logger = logging.getLogger(__name__)

    # -- reads -----------------------------------------------------------

    @property
    def state(self) -> CatalogState:
        return self._state

    @property
    def records(self) -> tuple[ServiceRecord, ...]:
        return self._state.records

    @property
    def view(self) -> tuple[ServiceRecord, ...]:
        return self._view

    @property
    def categories(self) -> list[str]:
        return list(self._categories)

    @property
    def cities(self) -> list[str]:
        return list(self._cities)

    @property
    def favorites(self) -> frozenset[RecordId]:
        return self._state.favorites

    @property
    def selection(self) -> SelectionState:
        return self._state.selection

    @property
    def selected_record(self) -> ServiceRecord | None:
        selection = self._state.selection
        if not selection.is_open:
            return None
        return self._by_id.get(selection.record_id)

    def favorite_records(self) -> list[ServiceRecord]:
        """Favorited records in catalog order."""
        return [record for record in self._state.records if record.id in self._state.favorites]

    def is_favorite(self, record_id: RecordId) -> bool:
        return record_id in self._state.favorites

    def get_record(self, record_id: RecordId) -> ServiceRecord:
        record = self._by_id.get(record_id)
        if record is None:
            raise UnknownRecordError(f"no catalog record with id {record_id!r}")
        return record

    def resolve_id(self, raw_id: str) -> RecordId:
        """Map an id received as text (e.g. a URL segment) to the catalog's id."""
        for record_id in self._by_id:
            if str(record_id) == raw_id:
                return record_id
        raise UnknownRecordError(f"no catalog record with id {raw_id!r}")

    def summary(self) -> ViewSummary:
        return summarize_view(self._state, self._view)

    # -- filter / sort inputs -------------------------------------------

    def set_search_term(self, search_term: str) -> tuple[ServiceRecord, ...]:
        return self._update(lambda state: replace(state, search_term=search_term or ""), "search_term")

    def set_category(self, category: str) -> tuple[ServiceRecord, ...]:
        return self._update(lambda state: replace(state, selected_category=category), "category")

    def set_city(self, city: str) -> tuple[ServiceRecord, ...]:
        return self._update(lambda state: replace(state, selected_city=city), "city")

    def set_sort_mode(self, sort_mode: str) -> tuple[ServiceRecord, ...]:
        return self._update(lambda state: replace(state, sort_mode=sort_mode), "sort_mode")

    def reset_filters(self) -> tuple[ServiceRecord, ...]:
        """Clear search, show all categories and cities, sort by rating. Favorites and selection stay."""
        return self._update(lambda state: reset_filters(state, self._default_sort_mode), "reset_filters")

    # -- favorites / selection ------------------------------------------

    def toggle_favorite(self, record_id: RecordId) -> frozenset[RecordId]:
        self.get_record(record_id)
        with self._lock:
            favorites = favorites_utils.toggle(self._state.favorites, record_id)
            self._state = replace(self._state, favorites=favorites)
        self._logger.debug(
            "Favorite toggled",
            extra={"record_id": record_id, "reason": "added" if record_id in favorites else "removed"},
        )
        return favorites

    def select(self, record_id: RecordId) -> SelectionState:
        self.get_record(record_id)
        with self._lock:
            selection = self._selection.select(self._state.selection, record_id)
            self._state = replace(self._state, selection=selection)
        return selection

    def close(self) -> SelectionState:
        with self._lock:
            selection = self._selection.close(self._state.selection)
            if selection is not self._state.selection:
                self._state = replace(self._state, selection=selection)
        return selection

    def _update(
        self,
        change: Callable[[CatalogState], CatalogState],
        reason: str,
    ) -> tuple[ServiceRecord, ...]:
        with self._lock:
            new_state = change(self._state)
            self._state = new_state
            self._view = self._derive.execute(new_state)
            view = self._view
        self._logger.debug(
            "View recomputed",
            extra={"sort_mode": new_state.sort_mode, "result_count": len(view), "reason": reason},
        )
        return view

from __future__ import annotations

from dataclasses import dataclass

from service_directory.application.utils.filter_predicate import matches
from service_directory.application.utils.sorter import sort_records
from service_directory.domain.entities.catalog_state import ALL, CatalogState
from service_directory.domain.entities.service_record import ServiceRecord


@dataclass(frozen=True)
class ViewSummary:
    result_count: int
    headline: str  # "3 Services Found"
    description: str  # "Showing results for Technology in Austin"


def derive_view(state: CatalogState) -> tuple[ServiceRecord, ...]:
    """
    Filter the catalog by search/category/city, then sort by the current mode.

    Pure: the result depends only on records, search_term, selected_category,
    selected_city and sort_mode.
    """
    filtered = [
        record
        for record in state.records
        if matches(record, state.search_term, state.selected_category, state.selected_city)
    ]
    return tuple(sort_records(filtered, state.sort_mode))


def summarize_view(state: CatalogState, view: tuple[ServiceRecord, ...]) -> ViewSummary:
    count = len(view)
    if state.selected_category == ALL:
        description = "Showing results for all categories"
    else:
        description = f"Showing results for {state.selected_category}"
    if state.selected_city != ALL:
        description += f" in {state.selected_city}"
    return ViewSummary(
        result_count=count,
        headline=f"{count} Services Found",
        description=description,
    )


class DeriveViewUseCase:
    """Memoizes the derived view on exactly its five inputs."""

    def __init__(self) -> None:
        self._inputs: tuple[object, ...] | None = None
        self._view: tuple[ServiceRecord, ...] = ()

    def execute(self, state: CatalogState) -> tuple[ServiceRecord, ...]:
        inputs = state.view_inputs()
        if inputs != self._inputs:
            self._view = derive_view(state)
            self._inputs = inputs
        return self._view

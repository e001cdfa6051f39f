from __future__ import annotations

from service_directory.domain.entities.catalog_state import ALL, CatalogState
from service_directory.domain.entities.sort_mode import DEFAULT_SORT_MODE


def reset_filters(state: CatalogState, sort_mode: str = DEFAULT_SORT_MODE) -> CatalogState:
    """Reset search, category, city and sort to their initial values."""
    return CatalogState(
        records=state.records,
        search_term="",
        selected_category=ALL,
        selected_city=ALL,
        sort_mode=sort_mode,
        favorites=state.favorites,
        selection=state.selection,
    )

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from service_directory.api.v1.schemas import (
    FacetsResponseSchema,
    FavoritesResponseSchema,
    FavoriteToggleResponseSchema,
    FiltersSchema,
    FiltersUpdateSchema,
    SelectionResponseSchema,
    ServiceCardSchema,
    ServiceDetailSchema,
    SessionCreatedSchema,
    SortOptionSchema,
    ViewResponseSchema,
)
from service_directory.application.exceptions import (
    CatalogLoadError,
    UnknownRecordError,
    UnknownSessionError,
)
from service_directory.application.ports.session_store import SessionStorePort
from service_directory.application.use_cases.catalog_session import CatalogSession
from service_directory.domain.entities.sort_mode import SORT_MODE_LABELS
from service_directory.wiring.dependencies import get_session_store

router = APIRouter()
logger = logging.getLogger(__name__)


def _get_session(session_id: str, store: SessionStorePort) -> CatalogSession:
    try:
        return store.get(session_id)
    except UnknownSessionError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _view_response(session_id: str, session: CatalogSession) -> ViewResponseSchema:
    state = session.state
    summary = session.summary()
    return ViewResponseSchema(
        session_id=session_id,
        filters=FiltersSchema(
            search_term=state.search_term,
            category=state.selected_category,
            city=state.selected_city,
            sort_mode=state.sort_mode,
        ),
        result_count=summary.result_count,
        headline=summary.headline,
        description=summary.description,
        services=[
            ServiceCardSchema.from_record(record, is_favorite=session.is_favorite(record.id))
            for record in session.view
        ],
        favorites_count=len(session.favorites),
    )


def _selection_response(session: CatalogSession) -> SelectionResponseSchema:
    record = session.selected_record
    return SelectionResponseSchema(
        status=session.selection.status,
        record_id=session.selection.record_id,
        service=(
            ServiceDetailSchema.from_record(record, is_favorite=session.is_favorite(record.id))
            if record else None
        ),
    )


@router.post("/sessions", response_model=SessionCreatedSchema, status_code=201)
def create_session(store: SessionStorePort = Depends(get_session_store)):
    try:
        session_id, _ = store.create()
    except CatalogLoadError as e:
        logger.warning("Catalog unavailable", extra={"reason": str(e)})
        raise HTTPException(status_code=503, detail=str(e))
    return SessionCreatedSchema(session_id=session_id)


@router.get("/sessions/{session_id}/view", response_model=ViewResponseSchema)
def get_view(session_id: str, store: SessionStorePort = Depends(get_session_store)):
    session = _get_session(session_id, store)
    return _view_response(session_id, session)


@router.get("/sessions/{session_id}/facets", response_model=FacetsResponseSchema)
def get_facets(session_id: str, store: SessionStorePort = Depends(get_session_store)):
    session = _get_session(session_id, store)
    return FacetsResponseSchema(
        categories=session.categories,
        cities=session.cities,
        sort_modes=[SortOptionSchema(mode=mode, label=label) for mode, label in SORT_MODE_LABELS.items()],
    )


@router.patch("/sessions/{session_id}/filters", response_model=ViewResponseSchema)
def update_filters(
    session_id: str,
    req: FiltersUpdateSchema,
    store: SessionStorePort = Depends(get_session_store),
):
    session = _get_session(session_id, store)
    if req.search_term is not None:
        session.set_search_term(req.search_term)
    if req.category is not None:
        session.set_category(req.category)
    if req.city is not None:
        session.set_city(req.city)
    if req.sort_mode is not None:
        session.set_sort_mode(req.sort_mode)
    return _view_response(session_id, session)


@router.post("/sessions/{session_id}/filters/reset", response_model=ViewResponseSchema)
def reset_filters(session_id: str, store: SessionStorePort = Depends(get_session_store)):
    session = _get_session(session_id, store)
    session.reset_filters()
    return _view_response(session_id, session)


@router.get("/sessions/{session_id}/favorites", response_model=FavoritesResponseSchema)
def get_favorites(session_id: str, store: SessionStorePort = Depends(get_session_store)):
    session = _get_session(session_id, store)
    records = session.favorite_records()
    return FavoritesResponseSchema(
        count=len(records),
        services=[ServiceCardSchema.from_record(record, is_favorite=True) for record in records],
    )


@router.post("/sessions/{session_id}/favorites/{record_id}/toggle", response_model=FavoriteToggleResponseSchema)
def toggle_favorite(session_id: str, record_id: str, store: SessionStorePort = Depends(get_session_store)):
    session = _get_session(session_id, store)
    try:
        resolved_id = session.resolve_id(record_id)
        favorites = session.toggle_favorite(resolved_id)
    except UnknownRecordError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return FavoriteToggleResponseSchema(
        id=resolved_id,
        is_favorite=resolved_id in favorites,
        favorites_count=len(favorites),
    )


@router.get("/sessions/{session_id}/selection", response_model=SelectionResponseSchema)
def get_selection(session_id: str, store: SessionStorePort = Depends(get_session_store)):
    session = _get_session(session_id, store)
    return _selection_response(session)


@router.put("/sessions/{session_id}/selection/{record_id}", response_model=SelectionResponseSchema)
def select_service(session_id: str, record_id: str, store: SessionStorePort = Depends(get_session_store)):
    session = _get_session(session_id, store)
    try:
        session.select(session.resolve_id(record_id))
    except UnknownRecordError as e:
        raise HTTPException(status_code=404, detail=str(e))
    logger.info("Service selected", extra={"session_id": session_id, "record_id": record_id})
    return _selection_response(session)


@router.delete("/sessions/{session_id}/selection", response_model=SelectionResponseSchema)
def close_selection(session_id: str, store: SessionStorePort = Depends(get_session_store)):
    session = _get_session(session_id, store)
    session.close()
    return _selection_response(session)

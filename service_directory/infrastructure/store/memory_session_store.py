from __future__ import annotations

import logging
import threading
import uuid
from collections import OrderedDict

from service_directory.application.exceptions import UnknownSessionError
from service_directory.application.ports.catalog_source import CatalogSourcePort
from service_directory.application.ports.session_store import SessionStorePort
from service_directory.application.use_cases.catalog_session import CatalogSession
from service_directory.domain.entities.sort_mode import DEFAULT_SORT_MODE


class MemorySessionStore(SessionStorePort):
    def __init__(
        self,
        catalog: CatalogSourcePort,
        session_limit: int = 1000,
        default_sort_mode: str = DEFAULT_SORT_MODE,
    ) -> None:
        self._catalog = catalog
        self._sessions: OrderedDict[str, CatalogSession] = OrderedDict()
        self._session_limit = max(1, session_limit)
        self._default_sort_mode = default_sort_mode
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def create(self) -> tuple[str, CatalogSession]:
        session = CatalogSession(self._catalog.load_records(), sort_mode=self._default_sort_mode)
        session_id = uuid.uuid4().hex
        with self._lock:
            self._sessions[session_id] = session
            while len(self._sessions) > self._session_limit:
                evicted_id, _ = self._sessions.popitem(last=False)
                self._logger.info("Session evicted", extra={"session_id": evicted_id, "reason": "session_limit"})
        self._logger.info("Session created", extra={"session_id": session_id})
        return session_id, session

    def get(self, session_id: str) -> CatalogSession:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                raise UnknownSessionError(f"unknown session {session_id!r}")
            self._sessions.move_to_end(session_id)
            return session

    def discard(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)

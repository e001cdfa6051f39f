from __future__ import annotations

from abc import ABC, abstractmethod

from service_directory.application.use_cases.catalog_session import CatalogSession


class SessionStorePort(ABC):
    @abstractmethod
    def create(self) -> tuple[str, CatalogSession]:
        """Start a new session over the catalog and return its id."""
        raise NotImplementedError

    @abstractmethod
    def get(self, session_id: str) -> CatalogSession:
        """Return the session or raise UnknownSessionError."""
        raise NotImplementedError

    @abstractmethod
    def discard(self, session_id: str) -> None:
        raise NotImplementedError

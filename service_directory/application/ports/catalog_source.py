from __future__ import annotations

from abc import ABC, abstractmethod

from service_directory.domain.entities.service_record import ServiceRecord


class CatalogSourcePort(ABC):
    @abstractmethod
    def load_records(self) -> tuple[ServiceRecord, ...]:
        """
        Load the full catalog for a session.

        Requirements:
        - Records come back in catalog order, already validated
        - Ids are unique
        - Raise CatalogLoadError if the raw data is malformed

        Returns:
            Immutable ordered sequence of ServiceRecord
        """
        raise NotImplementedError

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from service_directory.application.dto.service_record_payload import parse_records
from service_directory.application.ports.catalog_source import CatalogSourcePort
from service_directory.domain.entities.service_record import ServiceRecord
from service_directory.infrastructure.catalog.sample_catalog_data import SAMPLE_SERVICES


class MemoryCatalogSource(CatalogSourcePort):
    def __init__(self, raw_records: Sequence[dict[str, Any]] | None = None) -> None:
        self._raw_records = SAMPLE_SERVICES if raw_records is None else raw_records
        self._records: tuple[ServiceRecord, ...] | None = None

    def load_records(self) -> tuple[ServiceRecord, ...]:
        if self._records is None:
            self._records = parse_records(self._raw_records)
        return self._records

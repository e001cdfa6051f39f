from __future__ import annotations

import json
import logging
from pathlib import Path

from service_directory.application.dto.service_record_payload import parse_records
from service_directory.application.exceptions import CatalogLoadError
from service_directory.application.ports.catalog_source import CatalogSourcePort
from service_directory.domain.entities.service_record import ServiceRecord


class JsonCatalogSource(CatalogSourcePort):
    """Reads the catalog from a JSON file holding a list of records (or {"services": [...]})."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._records: tuple[ServiceRecord, ...] | None = None
        self._logger = logging.getLogger(__name__)

    def load_records(self) -> tuple[ServiceRecord, ...]:
        if self._records is not None:
            return self._records

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise CatalogLoadError(f"catalog file not found: {self._path}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CatalogLoadError(f"catalog file is not valid JSON: {self._path}: {e}") from e

        if isinstance(data, dict) and "services" in data:
            data = data["services"]

        self._records = parse_records(data)
        self._logger.info(
            "Catalog loaded",
            extra={"result_count": len(self._records), "reason": str(self._path)},
        )
        return self._records

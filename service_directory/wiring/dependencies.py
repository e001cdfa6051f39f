from functools import lru_cache
import logging

from service_directory.core.config import settings
from service_directory.application.ports.catalog_source import CatalogSourcePort
from service_directory.application.ports.session_store import SessionStorePort
from service_directory.infrastructure.catalog.json_catalog_source import JsonCatalogSource
from service_directory.infrastructure.catalog.memory_catalog_source import MemoryCatalogSource
from service_directory.infrastructure.store.memory_session_store import MemorySessionStore


@lru_cache
def get_catalog_source() -> CatalogSourcePort:
    logger = logging.getLogger(__name__)
    if settings.CATALOG_SOURCE.lower() == "json":
        logger.info("Using JsonCatalogSource path=%s", settings.CATALOG_PATH)
        return JsonCatalogSource(settings.CATALOG_PATH)
    logger.info("Using MemoryCatalogSource (sample catalog)")
    return MemoryCatalogSource()


@lru_cache
def get_session_store() -> SessionStorePort:
    return MemorySessionStore(
        catalog=get_catalog_source(),
        session_limit=settings.SESSION_LIMIT,
        default_sort_mode=settings.DEFAULT_SORT_MODE,
    )

"""Hold the current catalog snapshot and rebuild it on demand."""

import logging
import threading
from collections.abc import Callable

from core.catalog import Catalog, CourseTree, build_catalog

logger = logging.getLogger(__name__)


class CatalogNotLoadedError(Exception):
    """Raised when the catalog is read before it has been built."""

    pass


class CatalogStore:
    """Publishes immutable Catalog snapshots.

    Readers call get() and keep using the snapshot they got. refresh()
    builds a complete new Catalog first and only then swaps it in, so a
    reader never sees a half-built catalog. If the rebuild fails the
    previous snapshot stays published.
    """

    def __init__(self, source: Callable[[], CourseTree]):
        self._source = source
        self._catalog: Catalog | None = None
        self._refresh_lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._catalog is not None

    def get(self) -> Catalog:
        catalog = self._catalog
        if catalog is None:
            raise CatalogNotLoadedError("Catalog not loaded. Call refresh() first.")
        return catalog

    def publish(self, catalog: Catalog) -> None:
        duplicates = catalog.duplicate_ids()
        if duplicates:
            logger.warning(
                f"Duplicate topic ids in catalog (first match wins): {duplicates}"
            )
        self._catalog = catalog
        logger.info(f"Published catalog with {len(catalog)} topics")

    def refresh(self) -> Catalog:
        """Rebuild the catalog from the source and publish it."""
        with self._refresh_lock:
            catalog = build_catalog(self._source())
            self.publish(catalog)
            return catalog

    def clear(self) -> None:
        self._catalog = None

"""
Resolves a requested version (an alias or a pinned id) to a catalog entry.
"""

import logging
from typing import Optional, Tuple

from mcfetch.mcfetch_exceptions import VersionNotFoundError
from mcfetch.mcfetch_logger import MCFetchLogger
from mcfetch.version_models import Catalog
from mcfetch.version_store.manifest_store import ManifestStore

RELEASE_ALIAS = "release"
SNAPSHOT_ALIAS = "snapshot"


def is_alias(requested: str) -> bool:
    """
    True for "release" and "snapshot".

    Aliases drift as new versions are published, so they are always resolved
    against a freshly fetched catalog. Pinned ids never change their metadata
    URL and can be resolved against the cached one.
    """
    return requested in (RELEASE_ALIAS, SNAPSHOT_ALIAS)


class VersionResolver:
    def __init__(self, logger: MCFetchLogger, manifest_store: Optional[ManifestStore] = None):
        self.logger = logger
        self.manifest_store = manifest_store

    def resolve(self, alias: str, catalog: Catalog) -> Tuple[str, str]:
        """
        Returns (version id, metadata URL) for the requested alias or id.

        Raises:
            VersionNotFoundError: If no catalog entry matches; names the requested alias
        """
        if alias == RELEASE_ALIAS:
            version_id = catalog.latest.release
        elif alias == SNAPSHOT_ALIAS:
            version_id = catalog.latest.snapshot
        else:
            version_id = alias

        entry = catalog.find(version_id)
        if entry is None:
            raise VersionNotFoundError(alias, version_id)

        if version_id != alias:
            self.logger.log(f"{alias} is {version_id}", logging.INFO)
        return entry.id, entry.metadata_url

    def resolve_from_store(self, alias: str) -> Tuple[str, str]:
        """
        Loads the catalog, refreshing it only for aliases, and resolves alias against it.
        """
        if self.manifest_store is None:
            raise ValueError("VersionResolver was created without a manifest store")
        catalog = self.manifest_store.load(force_refresh=is_alias(alias))
        return self.resolve(alias, catalog)

"""
Catalog and metadata package stores.

This package handles:
1. Loading or refreshing the version catalog
2. Resolving "release", "snapshot" or a pinned id to a metadata URL
3. Loading or fetching the per-version metadata package
"""

from .manifest_store import ManifestStore
from .package_store import PackageStore
from .resolver import VersionResolver, is_alias

__all__ = ["ManifestStore", "PackageStore", "VersionResolver", "is_alias"]

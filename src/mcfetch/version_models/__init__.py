"""
Version data models.

This package provides Pydantic data models for parsing the version catalog
and the per-version metadata package.
"""

from .catalog import (
    Catalog,
    CatalogEntry,
    LatestVersions,
)
from .version_package import (
    VersionPackage,
    PackageDownloads,
    DownloadRef,
    LibraryRef,
    LibraryDownloads,
    ArtifactRef,
    PlatformRule,
    AssetIndexRef,
    Arguments,
)

__all__ = [
    # Catalog
    "Catalog",
    "CatalogEntry",
    "LatestVersions",
    # Version package
    "VersionPackage",
    "PackageDownloads",
    "DownloadRef",
    "LibraryRef",
    "LibraryDownloads",
    "ArtifactRef",
    "PlatformRule",
    "AssetIndexRef",
    "Arguments",
]

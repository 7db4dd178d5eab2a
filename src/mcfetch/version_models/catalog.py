"""
Pydantic data models for the version catalog (version_manifest.json).

The catalog maps the "release" and "snapshot" aliases and every known
version id to the URL of that version's metadata package.
"""

from typing import List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field

from mcfetch.mcfetch_exceptions import ParseError


class LatestVersions(BaseModel):
    """Ids the "release" and "snapshot" aliases currently point to."""

    release: str
    snapshot: str

    model_config = ConfigDict(extra="allow")


class CatalogEntry(BaseModel):
    """
    One published version.

    url points to the version's metadata package and never changes once
    published.
    """

    id: str = Field(..., description="Version id, e.g. 1.20.1 or 23w31a")
    type: str = Field(..., description="release, snapshot, old_alpha, old_beta, ...")
    url: str = Field(..., description="URL of the version's metadata package")
    time: Optional[str] = Field(None, description="Last modification time")
    release_time: Optional[str] = Field(None, alias="releaseTime")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @property
    def metadata_url(self) -> str:
        return self.url


class Catalog(BaseModel):
    """
    Top-level catalog document.

    Structure:
    {
      "latest": {"release": "1.20.1", "snapshot": "23w31a"},
      "versions": [{"id": ..., "type": ..., "url": ..., "time": ..., "releaseTime": ...}, ...]
    }
    """

    latest: LatestVersions
    versions: List[CatalogEntry] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")

    def find(self, version_id: str) -> Optional[CatalogEntry]:
        """
        Returns the first entry whose id equals version_id, or None.
        """
        return next((v for v in self.versions if v.id == version_id), None)

    def validate_invariants(self, source: str = "catalog") -> "Catalog":
        """
        Checks that ids are unique and that both latest ids name an entry.

        Args:
            source: URL or path the catalog came from, used in the error message

        Returns:
            The catalog itself

        Raises:
            ParseError: If an invariant does not hold
        """
        seen: Set[str] = set()
        for entry in self.versions:
            if entry.id in seen:
                raise ParseError(source, f"duplicate version id {entry.id!r}")
            seen.add(entry.id)

        for alias, version_id in (("release", self.latest.release), ("snapshot", self.latest.snapshot)):
            if version_id not in seen:
                raise ParseError(source, f"latest {alias} {version_id!r} has no catalog entry")

        return self

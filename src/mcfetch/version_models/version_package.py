"""
Pydantic data models for a version's metadata package (meta.json).

Only the parts needed to place the primary payload and the libraries are
typed. arguments.game and arguments.jvm hold platform-conditional argument
lists and are kept as untyped values; unknown keys are preserved everywhere.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class DownloadRef(BaseModel):
    """A single downloadable file: the client or server jar, or a mappings file."""

    url: str
    sha1: Optional[str] = None
    size: Optional[int] = None

    model_config = ConfigDict(extra="allow")


class ArtifactRef(BaseModel):
    """
    A library file.

    path is Maven-style: group/as/dirs/artifact/version/artifact-version[-classifier].jar
    """

    path: Optional[str] = None
    url: Optional[str] = None
    sha1: Optional[str] = None
    size: Optional[int] = None

    model_config = ConfigDict(extra="allow")

    def is_usable(self) -> bool:
        return bool(self.path) and bool(self.url)


class PackageDownloads(BaseModel):
    client: DownloadRef
    server: Optional[DownloadRef] = None
    client_mappings: Optional[DownloadRef] = None
    server_mappings: Optional[DownloadRef] = None

    model_config = ConfigDict(extra="allow")


class RuleOS(BaseModel):
    name: Optional[str] = None
    version: Optional[str] = None
    arch: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class PlatformRule(BaseModel):
    """An allow/disallow rule. Carried with the library, not evaluated."""

    action: str
    os: Optional[RuleOS] = None

    model_config = ConfigDict(extra="allow")


class LibraryDownloads(BaseModel):
    artifact: Optional[ArtifactRef] = None
    classifiers: Dict[str, ArtifactRef] = Field(default_factory=dict)

    model_config = ConfigDict(extra="allow")


class LibraryExtract(BaseModel):
    exclude: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class LibraryRef(BaseModel):
    """
    A dependency library.

    natives maps a platform key ("linux", "windows", "osx"/"macos") to the
    classifier key under downloads.classifiers holding that platform's native
    artifact. A library whose natives block has an entry for the current
    platform is native for it; every other library is ordinary and uses
    downloads.artifact.
    """

    name: str = Field(..., description="group:artifact:version")
    rules: List[PlatformRule] = Field(default_factory=list)
    natives: Dict[str, str] = Field(default_factory=dict)
    downloads: LibraryDownloads = Field(default_factory=LibraryDownloads)
    extract: Optional[LibraryExtract] = None

    model_config = ConfigDict(extra="allow")

    @property
    def native_classifiers(self) -> Dict[str, str]:
        return self.natives

    @property
    def artifacts(self) -> Dict[str, ArtifactRef]:
        return self.downloads.classifiers

    def native_classifier(self, native_keys: Tuple[str, ...]) -> Optional[str]:
        """
        Returns the classifier key for the first of native_keys present in natives, or None.
        """
        for key in native_keys:
            if key in self.natives:
                return self.natives[key]
        return None


class AssetIndexRef(BaseModel):
    id: str
    url: str
    sha1: Optional[str] = None
    size: Optional[int] = None
    total_size: Optional[int] = Field(None, alias="totalSize")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Arguments(BaseModel):
    game: Any = None
    jvm: Any = None

    model_config = ConfigDict(extra="allow")


class VersionPackage(BaseModel):
    """
    Metadata package of one version: the primary payload and its dependency libraries.
    """

    id: str
    downloads: PackageDownloads
    libraries: List[LibraryRef] = Field(default_factory=list)
    asset_index: Optional[AssetIndexRef] = Field(None, alias="assetIndex")
    assets: Optional[str] = None
    compliance_level: Optional[int] = Field(None, alias="complianceLevel")
    main_class: Optional[str] = Field(None, alias="mainClass")
    type: Optional[str] = None
    release_time: Optional[str] = Field(None, alias="releaseTime")
    time: Optional[str] = None
    arguments: Optional[Arguments] = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @property
    def primary_download(self) -> DownloadRef:
        return self.downloads.client

"""
Runs a whole fetch: catalog, version resolution, metadata package, artifacts.
"""

import dataclasses
import logging
import pathlib
from typing import Optional

from mcfetch.artifact_downloader import ArtifactPlacer
from mcfetch.cache_layout import CacheLayout
from mcfetch.mcfetch_config import MCFetchConfig
from mcfetch.mcfetch_logger import MCFetchLogger
from mcfetch.mcfetch_transport import HTTPTransport, Transport
from mcfetch.mcfetch_utils import FileUtils, PlatformUtils
from mcfetch.version_store import ManifestStore, PackageStore, VersionResolver


@dataclasses.dataclass
class FetchResult:
    """
    Outcome of a fetch run.
    """

    version_id: str
    platform_tag: str
    version_dir: pathlib.Path
    summary: dict


class VersionFetcher:
    """
    Wires the stores, the resolver and the placer together for one configuration.

    Use VersionFetcher.create() to build one over HTTP, or pass a transport
    directly to fetch from elsewhere.
    """

    def __init__(self, config: MCFetchConfig, logger: MCFetchLogger, transport: Transport):
        self.config = config
        self.logger = logger
        self.transport = transport
        self.layout = CacheLayout(config.resolved_root())
        self.manifest_store = ManifestStore(self.layout, transport, logger, config.manifest_url)
        self.resolver = VersionResolver(logger, self.manifest_store)
        self.package_store = PackageStore(self.layout, transport, logger)
        self.placer = ArtifactPlacer(transport, logger)

    @classmethod
    def create(cls, config: MCFetchConfig, logger: Optional[MCFetchLogger] = None) -> "VersionFetcher":
        logger = logger if logger is not None else MCFetchLogger()
        return cls(config, logger, HTTPTransport(logger, timeout=config.request_timeout))

    def fetch(self, platform_tag: Optional[str] = None) -> FetchResult:
        """
        Resolves the configured version and places its artifacts in the cache.

        Args:
            platform_tag: Overrides the tag derived from the host

        Raises:
            MCFetchException: On any failure other than a native library download
        """
        FileUtils.make_dirs(self.layout.versions_dir)

        if platform_tag is None:
            platform_tag = PlatformUtils.get_platform_tag()
        self.logger.log(f"Runtime: natives-{platform_tag}", logging.INFO)

        version_id, metadata_url = self.resolver.resolve_from_store(self.config.version)
        package = self.package_store.load(version_id, metadata_url)
        summary = self.placer.materialize(
            package, platform_tag, self.layout, server=self.config.server, version_id=version_id
        )

        return FetchResult(
            version_id=version_id,
            platform_tag=platform_tag,
            version_dir=self.layout.version_dir(version_id),
            summary=summary,
        )

    def close(self) -> None:
        """Releases the transport, e.g. the HTTP session."""
        self.transport.close()

"""
Artifact placement.

Executes the download plans of a version: fetches each artifact that is not
yet in the cache and writes it to its destination.
"""

import logging
import pathlib
from typing import Optional, Union

from mcfetch.cache_layout import CacheLayout
from mcfetch.mcfetch_exceptions import TransportError
from mcfetch.mcfetch_logger import MCFetchLogger
from mcfetch.mcfetch_transport import Transport
from mcfetch.mcfetch_utils import FileUtils
from mcfetch.artifact_plan import ArtifactPlanner, DownloadPlan, DownloadStatus
from mcfetch.version_models import VersionPackage


class ArtifactPlacer:
    """
    Downloads the primary payload and libraries of a version into the cache.

    Artifacts are fetched one at a time in catalog order. A file already at
    its destination is never fetched or rewritten, so running twice against a
    complete cache does no network and no writes.

    A failed fetch of the primary payload or of an ordinary library ends the
    run. A failed fetch of a native library is logged and placement goes on
    with the remaining artifacts.
    """

    def __init__(self, transport: Transport, logger: MCFetchLogger):
        """
        Args:
            transport: Transport used to fetch artifacts
            logger: Logger for progress and error messages
        """
        self.transport = transport
        self.logger = logger
        self.planner: Optional[ArtifactPlanner] = None

    def materialize(
        self,
        package: VersionPackage,
        platform_tag: str,
        cache_root: Union[str, pathlib.Path, CacheLayout],
        server: bool = False,
        version_id: Optional[str] = None,
    ) -> dict:
        """
        Places every artifact of package for platform_tag beneath cache_root.

        Args:
            package: The resolved version package
            platform_tag: Tag from PlatformUtils.get_platform_tag()
            cache_root: Cache root directory, or a CacheLayout over it
            server: Place the server jar instead of the client jar
            version_id: Catalog id the package was resolved from; defaults to package.id

        Returns:
            Dictionary with counts of completed, skipped, failed and pending downloads

        Raises:
            ArtifactUnavailableError: If the package lacks the requested primary payload
            TransportError: If the primary payload or an ordinary library could not be fetched
            CacheWriteError: If an artifact or directory could not be written, or a
                destination from the metadata lies outside the cache root
        """
        layout = cache_root if isinstance(cache_root, CacheLayout) else CacheLayout(cache_root)
        self.planner = ArtifactPlanner(
            package, platform_tag, layout, self.logger, server=server, version_id=version_id
        )
        self.planner.create_download_plan()

        pending = self.planner.get_pending_downloads()
        if not pending:
            self.logger.log(f"All artifacts of {self.planner.version_id} are present", logging.INFO)
            return self.planner.get_download_summary()

        self.logger.log(f"Starting download of {len(pending)} artifacts for {self.planner.version_id}", logging.INFO)
        for plan in pending:
            self.download_artifact(plan)

        return self.planner.get_download_summary()

    def download_artifact(self, plan: DownloadPlan) -> bool:
        """
        Fetches and stores a single artifact unless its destination exists.

        Returns:
            True if the artifact is in place, False if a native fetch failed
        """
        if FileUtils.exists(plan.destination_path):
            plan.status = DownloadStatus.SKIPPED
            return True

        plan.status = DownloadStatus.IN_PROGRESS
        self.logger.log(f"Downloading {plan.url}", logging.INFO)
        try:
            data = self.transport.fetch(plan.url)
        except TransportError as e:
            self.planner.mark_download_completed(plan, success=False, error_message=str(e))
            if not plan.is_native:
                raise
            self.logger.log(f"Failed to download native library {plan.key}: {e}", logging.WARNING)
            return False

        FileUtils.make_dirs(plan.destination_path.parent)
        FileUtils.write_file(plan.destination_path, data)
        self.planner.mark_download_completed(plan, success=True)
        return True

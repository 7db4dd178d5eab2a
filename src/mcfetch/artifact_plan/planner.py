"""
Artifact planning.

Turns a version package into one download plan per artifact: where it comes
from, where it goes, and whether it is already present in the cache.
"""

import logging
import pathlib
from typing import List, Optional

from mcfetch.cache_layout import CacheLayout
from mcfetch.mcfetch_exceptions import ArtifactUnavailableError
from mcfetch.mcfetch_logger import MCFetchLogger
from mcfetch.mcfetch_utils import FileUtils, PlatformUtils
from mcfetch.version_models import LibraryRef, VersionPackage


class DownloadStatus:
    """Enumeration of download statuses."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    SKIPPED = "skipped"
    FAILED = "failed"


class ArtifactKind:
    """What a plan places, which decides its destination and its failure policy."""

    PRIMARY = "primary"
    LIBRARY = "library"
    NATIVE = "native"


class DownloadPlan:
    """
    A plan to download a single artifact.

    Captures all information needed to fetch the artifact and store it.
    """

    def __init__(
            self,
            key: str,
            kind: str,
            url: str,
            destination_path: pathlib.Path,
            sha1: Optional[str] = None,
            size: Optional[int] = None,
            status: str = DownloadStatus.PENDING,
    ):
        """
        Initialize a download plan.

        Args:
            key: Library name, or the payload file name for the primary payload
            kind: One of the ArtifactKind values
            url: URL to download from
            destination_path: File the artifact is written to
            sha1: Declared checksum, carried along unverified
            size: Declared size in bytes
            status: Current download status
        """
        self.key = key
        self.kind = kind
        self.url = url
        self.destination_path = destination_path
        self.sha1 = sha1
        self.size = size
        self.status = status
        self.error_message: Optional[str] = None

    @property
    def is_native(self) -> bool:
        return self.kind == ArtifactKind.NATIVE

    def __repr__(self) -> str:
        return (
            f"DownloadPlan(key={self.key}, kind={self.kind}, "
            f"status={self.status}, url={self.url})"
        )


class ArtifactPlanner:
    """
    Builds the download plans of one version for one platform.

    Libraries are classified in catalog order: a library whose natives block
    has an entry for the platform is native and lands flat in
    native-libraries/, every other library is ordinary and keeps its Maven
    path under libraries/.
    """

    def __init__(
        self,
        package: VersionPackage,
        platform_tag: str,
        layout: CacheLayout,
        logger: MCFetchLogger,
        server: bool = False,
        version_id: Optional[str] = None,
    ):
        """
        Args:
            package: The resolved version package
            platform_tag: Tag from PlatformUtils.get_platform_tag()
            layout: Cache layout rooted at the cache directory
            logger: Logger for skipped libraries
            server: Place the server jar instead of the client jar
            version_id: Catalog id the package was resolved from; defaults to package.id
        """
        self.package = package
        self.platform_tag = platform_tag
        self.layout = layout
        self.logger = logger
        self.server = server
        self.version_id = version_id if version_id is not None else package.id
        self.download_plans: List[DownloadPlan] = []

    def create_download_plan(self) -> List[DownloadPlan]:
        """
        Creates the plans for the primary payload and every usable library artifact.

        A plan whose destination already exists is marked SKIPPED.

        Raises:
            ArtifactUnavailableError: If the package lacks the requested primary payload
        """
        plans = [self._plan_primary_payload()]
        for library in self.package.libraries:
            plan = self._plan_library(library)
            if plan is not None:
                plans.append(plan)

        for plan in plans:
            if FileUtils.exists(plan.destination_path):
                plan.status = DownloadStatus.SKIPPED

        self.download_plans = plans
        return plans

    def _plan_primary_payload(self) -> DownloadPlan:
        version_id = self.version_id
        download = self.package.downloads.server if self.server else self.package.primary_download
        if download is None:
            raise ArtifactUnavailableError(f"Version {version_id} does not provide a server download")

        destination = self.layout.primary_payload_path(version_id, server=self.server)
        return DownloadPlan(
            key=destination.name,
            kind=ArtifactKind.PRIMARY,
            url=download.url,
            destination_path=destination,
            sha1=download.sha1,
            size=download.size,
        )

    def _plan_library(self, library: LibraryRef) -> Optional[DownloadPlan]:
        """
        Returns the plan for a library, or None when it has nothing to place on this platform.
        """
        version_id = self.version_id
        classifier = library.native_classifier(PlatformUtils.native_keys(self.platform_tag))

        if classifier is not None:
            artifact = library.artifacts.get(classifier)
            if artifact is None or not artifact.is_usable():
                self.logger.log(
                    f"Skipping {library.name}: no {classifier} artifact", logging.DEBUG
                )
                return None
            return DownloadPlan(
                key=library.name,
                kind=ArtifactKind.NATIVE,
                url=artifact.url,
                destination_path=self.layout.native_library_path(version_id, artifact.path),
                sha1=artifact.sha1,
                size=artifact.size,
            )

        artifact = library.downloads.artifact
        if artifact is None or not artifact.is_usable():
            # e.g. natives declared only for other platforms
            self.logger.log(f"Skipping {library.name}: no artifact for {self.platform_tag}", logging.DEBUG)
            return None
        return DownloadPlan(
            key=library.name,
            kind=ArtifactKind.LIBRARY,
            url=artifact.url,
            destination_path=self.layout.library_path(version_id, artifact.path),
            sha1=artifact.sha1,
            size=artifact.size,
        )

    def get_download_plans(self) -> List[DownloadPlan]:
        return self.download_plans

    def get_pending_downloads(self) -> List[DownloadPlan]:
        """
        Get all pending downloads.

        Returns:
            List of DownloadPlan objects with PENDING status, in catalog order
        """
        return [p for p in self.download_plans if p.status == DownloadStatus.PENDING]

    def mark_download_completed(self, plan: DownloadPlan, success: bool = True, error_message: Optional[str] = None) -> None:
        """
        Mark a download plan as completed or failed.
        """
        plan.status = DownloadStatus.COMPLETED if success else DownloadStatus.FAILED
        plan.error_message = None if success else error_message

    def get_download_summary(self) -> dict:
        """
        Get a summary of the plan statuses.

        Returns:
            Dictionary with counts of completed, skipped, failed and pending downloads
        """
        counts = {
            status: sum(1 for p in self.download_plans if p.status == status)
            for status in (DownloadStatus.COMPLETED, DownloadStatus.SKIPPED, DownloadStatus.FAILED, DownloadStatus.PENDING)
        }
        counts["total"] = len(self.download_plans)
        return counts

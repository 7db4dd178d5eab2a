"""
Paths of the on-disk cache tree.

    <root>/versions/version_manifest.json
    <root>/versions/<id>/meta.json
    <root>/versions/<id>/client_<id>.jar
    <root>/versions/<id>/server_<id>.jar
    <root>/versions/<id>/libraries/<relative path>
    <root>/versions/<id>/native-libraries/<file name>

The layout is the contract between runs: a file at one of these paths is
treated as already downloaded.
"""

import os
import pathlib
import posixpath
from typing import Union

from mcfetch.mcfetch_exceptions import CacheWriteError


class CacheLayout:
    """
    Computes cache paths beneath a root directory.

    Version ids and artifact paths come from remote metadata. Any of them
    that would place a file outside its directory raises CacheWriteError.
    """

    MANIFEST_FILE_NAME = "version_manifest.json"
    PACKAGE_FILE_NAME = "meta.json"
    LIBRARIES_DIR_NAME = "libraries"
    NATIVE_LIBRARIES_DIR_NAME = "native-libraries"

    def __init__(self, root: Union[str, pathlib.Path]):
        self.root = pathlib.Path(root)

    @staticmethod
    def _contained(parent: pathlib.Path, path: pathlib.Path) -> pathlib.Path:
        """
        Returns path if it resolves strictly beneath parent.

        Raises:
            CacheWriteError: If path resolves to parent itself or outside it
        """
        resolved_parent = os.path.realpath(parent)
        resolved = os.path.realpath(path)
        if resolved == resolved_parent or os.path.commonpath([resolved_parent, resolved]) != resolved_parent:
            raise CacheWriteError(str(path), f"resolves outside {parent}")
        return path

    @property
    def versions_dir(self) -> pathlib.Path:
        return self.root / "versions"

    @property
    def manifest_path(self) -> pathlib.Path:
        return self.versions_dir / self.MANIFEST_FILE_NAME

    def version_dir(self, version_id: str) -> pathlib.Path:
        return self._contained(self.versions_dir, self.versions_dir / version_id)

    def package_path(self, version_id: str) -> pathlib.Path:
        return self.version_dir(version_id) / self.PACKAGE_FILE_NAME

    def libraries_dir(self, version_id: str) -> pathlib.Path:
        return self.version_dir(version_id) / self.LIBRARIES_DIR_NAME

    def native_libraries_dir(self, version_id: str) -> pathlib.Path:
        return self.version_dir(version_id) / self.NATIVE_LIBRARIES_DIR_NAME

    def primary_payload_path(self, version_id: str, server: bool = False) -> pathlib.Path:
        kind = "server" if server else "client"
        return self.version_dir(version_id) / f"{kind}_{version_id}.jar"

    def library_path(self, version_id: str, relative_path: str) -> pathlib.Path:
        """
        Destination of an ordinary library; the Maven-style relative path is kept as nested directories.
        """
        libraries_dir = self.libraries_dir(version_id)
        return self._contained(libraries_dir, libraries_dir.joinpath(*relative_path.split("/")))

    def native_library_path(self, version_id: str, artifact_path: str) -> pathlib.Path:
        """
        Destination of a native library; only the last segment of its path is kept.
        """
        native_dir = self.native_libraries_dir(version_id)
        return self._contained(native_dir, native_dir / posixpath.basename(artifact_path))

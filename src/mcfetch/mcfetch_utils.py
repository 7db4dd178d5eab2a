"""
Platform detection and filesystem helpers used by the stores and the artifact placer.
"""

import os
import pathlib
import platform
import uuid
from typing import Optional, Tuple, Union

from mcfetch.mcfetch_exceptions import CacheReadError, CacheWriteError

PathLike = Union[str, os.PathLike]


class PlatformTag:
    """Platform tags used as keys in the "natives" block of library metadata."""

    LINUX = "linux"
    WINDOWS = "windows"
    MACOS = "macos"


class PlatformUtils:
    """
    Maps the host operating system to the tag used inside library metadata.
    """

    # host identifiers whose metadata tag differs from the name the OS reports
    HOST_TO_TAG = {"darwin": PlatformTag.MACOS}

    # older catalogs spell the macOS natives key "osx"
    NATIVE_KEY_ALIASES = {PlatformTag.MACOS: (PlatformTag.MACOS, "osx")}

    @staticmethod
    def get_host_os() -> str:
        return platform.system().lower()

    @staticmethod
    def get_platform_tag(host_os: Optional[str] = None) -> str:
        """
        Returns the platform tag for the given host identifier, or for the current host.

        Unrecognized hosts map to their own identifier. Such a tag matches no
        library's natives block, so every library is then treated as ordinary.

        Args:
            host_os: Host identifier such as "darwin", "linux" or "windows"

        Returns:
            The platform tag, e.g. "macos" for "darwin"
        """
        if host_os is None:
            host_os = PlatformUtils.get_host_os()
        return PlatformUtils.HOST_TO_TAG.get(host_os, host_os)

    @staticmethod
    def native_keys(platform_tag: str) -> Tuple[str, ...]:
        """Keys to look up, in order, in a library's natives block for this platform."""
        return PlatformUtils.NATIVE_KEY_ALIASES.get(platform_tag, (platform_tag,))


class FileUtils:
    """
    Filesystem operations for the cache tree, raising mcfetch exceptions with the path involved.
    """

    @staticmethod
    def exists(path: PathLike) -> bool:
        return os.path.exists(path)

    @staticmethod
    def read_file(path: PathLike) -> bytes:
        try:
            return pathlib.Path(path).read_bytes()
        except OSError as e:
            raise CacheReadError(str(path), str(e)) from e

    @staticmethod
    def make_dirs(path: PathLike) -> None:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            raise CacheWriteError(str(path), str(e)) from e

    @staticmethod
    def write_file(path: PathLike, data: bytes) -> None:
        """
        Writes data to path through a sibling temporary file that is renamed into place.

        Readers never observe a partially written file, and a failed write
        leaves nothing at path.

        Args:
            path: Destination file, whose parent directory must exist
            data: The bytes to write

        Raises:
            CacheWriteError: If the file could not be written
        """
        dest = pathlib.Path(path)
        tmp = dest.with_name(f"{dest.name}.tmp.{uuid.uuid4().hex}")
        try:
            with tmp.open("wb") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            tmp.replace(dest)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise CacheWriteError(str(dest), str(e)) from e

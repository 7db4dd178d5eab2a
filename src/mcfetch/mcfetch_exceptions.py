"""
Exceptions raised by mcfetch.

Every failure that ends a run derives from MCFetchException, so the CLI can
report it and exit non-zero without knowing which component raised it.
"""

from typing import Optional


class MCFetchException(Exception):
    """
    Base exception for mcfetch.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(MCFetchException):
    """Raised when the configuration file or values are invalid."""


class TransportError(MCFetchException):
    """
    Raised when a remote resource could not be fetched.

    Connection failures and HTTP error statuses both end up here; status_code
    is set when the server answered.
    """

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None) -> None:
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Could not fetch {url}: {reason}")


class CacheReadError(MCFetchException):
    """Raised when a cached file exists but could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not read {path}: {reason}")


class CacheWriteError(MCFetchException):
    """Raised when a file or directory under the cache root could not be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not write {path}: {reason}")


class ParseError(MCFetchException):
    """
    Raised when fetched or cached bytes are not a well-formed document.

    source is the URL or path the bytes came from.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        super().__init__(f"Could not parse {source}: {reason}")


class VersionNotFoundError(MCFetchException):
    """
    Raised when the catalog has no entry for the requested version.

    alias is what the user asked for; version_id is what it was substituted to
    (identical for pinned ids).
    """

    def __init__(self, alias: str, version_id: Optional[str] = None) -> None:
        self.alias = alias
        self.version_id = version_id if version_id is not None else alias
        if self.version_id != alias:
            message = f"Did not find the requested version {alias!r} (resolved to {self.version_id!r}) in the catalog"
        else:
            message = f"Did not find the requested version {alias!r} in the catalog"
        super().__init__(message)


class ArtifactUnavailableError(MCFetchException):
    """Raised when a version package does not declare a required download."""

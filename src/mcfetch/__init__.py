"""
mcfetch resolves a game version against the remote version catalog and
downloads its jar and libraries into a local cache.
"""

from mcfetch.mcfetch_config import MCFetchConfig
from mcfetch.mcfetch_exceptions import MCFetchException
from mcfetch.version_fetcher import FetchResult, VersionFetcher

__version__ = "0.1.0"

__all__ = ["MCFetchConfig", "MCFetchException", "VersionFetcher", "FetchResult"]

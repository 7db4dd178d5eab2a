"""
Loads the version catalog, from the cache or from the remote endpoint.
"""

import logging

from mcfetch.cache_layout import CacheLayout
from mcfetch.mcfetch_logger import MCFetchLogger
from mcfetch.mcfetch_settings import MCFetchSettings
from mcfetch.mcfetch_transport import Transport
from mcfetch.mcfetch_utils import FileUtils
from mcfetch.version_models import Catalog
from mcfetch.version_store.parsing import parse_document


class ManifestStore:
    """
    Owns versions/version_manifest.json.
    """

    def __init__(
        self,
        layout: CacheLayout,
        transport: Transport,
        logger: MCFetchLogger,
        manifest_url: str = MCFetchSettings.DEFAULT_MANIFEST_URL,
    ):
        """
        Args:
            layout: Cache layout rooted at the cache directory
            transport: Transport used to fetch the catalog
            logger: Logger for progress messages
            manifest_url: URL of the remote catalog
        """
        self.layout = layout
        self.transport = transport
        self.logger = logger
        self.manifest_url = manifest_url

    def load(self, force_refresh: bool) -> Catalog:
        """
        Returns the catalog.

        The remote catalog is fetched, written to the cache and parsed when
        force_refresh is set or no cached copy exists. Otherwise the cached
        copy is parsed and nothing is fetched.

        Raises:
            TransportError: If the catalog could not be fetched
            CacheReadError: If the cached catalog could not be read
            CacheWriteError: If the catalog could not be written to the cache
            ParseError: If the bytes are not a well-formed catalog
        """
        path = self.layout.manifest_path

        if force_refresh or not FileUtils.exists(path):
            self.logger.log(f"fetching {self.manifest_url}", logging.INFO)
            data = self.transport.fetch(self.manifest_url)
            FileUtils.make_dirs(path.parent)
            FileUtils.write_file(path, data)
            source = self.manifest_url
        else:
            self.logger.log(f"using cached catalog {path}", logging.DEBUG)
            data = FileUtils.read_file(path)
            source = str(path)

        catalog = parse_document(Catalog, data, source)
        return catalog.validate_invariants(source)

"""
Loads a version's metadata package, from the cache or from its metadata URL.
"""

import logging

from mcfetch.cache_layout import CacheLayout
from mcfetch.mcfetch_logger import MCFetchLogger
from mcfetch.mcfetch_transport import Transport
from mcfetch.mcfetch_utils import FileUtils
from mcfetch.version_models import VersionPackage
from mcfetch.version_store.parsing import parse_document


class PackageStore:
    """
    Owns versions/<id>/meta.json.
    """

    def __init__(self, layout: CacheLayout, transport: Transport, logger: MCFetchLogger):
        self.layout = layout
        self.transport = transport
        self.logger = logger

    def load(self, version_id: str, metadata_url: str) -> VersionPackage:
        """
        Returns the metadata package of version_id.

        A cached meta.json is used as is: a published version's metadata does
        not change, so its presence is enough. Otherwise it is fetched from
        metadata_url and cached.

        Raises:
            TransportError: If the package could not be fetched
            CacheReadError: If the cached package could not be read
            CacheWriteError: If the package could not be written to the cache
            ParseError: If the bytes are not a well-formed package
        """
        path = self.layout.package_path(version_id)

        if FileUtils.exists(path):
            self.logger.log(f"using cached package {path}", logging.DEBUG)
            data = FileUtils.read_file(path)
            source = str(path)
        else:
            self.logger.log(f"fetching {metadata_url}", logging.INFO)
            data = self.transport.fetch(metadata_url)
            FileUtils.make_dirs(path.parent)
            FileUtils.write_file(path, data)
            source = metadata_url

        return parse_document(VersionPackage, data, source)

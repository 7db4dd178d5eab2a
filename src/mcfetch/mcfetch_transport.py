"""
Transport used to fetch catalog, metadata and artifact bytes.

Everything that talks to the network goes through an object with a
fetch(url) -> bytes method, so tests substitute an in-memory transport.
"""

import logging
from typing import Optional, Protocol

import requests

from mcfetch.mcfetch_exceptions import TransportError
from mcfetch.mcfetch_logger import MCFetchLogger


class Transport(Protocol):
    def fetch(self, url: str) -> bytes:
        ...

    def close(self) -> None:
        ...


class HTTPTransport:
    """
    Blocking HTTP GET over a requests session.

    Connection failures and HTTP error statuses both raise TransportError.
    """

    def __init__(
        self,
        logger: MCFetchLogger,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            logger: Logger for request messages
            timeout: Seconds to wait for the server, or None to wait indefinitely
            session: Session to reuse; a new one is created when omitted
        """
        self.logger = logger
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def fetch(self, url: str) -> bytes:
        self.logger.log(f"GET {url}", logging.DEBUG)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(url, str(e)) from e

        if response.status_code >= 400:
            raise TransportError(url, f"HTTP {response.status_code}", status_code=response.status_code)

        return response.content

    def close(self) -> None:
        self.session.close()

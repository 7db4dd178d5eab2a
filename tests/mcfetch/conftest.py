"""
Shared fixtures for mcfetch tests.
"""

import pytest

from mcfetch.cache_layout import CacheLayout
from mcfetch.mcfetch_logger import MCFetchLogger
from tests.mcfetch.fakes import (
    MANIFEST_URL,
    PACKAGE_URL,
    FakeTransport,
    artifact_responses,
    encode,
    make_catalog,
    make_package,
)


@pytest.fixture
def logger():
    return MCFetchLogger()


@pytest.fixture
def layout(tmp_path):
    return CacheLayout(tmp_path / "root")


@pytest.fixture
def catalog_bytes():
    return encode(make_catalog())


@pytest.fixture
def package_bytes():
    return encode(make_package())


@pytest.fixture
def full_transport(catalog_bytes, package_bytes):
    """Transport serving the catalog, the 1.20.1 package and every artifact."""
    responses = artifact_responses()
    responses[MANIFEST_URL] = catalog_bytes
    responses[PACKAGE_URL] = package_bytes
    return FakeTransport(responses)

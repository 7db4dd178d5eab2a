"""
Tests for the manifest store, the version resolver and the package store.
"""

import pytest

from mcfetch.cache_layout import CacheLayout
from mcfetch.mcfetch_exceptions import (
    CacheReadError,
    CacheWriteError,
    ParseError,
    TransportError,
    VersionNotFoundError,
)
from mcfetch.version_models import Catalog
from mcfetch.version_store import ManifestStore, PackageStore, VersionResolver, is_alias
from tests.mcfetch.fakes import (
    MANIFEST_URL,
    PACKAGE_URL,
    SNAPSHOT_PACKAGE_URL,
    FakeTransport,
    encode,
    make_catalog,
    make_package,
)


def write_cached_catalog(layout, document):
    layout.versions_dir.mkdir(parents=True, exist_ok=True)
    layout.manifest_path.write_bytes(encode(document))


class TestManifestStore:
    """Tests for ManifestStore.load()."""

    def test_fetches_and_caches_when_no_cached_catalog(self, layout, logger, catalog_bytes):
        transport = FakeTransport({MANIFEST_URL: catalog_bytes})
        store = ManifestStore(layout, transport, logger, MANIFEST_URL)

        catalog = store.load(force_refresh=False)

        assert transport.fetched == [MANIFEST_URL]
        assert layout.manifest_path.read_bytes() == catalog_bytes
        assert catalog.latest.release == "1.20.1"

    def test_uses_cached_catalog_without_network(self, layout, logger):
        write_cached_catalog(layout, make_catalog())
        transport = FakeTransport()
        store = ManifestStore(layout, transport, logger, MANIFEST_URL)

        catalog = store.load(force_refresh=False)

        assert transport.fetched == []
        assert catalog.find("1.20.1") is not None

    def test_force_refresh_overwrites_cached_catalog(self, layout, logger):
        write_cached_catalog(layout, make_catalog(release="1.20.1"))
        fresh = encode(make_catalog(release="1.20.2", extra_versions=[
            {"id": "1.20.2", "type": "release", "url": "https://meta.example.test/1.20.2.json"},
        ]))
        transport = FakeTransport({MANIFEST_URL: fresh})
        store = ManifestStore(layout, transport, logger, MANIFEST_URL)

        catalog = store.load(force_refresh=True)

        assert transport.fetched == [MANIFEST_URL]
        assert catalog.latest.release == "1.20.2"
        assert layout.manifest_path.read_bytes() == fresh

    def test_transport_failure_is_fatal(self, layout, logger):
        store = ManifestStore(layout, FakeTransport(), logger, MANIFEST_URL)

        with pytest.raises(TransportError) as exc_info:
            store.load(force_refresh=True)

        assert exc_info.value.url == MANIFEST_URL
        assert not layout.manifest_path.exists()

    def test_malformed_catalog_is_parse_error(self, layout, logger):
        store = ManifestStore(layout, FakeTransport({MANIFEST_URL: b"<html>oops</html>"}), logger, MANIFEST_URL)

        with pytest.raises(ParseError):
            store.load(force_refresh=True)

    def test_malformed_cached_catalog_is_parse_error(self, layout, logger):
        layout.versions_dir.mkdir(parents=True)
        layout.manifest_path.write_bytes(b"[]")
        store = ManifestStore(layout, FakeTransport(), logger, MANIFEST_URL)

        with pytest.raises(ParseError) as exc_info:
            store.load(force_refresh=False)
        assert str(layout.manifest_path) in str(exc_info.value)

    def test_unreadable_cached_catalog_is_cache_read_error(self, layout, logger):
        # a directory where the file should be cannot be read as one
        layout.manifest_path.mkdir(parents=True)
        store = ManifestStore(layout, FakeTransport(), logger, MANIFEST_URL)

        with pytest.raises(CacheReadError):
            store.load(force_refresh=False)

    def test_unwritable_cache_is_cache_write_error(self, tmp_path, logger, catalog_bytes):
        blocker = tmp_path / "root"
        blocker.write_bytes(b"a file, not a directory")
        store = ManifestStore(CacheLayout(blocker), FakeTransport({MANIFEST_URL: catalog_bytes}), logger, MANIFEST_URL)

        with pytest.raises(CacheWriteError):
            store.load(force_refresh=True)


class TestVersionResolver:
    """Tests for VersionResolver."""

    @pytest.fixture
    def catalog(self):
        return Catalog.model_validate(make_catalog())

    @pytest.fixture
    def resolver(self, logger):
        return VersionResolver(logger)

    def test_release_alias(self, resolver, catalog):
        assert resolver.resolve("release", catalog) == ("1.20.1", PACKAGE_URL)

    def test_snapshot_alias(self, resolver, catalog):
        assert resolver.resolve("snapshot", catalog) == ("23w31a", SNAPSHOT_PACKAGE_URL)

    def test_pinned_id(self, resolver, catalog):
        assert resolver.resolve("1.20.1", catalog) == ("1.20.1", PACKAGE_URL)

    def test_unknown_id_names_requested_alias(self, resolver, catalog):
        with pytest.raises(VersionNotFoundError) as exc_info:
            resolver.resolve("not-a-real-id", catalog)

        assert exc_info.value.alias == "not-a-real-id"
        assert "not-a-real-id" in str(exc_info.value)

    def test_alias_substituted_to_missing_id_names_alias(self, resolver):
        # invariants unchecked on purpose: latest points nowhere
        catalog = Catalog.model_validate(make_catalog(snapshot="24w01a"))

        with pytest.raises(VersionNotFoundError) as exc_info:
            resolver.resolve("snapshot", catalog)

        assert exc_info.value.alias == "snapshot"
        assert exc_info.value.version_id == "24w01a"

    def test_ids_are_matched_exactly(self, resolver, catalog):
        with pytest.raises(VersionNotFoundError):
            resolver.resolve("1.20", catalog)

    @pytest.mark.parametrize(
        "requested, expected",
        [("release", True), ("snapshot", True), ("1.20.1", False), ("release-candidate", False), ("", False)],
    )
    def test_is_alias(self, requested, expected):
        assert is_alias(requested) is expected

    def test_pinned_id_does_not_refresh_stale_cached_catalog(self, layout, logger):
        # cached catalog predates 1.20.2, but the pinned id is in it
        write_cached_catalog(layout, make_catalog())
        transport = FakeTransport({MANIFEST_URL: encode(make_catalog(release="1.20.2", extra_versions=[
            {"id": "1.20.2", "type": "release", "url": "https://meta.example.test/1.20.2.json"},
        ]))})
        resolver = VersionResolver(logger, ManifestStore(layout, transport, logger, MANIFEST_URL))

        assert resolver.resolve_from_store("1.20.1") == ("1.20.1", PACKAGE_URL)
        assert transport.fetched == []

    def test_alias_always_refreshes_catalog(self, layout, logger):
        write_cached_catalog(layout, make_catalog())
        fresh = make_catalog(release="1.20.2", extra_versions=[
            {"id": "1.20.2", "type": "release", "url": "https://meta.example.test/1.20.2.json"},
        ])
        transport = FakeTransport({MANIFEST_URL: encode(fresh)})
        resolver = VersionResolver(logger, ManifestStore(layout, transport, logger, MANIFEST_URL))

        assert resolver.resolve_from_store("release") == ("1.20.2", "https://meta.example.test/1.20.2.json")
        assert transport.fetched == [MANIFEST_URL]

    def test_pinned_id_fetches_catalog_when_none_cached(self, layout, logger, catalog_bytes):
        transport = FakeTransport({MANIFEST_URL: catalog_bytes})
        resolver = VersionResolver(logger, ManifestStore(layout, transport, logger, MANIFEST_URL))

        assert resolver.resolve_from_store("23w31a") == ("23w31a", SNAPSHOT_PACKAGE_URL)
        assert transport.fetched == [MANIFEST_URL]


class TestPackageStore:
    """Tests for PackageStore.load()."""

    def test_fetches_and_caches_package(self, layout, logger, package_bytes):
        transport = FakeTransport({PACKAGE_URL: package_bytes})
        store = PackageStore(layout, transport, logger)

        package = store.load("1.20.1", PACKAGE_URL)

        assert package.id == "1.20.1"
        assert transport.fetched == [PACKAGE_URL]
        assert layout.package_path("1.20.1").read_bytes() == package_bytes

    def test_cached_package_used_without_network(self, layout, logger, package_bytes):
        layout.version_dir("1.20.1").mkdir(parents=True)
        layout.package_path("1.20.1").write_bytes(package_bytes)
        transport = FakeTransport()
        store = PackageStore(layout, transport, logger)

        package = store.load("1.20.1", PACKAGE_URL)

        assert package.id == "1.20.1"
        assert transport.fetched == []

    def test_cached_package_is_never_refetched(self, layout, logger):
        # presence alone is trusted, even if the remote has changed since
        cached = make_package()
        cached["mainClass"] = "cached.Main"
        layout.version_dir("1.20.1").mkdir(parents=True)
        layout.package_path("1.20.1").write_bytes(encode(cached))
        transport = FakeTransport({PACKAGE_URL: encode(make_package())})

        package = PackageStore(layout, transport, logger).load("1.20.1", PACKAGE_URL)

        assert package.main_class == "cached.Main"
        assert transport.fetched == []

    def test_transport_failure_is_fatal(self, layout, logger):
        store = PackageStore(layout, FakeTransport(), logger)

        with pytest.raises(TransportError):
            store.load("1.20.1", PACKAGE_URL)
        assert not layout.package_path("1.20.1").exists()

    def test_malformed_package_is_parse_error(self, layout, logger):
        store = PackageStore(layout, FakeTransport({PACKAGE_URL: b'{"id": "1.20.1"}'}), logger)

        with pytest.raises(ParseError) as exc_info:
            store.load("1.20.1", PACKAGE_URL)
        assert PACKAGE_URL in str(exc_info.value)

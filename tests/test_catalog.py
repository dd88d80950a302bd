"""
Tests for the install catalog and download catalog
"""
import dataclasses
from types import MappingProxyType

import pytest

from pwgen_install.platform import downloads
from pwgen_install.platform.catalog import (
    INSTALL_CATALOG,
    CatalogError,
    InstallInfo,
    lookup,
    validate_catalog,
)
from pwgen_install.platform.detector import Platform


class TestInstallCatalog:
    """Authored quick install table"""

    @pytest.mark.parametrize("p", list(Platform))
    def test_every_platform_has_a_command(self, p):
        info = lookup(p)
        assert info.label
        assert info.command.strip()
        assert info.note

    def test_bundled_catalog_is_valid(self):
        validate_catalog(INSTALL_CATALOG)

    def test_linux_uses_snap(self):
        info = lookup(Platform.LINUX)
        assert info.label == "snap"
        assert info.command.splitlines()[-1] == "sudo snap install pwgen-rust"

    def test_download_commands_are_multiline(self):
        for p in (Platform.MACOS, Platform.WINDOWS):
            info = lookup(p)
            assert info.label == "download"
            assert len(info.command.splitlines()) == 3
            assert "releases/latest" in info.command

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            INSTALL_CATALOG[Platform.LINUX] = InstallInfo("x", "y", "z")

    def test_install_info_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            lookup(Platform.LINUX).command = "rm -rf /"

    def test_lookup_uses_given_catalog(self):
        custom = {p: InstallInfo(p.value, f"install {p.value}", "") for p in Platform}
        assert lookup(Platform.MACOS, custom).command == "install macos"


class TestValidateCatalog:
    """validate_catalog rejects incomplete tables"""

    def _full(self):
        return {p: InstallInfo("pkg", f"install {p.value}", "note") for p in Platform}

    def test_accepts_complete_catalog(self):
        validate_catalog(MappingProxyType(self._full()))

    def test_missing_platform(self):
        catalog = self._full()
        del catalog[Platform.WINDOWS]
        with pytest.raises(CatalogError, match="windows"):
            validate_catalog(catalog)

    def test_unknown_key(self):
        catalog = self._full()
        catalog["freebsd"] = InstallInfo("pkg", "pkg install pwgen", "")
        with pytest.raises(CatalogError, match="freebsd"):
            validate_catalog(catalog)

    def test_empty_command(self):
        catalog = self._full()
        catalog[Platform.MACOS] = InstallInfo("brew", "   \n", "")
        with pytest.raises(CatalogError, match="Empty command for macos"):
            validate_catalog(catalog)

    def test_empty_label(self):
        catalog = self._full()
        catalog[Platform.LINUX] = InstallInfo("", "snap install pwgen-rust", "")
        with pytest.raises(CatalogError, match="Empty label for linux"):
            validate_catalog(catalog)

    def test_catalog_error_is_value_error(self):
        assert issubclass(CatalogError, ValueError)


class TestDownloads:
    """Download page data"""

    def test_bundled_downloads_are_valid(self):
        downloads.validate_downloads()

    @pytest.mark.parametrize("p", list(Platform))
    def test_cards_match_platform(self, p):
        card = downloads.platform_downloads(p)
        assert card.platform is p
        assert card.links
        assert card.package.command

    @pytest.mark.parametrize("p", list(Platform))
    def test_requirements_mention_disk_space(self, p):
        assert "50 MB disk space" in downloads.system_requirements(p)

    def test_release_version_in_manual_snap(self):
        manual = [m for m in downloads.ALTERNATIVE_METHODS if m.title == "Manual Snap Install"][0]
        assert f"pwgen-rust_{downloads.LATEST_RELEASE.version}_amd64.snap" in manual.command

    def test_scoop_needs_extras_bucket(self):
        card = downloads.platform_downloads(Platform.WINDOWS)
        assert card.package.command.splitlines() == ["scoop bucket add extras", "scoop install pwgen"]

    def test_missing_card_is_rejected(self, monkeypatch):
        cards = dict(downloads.PLATFORM_DOWNLOADS)
        del cards[Platform.MACOS]
        monkeypatch.setattr(downloads, 'PLATFORM_DOWNLOADS', cards)
        with pytest.raises(CatalogError, match="macos"):
            downloads.validate_downloads()

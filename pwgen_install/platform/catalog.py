#!/usr/bin/env python3
"""
PwGen Install Helper Install Catalog
Fixed per-platform quick install instructions
"""

from types import MappingProxyType
from typing import Mapping
from dataclasses import dataclass

from pwgen_install.platform.detector import Platform


class CatalogError(ValueError):
    """Raised when an authored catalog is incomplete or malformed"""


@dataclass(frozen=True)
class InstallInfo:
    """Install instructions for one platform"""
    label: str      # install method, e.g. "snap"
    command: str    # may span several lines
    note: str


RELEASES_URL = "https://github.com/hxhippy/pwgen/releases/latest"

INSTALL_CATALOG: Mapping[Platform, InstallInfo] = MappingProxyType({
    Platform.LINUX: InstallInfo(
        label="snap",
        command="# Install from Snap Store (Approved!)\nsudo snap install pwgen-rust",
        note="Available now in the Snap Store! ✅",
    ),
    Platform.MACOS: InstallInfo(
        label="download",
        command=(
            "# Download macOS installer\n"
            f"# Visit: {RELEASES_URL}\n"
            "# Download: pwgen-1.2.0-macos-x64.pkg or .dmg"
        ),
        note="Homebrew package coming soon: brew install pwgen",
    ),
    Platform.WINDOWS: InstallInfo(
        label="download",
        command=(
            "# Download Windows installer\n"
            f"# Visit: {RELEASES_URL}\n"
            "# Download: pwgen-windows-x64-installer.exe"
        ),
        note="Scoop package coming soon: scoop install pwgen",
    ),
})


def validate_catalog(catalog: Mapping[Platform, InstallInfo]) -> None:
    """
    Check that a catalog covers every platform with usable instructions

    Args:
        catalog: Mapping to check

    Raises:
        CatalogError: on missing or unknown platforms, or empty label/command
    """
    missing = [p.value for p in Platform if p not in catalog]
    if missing:
        raise CatalogError(f"No install info for: {', '.join(missing)}")

    unknown = [repr(key) for key in catalog if not isinstance(key, Platform)]
    if unknown:
        raise CatalogError(f"Unknown catalog keys: {', '.join(unknown)}")

    for p, info in catalog.items():
        if not info.label.strip():
            raise CatalogError(f"Empty label for {p.value}")
        if not info.command.strip():
            raise CatalogError(f"Empty command for {p.value}")


def lookup(p: Platform, catalog: Mapping[Platform, InstallInfo] = INSTALL_CATALOG) -> InstallInfo:
    """Get install info for a platform"""
    return catalog[p]


validate_catalog(INSTALL_CATALOG)

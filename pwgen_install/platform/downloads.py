#!/usr/bin/env python3
"""
PwGen Install Helper Download Catalog
Release artifacts, alternative install methods and system requirements
"""

from types import MappingProxyType
from typing import Mapping, Tuple
from dataclasses import dataclass

from pwgen_install.platform.detector import Platform
from pwgen_install.platform.catalog import CatalogError, RELEASES_URL


@dataclass(frozen=True)
class ReleaseInfo:
    """Latest published release"""
    version: str
    date: str
    highlights: str


@dataclass(frozen=True)
class DownloadLink:
    """A downloadable artifact or store page"""
    title: str
    url: str


@dataclass(frozen=True)
class InstallMethod:
    """A titled install snippet"""
    title: str
    command: str


@dataclass(frozen=True)
class PlatformDownloads:
    """Download card for one platform"""
    platform: Platform
    subtitle: str
    links: Tuple[DownloadLink, ...]
    package: InstallMethod
    package_note: str = ""


LATEST_RELEASE = ReleaseInfo(
    version="1.2.0",
    date="June 28, 2025",
    highlights=(
        "30-40% smaller binaries, enhanced security, modern cryptography "
        "(SHA-256 only), cross-platform installers"
    ),
)

PLATFORM_DOWNLOADS: Mapping[Platform, PlatformDownloads] = MappingProxyType({
    Platform.LINUX: PlatformDownloads(
        platform=Platform.LINUX,
        subtitle="Ubuntu, Debian, Fedora, Arch",
        links=(
            DownloadLink("⏳ Snap Store (Pending Approval)", "https://snapcraft.io/pwgen-rust"),
        ),
        package=InstallMethod("Coming Soon", "# sudo snap install pwgen-rust"),
        package_note="⏳ Awaiting Snap Store approval",
    ),
    Platform.MACOS: PlatformDownloads(
        platform=Platform.MACOS,
        subtitle="macOS 11.0 or later",
        links=(
            DownloadLink("📦 Download .dmg", RELEASES_URL),
            DownloadLink("📦 Download .pkg", RELEASES_URL),
        ),
        package=InstallMethod("Homebrew", "brew install --cask pwgen"),
    ),
    Platform.WINDOWS: PlatformDownloads(
        platform=Platform.WINDOWS,
        subtitle="Windows 10 or later",
        links=(
            DownloadLink("📦 Download .msi", RELEASES_URL),
            DownloadLink("📦 Download .exe", RELEASES_URL),
        ),
        package=InstallMethod("Scoop", "scoop bucket add extras\nscoop install pwgen"),
    ),
})

ALTERNATIVE_METHODS: Tuple[InstallMethod, ...] = (
    InstallMethod("Cargo (Rust)", "cargo install --git https://github.com/HxHippy/PWGen"),
    InstallMethod(
        "GitHub Releases",
        "# All platforms - direct download\nhttps://github.com/HxHippy/PWGen/releases/latest",
    ),
    InstallMethod("Snap Store (Pending Approval)", "# sudo snap install pwgen-rust"),
    InstallMethod(
        "Manual Snap Install",
        "wget https://github.com/HxHippy/PWGen/releases/latest/download/"
        f"pwgen-rust_{LATEST_RELEASE.version}_amd64.snap\n"
        f"sudo snap install --dangerous pwgen-rust_{LATEST_RELEASE.version}_amd64.snap",
    ),
)

SYSTEM_REQUIREMENTS: Mapping[Platform, Tuple[str, ...]] = MappingProxyType({
    Platform.LINUX: (
        "x86_64 architecture",
        "glibc 2.17+ or musl",
        "50 MB disk space",
        "GTK 3.0+ (for GUI)",
    ),
    Platform.MACOS: (
        "macOS 11.0 or later",
        "Intel or Apple Silicon",
        "50 MB disk space",
        "Cocoa framework",
    ),
    Platform.WINDOWS: (
        "Windows 10 or later",
        "x86_64 architecture",
        "50 MB disk space",
        "Visual C++ Redistributable",
    ),
})

VERIFICATION = InstallMethod(
    "Verify Download",
    "# Download checksums\n"
    "curl -O https://pwgenrust.dev/downloads/SHA256SUMS\n"
    "curl -O https://pwgenrust.dev/downloads/SHA256SUMS.sig\n"
    "\n"
    "# Verify signature\n"
    "gpg --verify SHA256SUMS.sig SHA256SUMS\n"
    "\n"
    "# Check file integrity\n"
    "sha256sum -c SHA256SUMS",
)

PGP_KEY_ID = "0x1234567890ABCDEF"
PUBLIC_KEY_PATH = "/downloads/pubkey.asc"


def platform_downloads(p: Platform) -> PlatformDownloads:
    """Get the download card for a platform"""
    return PLATFORM_DOWNLOADS[p]


def system_requirements(p: Platform) -> Tuple[str, ...]:
    """Get minimum system requirements for a platform"""
    return SYSTEM_REQUIREMENTS[p]


def validate_downloads() -> None:
    """
    Check the download tables cover every platform

    Raises:
        CatalogError: on missing platforms, mismatched cards or empty entries
    """
    for p in Platform:
        card = PLATFORM_DOWNLOADS.get(p)
        if card is None:
            raise CatalogError(f"No download card for {p.value}")
        if card.platform is not p:
            raise CatalogError(f"Download card for {p.value} is labelled {card.platform.value}")
        if not card.links:
            raise CatalogError(f"No download links for {p.value}")
        if not card.package.command.strip():
            raise CatalogError(f"Empty package command for {p.value}")
        if not SYSTEM_REQUIREMENTS.get(p):
            raise CatalogError(f"No system requirements for {p.value}")

    for method in ALTERNATIVE_METHODS:
        if not method.command.strip():
            raise CatalogError(f"Empty command for {method.title}")


validate_downloads()

#!/usr/bin/env python3
"""
PwGen Install Helper Platform Detection
Maps a browser-style environment identifier to a platform category
"""

import platform
from typing import Optional
from enum import Enum


class Platform(Enum):
    """Operating system categories with install instructions"""
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"

    @property
    def display_name(self) -> str:
        """Selector label with icon"""
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_value(cls, value: str) -> 'Platform':
        """
        Parse a platform value, case-insensitive

        Args:
            value: 'linux', 'macos' or 'windows'

        Returns:
            Matching Platform

        Raises:
            ValueError: if value names no platform
        """
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            raise ValueError(f"Unknown platform: {value!r}") from None


_DISPLAY_NAMES = {
    Platform.LINUX: "🐧 Linux",
    Platform.MACOS: "🍎 macOS",
    Platform.WINDOWS: "🪟 Windows",
}

# Checked in order, first match wins. Case-sensitive, like navigator.userAgent checks.
PLATFORM_MARKERS = (
    ('Win', Platform.WINDOWS),
    ('Mac', Platform.MACOS),
    ('Linux', Platform.LINUX),
)

DEFAULT_PLATFORM = Platform.LINUX


def detect_platform(identifier: Optional[str]) -> Platform:
    """
    Detect the platform from an environment identifier

    Args:
        identifier: User-agent style string (may be empty or None)

    Returns:
        Detected Platform, DEFAULT_PLATFORM when nothing matches
    """
    if not identifier:
        return DEFAULT_PLATFORM

    for marker, detected in PLATFORM_MARKERS:
        if marker in identifier:
            return detected

    return DEFAULT_PLATFORM


def host_identifier(system: Optional[str] = None,
                    release: Optional[str] = None,
                    machine: Optional[str] = None) -> str:
    """
    Build a user-agent style identifier for the local machine

    Args:
        system: OS name (default: platform.system())
        release: OS release (default: platform.release())
        machine: Architecture (default: platform.machine())

    Returns:
        Identifier string suitable for detect_platform()
    """
    system = platform.system() if system is None else system
    release = platform.release() if release is None else release
    machine = platform.machine() if machine is None else machine

    name = system.lower()
    if name == 'windows':
        token = f"Windows NT {release}; {machine}"
    elif name == 'darwin':
        # "Darwin" alone carries no Mac marker
        token = f"Macintosh; Intel Mac OS X {release.replace('.', '_')}"
    elif name == 'linux':
        token = f"X11; Linux {machine}"
    else:
        token = f"X11; {system} {machine}"

    return f"Mozilla/5.0 ({token.strip()})"

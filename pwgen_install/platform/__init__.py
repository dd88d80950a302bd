"""
PwGen Install Helper Platform Detection & Install Data
OS detection and per-platform install instructions
"""

from pwgen_install.platform.detector import (
    Platform,
    DEFAULT_PLATFORM,
    detect_platform,
    host_identifier,
)
from pwgen_install.platform.catalog import (
    CatalogError,
    InstallInfo,
    INSTALL_CATALOG,
    lookup,
    validate_catalog,
)

__all__ = [
    'Platform',
    'DEFAULT_PLATFORM',
    'detect_platform',
    'host_identifier',
    'CatalogError',
    'InstallInfo',
    'INSTALL_CATALOG',
    'lookup',
    'validate_catalog',
]

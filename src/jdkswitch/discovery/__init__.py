"""JDK discovery: search roots, probing, scanning and active detection.

Public API::

    from jdkswitch.discovery import PathCatalog, Scanner, ActiveResolver

    catalog = PathCatalog(default_roots=current_profile().default_roots)
    scanner = Scanner(catalog)
    records = scanner.scan()
    ActiveResolver(store).resolve(records)
"""

from __future__ import annotations

from jdkswitch.discovery.catalog import PathCatalog
from jdkswitch.discovery.models import (
    UNKNOWN_VERSION,
    Bitness,
    InstallationRecord,
    normalize_path,
)
from jdkswitch.discovery.platform_profile import PlatformProfile, current_profile
from jdkswitch.discovery.probe import InstallationProbe
from jdkswitch.discovery.resolver import ActiveResolver
from jdkswitch.discovery.scanner import Scanner, deduplicate

__all__ = [
    "ActiveResolver",
    "Bitness",
    "InstallationProbe",
    "InstallationRecord",
    "PathCatalog",
    "PlatformProfile",
    "Scanner",
    "UNKNOWN_VERSION",
    "current_profile",
    "deduplicate",
    "normalize_path",
]

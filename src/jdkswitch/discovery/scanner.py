"""Filesystem scanner for installed JDKs.

Discovery Algorithm:
    1. For each catalog root (defaults, then custom), if the root itself
       validates as an installation, record it and stop there.
    2. Otherwise list its immediate subdirectories and apply a cheap gate
       before probing: the ``bin`` executables must exist AND either a
       ``release`` file is present or the directory name looks like a JDK
       (vendor keyword, or a leading digit). The gate avoids spawning
       ``java -version`` for unrelated folders.
    3. Probe what passes the gate.
    4. Deduplicate on ``(normalized path, version)``.

An I/O error on one root is logged and skipped; the other roots still
contribute. ``scan_async`` runs the same ``scan`` on a dedicated single
worker thread.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from jdkswitch.discovery.catalog import PathCatalog
from jdkswitch.discovery.models import InstallationRecord
from jdkswitch.discovery.platform_profile import INSTALL_DIR_KEYWORDS, RELEASE_FILE
from jdkswitch.discovery.probe import InstallationProbe
from jdkswitch.discovery.resolver import ActiveResolver
from jdkswitch.exceptions import ErrorReporter

logger = logging.getLogger(__name__)


def looks_like_install_dir_name(name: str) -> bool:
    """Name heuristic: vendor/product keyword, or starts with a digit."""
    lowered = name.lower()
    if lowered[:1].isdigit():
        return True
    return any(keyword in lowered for keyword in INSTALL_DIR_KEYWORDS)


def deduplicate(records: list[InstallationRecord]) -> list[InstallationRecord]:
    """Keep the first record for every ``dedup_key``, preserving order."""
    seen: set[tuple[str, str]] = set()
    unique: list[InstallationRecord] = []
    for record in records:
        key = record.dedup_key
        if key in seen:
            continue
        seen.add(key)
        unique.append(record)
    logger.debug("Deduplicated %d records to %d", len(records), len(unique))
    return unique


class Scanner:
    """Walks a ``PathCatalog`` and returns validated installation records.

    Usage::

        with Scanner(catalog) as scanner:
            records = scanner.scan()
            future = scanner.scan_async()
    """

    def __init__(
        self,
        catalog: PathCatalog,
        probe: InstallationProbe | None = None,
        error_reporter: ErrorReporter | None = None,
    ) -> None:
        self.catalog = catalog
        self.probe = probe if probe is not None else InstallationProbe()
        self._error_reporter = error_reporter
        self._executor: ThreadPoolExecutor | None = None

    # -- Catalog pass-throughs -------------------------------------------

    def register_root(self, path: str | os.PathLike[str]) -> bool:
        return self.catalog.register_root(path)

    def unregister_root(self, path: str | os.PathLike[str]) -> bool:
        return self.catalog.unregister_root(path)

    def list_roots(self) -> list[Path]:
        return self.catalog.roots()

    def validate(self, path: str | os.PathLike[str]) -> bool:
        return self.probe.validate(path)

    # -- Scanning --------------------------------------------------------

    def scan(self) -> list[InstallationRecord]:
        """Scan every catalog root and return deduplicated records."""
        found: list[InstallationRecord] = []
        for root in self.catalog.roots():
            try:
                found.extend(self.scan_directory(root))
            except OSError:
                logger.warning("Failed to scan root %s", root, exc_info=True)
        return deduplicate(found)

    def scan_and_resolve(self, resolver: ActiveResolver) -> list[InstallationRecord]:
        """``scan`` followed by an active-installation pass."""
        records = self.scan()
        resolver.resolve(records)
        return records

    def scan_directory(self, directory: str | os.PathLike[str]) -> list[InstallationRecord]:
        """Scan one root. Missing roots yield an empty list.

        Raises:
            OSError: The root exists but cannot be listed.
        """
        root = Path(directory)
        if not root.is_dir():
            return []

        if self.probe.validate(root):
            record = self.probe.probe(root)
            return [record] if record is not None else []

        records: list[InstallationRecord] = []
        for child in sorted(root.iterdir()):
            try:
                if not child.is_dir() or not self._passes_gate(child):
                    continue
            except OSError:
                logger.debug("Skipping unreadable entry %s", child)
                continue
            record = self.probe.probe(child)
            if record is not None:
                records.append(record)
        return records

    def _passes_gate(self, path: Path) -> bool:
        if not self.probe.has_executables(path):
            return False
        if (path / RELEASE_FILE).exists():
            return True
        return looks_like_install_dir_name(path.name)

    # -- Background worker -----------------------------------------------

    def scan_async(self) -> Future[list[InstallationRecord]]:
        """Run ``scan`` on the scanner's background worker."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="jdkswitch-scan",
            )
        return self._executor.submit(self._scan_reporting_errors)

    def _scan_reporting_errors(self) -> list[InstallationRecord]:
        try:
            return self.scan()
        except Exception as exc:
            if self._error_reporter is not None:
                self._error_reporter("Background scan failed", exc)
            raise

    def shutdown(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> Scanner:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

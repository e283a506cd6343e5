"""Search roots for the JDK scanner.

``PathCatalog`` holds the OS default roots plus roots the user registered.
Registration validates existence and directory-ness and normalizes the
path, so the catalog never holds two entries pointing at the same absolute
directory. Persisting the custom roots is the caller's job (see
``jdkswitch.config.AppConfig``).

All mutation goes through a lock, but a scan that is iterating the roots
is not blocked by it: callers should not register or unregister while a
scan from the same catalog is in flight.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Iterable

from jdkswitch.discovery.models import normalize_path

logger = logging.getLogger(__name__)


def _same_path(a: Path, b: Path) -> bool:
    return os.path.normcase(str(a)) == os.path.normcase(str(b))


class PathCatalog:
    """Default and user-registered directories to scan.

    Usage::

        catalog = PathCatalog(default_roots=profile.default_roots)
        catalog.register_root("~/tools/jdks")
        for root in catalog.roots():
            ...
    """

    def __init__(
        self,
        default_roots: Iterable[str | os.PathLike[str]] = (),
        custom_roots: Iterable[str | os.PathLike[str]] = (),
    ) -> None:
        self._lock = threading.Lock()
        self._defaults: list[Path] = []
        for root in default_roots:
            normalized = normalize_path(root)
            if not any(_same_path(normalized, d) for d in self._defaults):
                self._defaults.append(normalized)
        self._custom: list[Path] = []
        for root in custom_roots:
            if not self.register_root(root):
                logger.debug("Ignoring initial custom root: %s", root)

    def register_root(self, path: str | os.PathLike[str] | None) -> bool:
        """Add a custom root.

        Returns:
            True if the root was added; False if it is missing, not a
            directory, already registered, or already a default root.
        """
        if path is None:
            return False
        normalized = normalize_path(path)
        try:
            if not normalized.is_dir():
                return False
        except OSError:
            return False
        with self._lock:
            if any(_same_path(normalized, existing) for existing in self._defaults + self._custom):
                return False
            self._custom.append(normalized)
        logger.info("Registered custom root %s", normalized)
        return True

    def unregister_root(self, path: str | os.PathLike[str] | None) -> bool:
        """Remove a custom root. Returns True if one was removed."""
        if path is None:
            return False
        normalized = normalize_path(path)
        with self._lock:
            before = len(self._custom)
            self._custom = [p for p in self._custom if not _same_path(p, normalized)]
            removed = len(self._custom) != before
        if removed:
            logger.info("Unregistered custom root %s", normalized)
        return removed

    def custom_roots(self) -> list[Path]:
        """Snapshot of the user-registered roots, in registration order."""
        with self._lock:
            return list(self._custom)

    def default_roots(self) -> list[Path]:
        return list(self._defaults)

    def roots(self) -> list[Path]:
        """Defaults followed by custom roots; no path appears twice."""
        with self._lock:
            return self._defaults + self._custom

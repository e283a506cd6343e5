"""Validation and metadata extraction for one candidate directory.

The probe answers three questions about a directory:

1. Is it a JDK?  (``bin/`` holds both the launcher and the compiler.)
2. Which version?  (``release`` file first, then ``java -version``.)
3. Which bitness?  (path marker first, then ``java -d64 -version``.)

Only (1) can reject a directory. Version and bitness failures degrade to
``UNKNOWN_VERSION`` and ``Bitness.BIT_32`` respectively and are logged.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from jdkswitch.commands import CommandRunner, SubprocessRunner
from jdkswitch.discovery.models import (
    UNKNOWN_VERSION,
    Bitness,
    InstallationRecord,
    normalize_path,
)
from jdkswitch.discovery.platform_profile import (
    BITNESS_MARKERS,
    RELEASE_FILE,
    PlatformProfile,
    current_profile,
)
from jdkswitch.discovery.versions import parse_release_file, parse_version_output

logger = logging.getLogger(__name__)


class InstallationProbe:
    """Turns a directory into an ``InstallationRecord`` (or rejects it)."""

    def __init__(
        self,
        runner: CommandRunner | None = None,
        profile: PlatformProfile | None = None,
    ) -> None:
        self._runner = runner if runner is not None else SubprocessRunner()
        self._profile = profile if profile is not None else current_profile()

    @property
    def profile(self) -> PlatformProfile:
        return self._profile

    def interpreter_path(self, path: str | os.PathLike[str]) -> Path:
        return Path(path) / "bin" / self._profile.interpreter

    def compiler_path(self, path: str | os.PathLike[str]) -> Path:
        return Path(path) / "bin" / self._profile.compiler

    def has_executables(self, path: str | os.PathLike[str]) -> bool:
        """True iff both required executables exist under ``path/bin``."""
        try:
            return (
                self.interpreter_path(path).exists()
                and self.compiler_path(path).exists()
            )
        except OSError:
            return False

    def validate(self, path: str | os.PathLike[str] | None) -> bool:
        """True iff ``path`` is a directory containing a usable JDK layout."""
        if path is None:
            return False
        try:
            if not Path(path).is_dir():
                return False
        except OSError:
            return False
        return self.has_executables(path)

    def probe(self, path: str | os.PathLike[str]) -> InstallationRecord | None:
        """Build a record for ``path``, or None if it is not an installation."""
        if not self.validate(path):
            logger.debug("Not an installation: %s", path)
            return None
        install_path = normalize_path(path)
        return InstallationRecord(
            version=self.extract_version(install_path),
            install_path=install_path,
            bitness=self.detect_bitness(install_path),
        )

    def extract_version(self, path: str | os.PathLike[str]) -> str:
        """Version from the release file, else from ``java -version``."""
        version = self._version_from_release(Path(path))
        if version:
            return version
        version = self._version_from_launcher(Path(path))
        if version:
            return version
        logger.warning("Could not determine version for %s", path)
        return UNKNOWN_VERSION

    def _version_from_release(self, path: Path) -> str | None:
        release = path / RELEASE_FILE
        try:
            if not release.is_file():
                return None
            text = release.read_text(encoding="utf-8", errors="replace")
        except OSError:
            logger.warning("Failed to read %s", release, exc_info=True)
            return None
        return parse_release_file(text).get("JAVA_VERSION") or None

    def _version_from_launcher(self, path: Path) -> str | None:
        try:
            result = self._runner.run([str(self.interpreter_path(path)), "-version"])
        except OSError:
            logger.warning("Failed to run %s -version", path, exc_info=True)
            return None
        return parse_version_output(result.output)

    def detect_bitness(self, path: str | os.PathLike[str]) -> Bitness:
        """64 if the path says so or ``-d64`` is accepted, otherwise 32."""
        lowered = str(path).lower()
        if any(marker in lowered for marker in BITNESS_MARKERS):
            return Bitness.BIT_64
        try:
            result = self._runner.run(
                [str(self.interpreter_path(path)), "-d64", "-version"]
            )
        except OSError:
            logger.debug("Bitness probe could not start for %s", path)
            return Bitness.BIT_32
        return Bitness.BIT_64 if result.ok else Bitness.BIT_32

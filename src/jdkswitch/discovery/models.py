"""Data models for the discovery module.

``InstallationRecord`` is the unit produced by ``InstallationProbe`` and
consumed by ``ActiveResolver``, the CLI, and ``SwitchCoordinator``.

Two identities are in play:

* Equality and hashing use ``install_path`` only. Two records at the same
  path are the same installation whatever version was probed.
* Scan-time deduplication uses ``dedup_key`` (normalized path plus
  version), which is finer grained. The mismatch is kept on purpose
  until product clarifies which identity should win.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from pathlib import Path

# Recorded when neither the release file nor ``java -version`` yields a version.
UNKNOWN_VERSION = "unknown"


class Bitness(enum.IntEnum):
    """Address width of an installation."""

    BIT_32 = 32
    BIT_64 = 64


@dataclass(unsafe_hash=True)
class InstallationRecord:
    """A discovered JDK installation.

    Attributes:
        version: Free-form version string, or ``UNKNOWN_VERSION``.
        install_path: Absolute, normalized installation root.
        bitness: 32- or 64-bit classification.
        is_active: Set by ``ActiveResolver``; never carried across scans.
    """

    version: str = field(compare=False)
    install_path: Path
    bitness: Bitness = field(default=Bitness.BIT_64, compare=False)
    is_active: bool = field(default=False, compare=False)

    @property
    def bin_dir(self) -> Path:
        return self.install_path / "bin"

    @property
    def is_64bit(self) -> bool:
        return self.bitness is Bitness.BIT_64

    @property
    def dedup_key(self) -> tuple[str, str]:
        """``(normalized path, version)`` key used to collapse scan duplicates."""
        return (os.path.normcase(str(normalize_path(self.install_path))), self.version)


def normalize_path(path: str | os.PathLike[str]) -> Path:
    """Return ``path`` as an absolute, lexically normalized ``Path``.

    ``~`` is expanded. Symlinks are not resolved.
    """
    return Path(os.path.abspath(os.path.expanduser(os.fspath(path))))

"""Per-OS facts used by discovery: executable names, default roots, queries.

A ``PlatformProfile`` bundles everything that differs between Windows and
POSIX hosts so that the probe, scanner and resolver stay OS-agnostic and
tests can pin a profile regardless of where they run.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

# Directory-name keywords that make a folder look like a JDK.
INSTALL_DIR_KEYWORDS: tuple[str, ...] = ("jdk", "java", "hotspot", "microsoft")

# Substrings in an installation path that imply a 64-bit build.
BITNESS_MARKERS: tuple[str, ...] = ("x64", "amd64", "x86_64", "aarch64", "64bit", "64-bit")

# The metadata file modern JDKs ship at their root.
RELEASE_FILE = "release"


@dataclass(frozen=True)
class PlatformProfile:
    """OS-specific discovery settings.

    Attributes:
        name: ``"windows"``, ``"macos"`` or ``"linux"``.
        interpreter: File name of the launcher under ``bin/``.
        compiler: File name of the compiler under ``bin/``.
        default_roots: Well-known directories scanned on every run.
        which_command: argv prefix for the "where is this binary" query.
        shim_markers: Path fragments identifying app-virtualization shims
            whose results must be ignored.
    """

    name: str
    interpreter: str
    compiler: str
    default_roots: tuple[str, ...] = ()
    which_command: tuple[str, ...] = ()
    shim_markers: tuple[str, ...] = field(default_factory=tuple)


def _windows_profile() -> PlatformProfile:
    home = os.path.expanduser("~")
    return PlatformProfile(
        name="windows",
        interpreter="java.exe",
        compiler="javac.exe",
        default_roots=(
            r"C:\Program Files\Java",
            r"C:\Program Files (x86)\Java",
            r"C:\Program Files\Microsoft",
            os.path.join(home, "AppData", "Local", "Programs", "Java"),
        ),
        which_command=("where",),
        shim_markers=("WindowsApps",),
    )


def _posix_profile(name: str) -> PlatformProfile:
    home = os.path.expanduser("~")
    user_roots = (
        os.path.join(home, ".sdkman", "candidates", "java"),
        os.path.join(home, ".jdks"),
    )
    system_roots: tuple[str, ...] = ()
    if name == "linux":
        system_roots = ("/usr/lib/jvm", "/usr/java", "/opt/java")
    return PlatformProfile(
        name=name,
        interpreter="java",
        compiler="javac",
        default_roots=system_roots + user_roots,
        which_command=("which", "-a"),
        # sdkman/jenv/asdf shims forward to whatever is selected elsewhere.
        shim_markers=("/shims/",),
    )


def current_profile() -> PlatformProfile:
    """Return the profile for the running interpreter's OS."""
    if sys.platform.startswith("win"):
        return _windows_profile()
    if sys.platform == "darwin":
        return _posix_profile("macos")
    return _posix_profile("linux")

"""Version string extraction and comparison.

Covers where versions come from and how they are compared:

* the ``release`` metadata file (``JAVA_VERSION="17.0.2"``),
* ``java -version`` output, matched against an ordered pattern list, and
* the resolver's fuzzy match (full string, then major.minor, then major),
  and the stricter component match used to pick a switch target.
"""

from __future__ import annotations

import re

# Ordered most specific first; the first pattern that matches wins.
VERSION_OUTPUT_PATTERNS: tuple[re.Pattern[str], ...] = (
    # openjdk version "17.0.2" 2022-01-18
    re.compile(r'openjdk version\s+"([0-9]+(?:\.[0-9]+)*[^"]*)"'),
    # java version "1.8.0_462"
    re.compile(r'java version\s+"([0-9]+(?:\.[0-9]+)*[^"]*)"'),
    # any other vendor: version "21" / version "11.0.15"
    re.compile(r'version\s+"([0-9]+(?:\.[0-9]+)*[^"]*)"'),
    # unquoted: version 17.0.16
    re.compile(r"version\s+([0-9]+\.[0-9]+\.[0-9]+[^\s]*)"),
    # legacy build string anywhere: 1.8.0_462
    re.compile(r"\b(1\.[0-9]+\.[0-9]+_[0-9]+)\b"),
    # unquoted two-part: version 17.0
    re.compile(r"version\s+([0-9]+\.[0-9]+[^\s]*)"),
)

_MAIN_VERSION = re.compile(r"^([0-9]+\.[0-9]+\.[0-9]+(?:_[0-9]+)?)")
_MAJOR_MINOR = re.compile(r"^([0-9]+\.[0-9]+)")


def parse_release_file(text: str) -> dict[str, str]:
    """Parse ``KEY=value`` lines, stripping surrounding quotes from values."""
    entries: dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        entries[key.strip()] = value
    return entries


def parse_version_output(output: str | None) -> str | None:
    """Extract a version from ``java -version`` text, or None."""
    if not output:
        return None
    for pattern in VERSION_OUTPUT_PATTERNS:
        match = pattern.search(output)
        if match:
            return match.group(1)
    return None


def main_version(version: str | None) -> str:
    """Reduce a version to its comparable core.

    ``"11.0.15+10"`` -> ``"11.0.15"``, ``"1.8.0_462"`` stays as is,
    ``"17-ea"`` -> ``"17"``.
    """
    if not version:
        return ""
    cleaned = re.sub(r"^[\"']", "", version)
    cleaned = re.sub(r"[+\-].*$", "", cleaned)
    match = _MAIN_VERSION.match(cleaned)
    if match:
        return match.group(1)
    match = _MAJOR_MINOR.match(cleaned)
    if match:
        return match.group(1)
    return cleaned


def match_level(candidate: str | None, actual: str | None) -> int:
    """How closely two versions agree.

    Returns:
        3 for full equality of the main versions, 2 for equal major.minor,
        1 for equal major, 0 for no match.
    """
    if not candidate or not actual:
        return 0
    a, b = main_version(candidate), main_version(actual)
    if not a or not b:
        return 0
    if a == b:
        return 3
    a_parts, b_parts = a.split("."), b.split(".")
    if len(a_parts) >= 2 and len(b_parts) >= 2 and a_parts[:2] == b_parts[:2]:
        return 2
    if a_parts[0] == b_parts[0]:
        return 1
    return 0


def release_parts(version: str | None) -> list[str]:
    """Numeric components of a version with the legacy ``1.`` prefix dropped.

    ``"1.8.0_462"`` -> ``["8", "0", "462"]``, ``"17.0.2+8"`` -> ``["17", "0", "2"]``.
    """
    parts = [p for p in re.split(r"[._]", main_version(version)) if p]
    if len(parts) >= 2 and parts[0] == "1":
        parts = parts[1:]
    return parts


def matches_target(candidate: str | None, target: str | None) -> bool:
    """True if every component the user gave in ``target`` agrees with ``candidate``.

    Stricter than ``match_level``: ``"1.7"`` does not select ``1.8.0_462``,
    ``"17.0.3"`` does not select ``17.0.2``, while ``"8"`` selects
    ``1.8.0_462`` and ``"17"`` selects ``17.0.2``.
    """
    wanted = release_parts(target)
    have = release_parts(candidate)
    if not wanted or len(wanted) > len(have):
        return False
    return have[: len(wanted)] == wanted

"""Rewriting the search-path variable for a new JDK.

Old JDK entries are recognized structurally: the entry's last segment is
``bin`` and the segment above it names a JDK (``java``/``jdk`` keyword,
case-insensitive). ``C:\\Program Files\\Java\\jdk-17\\bin`` and
``%JAVA_HOME%\\bin`` are stripped; ``C:\\tools\\bin`` and
``C:\\Program Files\\Java\\jdk-17\\lib`` are kept.
"""

from __future__ import annotations

import re

# Parent-directory keywords that mark a ``bin`` entry as a JDK one.
SEARCH_PATH_KEYWORDS: tuple[str, ...] = ("java", "jdk")

_SEGMENT_SPLIT = re.compile(r"[\\/]+")


def is_jdk_bin_entry(entry: str) -> bool:
    segments = [s for s in _SEGMENT_SPLIT.split(entry.strip()) if s]
    if len(segments) < 2 or segments[-1].lower() != "bin":
        return False
    parent = segments[-2].lower()
    return any(keyword in parent for keyword in SEARCH_PATH_KEYWORDS)


def rewrite_search_path(current: str | None, new_bin: str, separator: str = ";") -> str:
    """Drop old JDK ``bin`` entries from ``current`` and append ``new_bin``.

    Empty entries are dropped as well. ``current`` of None is treated as
    an empty search path.
    """
    entries = (current or "").split(separator)
    kept = [e for e in entries if e.strip() and not is_jdk_bin_entry(e)]
    kept.append(new_bin)
    return separator.join(kept)

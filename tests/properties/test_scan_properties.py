"""Property-based tests for deduplication, active resolution and
search-path rewriting.

The properties checked:
    - deduplicate keeps one record per (path, version), first one first.
    - deduplicate is idempotent.
    - Scanning an unchanged tree twice, or asynchronously, gives the same
      result.
    - After resolve, at most one record is active.
    - rewrite_search_path always ends with the new bin entry and never
      keeps an old JDK bin entry or an empty entry.
    - match_level is symmetric.
"""
from __future__ import annotations

import tempfile
from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from jdkswitch.discovery import (
    ActiveResolver,
    InstallationProbe,
    InstallationRecord,
    PathCatalog,
    Scanner,
    deduplicate,
)
from jdkswitch.discovery.versions import match_level
from jdkswitch.env.scope import Scope
from jdkswitch.env.search_path import is_jdk_bin_entry, rewrite_search_path
from tests.helpers import POSIX_PROFILE, FakeRunner, FakeStore, make_jdk


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

install_dirs = st.sampled_from(
    ["/opt/jdk-17", "/opt/jdk-11", "/usr/lib/jvm/java-8", "/opt/zulu21", "/srv/temurin"]
)
versions = st.sampled_from(["1.8.0_462", "11.0.15", "11.0.2", "17.0.2", "17", "21.0.1", "unknown"])

records = st.builds(
    lambda path, version: InstallationRecord(version=version, install_path=Path(path)),
    install_dirs,
    versions,
)
record_lists = st.lists(records, max_size=12)

path_entries = st.sampled_from([
    r"C:\Windows\system32",
    r"C:\Program Files\Java\jdk-17\bin",
    r"C:\Program Files\Java\jdk-17\lib",
    r"%JAVA_HOME%\bin",
    r"C:\tools\bin",
    r"D:\jdks\jdk1.8.0_202\bin",
    "",
    "   ",
])
new_bins = st.sampled_from([r"C:\Program Files\Java\jdk-21\bin", r"D:\jdks\jdk-11.0.2\bin"])


# ---------------------------------------------------------------------------
# Deduplication
# ---------------------------------------------------------------------------


class TestDeduplicate:
    """deduplicate() over arbitrary scan results."""

    @given(items=record_lists)
    def test_keys_are_unique(self, items: list[InstallationRecord]) -> None:
        keys = [r.dedup_key for r in deduplicate(items)]
        assert len(keys) == len(set(keys))

    @given(items=record_lists)
    def test_every_key_survives(self, items: list[InstallationRecord]) -> None:
        assert {r.dedup_key for r in deduplicate(items)} == {r.dedup_key for r in items}

    @given(items=record_lists)
    def test_first_occurrence_wins(self, items: list[InstallationRecord]) -> None:
        for kept in deduplicate(items):
            first = next(r for r in items if r.dedup_key == kept.dedup_key)
            assert kept is first

    @given(items=record_lists)
    def test_idempotent(self, items: list[InstallationRecord]) -> None:
        once = deduplicate(items)
        assert deduplicate(once) == once


# ---------------------------------------------------------------------------
# Active resolution
# ---------------------------------------------------------------------------


class TestResolveAtMostOneActive:
    """Whatever JAVA_HOME says, resolve marks zero or one record."""

    @given(items=record_lists, home=st.one_of(st.none(), install_dirs))
    def test_at_most_one_active(self, items: list[InstallationRecord], home: str | None) -> None:
        for record in items:
            record.is_active = True
        store = FakeStore({(Scope.USER, "JAVA_HOME"): home} if home else {})
        resolver = ActiveResolver(store, runner=FakeRunner(), profile=POSIX_PROFILE)

        active = resolver.resolve(items)

        flagged = [r for r in items if r.is_active]
        assert len(flagged) <= 1
        if active is None:
            assert flagged == []
        else:
            assert flagged == [active]

    @given(items=st.lists(records, min_size=1, max_size=8), data=st.data())
    def test_configured_home_is_found(self, items: list[InstallationRecord], data) -> None:
        target = data.draw(st.sampled_from(items))
        store = FakeStore({(Scope.USER, "JAVA_HOME"): str(target.install_path)})
        resolver = ActiveResolver(store, runner=FakeRunner(), profile=POSIX_PROFILE)

        active = resolver.resolve(items)

        assert active is not None
        assert active.install_path == target.install_path


# ---------------------------------------------------------------------------
# Search-path rewriting
# ---------------------------------------------------------------------------


class TestRewriteSearchPath:
    """Structural guarantees of rewrite_search_path()."""

    @given(entries=st.lists(path_entries, max_size=10), new_bin=new_bins)
    def test_new_bin_is_last(self, entries: list[str], new_bin: str) -> None:
        result = rewrite_search_path(";".join(entries), new_bin)
        assert result.split(";")[-1] == new_bin

    @given(entries=st.lists(path_entries, max_size=10), new_bin=new_bins)
    def test_no_stale_jdk_or_empty_entries(self, entries: list[str], new_bin: str) -> None:
        kept = rewrite_search_path(";".join(entries), new_bin).split(";")[:-1]
        assert all(e.strip() for e in kept)
        assert not any(is_jdk_bin_entry(e) for e in kept)

    @given(entries=st.lists(path_entries, max_size=10), new_bin=new_bins)
    def test_other_entries_keep_order(self, entries: list[str], new_bin: str) -> None:
        kept = rewrite_search_path(";".join(entries), new_bin).split(";")[:-1]
        expected = [e for e in entries if e.strip() and not is_jdk_bin_entry(e)]
        assert kept == expected

    @given(entries=st.lists(path_entries, max_size=10), first=new_bins, second=new_bins)
    def test_repeated_switch_keeps_one_jdk(self, entries: list[str], first: str, second: str) -> None:
        once = rewrite_search_path(";".join(entries), first)
        twice = rewrite_search_path(once, second)
        assert sum(1 for e in twice.split(";") if is_jdk_bin_entry(e)) == 1


# ---------------------------------------------------------------------------
# Version matching
# ---------------------------------------------------------------------------


class TestMatchLevel:

    @given(a=versions, b=versions)
    def test_symmetric(self, a: str, b: str) -> None:
        assert match_level(a, b) == match_level(b, a)

    @given(a=versions)
    def test_known_version_matches_itself_fully(self, a: str) -> None:
        if a != "unknown":
            assert match_level(a, a) == 3


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------

tree_entries = st.lists(
    st.tuples(
        st.sampled_from(["jdk-17", "jdk-11", "microsoft-jdk-21", "8u202", "hotspot-8", "java-se"]),
        st.sampled_from(["17.0.2", "11.0.15", "21.0.1", None]),
        st.booleans(),
    ),
    max_size=6,
    unique_by=lambda entry: entry[0],
)


class TestScanIsRepeatable:
    """scan() over an unchanged tree is stable, synchronously or not."""

    @settings(max_examples=25, deadline=None)
    @given(entries=tree_entries)
    def test_scan_idempotent_and_async_identical(self, entries) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name, version, with_compiler in entries:
                make_jdk(root, name, version, with_compiler=with_compiler)
            probe = InstallationProbe(runner=FakeRunner(), profile=POSIX_PROFILE)

            with Scanner(PathCatalog(custom_roots=[root]), probe=probe) as scanner:
                first = [(r.install_path, r.version) for r in scanner.scan()]
                second = [(r.install_path, r.version) for r in scanner.scan()]
                background = [(r.install_path, r.version) for r in scanner.scan_async().result()]

        assert first == second == background
        assert len(first) == sum(1 for _, _, with_compiler in entries if with_compiler)

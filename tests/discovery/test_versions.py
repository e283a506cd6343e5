"""Tests for version parsing, normalization and fuzzy matching."""

from __future__ import annotations

import pytest

from jdkswitch.discovery.versions import (
    main_version,
    match_level,
    matches_target,
    parse_release_file,
    parse_version_output,
    release_parts,
)


class TestParseReleaseFile:
    def test_quoted_values(self) -> None:
        text = 'JAVA_VERSION="17.0.2"\nIMPLEMENTOR="Eclipse Adoptium"\n'
        assert parse_release_file(text) == {
            "JAVA_VERSION": "17.0.2",
            "IMPLEMENTOR": "Eclipse Adoptium",
        }

    def test_unquoted_and_blank_lines(self) -> None:
        assert parse_release_file("\n# comment\nJAVA_VERSION=11.0.15\nnonsense\n") == {
            "JAVA_VERSION": "11.0.15",
        }

    def test_value_containing_equals(self) -> None:
        assert parse_release_file('SOURCE=".:git:abc=def"')["SOURCE"] == ".:git:abc=def"


class TestParseVersionOutput:
    @pytest.mark.parametrize(
        ("output", "expected"),
        [
            ('openjdk version "17.0.2" 2022-01-18', "17.0.2"),
            ('java version "1.8.0_462"', "1.8.0_462"),
            ('openjdk version "21" 2023-09-19', "21"),
            ('openjdk version "11.0.15+10-LTS"', "11.0.15+10-LTS"),
            ("openjdk version 17.0.16 2025-07-15", "17.0.16"),
            ("Java(TM) SE Runtime Environment (build 1.8.0_202-b08)", "1.8.0_202"),
            ("version 17.0", "17.0"),
        ],
    )
    def test_patterns(self, output: str, expected: str) -> None:
        assert parse_version_output(output) == expected

    def test_specific_pattern_beats_generic(self) -> None:
        output = 'openjdk version "17.0.2"\nsomething version "99.0.0"'
        assert parse_version_output(output) == "17.0.2"

    @pytest.mark.parametrize("output", [None, "", "Error: could not find java.dll"])
    def test_no_match(self, output) -> None:
        assert parse_version_output(output) is None


class TestMainVersion:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("17.0.5", "17.0.5"),
            ("11.0.15+10", "11.0.15"),
            ("1.8.0_462", "1.8.0_462"),
            ('"17.0.2', "17.0.2"),
            ("21-ea", "21"),
            ("17.0", "17.0"),
            ("", ""),
            (None, ""),
        ],
    )
    def test_main_version(self, raw, expected) -> None:
        assert main_version(raw) == expected


class TestMatchLevel:
    def test_full(self) -> None:
        assert match_level("17.0.2", "17.0.2+8") == 3

    def test_major_minor(self) -> None:
        assert match_level("17.0.2", "17.0.9") == 2

    def test_major(self) -> None:
        assert match_level("17.1.2", "17.0.9") == 1

    def test_none(self) -> None:
        assert match_level("11.0.15", "17.0.2") == 0

    def test_missing_side(self) -> None:
        assert match_level(None, "17") == 0
        assert match_level("17", "") == 0

    def test_unknown_sentinel_never_matches(self) -> None:
        assert match_level("unknown", "17.0.2") == 0


class TestReleaseParts:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1.8.0_462", ["8", "0", "462"]),
            ("17.0.2+8", ["17", "0", "2"]),
            ("21", ["21"]),
            ("1", ["1"]),
            (None, []),
        ],
    )
    def test_release_parts(self, raw, expected) -> None:
        assert release_parts(raw) == expected


class TestMatchesTarget:
    def test_legacy_minor_must_agree(self) -> None:
        assert matches_target("1.8.0_462", "1.7") is False
        assert matches_target("1.8.0_462", "1.8") is True

    def test_feature_release_selects_legacy(self) -> None:
        assert matches_target("1.8.0_462", "8") is True
        assert matches_target("1.8.0_462", "7") is False

    def test_major_prefix(self) -> None:
        assert matches_target("17.0.2", "17") is True
        assert matches_target("17.0.2", "17.0") is True
        assert matches_target("17.0.2", "1") is False

    def test_more_specific_target_must_match_exactly(self) -> None:
        assert matches_target("17.0.2", "17.0.3") is False
        assert matches_target("17", "17.0.2") is False

    def test_unknown_version_never_selected(self) -> None:
        assert matches_target("unknown", "17") is False
        assert matches_target("17.0.2", "") is False

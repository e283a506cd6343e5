"""Shared fixtures for jdkswitch tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from jdkswitch.discovery import InstallationProbe, PathCatalog, Scanner
from tests.helpers import POSIX_PROFILE, FakeRunner, FakeStore


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def probe(runner: FakeRunner) -> InstallationProbe:
    return InstallationProbe(runner=runner, profile=POSIX_PROFILE)


@pytest.fixture
def jdk_root(tmp_path: Path) -> Path:
    """An empty directory to register as a scan root."""
    root = tmp_path / "jdks"
    root.mkdir()
    return root


@pytest.fixture
def scanner(jdk_root: Path, probe: InstallationProbe) -> Scanner:
    catalog = PathCatalog(custom_roots=[jdk_root])
    return Scanner(catalog, probe=probe)

"""Shared test doubles and fixture builders.

``FakeRunner`` stands in for ``SubprocessRunner`` with canned results;
``FakeStore`` is an in-memory ``ScopedEnvironmentStore``; ``make_jdk``
lays out a minimal JDK directory tree.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from jdkswitch.commands import CommandResult, CommandRunner
from jdkswitch.discovery.platform_profile import PlatformProfile
from jdkswitch.env.scope import Scope
from jdkswitch.env.store import ScopedEnvironmentStore

POSIX_PROFILE = PlatformProfile(
    name="linux",
    interpreter="java",
    compiler="javac",
    default_roots=(),
    which_command=("which", "-a"),
    shim_markers=("/shims/",),
)


class FakeRunner(CommandRunner):
    """Returns canned results keyed by the full argv tuple.

    Unknown commands raise ``FileNotFoundError``, like a missing binary.
    """

    def __init__(
        self,
        responses: dict[tuple[str, ...], CommandResult | Exception] | None = None,
    ) -> None:
        self.responses: dict[tuple[str, ...], CommandResult | Exception] = dict(responses or {})
        self.calls: list[tuple[str, ...]] = []

    def add(self, args: Sequence[str], result: CommandResult | Exception) -> None:
        self.responses[tuple(str(a) for a in args)] = result

    def run(self, args: Sequence[str]) -> CommandResult:
        key = tuple(str(a) for a in args)
        self.calls.append(key)
        response = self.responses.get(key)
        if response is None:
            raise FileNotFoundError(key[0])
        if isinstance(response, Exception):
            raise response
        return response


class FakeStore(ScopedEnvironmentStore):
    """In-memory store; ``fail_writes`` maps (scope, name) to an error."""

    def __init__(self, values: dict[tuple[Scope, str], str] | None = None) -> None:
        self.values: dict[tuple[Scope, str], str] = dict(values or {})
        self.fail_writes: dict[tuple[Scope, str], Exception] = {}
        self.writes: list[tuple[Scope, str, str]] = []

    def read(self, name: str, scope: Scope) -> str | None:
        return self.values.get((scope, name))

    def write(self, name: str, value: str, scope: Scope) -> None:
        error = self.fail_writes.get((scope, name))
        if error is not None:
            raise error
        self.writes.append((scope, name, value))
        self.values[(scope, name)] = value


def make_jdk(
    parent: Path,
    name: str,
    version: str | None = None,
    *,
    with_compiler: bool = True,
    release_text: str | None = None,
) -> Path:
    """Create ``parent/name`` with ``bin/java`` (+ ``bin/javac``) and a release file.

    Args:
        version: Written as ``JAVA_VERSION="<version>"``; None writes no release file.
        release_text: Raw release file content, overriding ``version``.
    """
    home = parent / name
    bin_dir = home / "bin"
    bin_dir.mkdir(parents=True, exist_ok=True)
    (bin_dir / "java").write_text("")
    if with_compiler:
        (bin_dir / "javac").write_text("")
    if release_text is not None:
        (home / "release").write_text(release_text)
    elif version is not None:
        (home / "release").write_text(
            f'IMPLEMENTOR="Eclipse Adoptium"\nJAVA_VERSION="{version}"\nOS_ARCH="x86_64"\n'
        )
    return home


def version_output(version: str, vendor: str = "openjdk") -> CommandResult:
    """What ``java -version`` prints (on stderr) for ``version``."""
    return CommandResult(
        returncode=0,
        stderr=(
            f'{vendor} version "{version}" 2022-01-18\n'
            f"OpenJDK Runtime Environment (build {version}+8)\n"
            f"OpenJDK 64-Bit Server VM (build {version}+8, mixed mode)\n"
        ),
    )

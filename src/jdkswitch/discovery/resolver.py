"""Determines which discovered installation is currently active.

Three independent signals can disagree about "the active JDK", so they
are consulted in a fixed order and the first one that identifies a
candidate wins:

    Tier 1  JAVA_HOME as persisted in the USER scope, else SYSTEM scope,
            matched exactly against candidate paths.
    Tier 2  The ``java`` binary the OS resolves on the search path
            (shim locations excluded), two levels up, matched exactly.
    Tier 3  That binary's ``-version`` output, fuzzy-matched against
            candidate versions (full, then major.minor, then major). The
            earliest candidate in scan order that matches at any level wins.

A failure inside a tier means "this tier found nothing". Finding nothing
in all three is a normal outcome: no record is marked active.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from jdkswitch.commands import CommandRunner, SubprocessRunner
from jdkswitch.discovery.models import InstallationRecord, normalize_path
from jdkswitch.discovery.platform_profile import PlatformProfile, current_profile
from jdkswitch.discovery.versions import match_level, parse_version_output
from jdkswitch.env.scope import READ_ORDER
from jdkswitch.env.store import HOME_VARIABLE, ScopedEnvironmentStore

logger = logging.getLogger(__name__)


def _same_path(a: Path, b: Path) -> bool:
    return os.path.normcase(str(a)) == os.path.normcase(str(b))


class ActiveResolver:
    """Marks at most one ``InstallationRecord`` as active."""

    def __init__(
        self,
        store: ScopedEnvironmentStore,
        runner: CommandRunner | None = None,
        profile: PlatformProfile | None = None,
    ) -> None:
        self._store = store
        self._runner = runner if runner is not None else SubprocessRunner()
        self._profile = profile if profile is not None else current_profile()

    def resolve(self, records: list[InstallationRecord]) -> InstallationRecord | None:
        """Reset every flag, then mark the active record in place.

        Returns:
            The record marked active, or None when no tier matched.
        """
        for record in records:
            record.is_active = False
        if not records:
            return None

        tiers = (
            ("configured home", self._match_configured_home),
            ("resolved binary", self._match_resolved_binary),
            ("version", self._match_version),
        )
        for label, tier in tiers:
            try:
                match = tier(records)
            except Exception:
                logger.warning("Active detection by %s failed", label, exc_info=True)
                continue
            if match is not None:
                match.is_active = True
                logger.info("Active installation (by %s): %s", label, match.install_path)
                return match
            logger.debug("Active detection by %s found nothing", label)
        logger.info("No active installation among %d candidates", len(records))
        return None

    # -- Tier 1 ----------------------------------------------------------

    def configured_home(self) -> str | None:
        """JAVA_HOME from the first scope that has a non-blank value."""
        for scope in READ_ORDER:
            value = self._store.read(HOME_VARIABLE, scope)
            if value and value.strip():
                logger.debug("%s from %s scope: %s", HOME_VARIABLE, scope, value)
                return value.strip()
        return None

    def _match_configured_home(
        self, records: list[InstallationRecord],
    ) -> InstallationRecord | None:
        home = self.configured_home()
        if home is None:
            return None
        return self._match_path(records, normalize_path(home))

    # -- Tier 2 ----------------------------------------------------------

    def resolved_binary(self) -> Path | None:
        """First interpreter on the OS search path, ignoring shims."""
        if not self._profile.which_command:
            return None
        query = Path(self._profile.interpreter).stem
        try:
            result = self._runner.run([*self._profile.which_command, query])
        except OSError:
            logger.debug("Executable lookup for %s could not start", query)
            return None
        if not result.ok:
            return None
        interpreter = self._profile.interpreter.casefold()
        for line in result.stdout.splitlines():
            candidate = line.strip()
            if not candidate:
                continue
            if any(marker in candidate for marker in self._profile.shim_markers):
                logger.debug("Ignoring shim %s", candidate)
                continue
            if Path(candidate).name.casefold() != interpreter:
                continue
            return normalize_path(candidate)
        return None

    def _match_resolved_binary(
        self, records: list[InstallationRecord],
    ) -> InstallationRecord | None:
        binary = self.resolved_binary()
        if binary is None:
            return None
        match = self._match_path(records, binary.parent.parent)
        if match is None:
            # Follow launcher symlinks such as /usr/bin/java -> alternatives.
            real = Path(os.path.realpath(binary))
            if real != binary:
                match = self._match_path(records, real.parent.parent)
        return match

    # -- Tier 3 ----------------------------------------------------------

    def running_version(self) -> str | None:
        """Version reported by the resolved interpreter (or bare ``java``)."""
        binary = self.resolved_binary()
        command = str(binary) if binary is not None else Path(self._profile.interpreter).stem
        result = self._runner.run([command, "-version"])
        return parse_version_output(result.output)

    def _match_version(
        self, records: list[InstallationRecord],
    ) -> InstallationRecord | None:
        actual = self.running_version()
        if actual is None:
            return None
        for record in records:
            if match_level(record.version, actual) > 0:
                return record
        return None

    @staticmethod
    def _match_path(
        records: list[InstallationRecord], target: Path,
    ) -> InstallationRecord | None:
        for record in records:
            if _same_path(normalize_path(record.install_path), target):
                return record
        return None

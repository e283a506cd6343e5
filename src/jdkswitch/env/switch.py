"""Switching the active JDK by rewriting scoped environment variables.

Write protocol, for each requested scope in order:

    1. JAVA_HOME := installation path
    2. PATH      := current PATH minus old JDK ``bin`` entries, plus the
                    new installation's ``bin``

The first failing write aborts the switch and its error propagates.
Scopes written before the failure are left as written: a partial
multi-scope change is possible and is not rolled back.

After every scope succeeds, a best-effort broadcast is sent and each
scope's JAVA_HOME is read back. Neither step can change the outcome;
they only feed the returned ``SwitchReport`` and the log.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Sequence

from jdkswitch.discovery.models import InstallationRecord
from jdkswitch.env.broadcast import EnvironmentBroadcaster
from jdkswitch.env.scope import Scope
from jdkswitch.env.search_path import rewrite_search_path
from jdkswitch.env.store import HOME_VARIABLE, SEARCH_PATH_VARIABLE, ScopedEnvironmentStore

logger = logging.getLogger(__name__)


@dataclass
class SwitchReport:
    """Diagnostics from a successful switch.

    Attributes:
        record: The installation switched to.
        scopes: Scopes written, in order.
        broadcast_delivered: Whether the change notification went out.
        mismatches: Scope -> value read back, for scopes whose JAVA_HOME did
            not read back as written (None when it could not be read).
    """

    record: InstallationRecord
    scopes: list[Scope]
    broadcast_delivered: bool = False
    mismatches: dict[Scope, str | None] = field(default_factory=dict)

    @property
    def verified(self) -> bool:
        return not self.mismatches


class SwitchCoordinator:
    """Points JAVA_HOME and PATH at a chosen installation."""

    def __init__(
        self,
        store: ScopedEnvironmentStore,
        broadcaster: EnvironmentBroadcaster | None = None,
    ) -> None:
        self._store = store
        self._broadcaster = broadcaster if broadcaster is not None else EnvironmentBroadcaster()
        self._executor: ThreadPoolExecutor | None = None

    def switch_to(
        self, record: InstallationRecord, scopes: Sequence[Scope],
    ) -> SwitchReport:
        """Write both variables for every scope, then notify and verify.

        Raises:
            ValueError: No scopes were given.
            PrivilegeError: A scope refused a write for lack of rights.
            StoreError: A write failed for any other reason.
        """
        if not scopes:
            raise ValueError("At least one scope is required")
        home = str(record.install_path)
        logger.info(
            "Switching to %s (%s) in scopes: %s",
            record.version, home, ", ".join(s.label for s in scopes),
        )

        for scope in scopes:
            self._write_scope(record, scope)

        delivered = self._broadcaster.broadcast()
        report = SwitchReport(record=record, scopes=list(scopes), broadcast_delivered=delivered)
        for scope in scopes:
            value = self._store.read(HOME_VARIABLE, scope)
            if value is None or os.path.normcase(value) != os.path.normcase(home):
                logger.warning(
                    "%s in %s scope reads back as %r, expected %r",
                    HOME_VARIABLE, scope, value, home,
                )
                report.mismatches[scope] = value
        return report

    def _write_scope(self, record: InstallationRecord, scope: Scope) -> None:
        self._store.write(HOME_VARIABLE, str(record.install_path), scope)
        current = self._store.read(SEARCH_PATH_VARIABLE, scope)
        new_path = rewrite_search_path(
            current, str(record.bin_dir), separator=self._store.list_separator,
        )
        self._store.write(SEARCH_PATH_VARIABLE, new_path, scope)
        logger.debug("Wrote %s and %s in %s scope", HOME_VARIABLE, SEARCH_PATH_VARIABLE, scope)

    def switch_to_async(
        self, record: InstallationRecord, scopes: Sequence[Scope],
    ) -> Future[SwitchReport]:
        """Run ``switch_to`` on the coordinator's background worker."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="jdkswitch-switch",
            )
        return self._executor.submit(self.switch_to, record, list(scopes))

    def has_admin_rights(self) -> bool:
        """Guess whether SYSTEM scope is writable by reading its PATH."""
        return self._store.read(SEARCH_PATH_VARIABLE, Scope.SYSTEM) is not None

    def shutdown(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> SwitchCoordinator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

"""Scoped environment-variable storage.

``ScopedEnvironmentStore`` is the read/write seam used by the resolver
(Tier 1) and the switch coordinator. ``RegistryEnvironmentStore`` backs it
with ``reg.exe`` through a ``CommandRunner``.

Reads never raise: a missing, unreadable or unparsable entry is ``None``.
Writes raise ``PrivilegeError`` when the mutation output carries an
access-denied signature and ``StoreError`` for any other failure. A write
is successful when the mutation reports exit status 0; no confirmation
read happens here.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from jdkswitch.commands import CommandResult, CommandRunner, SubprocessRunner
from jdkswitch.env.scope import Scope
from jdkswitch.exceptions import PrivilegeError, StoreError

logger = logging.getLogger(__name__)

HOME_VARIABLE = "JAVA_HOME"
SEARCH_PATH_VARIABLE = "PATH"

# reg.exe value type used for both variables; lets PATH hold %JAVA_HOME%.
EXPANDABLE_STRING_TYPE = "REG_EXPAND_SZ"
_TYPE_MARKER = "REG_"

# Fragments of reg.exe output that mean the write was refused for lack of rights.
ACCESS_DENIED_SIGNATURES: tuple[str, ...] = ("access is denied", "拒绝访问")


def is_access_denied(text: str) -> bool:
    lowered = text.lower()
    return any(signature in lowered for signature in ACCESS_DENIED_SIGNATURES)


def parse_query_output(output: str, name: str) -> str | None:
    """Pull ``name``'s value out of ``reg query`` output.

    The target line looks like ``    JAVA_HOME    REG_SZ    C:\\jdk``; the value
    is the text after the first whitespace following the type marker.
    """
    wanted = name.casefold()
    for line in output.splitlines():
        stripped = line.strip()
        if not stripped or stripped.split(None, 1)[0].casefold() != wanted:
            continue
        marker = stripped.find(_TYPE_MARKER, len(name))
        if marker == -1:
            continue
        rest = stripped[marker:]
        parts = rest.split(None, 1)
        return parts[1].strip() if len(parts) == 2 else ""
    return None


class ScopedEnvironmentStore(ABC):
    """Reads and writes named variables in a persistence scope."""

    # Separator between entries of a list-valued variable such as PATH.
    list_separator: str = ";"

    @abstractmethod
    def read(self, name: str, scope: Scope) -> str | None:
        """Current value of ``name`` in ``scope``, or None if unavailable."""

    @abstractmethod
    def write(self, name: str, value: str, scope: Scope) -> None:
        """Persist ``value`` for ``name`` in ``scope``.

        Raises:
            PrivilegeError: The scope refused the write for lack of rights.
            StoreError: Any other failure.
        """


class RegistryEnvironmentStore(ScopedEnvironmentStore):
    """Windows registry-backed store driven through ``reg.exe``."""

    def __init__(self, runner: CommandRunner | None = None) -> None:
        self._runner = runner if runner is not None else SubprocessRunner()

    def read(self, name: str, scope: Scope) -> str | None:
        try:
            result = self._runner.run(["reg", "query", scope.location, "/v", name])
        except OSError:
            logger.warning("Failed to query %s in %s scope", name, scope, exc_info=True)
            return None
        if not result.ok:
            logger.debug("%s not set in %s scope (exit %d)", name, scope, result.returncode)
            return None
        return parse_query_output(result.stdout, name)

    def write(self, name: str, value: str, scope: Scope) -> None:
        args = [
            "reg", "add", scope.location,
            "/v", name,
            "/t", EXPANDABLE_STRING_TYPE,
            "/d", value,
            "/f",
        ]
        try:
            result = self._runner.run(args)
        except OSError as exc:
            raise StoreError(
                f"Could not start reg.exe to set {name} in {scope} scope: {exc}",
                scope=scope,
            ) from exc
        if result.ok:
            logger.debug("Set %s in %s scope", name, scope)
            return
        self._raise_for_failure(name, scope, result)

    def _raise_for_failure(self, name: str, scope: Scope, result: CommandResult) -> None:
        diagnostic = result.output.strip()
        if is_access_denied(diagnostic):
            raise PrivilegeError(
                f"Insufficient privileges to modify {scope} environment variable {name}",
                scope=scope,
                diagnostic=diagnostic,
            )
        raise StoreError(
            f"Failed to set {name} in {scope} scope (exit {result.returncode}): {diagnostic}",
            scope=scope,
            diagnostic=diagnostic,
        )

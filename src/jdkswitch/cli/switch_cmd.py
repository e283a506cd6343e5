"""``jdkswitch switch TARGET`` - Make a JDK the active one.

TARGET is either a JDK directory or a version (``17``, ``11.0.15``, ``8``)
matched against scan results. Every component given must agree; the
legacy ``1.`` prefix is ignored, so ``8`` and ``1.8`` both select
``1.8.0_462`` while ``1.7`` does not.

Exit Codes:
    0 - All requested scopes were written.
    1 - TARGET not found, or a write failed.
    3 - A write was refused for lack of privileges.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from jdkswitch.cli.context import CliContext
from jdkswitch.cli.output import console, print_error, print_switch_report
from jdkswitch.discovery import InstallationRecord
from jdkswitch.discovery.versions import matches_target
from jdkswitch.env import Scope
from jdkswitch.exceptions import PrivilegeError, StoreError

EXIT_PRIVILEGE = 3


def _find_target(obj: CliContext, target: str) -> InstallationRecord | None:
    """Resolve TARGET to a record: a JDK directory, an exact version, else
    the first installation whose version agrees with every component of
    TARGET (``8`` also selects ``1.8.0_x``).
    """
    candidate = Path(target).expanduser()
    if obj.scanner.probe.validate(candidate):
        return obj.scanner.probe.probe(candidate)

    records = obj.scanner.scan()
    for record in records:
        if record.version == target:
            return record
    return next((r for r in records if matches_target(r.version, target)), None)


@click.command("switch")
@click.argument("target")
@click.option(
    "--scope", "scope_names",
    type=click.Choice(["user", "system"], case_sensitive=False),
    multiple=True,
    help="Scope(s) to write, in order. Defaults to the last scope used.",
)
@click.pass_obj
def switch_command(obj: CliContext, target: str, scope_names: tuple[str, ...]) -> None:
    """Point JAVA_HOME and PATH at TARGET."""
    record = _find_target(obj, target)
    if record is None:
        print_error("Not found", f"No JDK matches {target!r}. Run 'jdkswitch scan' to list them.")
        sys.exit(1)

    scopes = [Scope.parse(name) for name in scope_names] or [obj.config.last_scope]
    if Scope.SYSTEM in scopes and not obj.coordinator.has_admin_rights():
        console.print(
            "[yellow]System scope usually requires an elevated prompt; "
            "the switch may be refused.[/yellow]"
        )

    try:
        report = obj.coordinator.switch_to(record, scopes)
    except PrivilegeError as exc:
        print_error(
            "Permission denied",
            f"{exc}\nRe-run from an elevated prompt, or use --scope user.",
        )
        sys.exit(EXIT_PRIVILEGE)
    except StoreError as exc:
        print_error("Switch failed", str(exc))
        sys.exit(1)

    print_switch_report(report)
    obj.config.last_scope = Scope.SYSTEM if Scope.SYSTEM in scopes else Scope.USER
    obj.config.save()

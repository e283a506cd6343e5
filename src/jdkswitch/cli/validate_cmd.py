"""``jdkswitch validate PATH`` - Check whether a directory is a JDK.

Exit Codes:
    0 - PATH contains both the launcher and the compiler under bin/.
    1 - It does not.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from jdkswitch.cli.context import CliContext
from jdkswitch.cli.output import console


@click.command("validate")
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def validate_command(obj: CliContext, path: Path) -> None:
    """Report whether PATH is a valid JDK installation."""
    probe = obj.scanner.probe
    if not probe.validate(path):
        console.print(f"[red]Not a JDK:[/red] {path}")
        sys.exit(1)
    record = probe.probe(path)
    console.print(f"[green]Valid JDK:[/green] {path}")
    if record is not None:
        console.print(f"  Version: {record.version}")
        console.print(f"  Arch:    {int(record.bitness)}-bit")
    sys.exit(0)

"""``jdkswitch roots`` - Manage the directories scanned for JDKs.

Custom roots are persisted in the preference file; default roots are
fixed per operating system.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from jdkswitch.cli.context import CliContext
from jdkswitch.cli.output import console, print_roots


@click.group("roots")
def roots_group() -> None:
    """List, add or remove scan roots."""


@roots_group.command("list")
@click.pass_obj
def roots_list(obj: CliContext) -> None:
    """Show default and custom scan roots."""
    catalog = obj.scanner.catalog
    print_roots(catalog.default_roots(), catalog.custom_roots())


@roots_group.command("add")
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def roots_add(obj: CliContext, path: Path) -> None:
    """Register PATH as a custom scan root."""
    if not obj.scanner.register_root(path):
        console.print(f"[yellow]Not added[/yellow] (missing, not a directory, or already registered): {path}")
        sys.exit(1)
    obj.persist_roots()
    console.print(f"[green]Added[/green] {path}")


@roots_group.command("remove")
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def roots_remove(obj: CliContext, path: Path) -> None:
    """Unregister the custom scan root PATH."""
    if not obj.scanner.unregister_root(path):
        console.print(f"[yellow]Not a registered custom root:[/yellow] {path}")
        sys.exit(1)
    obj.persist_roots()
    console.print(f"[green]Removed[/green] {path}")

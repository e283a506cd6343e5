"""``jdkswitch active`` - Show the JDK the environment points at.

Exit Codes:
    0 - An active installation was identified.
    2 - None of the discovered installations is active.
"""

from __future__ import annotations

import json
import sys

import click

from jdkswitch.cli.context import CliContext
from jdkswitch.cli.output import console, record_to_dict


@click.command("active")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.pass_obj
def active_command(obj: CliContext, output_format: str) -> None:
    """Show the currently active JDK."""
    records = obj.scanner.scan_and_resolve(obj.resolver)
    active = next((r for r in records if r.is_active), None)

    if output_format == "json":
        click.echo(json.dumps(record_to_dict(active) if active else None, indent=2))
    elif active is None:
        console.print("[yellow]No active JDK detected.[/yellow]")
    else:
        console.print(f"[bold green]{active.version}[/bold green]  {active.install_path}")

    sys.exit(0 if active else 2)

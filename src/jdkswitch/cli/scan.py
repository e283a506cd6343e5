"""``jdkswitch scan`` - Discover installed JDKs.

Scans every default and custom root, then runs active detection unless
``--no-resolve`` is given.

Exit Codes:
    0 - One or more installations found.
    1 - The scan itself failed.
    2 - No installations found.
"""

from __future__ import annotations

import json
import sys

import click

from jdkswitch.cli.context import CliContext
from jdkswitch.cli.output import console, print_installations, record_to_dict


@click.command("scan")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.option(
    "--no-resolve",
    is_flag=True,
    default=False,
    help="Skip detection of the active installation.",
)
@click.pass_obj
def scan_command(obj: CliContext, output_format: str, no_resolve: bool) -> None:
    """Discover installed JDKs across all scan roots."""
    try:
        if output_format == "text":
            with console.status("Scanning for JDK installations..."):
                records = obj.scanner.scan_async().result()
        else:
            records = obj.scanner.scan_async().result()
    except Exception:
        # Already shown by the scanner's error reporter.
        sys.exit(1)
    finally:
        obj.scanner.shutdown()

    if not no_resolve:
        obj.resolver.resolve(records)

    if output_format == "json":
        click.echo(json.dumps([record_to_dict(r) for r in records], indent=2))
    else:
        print_installations(records)

    sys.exit(0 if records else 2)

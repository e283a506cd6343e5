"""Rich output formatting helpers for the jdkswitch CLI.

Active installations are highlighted in bold green; unknown versions are
dimmed. Errors go to a separate stderr console.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from jdkswitch.discovery import UNKNOWN_VERSION, InstallationRecord
from jdkswitch.env import SwitchReport

console = Console()
error_console = Console(stderr=True)


def record_to_dict(record: InstallationRecord) -> dict[str, Any]:
    return {
        "version": record.version,
        "path": str(record.install_path),
        "bitness": int(record.bitness),
        "active": record.is_active,
    }


def print_installations(records: list[InstallationRecord]) -> None:
    """Print a table of discovered installations.

    Args:
        records: Scan results, optionally annotated by the resolver.
    """
    if not records:
        console.print("[dim]No JDK installations found.[/dim]")
        return

    table = Table(title="Installed JDKs", show_header=True, header_style="bold")
    table.add_column("", justify="center", width=1)
    table.add_column("Version", style="bold")
    table.add_column("Arch", justify="right")
    table.add_column("Path", overflow="fold")

    for record in records:
        marker = Text("*", style="bold green") if record.is_active else Text("")
        version_style = "dim" if record.version == UNKNOWN_VERSION else ""
        if record.is_active:
            version_style = "bold green"
        table.add_row(
            marker,
            Text(record.version, style=version_style),
            f"{int(record.bitness)}-bit",
            str(record.install_path),
        )

    console.print(table)
    active = sum(1 for r in records if r.is_active)
    summary = f"[bold]{len(records)}[/bold] installation(s) found"
    if active == 0:
        summary += " | [yellow]no active installation detected[/yellow]"
    console.print(summary)


def print_roots(defaults: list[Path], custom: list[Path]) -> None:
    table = Table(title="Scan Roots", show_header=True, header_style="bold")
    table.add_column("Kind", style="dim")
    table.add_column("Path", overflow="fold")
    table.add_column("Exists", justify="center")
    for kind, roots in (("default", defaults), ("custom", custom)):
        for root in roots:
            exists = Text("yes", style="green") if root.is_dir() else Text("no", style="dim")
            table.add_row(kind, str(root), exists)
    console.print(table)


def print_switch_report(report: SwitchReport) -> None:
    scopes = ", ".join(s.label for s in report.scopes)
    header = Text.assemble(
        ("Version: ", "bold"), (report.record.version, ""),
        ("  Scopes: ", "bold"), (scopes, ""),
    )
    console.print(Panel(header, title="Switched JDK"))
    console.print(f"  JAVA_HOME: {report.record.install_path}")
    if not report.broadcast_delivered:
        console.print(
            "  [yellow]Could not notify running programs; "
            "open a new terminal to pick up the change.[/yellow]"
        )
    for scope, value in report.mismatches.items():
        console.print(f"  [yellow]{scope} JAVA_HOME reads back as {value!r}[/yellow]")


def print_error(title: str, message: str) -> None:
    error_console.print(Panel(Text(message), title=title, border_style="red"))

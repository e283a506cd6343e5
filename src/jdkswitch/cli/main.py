"""jdkswitch CLI: find installed JDKs and switch between them.

Entry point for the ``jdkswitch`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    scan      Discover installed JDKs and mark the active one.
    active    Show the active JDK.
    switch    Point JAVA_HOME and PATH at a JDK, per scope.
    roots     List, add or remove scan roots.
    validate  Check whether a directory is a JDK.

Usage::

    jdkswitch scan
    jdkswitch scan --format json
    jdkswitch switch 17 --scope user
    jdkswitch switch "C:\\Program Files\\Java\\jdk-21" --scope user --scope system
    jdkswitch roots add D:\\tools\\jdks
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from jdkswitch import __version__
from jdkswitch.cli.active_cmd import active_command
from jdkswitch.cli.context import CliContext
from jdkswitch.cli.output import print_error
from jdkswitch.cli.roots_cmd import roots_group
from jdkswitch.cli.scan import scan_command
from jdkswitch.cli.switch_cmd import switch_command
from jdkswitch.cli.validate_cmd import validate_command
from jdkswitch.config import AppConfig
from jdkswitch.exceptions import ConfigError


def _report_fatal(message: str, exc: BaseException) -> None:
    print_error("Fatal error", f"{message}: {exc}")


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Preference file (default: ~/.config/jdkswitch/config.yaml).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """jdkswitch: discover installed JDKs and switch the active one.

    Scans well-known and user-registered directories, works out which JDK
    the environment currently points at, and rewrites JAVA_HOME and PATH
    in the user and/or system scope.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.obj is not None:
        return
    try:
        config = AppConfig.load(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj = CliContext.create(config, error_reporter=_report_fatal)


cli.add_command(scan_command)
cli.add_command(active_command)
cli.add_command(switch_command)
cli.add_command(roots_group)
cli.add_command(validate_command)

"""Wiring of core services for CLI commands.

The Click group stores a ``CliContext`` on ``ctx.obj``. Tests construct
one directly with fake runners and stores and pass it via
``CliRunner.invoke(..., obj=...)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from jdkswitch.commands import CommandRunner, SubprocessRunner
from jdkswitch.config import AppConfig
from jdkswitch.discovery import (
    ActiveResolver,
    InstallationProbe,
    PathCatalog,
    PlatformProfile,
    Scanner,
    current_profile,
)
from jdkswitch.env import (
    EnvironmentBroadcaster,
    RegistryEnvironmentStore,
    ScopedEnvironmentStore,
    SwitchCoordinator,
)
from jdkswitch.exceptions import ErrorReporter


@dataclass
class CliContext:
    """Everything a command needs, built once per invocation."""

    config: AppConfig
    scanner: Scanner
    resolver: ActiveResolver
    coordinator: SwitchCoordinator

    @classmethod
    def create(
        cls,
        config: AppConfig,
        *,
        runner: CommandRunner | None = None,
        store: ScopedEnvironmentStore | None = None,
        profile: PlatformProfile | None = None,
        error_reporter: ErrorReporter | None = None,
    ) -> CliContext:
        runner = runner if runner is not None else SubprocessRunner()
        profile = profile if profile is not None else current_profile()
        store = store if store is not None else RegistryEnvironmentStore(runner)
        catalog = PathCatalog(
            default_roots=profile.default_roots,
            custom_roots=config.custom_roots,
        )
        probe = InstallationProbe(runner=runner, profile=profile)
        return cls(
            config=config,
            scanner=Scanner(catalog, probe=probe, error_reporter=error_reporter),
            resolver=ActiveResolver(store, runner=runner, profile=profile),
            coordinator=SwitchCoordinator(store, EnvironmentBroadcaster(runner)),
        )

    def persist_roots(self) -> None:
        """Write the catalog's custom roots back to the config file."""
        self.config.custom_roots = [Path(p) for p in self.scanner.catalog.custom_roots()]
        self.config.save()

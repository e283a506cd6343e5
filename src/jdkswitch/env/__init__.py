"""Scoped environment storage and the JDK switch protocol."""

from __future__ import annotations

from jdkswitch.env.broadcast import EnvironmentBroadcaster
from jdkswitch.env.scope import Scope
from jdkswitch.env.store import (
    HOME_VARIABLE,
    SEARCH_PATH_VARIABLE,
    RegistryEnvironmentStore,
    ScopedEnvironmentStore,
)
from jdkswitch.env.switch import SwitchCoordinator, SwitchReport

__all__ = [
    "EnvironmentBroadcaster",
    "HOME_VARIABLE",
    "RegistryEnvironmentStore",
    "SEARCH_PATH_VARIABLE",
    "Scope",
    "ScopedEnvironmentStore",
    "SwitchCoordinator",
    "SwitchReport",
]

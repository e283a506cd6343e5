"""Persistence scopes for environment variables."""

from __future__ import annotations

import enum


class Scope(enum.Enum):
    """Where a variable is persisted.

    Each member carries a human label, the registry key backing it, and
    whether writing it requires elevation.
    """

    USER = ("User", r"HKEY_CURRENT_USER\Environment", False)
    SYSTEM = (
        "System",
        r"HKEY_LOCAL_MACHINE\SYSTEM\CurrentControlSet\Control\Session Manager\Environment",
        True,
    )

    def __init__(self, label: str, location: str, requires_elevation: bool) -> None:
        self.label = label
        self.location = location
        self.requires_elevation = requires_elevation

    def __str__(self) -> str:
        return self.label

    @classmethod
    def parse(cls, name: str) -> Scope:
        """Look a scope up by member name or label, case-insensitively.

        Raises:
            ValueError: ``name`` matches no scope.
        """
        wanted = name.strip().casefold()
        for scope in cls:
            if wanted in (scope.name.casefold(), scope.label.casefold()):
                return scope
        raise ValueError(f"Unknown scope: {name!r}")


# Read order for "what is configured": user settings shadow machine ones.
READ_ORDER: tuple[Scope, ...] = (Scope.USER, Scope.SYSTEM)

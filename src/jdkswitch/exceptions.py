"""jdkswitch exception hierarchy.

All public exceptions inherit from JdkSwitchError, giving callers a single
base class to catch when they want to handle any jdkswitch-specific failure
without swallowing unrelated errors.

Only write-side failures are raised. Read-side and probe-side failures are
absorbed where they happen and turned into "no data" values (``None``, the
unknown-version sentinel, a 32-bit classification).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from jdkswitch.env.scope import Scope

# Callback for conditions the core cannot recover from (e.g. a background
# worker crashing). Hosts implement it to surface the problem to the user.
ErrorReporter = Callable[[str, BaseException], None]


class JdkSwitchError(Exception):
    """Base exception for all jdkswitch errors."""


class StoreError(JdkSwitchError):
    """Raised when writing a variable to a scoped environment store fails.

    Attributes:
        scope: The scope whose backing store rejected the write.
        diagnostic: Text captured from the failing mutation, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        scope: Scope | None = None,
        diagnostic: str = "",
    ) -> None:
        super().__init__(message)
        self.scope = scope
        self.diagnostic = diagnostic


class PrivilegeError(StoreError):
    """Raised when a write was refused with an access-denied signature.

    Distinguished from the generic ``StoreError`` so a caller can offer
    remediation (run elevated, or restrict the switch to the USER scope)
    instead of a plain retry.
    """


class ConfigError(JdkSwitchError):
    """Raised when the preference file exists but cannot be understood."""

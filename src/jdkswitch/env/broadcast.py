"""Best-effort "environment changed" notification.

On Windows, running processes (Explorer in particular) only pick up
registry edits to the environment after a ``WM_SETTINGCHANGE`` broadcast
with ``lParam="Environment"``. The broadcast is sent via PowerShell
through the ``CommandRunner`` so it stays injectable. Failure is logged
and reported as ``False``; it never raises.
"""

from __future__ import annotations

import logging

from jdkswitch.commands import CommandRunner, SubprocessRunner

logger = logging.getLogger(__name__)

HWND_BROADCAST = 0xFFFF
WM_SETTINGCHANGE = 0x1A
SMTO_ABORTIFHUNG = 0x0002
BROADCAST_TIMEOUT_MS = 1000

_POWERSHELL_SCRIPT = (
    "Add-Type -Namespace Win32 -Name NativeMethods -MemberDefinition '"
    '[DllImport("user32.dll", SetLastError = true, CharSet = CharSet.Auto)] '
    "public static extern IntPtr SendMessageTimeout(IntPtr hWnd, uint Msg, "
    "UIntPtr wParam, string lParam, uint fuFlags, uint uTimeout, out UIntPtr lpdwResult);'; "
    "$result = [UIntPtr]::Zero; "
    f"[void][Win32.NativeMethods]::SendMessageTimeout([IntPtr]{HWND_BROADCAST}, "
    f"{WM_SETTINGCHANGE}, [UIntPtr]::Zero, 'Environment', {SMTO_ABORTIFHUNG}, "
    f"{BROADCAST_TIMEOUT_MS}, [ref]$result)"
)


class EnvironmentBroadcaster:
    """Tells top-level windows that persisted environment state changed."""

    def __init__(self, runner: CommandRunner | None = None) -> None:
        self._runner = runner if runner is not None else SubprocessRunner()

    def broadcast(self) -> bool:
        """Send the notification. Returns True if it was delivered."""
        try:
            result = self._runner.run(
                ["powershell", "-NoProfile", "-NonInteractive", "-Command", _POWERSHELL_SCRIPT]
            )
        except OSError:
            logger.warning("Environment change broadcast could not start", exc_info=True)
            return False
        if not result.ok:
            logger.warning(
                "Environment change broadcast failed (exit %d): %s",
                result.returncode, result.output.strip(),
            )
            return False
        return True

"""jdkswitch: discover installed JDKs and switch the active one per scope."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

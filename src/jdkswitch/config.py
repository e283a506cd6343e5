"""User preferences persisted as YAML.

Holds what the core deliberately does not persist itself: the custom scan
roots and the scope last chosen for a switch. The file lives at
``~/.config/jdkswitch/config.yaml`` unless ``JDKSWITCH_CONFIG`` or an
explicit path says otherwise.

Example file::

    custom_roots:
      - D:\\tools\\jdks
    last_scope: USER
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from jdkswitch.env.scope import Scope
from jdkswitch.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "JDKSWITCH_CONFIG"


def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "jdkswitch" / "config.yaml"


@dataclass
class AppConfig:
    """Preferences loaded from, and saved to, one YAML file.

    Attributes:
        path: File backing this config.
        custom_roots: User-registered scan roots, as entered.
        last_scope: Scope selected for the most recent switch.
    """

    path: Path
    custom_roots: list[Path] = field(default_factory=list)
    last_scope: Scope = Scope.USER

    @classmethod
    def load(cls, path: Path | None = None) -> AppConfig:
        """Read the config file. A missing file yields defaults.

        Raises:
            ConfigError: The file is not valid YAML or not a mapping.
        """
        config_path = path if path is not None else default_config_path()
        if not config_path.is_file():
            return cls(path=config_path)
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read config {config_path}: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config {config_path} must be a mapping, got {type(data).__name__}")
        return cls(
            path=config_path,
            custom_roots=_parse_roots(data.get("custom_roots")),
            last_scope=_parse_scope(data.get("last_scope")),
        )

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data: dict[str, Any] = {
            "custom_roots": [str(p) for p in self.custom_roots],
            "last_scope": self.last_scope.name,
        }
        self.path.write_text(
            yaml.safe_dump(data, default_flow_style=False, allow_unicode=True),
            encoding="utf-8",
        )
        logger.debug("Saved config to %s", self.path)


def _parse_roots(raw: object) -> list[Path]:
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list):
        raise ConfigError("custom_roots must be a list of paths")
    return [Path(str(item).strip()) for item in raw if item and str(item).strip()]


def _parse_scope(raw: object) -> Scope:
    if not raw:
        return Scope.USER
    try:
        return Scope.parse(str(raw))
    except ValueError:
        logger.warning("Unknown last_scope %r in config; using USER", raw)
        return Scope.USER

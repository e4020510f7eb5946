"""Settings for dev-nerves.

Settings are optional. They are read from a JSON file:

1. the path given with ``--settings``
2. ``$DEV_NERVES_CONFIG``
3. ``~/.config/dev_nerves/config.json``

A missing file means defaults. A corrupt file is reported and ignored.
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "DEV_NERVES_CONFIG"
DEFAULT_SETTINGS_PATH = Path("~/.config/dev_nerves/config.json")


@dataclass
class DevNervesSettings:
    """Values baked into the generated dev container."""
    # Base image for the dev container Dockerfile
    elixir_image: str = "elixir:1.18"
    fwup_version: str = "1.14.0"

    # vintage_net regulatory domain for WiFi
    regulatory_domain: str = "US"

    remote_user: str = "vscode"

    # Upstream generator invocation (project name and --target are appended)
    bootstrap_command: List[str] = field(default_factory=lambda: ["mix", "nerves.new"])

    @property
    def elixir_version(self) -> str:
        """Version tag of ``elixir_image`` (``elixir:1.18`` -> ``1.18``)."""
        _, _, tag = self.elixir_image.partition(":")
        return tag or "latest"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "DevNervesSettings":
        """Build settings from a dict. Unknown keys are ignored.

        Raises:
            TypeError: If a known key holds a value of the wrong type
        """
        values = {
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__
        }
        for key, value in values.items():
            if key == "bootstrap_command":
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    raise TypeError(f"{key} must be a list of strings, got {value!r}")
            elif not isinstance(value, str):
                raise TypeError(f"{key} must be a string, got {value!r}")
        return cls(**values)


def settings_path(explicit: Optional[Path] = None) -> Path:
    """Resolve which settings file applies."""
    if explicit is not None:
        return Path(explicit).expanduser()
    env_path = os.environ.get(SETTINGS_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_SETTINGS_PATH.expanduser()


def load_settings(path: Optional[Path] = None) -> DevNervesSettings:
    """Load settings, falling back to defaults."""
    source = settings_path(path)

    if not source.exists():
        logger.debug("No settings file at %s, using defaults", source)
        return DevNervesSettings()

    try:
        data = json.loads(source.read_text())
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        settings = DevNervesSettings.from_dict(data)
    except (OSError, json.JSONDecodeError, TypeError) as e:
        logger.warning("Settings file %s is unreadable: %s. Using defaults.", source, e)
        return DevNervesSettings()

    logger.debug("Loaded settings from %s", source)
    return settings

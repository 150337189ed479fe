"""Configuration loading."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from dockhand.errors import ConfigError
from dockhand.models.config import DockhandConfig


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "DOCKHAND_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/dockhand/config.yaml")


class ConfigManager:
    """Loads the dockhand configuration file."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager.

        Without an explicit path the DOCKHAND_CONFIG environment variable is
        consulted, then the per-user default location.
        """
        self.explicit = config_path is not None or CONFIG_ENV_VAR in os.environ
        if config_path is None:
            config_path = Path(os.environ.get(CONFIG_ENV_VAR, str(DEFAULT_CONFIG_PATH)))
        self.config_path = Path(config_path).expanduser()
        self.yaml = YAML(typ="safe")
        self.config: Optional[DockhandConfig] = None

    def load(self) -> DockhandConfig:
        """Load and validate the configuration file."""
        if not self.config_path.exists():
            if self.explicit:
                raise FileNotFoundError(f"Config not found: {self.config_path}")
            logger.debug(f"No config at {self.config_path}, using defaults")
            self.config = DockhandConfig()
            return self.config

        data = self._read_yaml(self.config_path)
        try:
            self.config = DockhandConfig(**data)
        except ValidationError as e:
            logger.error(f"Invalid config {self.config_path}: {e}")
            raise ConfigError(f"Invalid config {self.config_path}: {e}") from e

        logger.debug(f"Loaded config: {self.config_path}")
        return self.config

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Read and parse a YAML mapping."""
        try:
            data = self.yaml.load(file_path.read_text())
        except YAMLError as e:
            raise ConfigError(f"Unreadable config {file_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config {file_path} must contain a mapping")
        return data

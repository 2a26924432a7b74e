"""
Config File Parser - Load controller options from YAML

Reads a YAML config file with kebab-case keys and builds the options
value from it.
"""

import logging
from typing import Dict

import yaml

from ..core.exceptions import ConfigError
from ..core.options import ControllerOptions

logger = logging.getLogger(__name__)


class ConfigFileParser:
    def __init__(self, config_path: str):
        self.config_path = config_path

    def parse(self) -> Dict:
        """Read the YAML config file into a mapping."""
        try:
            with open(self.config_path, "r") as f:
                config = yaml.safe_load(f)
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing config file {self.config_path}: {e}")

        if config is None:
            logger.warning(f"Config file {self.config_path} is empty, using defaults")
            return {}

        if not isinstance(config, dict):
            raise ConfigError(
                f"Config file {self.config_path} must contain a mapping at the top level"
            )

        logger.info(f"Configuration loaded from {self.config_path}")
        return config


def load_options(config_path: str) -> ControllerOptions:
    """Load controller options from a YAML config file."""
    return ControllerOptions.from_dict(ConfigFileParser(config_path).parse())

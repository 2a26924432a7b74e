"""
Controller Options - Startup configuration for certificate controllers

Resolves which controllers a process should start and validates the
options it was given, including DNS-01 recursive nameserver addresses.
"""

__version__ = "1.0.0"
__author__ = "Controller Options Team"
__description__ = "Startup option resolution and validation for controller processes"

from .core.controllers import DEFAULT_ENABLED_CONTROLLERS, enabled_controllers
from .core.exceptions import ConfigError, OptionsValidationError
from .core.options import ControllerOptions
from .parsers.config_file import load_options
from .utils.validators import validate_dns_server

__all__ = [
    "ControllerOptions",
    "DEFAULT_ENABLED_CONTROLLERS",
    "enabled_controllers",
    "validate_dns_server",
    "load_options",
    "ConfigError",
    "OptionsValidationError",
]

"""
Core option handling.

This package contains the options value, controller enablement and
the errors raised during validation.
"""

from .controllers import enabled_controllers, unknown_controllers
from .exceptions import ConfigError, OptionsValidationError
from .logging_options import LoggingOptions
from .options import ControllerOptions

__all__ = [
    "ControllerOptions",
    "LoggingOptions",
    "enabled_controllers",
    "unknown_controllers",
    "ConfigError",
    "OptionsValidationError",
]

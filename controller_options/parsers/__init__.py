"""
Config file parsing.
"""

from .config_file import ConfigFileParser, load_options

__all__ = ["ConfigFileParser", "load_options"]

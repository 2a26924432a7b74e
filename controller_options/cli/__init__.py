"""
Command-line interface components.

This package contains CLI tools and entry points for checking controller options.
"""

from .main import main

__all__ = ["main"]

"""
Utility functions and helpers.

This package contains syntax validators for option values.
"""

from .validators import validate_dns_server, validate_ip_address, validate_solver_nameserver

__all__ = ["validate_dns_server", "validate_ip_address", "validate_solver_nameserver"]

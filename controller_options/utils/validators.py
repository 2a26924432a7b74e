"""
Validators - Syntax checks for controller option values

This module provides validation functions for nameserver addresses and
the scalar option fields checked at controller startup. Nothing here
performs network I/O; only the textual form of a value is inspected.
"""

import logging
from typing import Tuple

import dns.inet

logger = logging.getLogger(__name__)

DOH_SCHEME_PREFIX = "https://"

VALID_ISSUER_KINDS = ("Issuer", "ClusterIssuer")


def split_host_port(address: str) -> Tuple[str, str]:
    """
    Split a network address of the form host:port or [host]:port.

    Args:
        address: The address to split

    Returns:
        (host, port) tuple

    Raises:
        ValueError: If the address is not a host:port pair
    """
    if address.startswith("["):
        end = address.find("]")
        if end < 0:
            raise ValueError("missing ']' in address")
        host = address[1:end]
        rest = address[end + 1 :]
        if not rest.startswith(":"):
            raise ValueError("missing port in address")
        port = rest[1:]
        if ":" in port:
            raise ValueError("too many colons in address")
        return host, port

    if ":" not in address:
        raise ValueError("missing port in address")

    host, port = address.rsplit(":", 1)
    # Unbracketed IPv6 literals are ambiguous
    if ":" in host:
        raise ValueError("too many colons in address")
    return host, port


def validate_ip_address(address: str) -> bool:
    """
    Validate an IPv4 or IPv6 address literal.

    Args:
        address: The address to validate

    Returns:
        True if valid, False otherwise
    """
    if not address or not isinstance(address, str):
        return False

    return dns.inet.is_address(address)


def validate_port(port: str) -> bool:
    """Validate a decimal port string in the range 0-65535."""
    if not port or not (port.isascii() and port.isdecimal()):
        return False
    return int(port) <= 65535


def _validate_ip_port(address: str) -> Tuple[bool, str]:
    """Check an ip:port pair, returning (valid, detail)."""
    try:
        host, port = split_host_port(address)
    except ValueError as e:
        return False, str(e)

    if not validate_ip_address(host):
        return False, f"invalid IP address '{host}'"

    if not validate_port(port):
        return False, f"invalid port '{port}'"

    return True, ""


def validate_dns_server(address: str) -> Tuple[bool, str]:
    """
    Validate a DNS-01 recursive nameserver address.

    Accepted forms are ``<ip address>:<port>`` and
    ``https://<DoH RFC 8484 server address>``.

    Args:
        address: The nameserver address to validate

    Returns:
        (True, "") if valid, otherwise (False, reason). The reason always
        contains the offending address verbatim.
    """
    if address.startswith(DOH_SCHEME_PREFIX):
        # Host and path are not constrained beyond being present
        if not address[len(DOH_SCHEME_PREFIX) :]:
            logger.debug(f"Rejected DNS server with empty DoH endpoint: {address}")
            return False, f"invalid DNS server (empty DoH endpoint): {address}"
        return True, ""

    valid, detail = _validate_ip_port(address)
    if not valid:
        logger.debug(f"Rejected DNS server {address}: {detail}")
        return False, f"invalid DNS server ({detail}): {address}"

    return True, ""


def validate_solver_nameserver(address: str) -> Tuple[bool, str]:
    """
    Validate an HTTP-01 solver nameserver address (ip:port only).

    Returns:
        (True, "") if valid, otherwise (False, reason)
    """
    valid, detail = _validate_ip_port(address)
    if not valid:
        return False, f"invalid HTTP01 solver nameserver ({detail}): {address}"

    return True, ""


def validate_issuer_kind(kind: str) -> bool:
    """Validate the default issuer kind."""
    return kind in VALID_ISSUER_KINDS

"""
Controller Enablement - Resolve which controllers a process should start

The ``controllers`` option is an ordered list of specs applied left to
right:

    "name"   enable ``name``
    "-name"  disable ``name``
    "*"      reset to the default controller set

A wildcard replaces whatever was accumulated before it, so the last
wildcard wins over any earlier enables or disables.
"""

import logging
from typing import Iterable, Set

logger = logging.getLogger(__name__)

WILDCARD = "*"
DISABLE_PREFIX = "-"

ALL_CONTROLLERS = frozenset(
    [
        "issuers",
        "clusterissuers",
        "certificates-metrics",
        "ingress-shim",
        "gateway-shim",
        "orders",
        "challenges",
        "certificaterequests-issuer-acme",
        "certificaterequests-approver",
        "certificaterequests-issuer-ca",
        "certificaterequests-issuer-selfsigned",
        "certificaterequests-issuer-vault",
        "certificaterequests-issuer-venafi",
        "certificates-trigger",
        "certificates-issuing",
        "certificates-key-manager",
        "certificates-request-manager",
        "certificates-readiness",
        "certificates-revision-manager",
        "certificatesigningrequests-issuer-acme",
        "certificatesigningrequests-issuer-ca",
        "certificatesigningrequests-issuer-selfsigned",
        "certificatesigningrequests-issuer-vault",
        "certificatesigningrequests-issuer-venafi",
    ]
)

# Opt-in only; never started by "*"
EXPERIMENTAL_CONTROLLERS = frozenset(
    [
        "gateway-shim",
        "certificatesigningrequests-issuer-acme",
        "certificatesigningrequests-issuer-ca",
        "certificatesigningrequests-issuer-selfsigned",
        "certificatesigningrequests-issuer-vault",
        "certificatesigningrequests-issuer-venafi",
    ]
)

DEFAULT_ENABLED_CONTROLLERS = ALL_CONTROLLERS - EXPERIMENTAL_CONTROLLERS


def enabled_controllers(specs: Iterable[str]) -> Set[str]:
    """
    Resolve a list of controller specs into the set of enabled controllers.

    Args:
        specs: Ordered controller specs ("name", "-name" or "*")

    Returns:
        Set of controller names to start. Names are not checked against
        the known controllers.
    """
    specs = list(specs)
    enabled: Set[str] = set()

    for spec in specs:
        if spec == WILDCARD:
            enabled = set(DEFAULT_ENABLED_CONTROLLERS)
        elif spec.startswith(DISABLE_PREFIX):
            enabled.discard(spec[len(DISABLE_PREFIX) :])
        else:
            enabled.add(spec)

    logger.debug(f"Resolved {len(enabled)} enabled controllers from {specs}")
    return enabled


def unknown_controllers(names: Iterable[str]) -> Set[str]:
    """Return the names that are not known controllers."""
    return {name for name in names if name not in ALL_CONTROLLERS}

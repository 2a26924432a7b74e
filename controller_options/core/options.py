"""
Controller Options - Startup configuration of the controller process

This module holds the options value consumed at process start, validates
it once before any controller runs, and resolves which controllers to
start.
"""

import logging
from typing import Dict, List, Optional, Set, Union

from .controllers import enabled_controllers
from .exceptions import ConfigError, OptionsValidationError
from .logging_options import LoggingOptions
from ..utils.validators import (
    validate_dns_server,
    validate_issuer_kind,
    validate_solver_nameserver,
)

logger = logging.getLogger(__name__)

DEFAULT_CONTROLLERS = ["*"]
DEFAULT_ISSUER_KIND = "Issuer"
DEFAULT_ISSUER_GROUP = "cert-manager.io"
DEFAULT_CLUSTER_RESOURCE_NAMESPACE = "kube-system"
DEFAULT_KUBERNETES_API_QPS = 20.0
DEFAULT_KUBERNETES_API_BURST = 50

# Config file key -> attribute name
CONFIG_KEYS = {
    "controllers": "controllers",
    "dns01-recursive-nameservers": "dns01_recursive_nameservers",
    "dns01-recursive-nameservers-only": "dns01_recursive_nameservers_only",
    "acme-http01-solver-nameservers": "acme_http01_solver_nameservers",
    "default-issuer-kind": "default_issuer_kind",
    "default-issuer-name": "default_issuer_name",
    "default-issuer-group": "default_issuer_group",
    "cluster-resource-namespace": "cluster_resource_namespace",
    "kube-api-qps": "kubernetes_api_qps",
    "kube-api-burst": "kubernetes_api_burst",
}

LIST_FIELDS = (
    "controllers",
    "dns01_recursive_nameservers",
    "acme_http01_solver_nameservers",
)

NUMBER_FIELDS = {
    "kubernetes_api_qps": float,
    "kubernetes_api_burst": int,
}


class ControllerOptions:
    """Options value for a controller process."""

    def __init__(
        self,
        controllers: Optional[List[str]] = None,
        dns01_recursive_nameservers: Optional[List[str]] = None,
        dns01_recursive_nameservers_only: bool = False,
        acme_http01_solver_nameservers: Optional[List[str]] = None,
        default_issuer_kind: str = DEFAULT_ISSUER_KIND,
        default_issuer_name: str = "",
        default_issuer_group: str = DEFAULT_ISSUER_GROUP,
        cluster_resource_namespace: str = DEFAULT_CLUSTER_RESOURCE_NAMESPACE,
        kubernetes_api_qps: float = DEFAULT_KUBERNETES_API_QPS,
        kubernetes_api_burst: int = DEFAULT_KUBERNETES_API_BURST,
        logging_options: Optional[LoggingOptions] = None,
    ):
        if controllers is None:
            controllers = DEFAULT_CONTROLLERS
        self.controllers = tuple(controllers)
        self.dns01_recursive_nameservers = tuple(dns01_recursive_nameservers or ())
        self.dns01_recursive_nameservers_only = dns01_recursive_nameservers_only
        self.acme_http01_solver_nameservers = tuple(
            acme_http01_solver_nameservers or ()
        )
        self.default_issuer_kind = default_issuer_kind
        self.default_issuer_name = default_issuer_name
        self.default_issuer_group = default_issuer_group
        self.cluster_resource_namespace = cluster_resource_namespace
        self.kubernetes_api_qps = kubernetes_api_qps
        self.kubernetes_api_burst = kubernetes_api_burst
        self.logging = logging_options or LoggingOptions()

    @classmethod
    def from_dict(cls, config: Dict) -> "ControllerOptions":
        """
        Build options from a config mapping with kebab-case keys.

        Args:
            config: Mapping as loaded from a YAML config file

        Returns:
            ControllerOptions with defaults for absent keys

        Raises:
            ConfigError: If a list option is not a list of strings
        """
        kwargs = {}
        for key, value in config.items():
            if key == "logging":
                if value is not None and not isinstance(value, dict):
                    raise ConfigError("'logging' must be a mapping")
                kwargs["logging_options"] = LoggingOptions.from_dict(value)
                continue

            attr = CONFIG_KEYS.get(key)
            if attr is None:
                logger.warning(f"Ignoring unknown config key '{key}'")
                continue

            if attr in LIST_FIELDS:
                value = _as_string_list(key, value)
            elif attr in NUMBER_FIELDS:
                value = _as_number(key, value, NUMBER_FIELDS[attr])
            kwargs[attr] = value

        return cls(**kwargs)

    def enabled_controllers(self) -> Set[str]:
        """Return the set of controllers to start."""
        return enabled_controllers(self.controllers)

    def validate(self) -> None:
        """
        Validate all option fields.

        Every check runs; failures are collected and raised together.

        Raises:
            OptionsValidationError: If any field is invalid
        """
        errors: List[Union[str, Exception]] = []

        if not validate_issuer_kind(self.default_issuer_kind):
            errors.append(f"invalid default issuer kind: {self.default_issuer_kind}")

        errors.extend(self._validate_api_rate_limits())

        for server in self.dns01_recursive_nameservers:
            valid, reason = validate_dns_server(server)
            if not valid:
                errors.append(reason)

        for server in self.acme_http01_solver_nameservers:
            valid, reason = validate_solver_nameserver(server)
            if not valid:
                errors.append(reason)

        try:
            self.logging.validate()
        except ValueError as e:
            errors.append(e)

        if errors:
            raise OptionsValidationError(errors)

    def _validate_api_rate_limits(self) -> List[str]:
        """Check Kubernetes API burst and QPS bounds."""
        errors = []

        if self.kubernetes_api_burst <= 0:
            errors.append(
                f"invalid value for kube-api-burst: {self.kubernetes_api_burst} "
                f"must be higher than 0"
            )

        if self.kubernetes_api_qps <= 0:
            errors.append(
                f"invalid value for kube-api-qps: {self.kubernetes_api_qps} "
                f"must be higher than 0"
            )

        if float(self.kubernetes_api_burst) < float(self.kubernetes_api_qps):
            errors.append(
                f"invalid value for kube-api-burst: {self.kubernetes_api_burst} "
                f"must be higher or equal to kube-api-qps: {self.kubernetes_api_qps}"
            )

        return errors

    def __repr__(self) -> str:
        return (
            f"ControllerOptions(controllers={list(self.controllers)!r}, "
            f"dns01_recursive_nameservers={list(self.dns01_recursive_nameservers)!r}, "
            f"default_issuer_kind={self.default_issuer_kind!r})"
        )


def _as_string_list(key: str, value) -> List[str]:
    """Coerce a config value into a list of strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return value


def _as_number(key: str, value, kind):
    """Convert a config value to int or float."""
    if isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a number, got {value!r}")
    try:
        return kind(value)
    except (TypeError, ValueError):
        raise ConfigError(f"'{key}' must be a number, got {value!r}")

#!/usr/bin/env python3
"""
Controller Options - Command Line Interface

Validates controller startup options and prints the controllers that
would be started.
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from ..core.controllers import DEFAULT_ENABLED_CONTROLLERS, unknown_controllers
from ..core.exceptions import ConfigError, OptionsValidationError
from ..core.logging_options import LoggingOptions
from ..core.options import ControllerOptions
from ..parsers.config_file import ConfigFileParser

console = Console()
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="controller-options",
        description="Controller Options - Validate controller startup configuration",
    )

    parser.add_argument("--config", "-c", help="YAML configuration file path")

    parser.add_argument(
        "--controllers",
        help="Comma separated controller specs: 'name' enables, '-name' disables, "
        "'*' enables the default set",
    )

    parser.add_argument(
        "--dns01-recursive-nameservers",
        help="Comma separated nameservers: 'ip:port' or 'https://' DoH endpoints",
    )

    parser.add_argument(
        "--dns01-recursive-nameservers-only",
        action="store_true",
        default=None,
        help="Only use the recursive nameservers for DNS01 self checks",
    )

    parser.add_argument(
        "--acme-http01-solver-nameservers",
        help="Comma separated 'ip:port' nameservers for HTTP01 self checks",
    )

    parser.add_argument("--default-issuer-kind", help="Issuer or ClusterIssuer")

    parser.add_argument("--default-issuer-name", help="Default issuer name")

    parser.add_argument("--cluster-resource-namespace", help="Cluster resource namespace")

    parser.add_argument("--kube-api-qps", type=float, help="Kubernetes API QPS")

    parser.add_argument("--kube-api-burst", type=int, help="Kubernetes API burst")

    parser.add_argument(
        "--logging-format", choices=["text", "json"], help="Log output format"
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    return parser


def build_config(args: argparse.Namespace) -> dict:
    """Merge the config file with command line flags; flags win."""
    config = ConfigFileParser(args.config).parse() if args.config else {}

    overrides = {
        "controllers": args.controllers,
        "dns01-recursive-nameservers": args.dns01_recursive_nameservers,
        "dns01-recursive-nameservers-only": args.dns01_recursive_nameservers_only,
        "acme-http01-solver-nameservers": args.acme_http01_solver_nameservers,
        "default-issuer-kind": args.default_issuer_kind,
        "default-issuer-name": args.default_issuer_name,
        "cluster-resource-namespace": args.cluster_resource_namespace,
        "kube-api-qps": args.kube_api_qps,
        "kube-api-burst": args.kube_api_burst,
    }
    for key, value in overrides.items():
        if value is not None:
            config[key] = value

    if args.logging_format or args.verbose:
        logging_config = dict(config.get("logging") or {})
        if args.logging_format:
            logging_config["format"] = args.logging_format
        if args.verbose:
            logging_config["v"] = logging_config.get("v") or 1
        config["logging"] = logging_config

    return config


def configure_logging(config: dict) -> None:
    """Apply the configured logging before the options are built."""
    section = config.get("logging")
    logging_options = LoggingOptions.from_dict(section if isinstance(section, dict) else None)
    try:
        logging_options.validate()
    except ValueError:
        # Reported by ControllerOptions.validate()
        logging_options = LoggingOptions()
    logging_options.apply()


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = build_config(args)
        configure_logging(config)
        options = ControllerOptions.from_dict(config)
        options.validate()
    except (ConfigError, OptionsValidationError) as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    enabled = options.enabled_controllers()
    for name in sorted(unknown_controllers(enabled)):
        logger.warning(f"'{name}' is not a known controller")

    display_enabled_controllers(enabled)
    sys.exit(0)


def display_enabled_controllers(enabled):
    """Print a table of the controllers that would be started."""
    table = Table(title="Enabled Controllers")
    table.add_column("Controller", style="cyan")
    table.add_column("Default", style="magenta")

    for name in sorted(enabled):
        table.add_row(name, "yes" if name in DEFAULT_ENABLED_CONTROLLERS else "no")

    console.print(table)
    console.print(f"\n[bold]Total enabled: {len(enabled)}[/bold]")


if __name__ == "__main__":
    main()

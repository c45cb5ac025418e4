"""Command-line interface for configuration variables.

Usage:
    python -m matcfg.cli list --mode full
    python -m matcfg.cli check "temp=20C;dcutoff=0.5;inelas=none"
    python -m matcfg.cli check --file material.yaml
    python -m matcfg.cli factory "myfact@!notthis"
    python -m matcfg.cli describe mos
"""

import argparse
import logging
import sys
import warnings
from typing import Optional, Sequence

from matcfg.config.cfg_data import CfgValues
from matcfg.config.enums import VarListMode
from matcfg.config.factory_request import parse_factory_request
from matcfg.config.registry import var_id_from_name, var_info
from matcfg.config.reporting import dump_cfg_var_list
from matcfg.config.validation import ConfigurationWarning, warn_if_unsafe
from matcfg.config.yaml_loader import load_cfg_yaml
from matcfg.core.errors import BadInput

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def cmd_list(args: argparse.Namespace) -> int:
    """Print the list of configuration variables."""
    dump_cfg_var_list(sys.stdout, VarListMode(args.mode), args.prefix)
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Validate assignments and print their canonical form."""
    try:
        if args.file:
            cfg = load_cfg_yaml(args.file)
        else:
            cfg = CfgValues.from_string(args.assignments or "")
    except (BadInput, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    print(cfg.to_string())

    if args.warn:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", ConfigurationWarning)
            for msg in warn_if_unsafe(cfg):
                logger.warning(msg)
    return 0


def cmd_factory(args: argparse.Namespace) -> int:
    """Parse a factory selection string."""
    try:
        request = parse_factory_request(args.request)
    except BadInput as e:
        logger.error(f"Invalid factory request: {e}")
        return 1

    print(f"specific : {request.specific if request.has_specific_request() else '<none>'}")
    print(f"excluded : {', '.join(request.excluded) if request.excluded else '<none>'}")
    print(f"canonical: {request.to_string()}")
    return 0


def cmd_describe(args: argparse.Namespace) -> int:
    """Show the full definition of one variable."""
    var_id = var_id_from_name(args.name)
    if var_id is None:
        logger.error(f"Unknown configuration parameter: {args.name}")
        return 1

    var = var_info(var_id)
    default = var.default_str()
    print(f"name       : {var.name}")
    print(f"group      : {var.group.value}")
    print(f"kind       : {var.kind.label}")
    print(f"units      : {var.units or '-'}")
    print(f"default    : {'<required>' if default is None else repr(default)}")
    print(f"description: {var.description}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Configuration variables of material descriptions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List all variables with descriptions
  python -m matcfg.cli list --mode full

  # Validate values and print the canonical form
  python -m matcfg.cli check "temp=20C;mos=0.5deg;dir1=@crys_hkl:0,0,1@lab:0,0,1"

  # Validate values from a YAML file and show advisories
  python -m matcfg.cli check --file material.yaml --warn

  # Parse a factory selection
  python -m matcfg.cli factory "myfact@!notthis"
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # List command
    list_parser = subparsers.add_parser("list", help="List configuration variables")
    list_parser.add_argument(
        "--mode",
        choices=[m.value for m in VarListMode],
        default=VarListMode.TXT_SHORT.value,
        help="Output format (default: short)",
    )
    list_parser.add_argument(
        "--prefix",
        default="",
        help="String prepended to each output line",
    )

    # Check command
    check_parser = subparsers.add_parser("check", help="Validate configuration values")
    check_parser.add_argument(
        "assignments",
        nargs="?",
        help='Assignments such as "temp=300;dcutoff=0.5"',
    )
    check_parser.add_argument(
        "--file",
        help="YAML file with values (instead of assignments)",
    )
    check_parser.add_argument(
        "--warn",
        action="store_true",
        help="Also report advisory warnings",
    )

    # Factory command
    factory_parser = subparsers.add_parser("factory", help="Parse a factory selection string")
    factory_parser.add_argument("request", help='Request such as "myfact@!notthis"')

    # Describe command
    describe_parser = subparsers.add_parser("describe", help="Describe one variable")
    describe_parser.add_argument("name", help="Variable name")

    args = parser.parse_args(argv)

    if args.command == "list":
        return cmd_list(args)
    elif args.command == "check":
        return cmd_check(args)
    elif args.command == "factory":
        return cmd_factory(args)
    elif args.command == "describe":
        return cmd_describe(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())

"""
regconfig CLI - Main entry point.

Usage:
    regconfig path
    regconfig show
    regconfig login <server> --username <user> [--email <email>] [--password-stdin]
    regconfig logout <server>
    regconfig migrate [--to current|legacy]
    regconfig init
"""

import argparse
import sys
from typing import List, Optional

from regconfig import __version__


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="regconfig",
        description="Manage registry credentials in config.json (or the legacy .regcfg)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  path        Show which configuration file is in use
  show        List stored registry credentials (passwords are never shown)
  login       Store credentials for a registry
  logout      Remove credentials for a registry
  migrate     Rewrite the configuration in another format
  init        Write a default settings file

Examples:
  regconfig show
  regconfig login registry.example.com --username admin
  echo "$TOKEN" | regconfig login ghcr.io --username bot --password-stdin
  regconfig --config-dir ./ci-config migrate --to current

Use 'regconfig <command> --help' for more information on a command.
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--config-dir", "-c",
        help="Configuration directory (default: $REGCONFIG_DIR or ~/.regconfig)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the log level from settings.yaml",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    subparsers.add_parser(
        "path",
        help="Show the configuration file in use",
    )

    subparsers.add_parser(
        "show",
        help="List stored registry credentials",
    )

    login_parser = subparsers.add_parser(
        "login",
        help="Store credentials for a registry",
        description="Store credentials for a registry server",
    )
    _setup_login_parser(login_parser)

    logout_parser = subparsers.add_parser(
        "logout",
        help="Remove credentials for a registry",
    )
    logout_parser.add_argument("server", help="Registry server address")

    migrate_parser = subparsers.add_parser(
        "migrate",
        help="Rewrite the configuration in another format",
        description="Load the configuration and save it in the requested format",
    )
    migrate_parser.add_argument(
        "--to",
        choices=["current", "legacy"],
        default="current",
        help="Target format (default: current)",
    )

    subparsers.add_parser(
        "init",
        help="Write a default settings file",
    )

    return parser


def _setup_login_parser(parser: argparse.ArgumentParser):
    """Set up login subcommand parser."""
    parser.add_argument("server", help="Registry server address")

    parser.add_argument(
        "--username", "-u",
        required=True,
        help="Registry username",
    )

    parser.add_argument(
        "--email", "-e",
        default="",
        help="Account email",
    )

    parser.add_argument(
        "--password-stdin",
        action="store_true",
        help="Read the password from stdin instead of prompting",
    )


def _setup_logging(args) -> int:
    """Configure logging from settings. Returns non-zero on bad settings."""
    from regconfig.core.config import get_settings
    from regconfig.core.log import configure_from_settings

    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    configure_from_settings(settings.logging, level_override=args.log_level)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if _setup_logging(args) != 0:
        return 1

    if args.command == "init":
        from regconfig.cli.auths import handle_init

        return handle_init(args)
    elif args.command in ("path", "show", "login", "logout", "migrate"):
        from regconfig.cli.auths import handle_auths

        return handle_auths(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())

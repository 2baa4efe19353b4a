"""
Credential CLI handlers.

Handles: regconfig path | show | login | logout | migrate | init
"""

import getpass
import sys

from regconfig.auth.models import AuthConfig
from regconfig.configfile.loader import ConfigLocation, load
from regconfig.configfile.model import CURRENT_FILENAME, ConfigFile, FormatVersion
from regconfig.errors import ConfigError


BACKUP_SUFFIX = ".bak"


def _location(args) -> ConfigLocation:
    return ConfigLocation.from_environment(override_dir=args.config_dir)


def handle_auths(args) -> int:
    """Handle credential subcommands."""
    try:
        config = load(location=_location(args))
    except (ConfigError, OSError) as e:
        print(f"Error: {e}")
        return 1

    if args.command == "path":
        return _show_path(config)
    elif args.command == "show":
        return _show(config)
    elif args.command == "login":
        return _login(config, args)
    elif args.command == "logout":
        return _logout(config, args)
    elif args.command == "migrate":
        return _migrate(config, args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


def _save(config: ConfigFile) -> int:
    try:
        path = config.save()
    except OSError as e:
        print(f"Error: could not write {config.path}: {e}")
        return 1
    print(f"Saved {path}")
    return 0


def _show_path(config: ConfigFile) -> int:
    """Print the configuration file path and format."""
    exists = "" if config.source_path else " (not created yet)"
    print(f"{config.path}{exists}")
    print(f"Format: {config.version.name.lower()}")
    return 0


def _show(config: ConfigFile) -> int:
    """List credentials without secrets."""
    if not config.auth_configs:
        print("No credentials stored")
        print("\nAdd credentials with: regconfig login <server> --username <user>")
        return 0

    print(f"Registries ({len(config.auth_configs)}):\n")

    for server in sorted(config.auth_configs):
        auth_config = config.auth_configs[server]
        print(f"  {server}")
        print(f"    Username: {auth_config.username or '-'}")
        if auth_config.email:
            print(f"    Email: {auth_config.email}")
        print()

    if config.preferences:
        print(f"Preferences: {', '.join(sorted(config.preferences))}")

    return 0


def _login(config: ConfigFile, args) -> int:
    """Store credentials for a server."""
    if args.password_stdin:
        password = sys.stdin.read().rstrip("\r\n")
    else:
        password = getpass.getpass(f"Password for {args.username}@{args.server}: ")

    if not password:
        print("Error: Password is required")
        return 1

    config.set_auth(AuthConfig(
        username=args.username,
        password=password,
        email=args.email,
        server_address=args.server,
    ))

    if _save(config) != 0:
        return 1

    print(f"✓ Stored credentials for '{args.server}'")
    return 0


def _logout(config: ConfigFile, args) -> int:
    """Remove credentials for a server."""
    if not config.remove_auth(args.server):
        print(f"Error: No credentials stored for '{args.server}'")
        return 1

    if _save(config) != 0:
        return 1

    print(f"✓ Removed credentials for '{args.server}'")
    return 0


def _migrate(config: ConfigFile, args) -> int:
    """Save the configuration in another format."""
    target = FormatVersion.LEGACY if args.to == "legacy" else FormatVersion.CURRENT

    if config.version is target and config.source_path is not None:
        print(f"Already in {args.to} format: {config.path}")
        return 0

    previous = config.source_path
    config.version = target
    if _save(config) != 0:
        return 1

    # config.json is always read first, so it has to move aside for the
    # legacy file to take effect
    superseded = config.directory / CURRENT_FILENAME
    if target is FormatVersion.LEGACY and superseded.is_file():
        backup = superseded.with_name(superseded.name + BACKUP_SUFFIX)
        try:
            superseded.replace(backup)
        except OSError as e:
            print(f"Error: could not move {superseded} aside: {e}")
            return 1
        print(f"  Moved {superseded} -> {backup}")

    if previous is not None:
        print(f"✓ Migrated {previous} -> {config.path}")
        if target is FormatVersion.CURRENT:
            print("  The old file was left in place; remove it once the new one works.")
    return 0


def handle_init(args) -> int:
    """Write the default settings file."""
    from regconfig.core.config import get_settings

    settings = get_settings()
    if not settings.save_default_settings():
        print(f"Settings already exist: {settings.settings_file}")
        return 1

    print(f"✓ Wrote {settings.settings_file}")
    return 0

"""
regconfig - Registry credential configuration files.

Usage:
    regconfig show
    regconfig login registry.example.com --username admin
    regconfig migrate --to current
"""

__version__ = "0.1.0"

from regconfig.auth import AuthConfig, encode_auth, decode_auth
from regconfig.configfile import (
    ConfigFile,
    ConfigLocation,
    FormatVersion,
    load,
    load_from_reader,
    save,
    serialize,
    set_config_dir,
)
from regconfig.errors import (
    ConfigError,
    ConfigParseError,
    DecodeError,
    EmptyAuthConfigError,
    EmptyConfigFileError,
    InvalidAuthConfigError,
)

__all__ = [
    # Version
    "__version__",
    # Credentials
    "AuthConfig",
    "encode_auth",
    "decode_auth",
    # Config files
    "ConfigFile",
    "ConfigLocation",
    "FormatVersion",
    "load",
    "load_from_reader",
    "save",
    "serialize",
    "set_config_dir",
    # Errors
    "ConfigError",
    "ConfigParseError",
    "DecodeError",
    "EmptyAuthConfigError",
    "EmptyConfigFileError",
    "InvalidAuthConfigError",
]

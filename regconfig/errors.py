"""
Error taxonomy for configuration loading and saving.

Distinct exception types map to distinct remediation steps:

- EmptyConfigFileError: the file exists but has no content
- EmptyAuthConfigError: legacy plain-text file with no usable content
- InvalidAuthConfigError: legacy content present but malformed
- DecodeError: an obfuscated auth field could not be decoded
- ConfigParseError: current-format file is not a JSON object of the right shape

A missing file is not an error. Filesystem failures surface as OSError.
"""

from pathlib import Path
from typing import Optional


class ConfigError(Exception):
    """Base class for all configuration errors."""


class EmptyConfigFileError(ConfigError):
    """Configuration file exists but is zero-length."""

    def __init__(self, path: Path, legacy: bool = False):
        self.path = Path(path)
        self.legacy = legacy
        if legacy:
            message = f"Legacy auth file {self.path} is empty"
        else:
            message = f"Configuration file {self.path} is empty"
        super().__init__(message)


class ConfigParseError(ConfigError):
    """Current-format file could not be decoded into the expected structure."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class AuthConfigError(ConfigError):
    """Base class for credential parsing errors."""


class EmptyAuthConfigError(AuthConfigError):
    """Legacy plain-text auth file has no recognizable content."""

    def __init__(self, message: str = "The Auth config file is empty"):
        super().__init__(message)


class InvalidAuthConfigError(AuthConfigError):
    """Legacy auth content is present but malformed."""

    def __init__(self, message: str = "Invalid Auth config file"):
        super().__init__(message)


class DecodeError(InvalidAuthConfigError):
    """Obfuscated auth string is not valid base64 text or lacks a separator."""

    def __init__(self, message: str = "Invalid auth configuration file"):
        super().__init__(message)

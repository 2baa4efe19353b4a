"""
In-memory registry configuration.

A ConfigFile owns the credential map and the auxiliary preferences of a
configuration file, plus enough location information to save it back.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, Optional

from regconfig.auth.models import AuthConfig


CURRENT_FILENAME = "config.json"
LEGACY_FILENAME = ".regcfg"

# Key used for single-entry legacy files that carry no server address
DEFAULT_INDEX_SERVER = "https://index.docker.io/v1/"

# Well-known preference keys in the current format
PS_FORMAT_KEY = "psFormat"
HTTP_HEADERS_KEY = "HttpHeaders"


class FormatVersion(IntEnum):
    """On-disk schema version."""
    LEGACY = 1
    CURRENT = 2

    @property
    def filename(self) -> str:
        if self is FormatVersion.LEGACY:
            return LEGACY_FILENAME
        return CURRENT_FILENAME


@dataclass
class ConfigFile:
    """Registry credentials and display preferences."""

    auth_configs: Dict[str, AuthConfig] = field(default_factory=dict)

    # Top-level keys other than "auths", carried through uninterpreted
    preferences: Dict[str, Any] = field(default_factory=dict)

    version: FormatVersion = FormatVersion.CURRENT

    config_dir: Optional[Path] = None
    filename: Optional[str] = None

    # Where this config was read from, if anywhere
    source_path: Optional[Path] = None

    @property
    def directory(self) -> Path:
        """Configuration directory, falling back to the process default."""
        if self.config_dir is not None:
            return Path(self.config_dir)

        from regconfig.configfile.loader import get_default_location

        return get_default_location().config_dir()

    @property
    def path(self) -> Path:
        """
        File this configuration saves to.

        An explicit filename wins; otherwise the name follows the version, so
        switching the version before saving migrates to the other file.
        """
        if self.filename:
            explicit = Path(self.filename)
            if explicit.is_absolute():
                return explicit
            return self.directory / explicit
        return self.directory / self.version.filename

    @property
    def ps_format(self) -> str:
        """Default format template for container listings."""
        value = self.preferences.get(PS_FORMAT_KEY, "")
        return value if isinstance(value, str) else ""

    @ps_format.setter
    def ps_format(self, value: str):
        if value:
            self.preferences[PS_FORMAT_KEY] = value
        else:
            self.preferences.pop(PS_FORMAT_KEY, None)

    @property
    def http_headers(self) -> Dict[str, str]:
        """Extra HTTP headers to send to registries."""
        value = self.preferences.get(HTTP_HEADERS_KEY)
        return dict(value) if isinstance(value, dict) else {}

    def get_auth(self, server_address: str) -> Optional[AuthConfig]:
        """Get credentials for a server, or None."""
        return self.auth_configs.get(server_address)

    def set_auth(self, auth_config: AuthConfig):
        """Store credentials, keyed by their server address."""
        if not auth_config.server_address:
            raise ValueError("AuthConfig.server_address is required")
        self.auth_configs[auth_config.server_address] = auth_config

    def remove_auth(self, server_address: str) -> bool:
        """Remove credentials for a server. Returns True if one was removed."""
        return self.auth_configs.pop(server_address, None) is not None

    def save(self) -> Path:
        """Save to ``self.path`` in the format selected by ``self.version``."""
        from regconfig.configfile.serializer import save

        return save(self)

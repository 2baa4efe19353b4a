"""
Format adapter interface.

Each on-disk schema version is an explicit ConfigFormat implementation,
selected by FormatVersion rather than by inspecting content.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping

from regconfig.auth.models import AuthConfig
from regconfig.configfile.model import ConfigFile, FormatVersion


class ConfigFormat(ABC):
    """Parses and serializes one on-disk schema version."""

    version: FormatVersion

    @property
    def filename(self) -> str:
        """Default filename for this format."""
        return self.version.filename

    @abstractmethod
    def parse(self, data: bytes) -> ConfigFile:
        """
        Decode file content into a ConfigFile.

        Either returns a fully decoded configuration or raises; a partially
        populated ConfigFile is never returned.
        """

    @abstractmethod
    def serialize(self, config: ConfigFile) -> bytes:
        """
        Encode a ConfigFile into file content.

        Must not modify ``config``.
        """


def decode_auth_map(raw: Mapping[str, Dict[str, Any]]) -> Dict[str, AuthConfig]:
    """Decode every entry of a server -> {auth, email} map."""
    return {
        server: AuthConfig.from_entry(server, entry)
        for server, entry in raw.items()
    }


def encode_auth_map(auth_configs: Mapping[str, AuthConfig]) -> Dict[str, Dict[str, str]]:
    """Build a fresh server -> {auth, email} map, leaving the records untouched."""
    return {
        server: auth_configs[server].to_entry()
        for server in sorted(auth_configs)
    }


def dump_json(obj: Any) -> bytes:
    """Tab-indented JSON, matching what users expect to hand-edit."""
    return json.dumps(obj, indent="\t", ensure_ascii=False).encode("utf-8")


def get_format(version: FormatVersion) -> ConfigFormat:
    """
    Get the adapter for a format version.

    Args:
        version: FormatVersion or its integer value.

    Raises:
        ValueError: If the version is unknown.
    """
    from regconfig.configfile.current import CurrentFormat
    from regconfig.configfile.legacy import LegacyFormat

    version = FormatVersion(version)
    if version is FormatVersion.LEGACY:
        return LegacyFormat()
    return CurrentFormat()

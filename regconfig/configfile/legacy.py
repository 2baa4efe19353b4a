"""
Legacy (format 1) adapter.

The legacy file is either a flat JSON map of server -> {auth, email}, or an
older two-line plain-text form:

    auth = <base64 user:pass>
    email = <address>

JSON is always tried first; the plain-text parser only sees content that is
not a JSON object of objects.
"""

import json
import logging
from typing import Any, Dict, Optional

from regconfig.auth.models import AuthConfig
from regconfig.configfile.formats import (
    ConfigFormat,
    decode_auth_map,
    dump_json,
    encode_auth_map,
)
from regconfig.configfile.model import DEFAULT_INDEX_SERVER, ConfigFile, FormatVersion
from regconfig.errors import EmptyAuthConfigError, InvalidAuthConfigError


logger = logging.getLogger(__name__)

TEXT_SEPARATOR = " = "


def _as_auth_map(data: bytes) -> Optional[Dict[str, Dict[str, Any]]]:
    """Return the content as a server map if it is one, else None."""
    try:
        decoded = json.loads(data)
    except ValueError:
        return None

    if decoded is None:
        return {}
    if not isinstance(decoded, dict):
        return None
    if not all(isinstance(entry, dict) for entry in decoded.values()):
        return None
    return decoded


def _split_line(line: str) -> str:
    """Return the value of a ``key = value`` line."""
    parts = line.rstrip("\r").split(TEXT_SEPARATOR)
    if len(parts) != 2:
        raise InvalidAuthConfigError()
    return parts[1]


class LegacyFormat(ConfigFormat):
    """Flat server map, or the two-line plain-text fallback."""

    version = FormatVersion.LEGACY

    def parse(self, data: bytes) -> ConfigFile:
        auth_map = _as_auth_map(data)
        if auth_map is not None:
            logger.debug(f"Legacy file is JSON with {len(auth_map)} entries")
            return ConfigFile(
                auth_configs=decode_auth_map(auth_map),
                version=self.version,
            )

        logger.debug("Legacy file is not JSON, trying plain-text form")
        return ConfigFile(
            auth_configs=self._parse_text(data),
            version=self.version,
        )

    def _parse_text(self, data: bytes) -> Dict[str, AuthConfig]:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidAuthConfigError()

        lines = text.split("\n")
        if len(lines) < 2:
            raise EmptyAuthConfigError()

        auth = _split_line(lines[0])
        auth_config = AuthConfig.from_entry(DEFAULT_INDEX_SERVER, {"auth": auth})
        auth_config.email = _split_line(lines[1])

        return {DEFAULT_INDEX_SERVER: auth_config}

    def serialize(self, config: ConfigFile) -> bytes:
        return dump_json(encode_auth_map(config.auth_configs))

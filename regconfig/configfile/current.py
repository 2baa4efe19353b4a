"""
Current (format 2) adapter.

    {
        "auths": {"<server>": {"auth": "<base64 user:pass>", "email": "..."}},
        "psFormat": "...",
        ...
    }

Every top-level key other than "auths" is a preference and is written back
exactly as it was read.
"""

import json
import logging
from typing import Any, Dict

from regconfig.configfile.formats import (
    ConfigFormat,
    decode_auth_map,
    dump_json,
    encode_auth_map,
)
from regconfig.configfile.model import ConfigFile, FormatVersion
from regconfig.errors import ConfigParseError


logger = logging.getLogger(__name__)

AUTHS_KEY = "auths"


class CurrentFormat(ConfigFormat):
    """Nested "auths" section plus opaque preferences."""

    version = FormatVersion.CURRENT

    def parse(self, data: bytes) -> ConfigFile:
        try:
            decoded = json.loads(data)
        except ValueError as e:
            raise ConfigParseError(f"invalid JSON: {e}")

        if decoded is None:
            decoded = {}
        if not isinstance(decoded, dict):
            raise ConfigParseError("top-level value must be a JSON object")

        raw_auths = decoded.pop(AUTHS_KEY, None)
        if raw_auths is None:
            raw_auths = {}
        if not isinstance(raw_auths, dict):
            raise ConfigParseError(f'"{AUTHS_KEY}" must be a JSON object')

        for server, entry in raw_auths.items():
            if not isinstance(entry, dict):
                raise ConfigParseError(f"auth entry for {server!r} must be a JSON object")

        config = ConfigFile(
            auth_configs=decode_auth_map(raw_auths),
            preferences=decoded,
            version=self.version,
        )

        logger.debug(
            f"Parsed {len(config.auth_configs)} auth entries and "
            f"{len(config.preferences)} preferences"
        )
        return config

    def serialize(self, config: ConfigFile) -> bytes:
        document: Dict[str, Any] = {AUTHS_KEY: encode_auth_map(config.auth_configs)}
        for key in sorted(config.preferences):
            if key == AUTHS_KEY:
                continue
            document[key] = config.preferences[key]
        return dump_json(document)

"""
Configuration serializer.

The output format is chosen by the version flag on the ConfigFile (or an
explicit override), never detected, so a caller can migrate a loaded legacy
config by changing ``config.version`` before saving.
"""

import logging
import os
from pathlib import Path
from typing import BinaryIO, Optional

from regconfig.configfile.formats import get_format
from regconfig.configfile.model import ConfigFile, FormatVersion


logger = logging.getLogger(__name__)

FILE_MODE = 0o600


def serialize(config: ConfigFile, version: Optional[FormatVersion] = None) -> bytes:
    """
    Encode a configuration to file content.

    Args:
        config: Configuration to encode. Not modified.
        version: Output format. Defaults to ``config.version``.
    """
    if version is None:
        version = config.version
    return get_format(version).serialize(config)


def save_to_writer(config: ConfigFile, writer: BinaryIO, version: Optional[FormatVersion] = None) -> int:
    """
    Write a configuration to a binary stream.

    Returns:
        Number of bytes written.
    """
    data = serialize(config, version)
    writer.write(data)
    return len(data)


def save(config: ConfigFile) -> Path:
    """
    Save a configuration to ``config.path``.

    Missing parent directories are created. The file is written owner-only
    since it holds credentials.

    Returns:
        Path written.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    data = serialize(config)
    path = config.path

    path.parent.mkdir(parents=True, exist_ok=True)

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    with os.fdopen(fd, "wb") as f:
        f.write(data)

    logger.info(
        f"Saved {len(config.auth_configs)} credential(s) to {path} "
        f"(format {int(config.version)})"
    )
    return path

"""
Configuration loader.

Resolves which configuration file to read, picks the adapter from the
filename that was found, and returns a decoded ConfigFile.

Directory resolution order:
    1. Explicit directory passed by the caller
    2. REGCONFIG_DIR environment variable
    3. config_dir from the tool settings file
    4. ~/.regconfig
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Mapping, Optional, Union

from regconfig.configfile.formats import get_format
from regconfig.configfile.model import (
    CURRENT_FILENAME,
    LEGACY_FILENAME,
    ConfigFile,
    FormatVersion,
)
from regconfig.core.config import get_settings
from regconfig.errors import EmptyConfigFileError


logger = logging.getLogger(__name__)

CONFIG_DIR_ENV_VAR = "REGCONFIG_DIR"
DEFAULT_DIR_NAME = ".regconfig"

PathLike = Union[str, os.PathLike]


def _default_settings_dir() -> Optional[Path]:
    return get_settings().config_dir


@dataclass
class ConfigLocation:
    """
    Where to look for configuration.

    Passed explicitly so tests can point the loader at any directory without
    touching the process environment.
    """

    override_dir: Optional[Path] = None
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)
    home: Optional[Path] = None
    settings_dir: Optional[Path] = None

    @classmethod
    def from_environment(cls, override_dir: Optional[PathLike] = None) -> "ConfigLocation":
        """Location built from the real environment, home and settings file."""
        return cls(
            override_dir=Path(override_dir) if override_dir else None,
            environ=os.environ,
            home=Path.home(),
            settings_dir=_default_settings_dir(),
        )

    def config_dir(self) -> Path:
        """Resolve the configuration directory."""
        if self.override_dir:
            return Path(self.override_dir)

        env_dir = self.environ.get(CONFIG_DIR_ENV_VAR)
        if env_dir:
            return Path(env_dir).expanduser()

        if self.settings_dir:
            return Path(self.settings_dir)

        home = self.home if self.home is not None else Path.home()
        return home / DEFAULT_DIR_NAME


# Resolved once per process
_default_location: Optional[ConfigLocation] = None


def get_default_location(reload: bool = False) -> ConfigLocation:
    """
    Get the process-wide default location.

    Args:
        reload: Re-read the environment and settings.
    """
    global _default_location

    if _default_location is None or reload:
        _default_location = ConfigLocation.from_environment()

    return _default_location


def set_config_dir(config_dir: PathLike):
    """Replace the process-wide default directory."""
    global _default_location
    _default_location = ConfigLocation.from_environment(override_dir=config_dir)


def find_config_file(config_dir: Path) -> Optional[Path]:
    """
    Find the configuration file in a directory.

    The current-format file wins over the legacy one.

    Returns:
        Path of the file found, or None.
    """
    for name in (CURRENT_FILENAME, LEGACY_FILENAME):
        candidate = config_dir / name
        if candidate.is_file():
            return candidate
    return None


def version_for_file(path: Path) -> FormatVersion:
    """Pick the format from a filename. Anything but the legacy name is current."""
    if path.name == LEGACY_FILENAME:
        return FormatVersion.LEGACY
    return FormatVersion.CURRENT


def load(
    path: Optional[PathLike] = None,
    location: Optional[ConfigLocation] = None,
) -> ConfigFile:
    """
    Load registry configuration.

    Args:
        path: Configuration directory or file. If None or empty, the
              directory comes from ``location``.
        location: Directory resolution; defaults to the process-wide one.

    Returns:
        Decoded ConfigFile. An empty one if no file exists yet.

    Raises:
        EmptyConfigFileError: If the file found is zero-length.
        ConfigError: If the file cannot be parsed.
        OSError: If the file cannot be read.
    """
    if location is None:
        location = get_default_location()

    explicit_file: Optional[Path] = None
    if path:
        target = Path(path).expanduser()
        if target.is_file():
            explicit_file = target
            config_dir = target.parent
        else:
            config_dir = target
    else:
        config_dir = location.config_dir()

    config_path = explicit_file or find_config_file(config_dir)
    if config_path is None:
        logger.debug(f"No configuration file in {config_dir}, starting empty")
        return ConfigFile(config_dir=config_dir, version=FormatVersion.CURRENT)

    version = version_for_file(config_path)
    data = config_path.read_bytes()
    if not data:
        raise EmptyConfigFileError(config_path, legacy=version is FormatVersion.LEGACY)

    config = get_format(version).parse(data)
    config.config_dir = config_dir
    config.source_path = config_path
    if explicit_file is not None and config_path.name != version.filename:
        config.filename = config_path.name

    logger.info(
        f"Loaded {len(config.auth_configs)} credential(s) from {config_path} "
        f"(format {int(version)})"
    )
    return config


def load_from_reader(reader: BinaryIO, version: FormatVersion = FormatVersion.CURRENT) -> ConfigFile:
    """
    Parse configuration from a binary stream, with no filesystem lookup.

    Args:
        reader: Stream to read all content from.
        version: Format of the content.
    """
    data = reader.read()
    if isinstance(data, str):
        data = data.encode("utf-8")
    return get_format(version).parse(data)

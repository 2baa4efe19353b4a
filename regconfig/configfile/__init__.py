"""Registry configuration files: model, format adapters, load and save."""

from regconfig.configfile.model import (
    ConfigFile,
    FormatVersion,
    CURRENT_FILENAME,
    LEGACY_FILENAME,
    DEFAULT_INDEX_SERVER,
)
from regconfig.configfile.formats import ConfigFormat, get_format
from regconfig.configfile.legacy import LegacyFormat
from regconfig.configfile.current import CurrentFormat
from regconfig.configfile.loader import (
    ConfigLocation,
    get_default_location,
    set_config_dir,
    load,
    load_from_reader,
)
from regconfig.configfile.serializer import serialize, save, save_to_writer

__all__ = [
    "ConfigFile",
    "FormatVersion",
    "CURRENT_FILENAME",
    "LEGACY_FILENAME",
    "DEFAULT_INDEX_SERVER",
    "ConfigFormat",
    "get_format",
    "LegacyFormat",
    "CurrentFormat",
    "ConfigLocation",
    "get_default_location",
    "set_config_dir",
    "load",
    "load_from_reader",
    "serialize",
    "save",
    "save_to_writer",
]

"""
Tool settings for regconfig.

Handles loading settings from ~/.regconfig/settings.yaml and providing
default values. These settings configure the tool itself (where registry
configuration lives, how to log); they are separate from the registry
credential files the tool manages.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


# Default paths
DEFAULT_BASE_DIR = Path.home() / ".regconfig"
DEFAULT_SETTINGS_FILE = DEFAULT_BASE_DIR / "settings.yaml"

SETTINGS_ENV_VAR = "REGCONFIG_SETTINGS"


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "WARNING"
    file: Optional[Path] = None


@dataclass
class Settings:
    """Main settings container."""

    settings_file: Path = DEFAULT_SETTINGS_FILE

    # Registry configuration directory; None means "use the built-in default"
    config_dir: Optional[Path] = None

    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, settings_path: Optional[Path] = None) -> "Settings":
        """
        Load settings from YAML file.

        Args:
            settings_path: Path to settings file. If None, uses default location.
                           Can also be set via REGCONFIG_SETTINGS env var.

        Returns:
            Settings instance with values from file merged with defaults.
        """
        if settings_path is None:
            settings_path = Path(
                os.environ.get(SETTINGS_ENV_VAR, str(DEFAULT_SETTINGS_FILE))
            )

        settings = cls()
        settings.settings_file = Path(settings_path)

        # If settings file doesn't exist, return defaults
        if not settings.settings_file.exists():
            return settings

        try:
            with open(settings.settings_file) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid settings YAML: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Invalid settings YAML: expected a mapping in {settings.settings_file}")

        if data.get("config_dir"):
            settings.config_dir = Path(data["config_dir"]).expanduser()

        if "logging" in data:
            log_data = data["logging"] or {}
            log_file = log_data.get("file")
            settings.logging = LoggingConfig(
                level=str(log_data.get("level", "WARNING")).upper(),
                file=Path(log_file).expanduser() if log_file else None,
            )

        return settings

    def save_default_settings(self) -> bool:
        """
        Save a default settings file if one doesn't exist.

        Returns:
            True if a file was written.
        """
        if self.settings_file.exists():
            return False

        self.settings_file.parent.mkdir(parents=True, exist_ok=True)

        config_dir = self.config_dir or ""
        log_file = self.logging.file or ""

        default_settings = f"""\
# regconfig settings

# =============================================================================
# Registry configuration
# =============================================================================

# Directory holding config.json (or the legacy .regcfg).
# Empty means ~/.regconfig unless REGCONFIG_DIR is set.
config_dir: {config_dir}

# =============================================================================
# Logging
# =============================================================================

logging:
  level: {self.logging.level}           # DEBUG, INFO, WARNING, ERROR
  file: {log_file}
"""

        with open(self.settings_file, "w") as f:
            f.write(default_settings)

        return True


# Singleton instance
_settings: Optional[Settings] = None


def get_settings(reload: bool = False) -> Settings:
    """
    Get the global settings instance.

    Args:
        reload: Force reload from file.

    Returns:
        Settings instance.
    """
    global _settings

    if _settings is None or reload:
        _settings = Settings.load()

    return _settings

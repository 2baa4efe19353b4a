from pathlib import Path

import pytest

from regconfig.configfile import loader
from regconfig.configfile.loader import ConfigLocation
from regconfig.core import config as settings_module


AUTH_JOEJOE = "am9lam9lOmhlbGxv"  # joejoe:hello
INDEX_SERVER = "https://index.docker.io/v1/"


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch):
    """
    Keep every test away from the real home directory and environment.

    The default location and settings singletons point into tmp_path.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.delenv(loader.CONFIG_DIR_ENV_VAR, raising=False)
    monkeypatch.setenv(settings_module.SETTINGS_ENV_VAR, str(home / "settings.yaml"))
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    monkeypatch.setattr(settings_module, "_settings", None)
    monkeypatch.setattr(loader, "_default_location", None)
    return home


@pytest.fixture()
def config_dir(tmp_path: Path) -> Path:
    """Empty configuration directory."""
    path = tmp_path / "config"
    path.mkdir()
    return path


@pytest.fixture()
def location(config_dir: Path) -> ConfigLocation:
    return ConfigLocation(override_dir=config_dir, environ={})


def write_file(directory: Path, name: str, content: str) -> Path:
    path = directory / name
    path.write_text(content)
    return path

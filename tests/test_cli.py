"""Tests for the regconfig command line."""

import io
import json
import logging

import pytest

from regconfig.cli.main import create_parser, main
from regconfig.configfile import FormatVersion, load
from regconfig.configfile.model import CURRENT_FILENAME, LEGACY_FILENAME
from tests.conftest import AUTH_JOEJOE, INDEX_SERVER, write_file


OLD_JSON = json.dumps({INDEX_SERVER: {"auth": AUTH_JOEJOE, "email": "user@example.com"}})


@pytest.fixture(autouse=True)
def restore_logger():
    package_logger = logging.getLogger("regconfig")
    saved = list(package_logger.handlers), package_logger.level
    yield
    package_logger.handlers[:] = saved[0]
    package_logger.setLevel(saved[1])


def run(config_dir, *args) -> int:
    return main(["--config-dir", str(config_dir), *args])


class TestParser:
    def test_login_requires_username(self):
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["login", "registry.example.com"])

    def test_migrate_default_target(self):
        args = create_parser().parse_args(["migrate"])
        assert args.to == "current"

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage:" in capsys.readouterr().out


class TestShow:
    def test_empty(self, config_dir, capsys):
        assert run(config_dir, "show") == 0
        assert "No credentials stored" in capsys.readouterr().out

    def test_lists_without_passwords(self, config_dir, capsys):
        write_file(config_dir, LEGACY_FILENAME, OLD_JSON)
        assert run(config_dir, "show") == 0
        out = capsys.readouterr().out
        assert INDEX_SERVER in out
        assert "joejoe" in out
        assert "user@example.com" in out
        assert "hello" not in out

    def test_broken_file(self, config_dir, capsys):
        write_file(config_dir, CURRENT_FILENAME, "")
        assert run(config_dir, "show") == 1
        assert "is empty" in capsys.readouterr().out


class TestPath:
    def test_not_created_yet(self, config_dir, capsys):
        assert run(config_dir, "path") == 0
        out = capsys.readouterr().out
        assert str(config_dir / CURRENT_FILENAME) in out
        assert "not created yet" in out

    def test_legacy(self, config_dir, capsys):
        write_file(config_dir, LEGACY_FILENAME, OLD_JSON)
        assert run(config_dir, "path") == 0
        out = capsys.readouterr().out
        assert str(config_dir / LEGACY_FILENAME) in out
        assert "legacy" in out


class TestLoginLogout:
    def test_login_from_stdin(self, config_dir, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("s3cr:et\n"))
        assert run(config_dir, "login", "registry.example.com", "-u", "admin", "--password-stdin") == 0

        document = json.loads((config_dir / CURRENT_FILENAME).read_text())
        entry = document["auths"]["registry.example.com"]
        assert entry["auth"] != ""
        assert "s3cr:et" not in (config_dir / CURRENT_FILENAME).read_text()

    def test_login_prompts(self, config_dir, monkeypatch):
        monkeypatch.setattr("getpass.getpass", lambda prompt: "hello")
        assert run(config_dir, "login", INDEX_SERVER, "-u", "joejoe", "-e", "user@example.com") == 0

        document = json.loads((config_dir / CURRENT_FILENAME).read_text())
        assert document["auths"][INDEX_SERVER] == {"auth": AUTH_JOEJOE, "email": "user@example.com"}

    def test_login_empty_password(self, config_dir, monkeypatch, capsys):
        monkeypatch.setattr("getpass.getpass", lambda prompt: "")
        assert run(config_dir, "login", INDEX_SERVER, "-u", "joejoe") == 1
        assert not (config_dir / CURRENT_FILENAME).exists()

    def test_login_keeps_legacy_format(self, config_dir, monkeypatch):
        write_file(config_dir, LEGACY_FILENAME, OLD_JSON)
        monkeypatch.setattr("getpass.getpass", lambda prompt: "pw")
        assert run(config_dir, "login", "other.example.com", "-u", "me") == 0

        document = json.loads((config_dir / LEGACY_FILENAME).read_text())
        assert set(document) == {INDEX_SERVER, "other.example.com"}
        assert not (config_dir / CURRENT_FILENAME).exists()

    def test_logout(self, config_dir, capsys):
        write_file(config_dir, CURRENT_FILENAME, json.dumps({"auths": json.loads(OLD_JSON)}))
        assert run(config_dir, "logout", INDEX_SERVER) == 0

        document = json.loads((config_dir / CURRENT_FILENAME).read_text())
        assert document["auths"] == {}

    def test_logout_unknown(self, config_dir, capsys):
        assert run(config_dir, "logout", "nope.example.com") == 1
        assert "No credentials stored" in capsys.readouterr().out


class TestMigrate:
    def test_legacy_to_current(self, config_dir, capsys):
        write_file(config_dir, LEGACY_FILENAME, OLD_JSON)
        assert run(config_dir, "migrate") == 0

        document = json.loads((config_dir / CURRENT_FILENAME).read_text())
        assert document["auths"][INDEX_SERVER] == {"auth": AUTH_JOEJOE, "email": "user@example.com"}
        assert "Migrated" in capsys.readouterr().out

    def test_already_current(self, config_dir, capsys):
        write_file(config_dir, CURRENT_FILENAME, "{}")
        assert run(config_dir, "migrate", "--to", "current") == 0
        assert "Already in current format" in capsys.readouterr().out

    def test_current_to_legacy(self, config_dir):
        write_file(config_dir, CURRENT_FILENAME, json.dumps({"auths": json.loads(OLD_JSON), "psFormat": "table"}))
        assert run(config_dir, "migrate", "--to", "legacy") == 0

        document = json.loads((config_dir / LEGACY_FILENAME).read_text())
        assert document == json.loads(OLD_JSON)

    def test_legacy_migration_is_what_next_load_reads(self, config_dir, monkeypatch):
        write_file(config_dir, CURRENT_FILENAME, json.dumps({"auths": json.loads(OLD_JSON)}))
        assert run(config_dir, "migrate", "--to", "legacy") == 0

        assert not (config_dir / CURRENT_FILENAME).exists()
        assert (config_dir / (CURRENT_FILENAME + ".bak")).exists()

        config = load(config_dir)
        assert config.version is FormatVersion.LEGACY
        assert config.source_path == config_dir / LEGACY_FILENAME
        assert config.auth_configs[INDEX_SERVER].username == "joejoe"

        # Later logins keep writing the legacy file
        monkeypatch.setattr("getpass.getpass", lambda prompt: "pw")
        assert run(config_dir, "login", "other.example.com", "-u", "me") == 0
        assert not (config_dir / CURRENT_FILENAME).exists()
        assert "other.example.com" in json.loads((config_dir / LEGACY_FILENAME).read_text())


class TestInit:
    def test_writes_settings(self, isolated_environment, capsys):
        assert main(["init"]) == 0
        assert (isolated_environment / "settings.yaml").exists()

        assert main(["init"]) == 1
        assert "already exist" in capsys.readouterr().out

    def test_bad_settings(self, isolated_environment, capsys):
        (isolated_environment / "settings.yaml").write_text("logging: [broken\n")
        assert main(["show"]) == 1
        assert "Invalid settings YAML" in capsys.readouterr().out

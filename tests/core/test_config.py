"""Tests for configuration loading."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from neubauten.core.config import (
    Config,
    create_default_config,
    ensure_directories,
    get_config_path,
    get_log_file_path,
    load_config,
    parse_config,
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point XDG dirs at tmp_path and restore os.environ afterwards."""
    with patch.dict(os.environ):
        for name in ["NEUBAUTEN_PLAYLISTS_DIR", "NEUBAUTEN_LIBRARY_ROOT", "NEUBAUTEN_LOG_LEVEL"]:
            os.environ.pop(name, None)
        os.environ["XDG_CONFIG_HOME"] = str(tmp_path / "config")
        os.environ["XDG_DATA_HOME"] = str(tmp_path / "data")
        monkeypatch.chdir(tmp_path)
        yield


class TestParseConfig:
    def test_empty_document_gives_defaults(self):
        assert parse_config({}) == Config()

    def test_sections(self):
        config = parse_config(
            {
                "library": {"playlists_dir": "/p", "library_root": "/m"},
                "player": {"volume": 80, "poll_interval": 0.25},
                "ui": {"poll_timeout_ms": 50, "show_durations": False},
                "logging": {"level": "debug", "backup_count": 2},
            }
        )
        assert config.library.playlists_dir == "/p"
        assert config.library.library_root == "/m"
        assert config.player.volume == 80
        assert config.player.poll_interval == 0.25
        assert config.player.mpv_socket_path is None
        assert config.ui.poll_timeout_ms == 50
        assert not config.ui.show_durations
        assert config.logging.level == "DEBUG"
        assert config.logging.backup_count == 2
        assert config.logging.max_file_size_mb == 10

    def test_home_is_expanded(self):
        config = parse_config({"library": {"playlists_dir": "~/lists"}})
        assert config.library.playlists_dir == str(Path.home() / "lists")

    def test_invalid_ui_values_fall_back(self):
        config = parse_config({"ui": {"poll_timeout_ms": 0}})
        assert config.ui.poll_timeout_ms == 100

    def test_non_numeric_poll_timeout_falls_back(self):
        config = parse_config({"ui": {"poll_timeout_ms": "fast", "show_durations": False}})
        assert config.ui.poll_timeout_ms == 100
        assert config.ui.show_durations is True

    def test_unknown_log_level_falls_back(self):
        assert parse_config({"logging": {"level": "chatty"}}).logging.level == "INFO"


class TestLoadConfig:
    def test_creates_default_file(self, tmp_path):
        config = load_config()
        path = tmp_path / "config" / "neubauten" / "config.toml"
        assert path.read_text(encoding="utf-8") == create_default_config()
        assert config == Config()

    def test_default_file_round_trips(self):
        load_config()
        config = load_config()
        assert config.library.playlists_dir == str(Path.home() / "Music" / "Playlists")
        assert config.ui.poll_timeout_ms == 100

    def test_cwd_config_wins(self, tmp_path):
        (tmp_path / "config.toml").write_text('[ui]\npoll_timeout_ms = 250\n')
        assert get_config_path() == tmp_path / "config.toml"
        assert load_config().ui.poll_timeout_ms == 250

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('[player]\nvolume = 11\n')
        assert load_config(path).player.volume == 11

    def test_broken_toml_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text("[library\nplaylists_dir = ")
        assert load_config(path) == Config()

    def test_environment_overrides(self, tmp_path):
        path = tmp_path / "c.toml"
        path.write_text('[library]\nplaylists_dir = "/from/toml"\n')
        os.environ["NEUBAUTEN_PLAYLISTS_DIR"] = "/from/env"
        os.environ["NEUBAUTEN_LOG_LEVEL"] = "warning"
        config = load_config(path)
        assert config.library.playlists_dir == "/from/env"
        assert config.logging.level == "WARNING"

    def test_dotenv_file(self, tmp_path):
        env_dir = tmp_path / "config" / "neubauten"
        env_dir.mkdir(parents=True)
        (env_dir / ".env").write_text("NEUBAUTEN_LIBRARY_ROOT=/from/dotenv\n")
        path = tmp_path / "c.toml"
        path.write_text("")
        assert load_config(path).library.library_root == "/from/dotenv"


class TestPaths:
    def test_default_log_file_in_data_dir(self, tmp_path):
        assert get_log_file_path(Config()) == tmp_path / "data" / "neubauten" / "neubauten.log"

    def test_custom_log_file(self, tmp_path):
        config = parse_config({"logging": {"log_file": str(tmp_path / "x.log")}})
        assert get_log_file_path(config) == tmp_path / "x.log"

    def test_ensure_directories(self, tmp_path):
        ensure_directories(Config())
        assert (tmp_path / "config" / "neubauten").is_dir()
        assert (tmp_path / "data" / "neubauten").is_dir()

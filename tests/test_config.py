"""Tests for settings loading."""

from pathlib import Path

import pytest

from jamal.config import APP_IDENTIFIER, default_data_dir, load_settings


class TestSettings:
    def test_env_data_dir(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("JAMAL_DATA_DIR", str(tmp_path))
        monkeypatch.delenv("JAMAL_MAX_RECENT", raising=False)

        settings = load_settings()
        assert settings.data_dir == tmp_path
        assert settings.recent_files_path == tmp_path / "recent_files.json"
        assert settings.max_recent_files == 20

    def test_explicit_dir_wins_over_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("JAMAL_DATA_DIR", str(tmp_path / "env"))

        settings = load_settings(tmp_path / "explicit")
        assert settings.data_dir == tmp_path / "explicit"

    def test_default_dir_uses_identifier(self, monkeypatch):
        monkeypatch.delenv("JAMAL_DATA_DIR", raising=False)

        settings = load_settings()
        assert settings.data_dir == default_data_dir()
        assert settings.data_dir.name == APP_IDENTIFIER

    def test_xdg_data_home(self, tmp_path: Path, monkeypatch):
        monkeypatch.setattr("jamal.config.sys.platform", "linux")
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
        assert default_data_dir() == tmp_path / APP_IDENTIFIER

    def test_max_recent_and_log_level(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("JAMAL_MAX_RECENT", "5")
        monkeypatch.setenv("JAMAL_LOG_LEVEL", "DEBUG")

        settings = load_settings(tmp_path)
        assert settings.max_recent_files == 5
        assert settings.log_level == "debug"

    @pytest.mark.parametrize("raw", ["many", "0", "-3"])
    def test_invalid_max_recent(self, tmp_path: Path, monkeypatch, raw: str):
        monkeypatch.setenv("JAMAL_MAX_RECENT", raw)
        with pytest.raises(ValueError):
            load_settings(tmp_path)

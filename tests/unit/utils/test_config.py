"""Tests for configuration loading."""
import os
from pathlib import Path

import pytest

from src.utils import config


@pytest.fixture(autouse=True)
def reset_env_loaded(monkeypatch):
    """Force .env to be read again in every test and restore the environment."""
    saved = {key: os.environ.get(key) for key in ("TEA_GATHERING_DATA_DIR", "TEA_GATHERING_LOG_LEVEL")}
    monkeypatch.setattr(config, "_ENV_LOADED", False)
    for key in saved:
        os.environ.pop(key, None)

    yield

    for key, value in saved.items():
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value


class TestLoadEnv:
    """Tests for .env parsing."""

    def test_reads_known_keys(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# comment\nTEA_GATHERING_DATA_DIR='/srv/tea'\nTEA_GATHERING_LOG_LEVEL=debug\n",
            encoding="utf-8",
        )

        config.load_env(env_file)

        assert os.environ["TEA_GATHERING_DATA_DIR"] == "/srv/tea"
        assert config.get_log_level() == "DEBUG"

    def test_ignores_unknown_keys(self, tmp_path, monkeypatch):
        monkeypatch.delenv("SOME_SECRET", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("SOME_SECRET=1\n", encoding="utf-8")

        config.load_env(env_file)

        assert "SOME_SECRET" not in os.environ

    def test_existing_environment_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TEA_GATHERING_DATA_DIR", "/from/env")
        env_file = tmp_path / ".env"
        env_file.write_text("TEA_GATHERING_DATA_DIR=/from/file\n", encoding="utf-8")

        config.load_env(env_file)

        assert os.environ["TEA_GATHERING_DATA_DIR"] == "/from/env"

    def test_missing_file_is_fine(self, tmp_path):
        config.load_env(tmp_path / "missing.env")
        assert config._ENV_LOADED is True


class TestPaths:
    """Tests for storage path helpers."""

    def test_default_storage_path(self, monkeypatch):
        monkeypatch.setattr(config, "_ENV_LOADED", True)
        assert config.get_storage_path() == Path("data") / "tea-gathering-attendees.json"

    def test_storage_path_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setattr(config, "_ENV_LOADED", True)
        monkeypatch.setenv("TEA_GATHERING_DATA_DIR", str(tmp_path))
        assert config.get_storage_path() == tmp_path / "tea-gathering-attendees.json"

    def test_default_log_level(self, monkeypatch):
        monkeypatch.setattr(config, "_ENV_LOADED", True)
        assert config.get_log_level() == "INFO"

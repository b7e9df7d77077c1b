"""Tests for school_locator.config."""

import os
from pathlib import Path

import pytest

from school_locator.config import APP_NAME, StoreConfig, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Remove all config-related env vars before each test."""
    for key in list(os.environ):
        if key.startswith("SCHOOL_LOCATOR_"):
            monkeypatch.delenv(key, raising=False)
    # Prevent .env file from re-setting variables during tests
    monkeypatch.setattr("school_locator.config.load_dotenv", lambda *a, **kw: None)


def test_defaults_use_platform_data_dir(monkeypatch, tmp_path):
    """Without overrides the data directory comes from platformdirs."""
    calls = []

    def fake_user_data_dir(appname, appauthor=None):
        calls.append(appname)
        return str(tmp_path / "appdata")

    monkeypatch.setattr("school_locator.config.user_data_dir", fake_user_data_dir)

    config = load_config()

    assert calls == [APP_NAME]
    assert config.data_dir == str(tmp_path / "appdata")
    assert config.database_filename == "schools.db"
    assert config.busy_timeout_seconds == 5.0
    assert config.database_path == str(tmp_path / "appdata" / "schools.db")


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SCHOOL_LOCATOR_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SCHOOL_LOCATOR_DB_FILENAME", "other.db")
    monkeypatch.setenv("SCHOOL_LOCATOR_BUSY_TIMEOUT_SECONDS", "0.5")

    config = load_config()

    assert config.data_dir == str(tmp_path)
    assert Path(config.database_path) == tmp_path / "other.db"
    assert config.busy_timeout_seconds == 0.5


def test_invalid_timeout_raises(monkeypatch, tmp_path):
    monkeypatch.setenv("SCHOOL_LOCATOR_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SCHOOL_LOCATOR_BUSY_TIMEOUT_SECONDS", "soon")
    with pytest.raises(ValueError, match="SCHOOL_LOCATOR_BUSY_TIMEOUT_SECONDS"):
        load_config()


def test_negative_timeout_raises(monkeypatch, tmp_path):
    monkeypatch.setenv("SCHOOL_LOCATOR_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SCHOOL_LOCATOR_BUSY_TIMEOUT_SECONDS", "-1")
    with pytest.raises(ValueError, match="must not be negative"):
        load_config()


def test_config_is_frozen(tmp_path):
    """Config is immutable after creation."""
    config = StoreConfig(data_dir=str(tmp_path))

    with pytest.raises(AttributeError):
        config.data_dir = "/other"

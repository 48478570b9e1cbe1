"""Tests for core.settings."""

from pathlib import Path

import pytest

from core.settings import get_default_settings, get_setting, load_settings, reload_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    """Each test loads settings from scratch without HEXON_* overrides."""
    monkeypatch.delenv("HEXON_STORAGE_FILE", raising=False)
    monkeypatch.delenv("HEXON_LOG_LEVEL", raising=False)
    reload_settings()
    yield
    reload_settings()


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    """Without settings.yaml, defaults are returned."""
    settings = load_settings(tmp_path)
    assert get_setting(settings, "storage.file") == "data/storage.json"
    assert get_setting(settings, "routes.educator_dashboard") == "/dashboard/educator"
    assert get_setting(settings, "logging.level") == "INFO"


def test_file_values_merge_over_defaults(tmp_path: Path) -> None:
    """Nested keys from settings.yaml override only what they name."""
    (tmp_path / "settings.yaml").write_text(
        "routes:\n  login: /signin\nlogging:\n  level: DEBUG\n", encoding="utf-8"
    )
    settings = load_settings(tmp_path)
    assert get_setting(settings, "routes.login") == "/signin"
    assert get_setting(settings, "routes.home") == "/"
    assert get_setting(settings, "logging.level") == "DEBUG"
    assert get_setting(settings, "logging.backup_count") == 3


def test_malformed_yaml_falls_back_to_defaults(tmp_path: Path) -> None:
    """Unparsable settings.yaml is ignored."""
    (tmp_path / "settings.yaml").write_text("routes: [unclosed", encoding="utf-8")
    settings = load_settings(tmp_path)
    assert get_setting(settings, "routes.login") == "/login"


def test_env_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """HEXON_* variables win over file values."""
    (tmp_path / "settings.yaml").write_text("storage:\n  file: a.json\n", encoding="utf-8")
    monkeypatch.setenv("HEXON_STORAGE_FILE", "b.json")
    monkeypatch.setenv("HEXON_LOG_LEVEL", "WARNING")
    settings = load_settings(tmp_path)
    assert get_setting(settings, "storage.file") == "b.json"
    assert get_setting(settings, "logging.level") == "WARNING"


def test_settings_are_cached_until_reload(tmp_path: Path) -> None:
    """load_settings returns the cached dict until reload_settings is called."""
    first = load_settings(tmp_path)
    (tmp_path / "settings.yaml").write_text("routes:\n  home: /start\n", encoding="utf-8")
    assert load_settings(tmp_path) is first
    reload_settings()
    assert get_setting(load_settings(tmp_path), "routes.home") == "/start"


def test_get_setting_missing_path_returns_default() -> None:
    assert get_setting({"a": {"b": 1}}, "a.c", "x") == "x"
    assert get_setting({"a": 1}, "a.b") is None


def test_get_default_settings_is_a_copy() -> None:
    """Mutating the returned defaults does not leak into later calls."""
    defaults = get_default_settings()
    defaults["routes"]["home"] = "/changed"
    assert get_default_settings()["routes"]["home"] == "/"

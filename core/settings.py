"""Load application settings from config/settings.yaml."""

import os
from pathlib import Path
from typing import Any

import yaml

_DEFAULTS: dict[str, Any] = {
    "storage": {
        "file": "data/storage.json",
        "namespace": "",
    },
    "routes": {
        "home": "/",
        "login": "/login",
        "dashboard": "/dashboard",
        "student_dashboard": "/dashboard/student",
        "educator_dashboard": "/dashboard/educator",
    },
    "logging": {
        "file": "logs/onboarding.log",
        "level": "INFO",
        "log_to_console": False,
        "max_bytes": 5242880,  # 5 MB
        "backup_count": 3,
    },
}

# Environment variable -> dot path it overrides
_ENV_OVERRIDES: dict[str, str] = {
    "HEXON_STORAGE_FILE": "storage.file",
    "HEXON_LOG_LEVEL": "logging.level",
}

_cached: dict[str, Any] | None = None


def _deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Merge overlay into base recursively. Mutates base."""
    for key, value in overlay.items():
        if value is None:
            continue
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def get_default_settings() -> dict[str, Any]:
    """Return a deep copy of default settings."""
    return _deep_copy_nested(_DEFAULTS)


def get_setting(settings: dict[str, Any], path: str, default: Any = None) -> Any:
    """Get a nested value by dot path (e.g. 'routes.login')."""
    current: Any = settings
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def _set_path(settings: dict[str, Any], path: str, value: Any) -> None:
    parts = path.split(".")
    current = settings
    for part in parts[:-1]:
        current = current.setdefault(part, {})
    current[parts[-1]] = value


def reload_settings() -> None:
    """Clear the settings cache. Call after config files or env change."""
    global _cached
    _cached = None


def load_settings(config_dir: Path | None = None) -> dict[str, Any]:
    """Load settings from config/settings.yaml.

    Returns defaults merged with file values, then HEXON_* environment
    overrides. Missing or unparsable files fall back to defaults.
    """
    global _cached
    if _cached is not None:
        return _cached

    if config_dir is None:
        config_dir = Path(__file__).resolve().parent.parent / "config"
    path = config_dir / "settings.yaml"

    result = get_default_settings()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                _deep_merge(result, data)
        except (yaml.YAMLError, OSError):
            pass

    for env_name, dot_path in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            _set_path(result, dot_path, value)

    _cached = result
    return result


def _deep_copy_nested(obj: Any) -> Any:
    """Return a deep copy of nested dicts/lists for defaults."""
    if isinstance(obj, dict):
        return {k: _deep_copy_nested(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_deep_copy_nested(x) for x in obj]
    return obj

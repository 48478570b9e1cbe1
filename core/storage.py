"""Client-side key-value storage.

The onboarding wizard and the dashboard router only see the KeyValueStore
protocol. FileStore persists to a JSON file and survives restarts;
MemoryStore lives for the process and is what tests inject.
"""

import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyValueStore(Protocol):
    """String key -> string value store. set(key, None) removes the key."""

    def get(self, key: str) -> str | None:
        """Return the stored value or None when absent."""

    def set(self, key: str, value: str | None) -> None:
        """Write value under key. None deletes the key."""


class MemoryStore:
    """Dict-backed store."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str | None) -> None:
        if value is None:
            self._data.pop(key, None)
        else:
            self._data[key] = value

    def snapshot(self) -> dict[str, str]:
        return dict(self._data)


class FileStore:
    """JSON file-backed store. Atomic writes via temp file + replace.

    An optional namespace prefixes every key ("ns:key") so several profiles
    can share one file.
    """

    def __init__(self, path: Path, namespace: str = "") -> None:
        self._path = path
        self._temp_path = path.with_name(path.name + ".tmp")
        self._namespace = (namespace or "").strip()

    @property
    def path(self) -> Path:
        return self._path

    def _ns(self, key: str) -> str:
        return f"{self._namespace}:{key}" if self._namespace else key

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable store %s: %s", self._path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._temp_path.write_text(
            json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8"
        )
        self._temp_path.replace(self._path)

    def get(self, key: str) -> str | None:
        value = self._load().get(self._ns(key.strip()))
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str | None) -> None:
        data = self._load()
        ns_key = self._ns(key.strip())
        if value is None:
            data.pop(ns_key, None)
        else:
            data[ns_key] = value
        self._save(data)

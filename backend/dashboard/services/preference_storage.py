"""Durable key-value slot for the display preference."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class PreferenceStorage(Protocol):
    """Minimal string key-value surface, like a browser's localStorage."""

    def get(self, key: str) -> str | None: ...  # noqa: E704

    def set(self, key: str, value: str) -> None: ...  # noqa: E704


class InMemoryPreferenceStorage:
    """Non-durable storage, for tests and ephemeral sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFilePreferenceStorage:
    """
    Storage backed by a small JSON object on disk.

    Writes go to a temp file and are moved into place, so a crash mid-write
    leaves the previous contents intact. An unreadable or malformed file reads
    as empty rather than failing.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp, self.path)

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable preference file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring preference file %s: not a JSON object", self.path)
            return {}
        return data

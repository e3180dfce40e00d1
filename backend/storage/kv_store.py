"""Single-key document storage used by the landing page and exam management stores."""

import json
import logging
import os
from pathlib import Path
from threading import Lock
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value


class JsonFileStore:
    """Keeps every key as a string value inside one JSON object on disk.

    Reads and writes go through the whole file; concurrent writers are last-write-wins.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)
        self._lock = Lock()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        with self.path.open('r', encoding='utf-8') as handle:
            data = json.load(handle)
        if not isinstance(data, dict):
            raise ValueError(f'{self.path} does not hold a JSON object.')
        return data

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            try:
                data = self._load()
            except ValueError:
                # corrupt file is overwritten
                logger.warning('Discarding unreadable store file %s.', self.path)
                data = {}
            data[key] = value
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + '.tmp')
            with tmp_path.open('w', encoding='utf-8') as handle:
                json.dump(data, handle, ensure_ascii=False)
            os.replace(tmp_path, self.path)

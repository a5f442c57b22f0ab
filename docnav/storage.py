"""
Session-scoped key-value storage.

Mirrors the browser's sessionStorage: string keys, string values, one
namespace per session. Backends raise StorageUnavailableError when they
cannot be reached; callers decide whether that is fatal.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from .config.constants import DEFAULT_SESSION_NAME, DOCNAV_CONFIG_DIR
from .exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


class KeyValueStorage(ABC):
    """A string-to-string persistence slot."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value for key, or None when absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete key if present."""


class MemoryStorage(KeyValueStorage):
    """In-process storage; lives as long as the object."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def items(self) -> Dict[str, str]:
        """Snapshot of everything stored."""
        return dict(self._items)


class FileSessionStorage(KeyValueStorage):
    """JSON-file storage holding one object per session name.

    The file looks like ``{"default": {"expandedGroups": "[\\"a\\"]"}}``.
    Every write rewrites the file so that a crash never loses more than
    the last mutation.
    """

    def __init__(self, path: Optional[Path] = None, session: str = DEFAULT_SESSION_NAME):
        self.path = path or DOCNAV_CONFIG_DIR / "session.json"
        self.session = session

    def _read_all(self) -> Dict[str, Dict[str, str]]:
        try:
            if not self.path.exists():
                return {}
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning("Session file %s is corrupt, starting fresh", self.path)
            return {}
        except OSError as e:
            raise StorageUnavailableError(
                "Failed to read session file", path=str(self.path)
            ) from e
        if not isinstance(data, dict):
            logger.warning("Session file %s is not an object, starting fresh", self.path)
            return {}
        return data

    def _write_all(self, data: Dict[str, Dict[str, str]]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise StorageUnavailableError(
                "Failed to write session file", path=str(self.path)
            ) from e

    def _session_items(self, data: Dict[str, Dict[str, str]]) -> Dict[str, str]:
        items = data.get(self.session)
        return items if isinstance(items, dict) else {}

    def get_item(self, key: str) -> Optional[str]:
        value = self._session_items(self._read_all()).get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        items = self._session_items(data)
        items[key] = str(value)
        data[self.session] = items
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        items = self._session_items(data)
        if key in items:
            del items[key]
            data[self.session] = items
            self._write_all(data)

    def clear(self) -> None:
        """Drop everything stored for this session."""
        data = self._read_all()
        if self.session in data:
            del data[self.session]
            self._write_all(data)

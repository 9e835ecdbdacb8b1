"""
Token persistence.

The client keeps at most one token, serialised as JSON under a fixed key.
A TokenStore is the key/value seam behind that, so the same session code
works against memory, a file on disk, or anything else an application
provides.
"""

import json
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path

from ginclient.logging import get_logger

TOKEN_KEY = "token"

DEFAULT_STORAGE_PATH = Path("~/.config/ginclient/storage.json")

logger = get_logger("auth")


class TokenStore(ABC):
    """Abstract string key/value store for the session token."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove a key. Removing an absent key is not an error."""


class MemoryTokenStore(TokenStore):
    """Token store that lives as long as the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def remove(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)


class FileTokenStore(TokenStore):
    """
    Token store backed by a single JSON document on disk.

    Writes go to a temporary file in the same directory which then replaces
    the document, so a crash never leaves a half-written store behind. The
    file is created with owner-only permissions.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path or DEFAULT_STORAGE_PATH).expanduser()
        self._lock = threading.Lock()

    def _read(self) -> dict[str, str]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable token store at %s", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring unexpected token store content at %s", self.path)
            return {}
        return data

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".storage-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.chmod(tmp_path, 0o600)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise

    def get(self, key: str) -> str | None:
        with self._lock:
            value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if key in data:
                del data[key]
                self._write(data)

"""Session-scoped key/value markers.

Only one key is used today: the "service is warm" flag written after the
first successful probe.
"""

import json
import threading
from abc import ABC, abstractmethod
from pathlib import Path

SERVER_AWAKE_KEY = "server_awake"


class BaseSessionStore(ABC):
    """Contract for session storage backends."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None when absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value for the rest of the session."""


class MemorySessionStore(BaseSessionStore):
    """Session lasting as long as the current process."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._values[key] = value


class FileSessionStore(BaseSessionStore):
    """Session shared by every process pointed at the same JSON file.

    The session ends when the file is removed (e.g. a temp dir cleaned up
    at logout). A missing or corrupt file reads as an empty session.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            values = self._read()
            values[key] = value
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(values), encoding="utf-8")

    def _read(self) -> dict[str, object]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            return {}
        return data if isinstance(data, dict) else {}


def build_session_store(session_file: str) -> BaseSessionStore:
    if session_file.strip():
        return FileSessionStore(Path(session_file).expanduser())
    return MemorySessionStore()

"""
In-memory adapter - Process-local key-value substrate.

Used with STORE_BACKEND=memory for local runs and in tests. Values live as
long as the adapter instance does.
"""

import threading
from typing import Dict, Optional


class MemoryAdapter:
    """Dictionary-backed implementation of the key-value adapter contract."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> bool:
        with self._lock:
            self._data[key] = value
        return True

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None

    def exists(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def ping(self) -> bool:
        return True

    def close(self) -> None:
        pass

    def keys(self) -> list[str]:
        """Stored keys, for inspection in tests and debugging."""
        with self._lock:
            return sorted(self._data)

"""
Key-value adapter interface.

The collection store only needs string get/set/delete against named keys,
so any backend offering these methods can hold the collections.
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class KeyValueAdapter(Protocol):
    """Minimal string key-value contract used by the collection store."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when absent or unreadable."""
        ...

    def set(self, key: str, value: str) -> bool:
        """Overwrite the value for key. Returns True on success."""
        ...

    def delete(self, key: str) -> bool:
        """Remove key. Returns True if something was deleted."""
        ...

    def exists(self, key: str) -> bool:
        """Check whether key holds a value."""
        ...

    def ping(self) -> bool:
        """Check connectivity."""
        ...

    def close(self) -> None:
        """Release connections held by the adapter."""
        ...

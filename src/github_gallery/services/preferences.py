"""Key-value preference store abstractions."""

from dataclasses import dataclass
from typing import Protocol

CACHED_GISTS_KEY = "cached_gists"
CACHED_IMAGES_KEY = "cached_images"
BOOKMARKS_KEY = "bookmarks"


class KeyValueStore(Protocol):
    """Persistent store for string and string-list values."""

    async def get_string(self, key: str) -> str | None:
        """Return the string stored under key, if any."""

    async def set_string(self, key: str, value: str) -> None:
        """Store a string under key, replacing any previous value."""

    async def get_string_list(self, key: str) -> list[str] | None:
        """Return the string list stored under key, if any."""

    async def set_string_list(self, key: str, values: list[str]) -> None:
        """Store a string list under key, replacing any previous value."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store used when no preferences file is configured."""

    _values: dict[str, str | list[str]]

    def __init__(self) -> None:
        self._values = {}

    async def get_string(self, key: str) -> str | None:
        """Return a stored string."""
        value = self._values.get(key)
        return value if isinstance(value, str) else None

    async def set_string(self, key: str, value: str) -> None:
        """Store a string."""
        self._values[key] = value

    async def get_string_list(self, key: str) -> list[str] | None:
        """Return a copy of a stored string list."""
        value = self._values.get(key)
        return list(value) if isinstance(value, list) else None

    async def set_string_list(self, key: str, values: list[str]) -> None:
        """Store a copy of a string list."""
        self._values[key] = list(values)

"""JSON file backed preference store."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from github_gallery.domain.errors import PersistenceError
from github_gallery.services.preferences import KeyValueStore

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileKeyValueStore(KeyValueStore):
    """Stores all preferences as one JSON object on disk.

    The file is read on first access. Every write rewrites the whole file
    through a temporary sibling and an atomic rename, so a single key update
    is never observed half-written.
    """

    path: Path
    _values: dict[str, object] | None = field(default=None, init=False, repr=False)

    async def get_string(self, key: str) -> str | None:
        """Return a stored string."""
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    async def set_string(self, key: str, value: str) -> None:
        """Store a string and flush to disk."""
        self._write(key, value)

    async def get_string_list(self, key: str) -> list[str] | None:
        """Return a stored string list."""
        value = self._load().get(key)
        if not isinstance(value, list):
            return None
        return [item for item in value if isinstance(item, str)]

    async def set_string_list(self, key: str, values: list[str]) -> None:
        """Store a string list and flush to disk."""
        self._write(key, list(values))

    def _load(self) -> dict[str, object]:
        if self._values is not None:
            return self._values
        self._values = {}
        if not self.path.exists():
            return self._values
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            self._set_aside("unreadable")
            return self._values
        if isinstance(data, dict):
            self._values = data
        else:
            self._set_aside("not a JSON object")
        return self._values

    def _set_aside(self, reason: str) -> None:
        """Move a bad preferences file out of the way so writes cannot clobber it."""
        corrupt_path = self.path.with_suffix(self.path.suffix + ".corrupt")
        try:
            self.path.replace(corrupt_path)
        except OSError:
            _logger.warning(
                "Preferences file %s is %s and could not be moved; starting empty",
                self.path,
                reason,
            )
            return
        _logger.warning(
            "Preferences file %s is %s; moved to %s and starting empty",
            self.path,
            reason,
            corrupt_path,
        )

    def _write(self, key: str, value: object) -> None:
        values = dict(self._load())
        values[key] = value
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(values), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as exc:
            raise PersistenceError(f"Failed to write preference {key!r}") from exc
        self._values = values

"""Remote fetch and local cache for one record collection."""

import json
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from github_gallery.domain.errors import CacheCorruptionError, FetchError
from github_gallery.services.preferences import KeyValueStore

CACHE_SCHEMA_VERSION = 1

_logger = logging.getLogger(__name__)


class Identified(Protocol):
    """Records addressable by a string id."""

    @property
    def id(self) -> str: ...


RecordT = TypeVar("RecordT", bound=Identified)


@dataclass
class CollectionSource(Generic[RecordT]):
    """Fetches a listing over HTTP and mirrors it into the preference store.

    ``decode`` and ``encode`` map between records and their API JSON objects.
    Cached values are written as a versioned envelope; a bare JSON array from
    older releases is still accepted on read.
    """

    name: str
    cache_key: str
    fetch: Callable[[], Awaitable[object]]
    decode: Callable[[object], RecordT]
    encode: Callable[[RecordT], dict[str, object]]
    store: KeyValueStore

    async def fetch_remote(self) -> list[RecordT]:
        """Fetch and decode the live listing."""
        try:
            payload = await self.fetch()
        except Exception as exc:
            raise FetchError(f"Failed to fetch {self.name}: {exc}") from exc
        if not isinstance(payload, list):
            raise FetchError(f"Expected a JSON array of {self.name}")
        try:
            records = [self.decode(item) for item in payload]
        except (KeyError, TypeError, ValueError) as exc:
            raise FetchError(f"Malformed {self.name} payload: {exc}") from exc
        return self._dedupe(records)

    async def load_cached(self) -> list[RecordT]:
        """Return the cached listing, or an empty list on a miss."""
        raw = await self.store.get_string(self.cache_key)
        if raw is None:
            return []
        try:
            return self.decode_cache(raw)
        except CacheCorruptionError as exc:
            _logger.warning("Ignoring cached %s: %s", self.name, exc)
            return []

    async def store_cache(self, records: Sequence[RecordT]) -> None:
        """Replace the cached listing."""
        await self.store.set_string(self.cache_key, self.encode_cache(records))

    def decode_cache(self, raw: str) -> list[RecordT]:
        """Parse a cached value written by ``encode_cache``."""
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise CacheCorruptionError(f"{self.cache_key} is not valid JSON") from exc
        if isinstance(data, dict):
            version = data.get("schema_version")
            if version != CACHE_SCHEMA_VERSION:
                raise CacheCorruptionError(
                    f"{self.cache_key} has unsupported schema version {version!r}"
                )
            data = data.get("items")
        if not isinstance(data, list):
            raise CacheCorruptionError(f"{self.cache_key} does not hold a JSON array")
        try:
            return [self.decode(item) for item in data]
        except (KeyError, TypeError, ValueError) as exc:
            raise CacheCorruptionError(
                f"{self.cache_key} holds an undecodable record: {exc}"
            ) from exc

    def encode_cache(self, records: Sequence[RecordT]) -> str:
        """Serialize records into the versioned cache envelope."""
        return json.dumps(
            {
                "schema_version": CACHE_SCHEMA_VERSION,
                "items": [self.encode(record) for record in records],
            }
        )

    def _dedupe(self, records: list[RecordT]) -> list[RecordT]:
        seen: set[str] = set()
        unique: list[RecordT] = []
        for record in records:
            record_id = record.id
            if record_id in seen:
                _logger.warning("Dropping duplicate %s id=%s", self.name, record_id)
                continue
            seen.add(record_id)
            unique.append(record)
        return unique

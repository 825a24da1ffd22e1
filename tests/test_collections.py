"""Tests for collection fetch and cache handling."""

import asyncio
import json

import httpx
import pytest

from github_gallery.domain.errors import CacheCorruptionError, FetchError
from github_gallery.domain.gists import Gist, gist_from_json, gist_to_json
from github_gallery.services.collections import CollectionSource
from github_gallery.services.preferences import CACHED_GISTS_KEY
from tests.conftest import FakeGistsClient, RecordingKeyValueStore, gist_payload


def _source(
    client: FakeGistsClient, store: RecordingKeyValueStore
) -> CollectionSource[Gist]:
    return CollectionSource(
        name="gists",
        cache_key=CACHED_GISTS_KEY,
        fetch=client.list_public_gists,
        decode=gist_from_json,
        encode=gist_to_json,
        store=store,
    )


def test_load_cached_returns_empty_when_absent(store) -> None:
    source = _source(FakeGistsClient(), store)

    assert asyncio.run(source.load_cached()) == []


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        json.dumps({"schema_version": 99, "items": []}),
        json.dumps("just a string"),
        json.dumps([{"description": "missing id"}]),
    ],
)
def test_load_cached_treats_corruption_as_miss(store, raw: str) -> None:
    source = _source(FakeGistsClient(), store)
    asyncio.run(store.set_string(CACHED_GISTS_KEY, raw))

    assert asyncio.run(source.load_cached()) == []


def test_decode_cache_raises_corruption_error(store) -> None:
    source = _source(FakeGistsClient(), store)

    with pytest.raises(CacheCorruptionError):
        source.decode_cache("{not json")


def test_load_cached_accepts_unversioned_array(store) -> None:
    source = _source(FakeGistsClient(), store)
    asyncio.run(store.set_string(CACHED_GISTS_KEY, json.dumps([gist_payload("7")])))

    cached = asyncio.run(source.load_cached())

    assert [gist.id for gist in cached] == ["7"]


def test_store_cache_writes_versioned_envelope(store) -> None:
    source = _source(FakeGistsClient(), store)
    records = [gist_from_json(gist_payload("1")), gist_from_json(gist_payload("2"))]

    asyncio.run(source.store_cache(records))

    raw = asyncio.run(store.get_string(CACHED_GISTS_KEY))
    data = json.loads(raw)
    assert data["schema_version"] == 1
    assert [item["id"] for item in data["items"]] == ["1", "2"]
    assert asyncio.run(source.load_cached()) == records


def test_fetch_remote_decodes_records(store) -> None:
    client = FakeGistsClient(payload=[gist_payload("1"), gist_payload("2")])
    source = _source(client, store)

    records = asyncio.run(source.fetch_remote())

    assert [record.id for record in records] == ["1", "2"]
    assert store.writes == []


def test_fetch_remote_drops_duplicate_ids(store) -> None:
    client = FakeGistsClient(
        payload=[
            gist_payload("1", description="first"),
            gist_payload("1", description="second"),
        ]
    )
    source = _source(client, store)

    records = asyncio.run(source.fetch_remote())

    assert len(records) == 1
    assert records[0].description == "first"


@pytest.mark.parametrize(
    "client",
    [
        FakeGistsClient(payload={"message": "rate limited"}),
        FakeGistsClient(payload=[{"description": "missing id"}]),
        FakeGistsClient(error=httpx.ConnectError("offline")),
    ],
)
def test_fetch_remote_raises_fetch_error(store, client: FakeGistsClient) -> None:
    source = _source(client, store)

    with pytest.raises(FetchError):
        asyncio.run(source.fetch_remote())

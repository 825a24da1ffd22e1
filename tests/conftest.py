"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest

from github_gallery.adapters.github_gists_client import GistsClient
from github_gallery.adapters.unsplash_client import UnsplashClient
from github_gallery.config import Settings
from github_gallery.containers import AppContainer, build_gallery_service
from github_gallery.domain.errors import PersistenceError
from github_gallery.services.bookmarks import BookmarkService
from github_gallery.services.preferences import InMemoryKeyValueStore


def gist_payload(gist_id: str = "1", **overrides: object) -> dict[str, object]:
    """Return a GitHub-shaped gist object."""
    payload: dict[str, object] = {
        "id": gist_id,
        "description": "",
        "created_at": "2024-01-02T03:04:05+00:00",
        "updated_at": "2024-01-03T03:04:05+00:00",
        "files": {"hello.py": {"filename": "hello.py", "language": "Python"}},
        "owner": {"login": "octocat"},
        "comments": 0,
    }
    payload.update(overrides)
    return payload


def image_payload(image_id: str = "img-1", **overrides: object) -> dict[str, object]:
    """Return an Unsplash-shaped photo object."""
    payload: dict[str, object] = {
        "id": image_id,
        "urls": {
            "regular": f"https://images.test/{image_id}/regular.jpg",
            "thumb": f"https://images.test/{image_id}/thumb.jpg",
        },
        "user": {"name": "Ansel Adams"},
        "description": "Mountains",
        "alt_description": "snowy mountains",
    }
    payload.update(overrides)
    return payload


@dataclass
class RecordingKeyValueStore(InMemoryKeyValueStore):
    """In-memory store that records writes and can be told to fail them."""

    writes: list[str]
    fail_writes: bool

    def __init__(self) -> None:
        super().__init__()
        self.writes = []
        self.fail_writes = False

    async def set_string(self, key: str, value: str) -> None:
        self._check(key)
        await super().set_string(key, value)

    async def set_string_list(self, key: str, values: list[str]) -> None:
        self._check(key)
        await super().set_string_list(key, values)

    def _check(self, key: str) -> None:
        if self.fail_writes:
            raise PersistenceError(f"write refused for {key}")
        self.writes.append(key)


@dataclass
class FakeGistsClient(GistsClient):
    """Fake gists client returning a fixed payload."""

    payload: object = field(default_factory=lambda: [gist_payload()])
    error: Exception | None = None
    gate: asyncio.Event | None = None
    calls: int = 0

    async def list_public_gists(self) -> object:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakeUnsplashClient(UnsplashClient):
    """Fake Unsplash client returning a fixed payload."""

    payload: object = field(default_factory=lambda: [image_payload()])
    error: Exception | None = None
    calls: list[int] = field(default_factory=list)

    async def list_photos(self, per_page: int = 30) -> object:
        self.calls.append(per_page)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def settings() -> Settings:
    return Settings(unsplash_access_key="access-key")


@pytest.fixture
def store() -> RecordingKeyValueStore:
    return RecordingKeyValueStore()


@pytest.fixture
def gists_client() -> FakeGistsClient:
    return FakeGistsClient()


@pytest.fixture
def unsplash_client() -> FakeUnsplashClient:
    return FakeUnsplashClient()


@pytest.fixture
def container(
    settings: Settings,
    store: RecordingKeyValueStore,
    gists_client: FakeGistsClient,
    unsplash_client: FakeUnsplashClient,
) -> AppContainer:
    gallery_service = build_gallery_service(
        gists_client=gists_client,
        unsplash_client=unsplash_client,
        store=store,
        per_page=settings.unsplash_per_page,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        store=store,
        gists_client=gists_client,
        unsplash_client=unsplash_client,
        gallery_service=gallery_service,
        bookmark_service=BookmarkService(store),
        close_resources=close_resources,
    )

"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from github_gallery.adapters.github_gists_client import GistsClient, HttpxGistsClient
from github_gallery.adapters.json_file_store import JsonFileKeyValueStore
from github_gallery.adapters.unsplash_client import (
    HttpxUnsplashClient,
    UnsplashClient,
)
from github_gallery.config import Settings, resolve_store_path
from github_gallery.domain.gists import Gist, gist_from_json, gist_to_json
from github_gallery.domain.images import ImageItem, image_from_json, image_to_json
from github_gallery.services.bookmarks import BookmarkService
from github_gallery.services.collections import CollectionSource
from github_gallery.services.gallery import GalleryService
from github_gallery.services.preferences import (
    CACHED_GISTS_KEY,
    CACHED_IMAGES_KEY,
    InMemoryKeyValueStore,
    KeyValueStore,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: KeyValueStore
    gists_client: GistsClient
    unsplash_client: UnsplashClient
    gallery_service: GalleryService
    bookmark_service: BookmarkService
    close_resources: Callable[[], Awaitable[None]]


def build_gallery_service(
    gists_client: GistsClient,
    unsplash_client: UnsplashClient,
    store: KeyValueStore,
    per_page: int = 30,
) -> GalleryService:
    """Wire the gist and image collection sources into a gallery service."""
    gist_source: CollectionSource[Gist] = CollectionSource(
        name="gists",
        cache_key=CACHED_GISTS_KEY,
        fetch=gists_client.list_public_gists,
        decode=gist_from_json,
        encode=gist_to_json,
        store=store,
    )

    async def fetch_images() -> object:
        return await unsplash_client.list_photos(per_page=per_page)

    image_source: CollectionSource[ImageItem] = CollectionSource(
        name="images",
        cache_key=CACHED_IMAGES_KEY,
        fetch=fetch_images,
        decode=image_from_json,
        encode=image_to_json,
        store=store,
    )
    return GalleryService(gist_source=gist_source, image_source=image_source)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store_path = resolve_store_path(resolved_settings.store_path)
    store: KeyValueStore = (
        JsonFileKeyValueStore(store_path)
        if store_path is not None
        else InMemoryKeyValueStore()
    )
    gists_client = HttpxGistsClient.create(
        url=resolved_settings.gists_url,
        timeout=resolved_settings.http_timeout_seconds,
    )
    unsplash_client = HttpxUnsplashClient.create(
        access_key=resolved_settings.unsplash_access_key,
        url=resolved_settings.unsplash_url,
        timeout=resolved_settings.http_timeout_seconds,
    )
    gallery_service = build_gallery_service(
        gists_client=gists_client,
        unsplash_client=unsplash_client,
        store=store,
        per_page=resolved_settings.unsplash_per_page,
    )
    bookmark_service = BookmarkService(store)

    async def close_resources() -> None:
        await gists_client.close()
        await unsplash_client.close()

    return AppContainer(
        settings=resolved_settings,
        store=store,
        gists_client=gists_client,
        unsplash_client=unsplash_client,
        gallery_service=gallery_service,
        bookmark_service=bookmark_service,
        close_resources=close_resources,
    )

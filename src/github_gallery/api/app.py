"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from github_gallery.api.schemas import (
    BookmarksView,
    GalleryStatus,
    GistView,
    ImageView,
    RefreshResult,
    ToggleResult,
)
from github_gallery.app_logging import configure_logging
from github_gallery.containers import AppContainer
from github_gallery.services.gallery import GalleryService


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        try:
            await state_container.bookmark_service.load()
        except Exception:
            logger.exception("Failed to load bookmarks")
        await state_container.gallery_service.refresh_all()
        yield
        await state_container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/status")
    async def gallery_status(request: Request) -> GalleryStatus:
        """Return the loading flag and listing sizes."""
        state_container: AppContainer = request.app.state.container
        return _status(state_container.gallery_service)

    @app.get("/gists")
    async def list_gists(request: Request) -> list[GistView]:
        """Return the current gist listing."""
        state_container: AppContainer = request.app.state.container
        bookmarks = state_container.bookmark_service
        return [
            GistView.from_record(gist, bookmarks.is_bookmarked(gist.id))
            for gist in state_container.gallery_service.gists
        ]

    @app.get("/images")
    async def list_images(request: Request) -> list[ImageView]:
        """Return the current image listing."""
        state_container: AppContainer = request.app.state.container
        bookmarks = state_container.bookmark_service
        return [
            ImageView.from_record(image, bookmarks.is_bookmarked(image.id))
            for image in state_container.gallery_service.images
        ]

    @app.get("/bookmarks")
    async def list_bookmarks(request: Request) -> BookmarksView:
        """Return bookmarked entries present in the current listings."""
        state_container: AppContainer = request.app.state.container
        bookmarks = state_container.bookmark_service
        gallery = state_container.gallery_service
        return BookmarksView(
            ids=sorted(bookmarks.bookmarks),
            gists=[
                GistView.from_record(gist, bookmarked=True)
                for gist in bookmarks.bookmarked_records(gallery.gists)
            ],
            images=[
                ImageView.from_record(image, bookmarked=True)
                for image in bookmarks.bookmarked_records(gallery.images)
            ],
        )

    @app.post("/bookmarks/{item_id}/toggle")
    async def toggle_bookmark(item_id: str, request: Request) -> ToggleResult:
        """Flip the bookmark state of a gist or image id."""
        state_container: AppContainer = request.app.state.container
        bookmarked = await state_container.bookmark_service.toggle(item_id)
        logger.info("Bookmark toggled: id=%s bookmarked=%s", item_id, bookmarked)
        return ToggleResult(id=item_id, bookmarked=bookmarked)

    @app.post("/refresh")
    async def refresh_all(request: Request) -> GalleryStatus:
        """Refresh both listings and return the resulting status."""
        state_container: AppContainer = request.app.state.container
        await state_container.gallery_service.refresh_all()
        return _status(state_container.gallery_service)

    @app.post("/refresh/{collection}")
    async def refresh_collection(collection: str, request: Request) -> RefreshResult:
        """Refresh a single listing."""
        state_container: AppContainer = request.app.state.container
        gallery = state_container.gallery_service
        if collection == "gists":
            started = await gallery.refresh_gists()
        elif collection == "images":
            started = await gallery.refresh_images()
        else:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return RefreshResult(collection=collection, started=started)

    return app


def _status(gallery: GalleryService) -> GalleryStatus:
    return GalleryStatus(
        is_loading=gallery.is_loading,
        gists=len(gallery.gists),
        images=len(gallery.images),
        errors=dict(gallery.last_errors),
    )

"""Pydantic response models for the gallery API."""

from datetime import datetime

from pydantic import BaseModel, Field

from github_gallery.domain.gists import Gist
from github_gallery.domain.images import ImageItem


class GistView(BaseModel):
    """Gist listing entry."""

    id: str
    description: str
    created_at: datetime
    updated_at: datetime
    files: dict[str, object]
    owner: dict[str, object]
    comment_count: int
    bookmarked: bool = False

    @classmethod
    def from_record(cls, gist: Gist, bookmarked: bool) -> "GistView":
        """Build a view from a domain record."""
        return cls(
            id=gist.id,
            description=gist.description,
            created_at=gist.created_at,
            updated_at=gist.updated_at,
            files=gist.files,
            owner=gist.owner,
            comment_count=gist.comment_count,
            bookmarked=bookmarked,
        )


class ImageView(BaseModel):
    """Image listing entry."""

    id: str
    url: str
    thumbnail_url: str
    author: str
    description: str
    bookmarked: bool = False

    @classmethod
    def from_record(cls, image: ImageItem, bookmarked: bool) -> "ImageView":
        """Build a view from a domain record."""
        return cls(
            id=image.id,
            url=image.url,
            thumbnail_url=image.thumbnail_url,
            author=image.author,
            description=image.description,
            bookmarked=bookmarked,
        )


class GalleryStatus(BaseModel):
    """Loading state and listing sizes."""

    is_loading: bool
    gists: int
    images: int
    errors: dict[str, str] = Field(default_factory=dict)


class BookmarksView(BaseModel):
    """Bookmarked entries currently present in the listings."""

    ids: list[str]
    gists: list[GistView]
    images: list[ImageView]


class ToggleResult(BaseModel):
    """Bookmark state after a toggle."""

    id: str
    bookmarked: bool


class RefreshResult(BaseModel):
    """Outcome of a single-listing refresh request."""

    collection: str
    started: bool

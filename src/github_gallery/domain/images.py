"""Image domain model and its JSON shape."""

from dataclasses import dataclass

UNKNOWN_AUTHOR = "Unknown"


@dataclass(frozen=True)
class ImageItem:
    """A public Unsplash photo listing entry."""

    id: str
    url: str
    thumbnail_url: str
    author: str = UNKNOWN_AUTHOR
    description: str = ""


def image_from_json(payload: object) -> ImageItem:
    """Build an image from an Unsplash API (or cached) JSON object.

    The description falls back to ``alt_description`` and then to an empty
    string; a missing author name becomes ``"Unknown"``.
    """
    if not isinstance(payload, dict):
        raise ValueError("Image payload must be a JSON object")
    image_id = payload.get("id")
    if image_id is None or image_id == "":
        raise ValueError("Image payload is missing an id")
    urls = payload.get("urls")
    if not isinstance(urls, dict):
        raise ValueError(f"Image {image_id} is missing urls")
    regular = urls.get("regular")
    thumb = urls.get("thumb")
    if not isinstance(regular, str) or not isinstance(thumb, str):
        raise ValueError(f"Image {image_id} is missing regular or thumb url")
    user = payload.get("user") or {}
    author = user.get("name") if isinstance(user, dict) else None
    description = payload.get("description")
    if description is None:
        description = payload.get("alt_description")
    return ImageItem(
        id=str(image_id),
        url=regular,
        thumbnail_url=thumb,
        author=author if author is not None else UNKNOWN_AUTHOR,
        description=description if description is not None else "",
    )


def image_to_json(item: ImageItem) -> dict[str, object]:
    """Serialize an image back into the Unsplash API shape."""
    return {
        "id": item.id,
        "urls": {"regular": item.url, "thumb": item.thumbnail_url},
        "user": {"name": item.author},
        "description": item.description,
    }

"""Gist domain model and its JSON shape."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Gist:
    """A public GitHub gist listing entry."""

    id: str
    description: str
    created_at: datetime
    updated_at: datetime
    files: dict[str, object]
    owner: dict[str, object]
    comment_count: int = 0


def gist_from_json(payload: object) -> Gist:
    """Build a gist from a GitHub API (or cached) JSON object."""
    if not isinstance(payload, dict):
        raise ValueError("Gist payload must be a JSON object")
    gist_id = payload.get("id")
    if gist_id is None or gist_id == "":
        raise ValueError("Gist payload is missing an id")
    comment_count = payload.get("comments") or 0
    if not isinstance(comment_count, int) or comment_count < 0:
        raise ValueError(f"Gist {gist_id} has an invalid comment count")
    return Gist(
        id=str(gist_id),
        description=payload.get("description") or "",
        created_at=_parse_timestamp(payload.get("created_at"), "created_at"),
        updated_at=_parse_timestamp(payload.get("updated_at"), "updated_at"),
        files=dict(payload.get("files") or {}),
        owner=dict(payload.get("owner") or {}),
        comment_count=comment_count,
    )


def gist_to_json(gist: Gist) -> dict[str, object]:
    """Serialize a gist back into the GitHub API shape."""
    return {
        "id": gist.id,
        "description": gist.description,
        "created_at": gist.created_at.isoformat(),
        "updated_at": gist.updated_at.isoformat(),
        "files": gist.files,
        "owner": gist.owner,
        "comments": gist.comment_count,
    }


def _parse_timestamp(value: object, field_name: str) -> datetime:
    if not isinstance(value, str):
        raise ValueError(f"Gist field {field_name} must be an ISO-8601 string")
    return datetime.fromisoformat(value)

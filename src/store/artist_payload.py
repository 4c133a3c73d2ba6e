"""JSON serialization for Artist aggregates.

This module centralizes the persisted payload shape of an Artist with
its image groups. The artist store keeps one payload per row.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Any, cast
from uuid import UUID

from core.types import Artist, Image, ImageGroup, ImageRole


def artist_to_payload(artist: Artist) -> dict[str, object]:
    """Serialize an Artist into a JSON-safe payload.

    Args:
        artist: Artist aggregate.

    Returns:
        Dictionary payload for JSON encoding.
    """
    return {
        "id": str(artist.id),
        "name": artist.name,
        "born": artist.born,
        "died": artist.died,
        "genre": artist.genre,
        "nationality": artist.nationality,
        "bio": artist.bio,
        "wikipedia": artist.wikipedia,
        "paintings": [_group_to_payload(group) for group in artist.paintings],
    }


def artist_from_payload(payload: dict[str, Any]) -> Artist:
    """Deserialize a JSON payload into an Artist.

    Args:
        payload: Serialized artist payload.

    Returns:
        Parsed Artist aggregate.

    Raises:
        KeyError: If a required field is missing.
        ValueError: If an identifier is malformed.
    """
    return Artist(
        id=UUID(str(payload["id"])),
        name=str(payload["name"]),
        born=str(payload["born"]),
        died=str(payload["died"]),
        genre=str(payload["genre"]),
        nationality=str(payload["nationality"]),
        bio=str(payload["bio"]),
        wikipedia=str(payload["wikipedia"]),
        paintings=tuple(_group_from_payload(item) for item in payload["paintings"]),
    )


def _group_to_payload(group: ImageGroup) -> dict[str, object]:
    return {
        "id": str(group.id),
        "full": _image_to_payload(group.full),
        "cropped": _image_to_payload(group.cropped),
        "thumbnail": _image_to_payload(group.thumbnail),
    }


def _group_from_payload(payload: dict[str, Any]) -> ImageGroup:
    group_id = UUID(str(payload["id"]))
    return ImageGroup(
        id=group_id,
        full=_image_from_payload(group_id, "full", payload["full"]),
        cropped=_image_from_payload(group_id, "cropped", payload["cropped"]),
        thumbnail=_image_from_payload(group_id, "thumbnail", payload["thumbnail"]),
    )


def _image_to_payload(image: Image) -> dict[str, object]:
    return {
        "path": image.path.as_posix(),
        "width": image.width,
        "height": image.height,
    }


def _image_from_payload(group_id: UUID, role: str, payload: dict[str, Any]) -> Image:
    return Image(
        group_id=group_id,
        path=PurePosixPath(str(payload["path"])),
        role=cast(ImageRole, role),
        width=int(payload["width"]),
        height=int(payload["height"]),
    )

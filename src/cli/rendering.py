"""Human-readable rendering of stored artists.

Rendering is kept out of the domain types so persisted shapes and
display formats can change independently.
"""

from __future__ import annotations

from core.types import Artist, Image, ImageGroup


def render_image(image: Image) -> str:
    """Render variant dimensions, e.g. ``(w  600  h  450)``."""
    return f"(w {image.width:4}  h {image.height:4})"


def render_image_group(group: ImageGroup) -> str:
    """Render one image group on a single line."""
    return (
        f"{group.id} ->  full {render_image(group.full)}  "
        f"cropped {render_image(group.cropped)}  "
        f"thumbnail {render_image(group.thumbnail)}"
    )


def render_artist(artist: Artist) -> str:
    """Render an artist with its biography and image groups.

    Args:
        artist: Stored artist aggregate.

    Returns:
        Multi-line text block ending with a newline.
    """
    lines = [
        f"{artist.id} -> {artist.name}  {artist.born} - {artist.died} "
        f"[{artist.nationality}] [{artist.genre}]",
        f"wikipedia: {artist.wikipedia}",
        artist.bio,
    ]
    lines.extend(f"  p {render_image_group(group)}" for group in artist.paintings)
    return "\n".join(lines) + "\n"

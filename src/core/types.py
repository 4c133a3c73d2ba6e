"""Shared typed models.

This module defines immutable data models used by the catalog reader,
ingest pipeline, artist store, and CLI to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Literal
from uuid import UUID

from core.constants import (
    CROPPED_FILE_STEM,
    CROPPED_MAX_DIMENSION,
    DEFAULT_CSV_FILE_NAME,
    DEFAULT_INPUT_DIR,
    FULL_FILE_STEM,
    THUMBNAIL_FILE_STEM,
    THUMBNAIL_MAX_DIMENSION,
)

ImageRole = Literal["full", "cropped", "thumbnail"]


@dataclass(frozen=True)
class CatalogRecord:
    """One validated catalog row describing an artist.

    Attributes:
        id: Numeric external identifier from the catalog.
        name: Artist display name.
        years: Free-text year range, e.g. ``1853 – 1890``.
        genre: Comma-separated genre text.
        nationality: Nationality text.
        bio: Biography text.
        wikipedia: Reference URL.
        paintings: Advisory painting count from the catalog.
    """

    id: int
    name: str
    years: str
    genre: str
    nationality: str
    bio: str
    wikipedia: str
    paintings: int


@dataclass(frozen=True)
class VariantPolicy:
    """Sizing rule for one derived image variant.

    Attributes:
        role: Variant role tag.
        file_stem: Output file name without extension.
        max_dimension: Longest-side bound, or ``None`` for a verbatim copy.
    """

    role: ImageRole
    file_stem: str
    max_dimension: int | None


FULL_POLICY = VariantPolicy(role="full", file_stem=FULL_FILE_STEM, max_dimension=None)
CROPPED_POLICY = VariantPolicy(
    role="cropped", file_stem=CROPPED_FILE_STEM, max_dimension=CROPPED_MAX_DIMENSION
)
THUMBNAIL_POLICY = VariantPolicy(
    role="thumbnail", file_stem=THUMBNAIL_FILE_STEM, max_dimension=THUMBNAIL_MAX_DIMENSION
)
DEFAULT_VARIANT_POLICIES = (FULL_POLICY, CROPPED_POLICY, THUMBNAIL_POLICY)


@dataclass(frozen=True)
class Image:
    """One derived raster file.

    Attributes:
        group_id: Identifier of the owning image group.
        path: Path relative to the destination image directory.
        role: Variant role tag.
        width: Pixel width after resizing.
        height: Pixel height after resizing.
    """

    group_id: UUID
    path: PurePosixPath
    role: ImageRole
    width: int
    height: int


@dataclass(frozen=True)
class ImageGroup:
    """Variants derived from a single source image file.

    Attributes:
        id: Time-ordered group identifier, also the output directory name.
        full: Verbatim copy of the source.
        cropped: Variant bounded by the cropped dimension.
        thumbnail: Variant bounded by the thumbnail dimension.
    """

    id: UUID
    full: Image
    cropped: Image
    thumbnail: Image

    @property
    def images(self) -> tuple[Image, Image, Image]:
        """Return the variants in role order."""
        return (self.full, self.cropped, self.thumbnail)


@dataclass(frozen=True)
class Artist:
    """Artist aggregate root persisted as one unit.

    Attributes:
        id: Time-ordered primary key.
        name: Artist display name.
        born: Start of the year range, opaque text.
        died: End of the year range, opaque text.
        genre: Genre text.
        nationality: Nationality text.
        bio: Biography text.
        wikipedia: Reference URL.
        paintings: Owned image groups.
    """

    id: UUID
    name: str
    born: str
    died: str
    genre: str
    nationality: str
    bio: str
    wikipedia: str
    paintings: tuple[ImageGroup, ...]


@dataclass(frozen=True)
class IngestOptions:
    """Ingest command options.

    Attributes:
        input_dir: Directory holding the catalog file and ``images/``.
        csv_file: Catalog file name relative to ``input_dir``.
        fail_fast: Abort on the first failed artist instead of collecting all.
    """

    input_dir: Path = DEFAULT_INPUT_DIR
    csv_file: Path = Path(DEFAULT_CSV_FILE_NAME)
    fail_fast: bool = True

    @property
    def csv_path(self) -> Path:
        """Return the catalog file path."""
        return self.input_dir / self.csv_file


@dataclass(frozen=True)
class IngestResult:
    """Outcome of a committed ingest run.

    Attributes:
        inserted_count: Number of artists inserted.
        artists: Inserted aggregates, in catalog order.
    """

    inserted_count: int
    artists: tuple[Artist, ...]

"""Artist aggregate construction.

This module turns one catalog record into an Artist aggregate with
derived birth/death fields and freshly generated image groups.
"""

from __future__ import annotations

import re
from concurrent.futures import Executor
from pathlib import Path
from typing import Sequence

from core.constants import IMAGES_INPUT_DIR_NAME, IMAGES_OUTPUT_DIR_NAME, YEAR_RANGE_SEPARATORS
from core.errors import AtelierFilesystemError, AtelierParseError
from core.identifiers import new_identifier
from core.logging_config import get_logger
from core.types import DEFAULT_VARIANT_POLICIES, Artist, CatalogRecord, VariantPolicy
from ingest.image_set import assemble_image_groups

_LOGGER = get_logger(__name__)
_YEAR_SEPARATOR_PATTERN = re.compile("|".join(re.escape(sep) for sep in YEAR_RANGE_SEPARATORS))


def split_year_range(artist_name: str, years: str) -> tuple[str, str]:
    """Split a free-text year range into born and died text.

    Splits on the first hyphen or en dash and trims both halves. The
    halves are kept as opaque text since catalog data is inconsistent.

    Args:
        artist_name: Artist name for error context.
        years: Year range text, e.g. ``1853 – 1890``.

    Returns:
        Pair of ``(born, died)``.

    Raises:
        AtelierParseError: If no separator is present.
    """
    parts = _YEAR_SEPARATOR_PATTERN.split(years, maxsplit=1)
    if len(parts) != 2:
        raise AtelierParseError(
            f"Failed to parse years for artist '{artist_name}': '{years}' has no "
            "'-' or '–' separator. Fix the years column in the catalog."
        )
    return parts[0].strip(), parts[1].strip()


def ensure_image_directory(data_root: Path) -> Path:
    """Create the destination image directory when missing.

    Args:
        data_root: Data directory root.

    Returns:
        Destination image directory.

    Raises:
        AtelierFilesystemError: If the directory cannot be created.
    """
    destination_root = data_root / IMAGES_OUTPUT_DIR_NAME
    try:
        destination_root.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise AtelierFilesystemError(
            f"Failed to create image directory {destination_root}: {error}. "
            "Check write permissions on the data directory."
        ) from error
    return destination_root


def build_artist(
    record: CatalogRecord,
    input_root: Path,
    data_root: Path,
    image_executor: Executor,
    policies: Sequence[VariantPolicy] = DEFAULT_VARIANT_POLICIES,
    fail_fast: bool = True,
) -> Artist:
    """Build an Artist aggregate from one catalog record.

    Args:
        record: Validated catalog row.
        input_root: Input directory containing ``images/``.
        data_root: Data directory receiving ``img/``.
        image_executor: Executor for per-image work.
        policies: Variant policies for each image group.
        fail_fast: Cancel pending images after the first failure.

    Returns:
        Fully built artist aggregate.

    Raises:
        AtelierParseError: If the year range cannot be split.
        AtelierError: If any image of the artist fails.
    """
    destination_root = ensure_image_directory(data_root)
    born, died = split_year_range(record.name, record.years)
    paintings = assemble_image_groups(
        record.name,
        input_root / IMAGES_INPUT_DIR_NAME,
        destination_root,
        image_executor,
        policies=policies,
        fail_fast=fail_fast,
    )
    artist = Artist(
        id=new_identifier(),
        name=record.name,
        born=born,
        died=died,
        genre=record.genre,
        nationality=record.nationality,
        bio=record.bio,
        wikipedia=record.wikipedia,
        paintings=tuple(paintings),
    )
    _LOGGER.info(
        "artist_built",
        artist_id=str(artist.id),
        artist_name=artist.name,
        catalog_id=record.id,
        group_count=len(artist.paintings),
        catalog_painting_count=record.paintings,
    )
    return artist

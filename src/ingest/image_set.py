"""Image set assembly for one artist.

This module discovers an artist's source images, fans variant
generation out over a shared image executor, and removes partial
output when any group of the artist fails.
"""

from __future__ import annotations

import shutil
from concurrent.futures import Executor
from pathlib import Path
from typing import Iterable, Sequence

from core.errors import AtelierError, AtelierFilesystemError, AtelierLookupError
from core.identifiers import new_identifier
from core.logging_config import get_logger
from core.parallel import map_parallel
from core.types import DEFAULT_VARIANT_POLICIES, ImageGroup, VariantPolicy
from ingest.variant_generator import create_group_directory, generate_variant

_LOGGER = get_logger(__name__)


def artist_image_dir_name(artist_name: str) -> str:
    """Return the image directory name for an artist.

    Args:
        artist_name: Catalog display name, e.g. ``Vincent Van Gogh``.

    Returns:
        Name with spaces replaced by underscores.
    """
    return "_".join(artist_name.split(" "))


def assemble_image_groups(
    artist_name: str,
    images_root: Path,
    destination_root: Path,
    executor: Executor,
    policies: Sequence[VariantPolicy] = DEFAULT_VARIANT_POLICIES,
    fail_fast: bool = True,
) -> list[ImageGroup]:
    """Build one image group per source file of an artist.

    Args:
        artist_name: Catalog display name.
        images_root: Directory containing one subdirectory per artist.
        destination_root: Destination image directory.
        executor: Executor running one task per source file.
        policies: Variant policies covering full, cropped, and thumbnail.
        fail_fast: Cancel pending images after the first failure.

    Returns:
        Image groups in source directory name order.

    Raises:
        AtelierLookupError: If the artist image directory is missing.
        AtelierError: If any image group fails; no group of the artist
            is left on disk.
    """
    source_dir = images_root / artist_image_dir_name(artist_name)
    if not source_dir.is_dir():
        raise AtelierLookupError(
            f"Failed to find image directory for artist '{artist_name}' at {source_dir}. "
            "Catalog names and image directory names must match."
        )
    source_paths = _list_source_files(artist_name, source_dir)
    outcome = map_parallel(
        executor,
        lambda source_path: _build_group(source_path, destination_root, policies),
        source_paths,
        fail_fast=fail_fast,
    )
    if not outcome.succeeded:
        remove_image_groups(destination_root, outcome.results)
        _LOGGER.error(
            "image_set_failed",
            artist_name=artist_name,
            source_dir=str(source_dir),
            failed_count=len(outcome.errors),
            cancelled_count=outcome.cancelled_count,
        )
        raise _with_artist_context(outcome.errors[0], artist_name)
    _LOGGER.debug(
        "image_set_assembled",
        artist_name=artist_name,
        source_dir=str(source_dir),
        group_count=len(outcome.results),
    )
    return list(outcome.results)


def remove_image_groups(destination_root: Path, groups: Iterable[ImageGroup]) -> None:
    """Delete the output directories of already-written image groups.

    Args:
        destination_root: Destination image directory.
        groups: Groups whose directories should be removed.
    """
    for group in groups:
        shutil.rmtree(destination_root / str(group.id), ignore_errors=True)


def _list_source_files(artist_name: str, source_dir: Path) -> list[Path]:
    """List directory entries of an artist, sorted by name."""
    try:
        return sorted(source_dir.iterdir())
    except OSError as error:
        raise AtelierFilesystemError(
            f"Failed to list images for artist '{artist_name}' in {source_dir}: {error}. "
            "Check read permissions on the image directory."
        ) from error


def _build_group(
    source_path: Path,
    destination_root: Path,
    policies: Sequence[VariantPolicy],
) -> ImageGroup:
    """Create a group directory and write every variant into it."""
    group_id = new_identifier()
    group_dir = create_group_directory(destination_root, group_id)
    try:
        images = {
            policy.role: generate_variant(source_path, destination_root, group_id, policy)
            for policy in policies
        }
    except AtelierError:
        shutil.rmtree(group_dir, ignore_errors=True)
        _LOGGER.warning(
            "image_group_failed",
            source_path=str(source_path),
            group_id=str(group_id),
        )
        raise
    return ImageGroup(
        id=group_id,
        full=images["full"],
        cropped=images["cropped"],
        thumbnail=images["thumbnail"],
    )


def _with_artist_context(error: AtelierError, artist_name: str) -> AtelierError:
    """Return a same-typed error prefixed with the artist name."""
    contextual_error = type(error)(f"Artist '{artist_name}': {error}")
    contextual_error.__cause__ = error
    return contextual_error

"""Image variant generation.

This module decodes one source image and writes one derived variant:
a verbatim copy or a Lanczos-resized JPEG bounded on its longest side.
It has no knowledge of artists; callers attach that context.
"""

from __future__ import annotations

import shutil
from pathlib import Path, PurePosixPath
from uuid import UUID

from PIL import Image as PILImage

from core.constants import OUTPUT_IMAGE_EXTENSION, OUTPUT_IMAGE_FORMAT, OUTPUT_IMAGE_QUALITY
from core.errors import AtelierDecodeError, AtelierFilesystemError
from core.types import Image, VariantPolicy

_DECODE_ERRORS = (OSError, ValueError, PILImage.DecompressionBombError)
_JPEG_COMPATIBLE_MODES = ("RGB", "L", "CMYK")


def create_group_directory(destination_root: Path, group_id: UUID) -> Path:
    """Create the output directory owned by one image group.

    Args:
        destination_root: Destination image directory.
        group_id: Image group identifier.

    Returns:
        Created group directory.

    Raises:
        AtelierFilesystemError: If the directory exists or cannot be created.
    """
    group_dir = destination_root / str(group_id)
    try:
        group_dir.mkdir()
    except FileExistsError as error:
        raise AtelierFilesystemError(
            f"Image group directory already exists at {group_dir}. "
            "Another image was already written under this identifier."
        ) from error
    except OSError as error:
        raise AtelierFilesystemError(
            f"Failed to create image group directory {group_dir}: {error}. "
            "Check write permissions under the data directory."
        ) from error
    return group_dir


def generate_variant(
    source_path: Path,
    destination_root: Path,
    group_id: UUID,
    policy: VariantPolicy,
) -> Image:
    """Write one derived variant of a source image.

    The group directory must already exist, see ``create_group_directory``.

    Args:
        source_path: Source image file.
        destination_root: Destination image directory.
        group_id: Owning image group identifier.
        policy: Variant role and sizing rule.

    Returns:
        Image descriptor with post-resize dimensions.

    Raises:
        AtelierDecodeError: If the source cannot be decoded.
        AtelierFilesystemError: If the variant cannot be written.
    """
    if policy.max_dimension is None:
        return _copy_full_variant(source_path, destination_root, group_id, policy)
    return _write_resized_variant(source_path, destination_root, group_id, policy)


def fit_within(width: int, height: int, bound: int) -> tuple[int, int]:
    """Scale dimensions so the longest side is at most ``bound``.

    Dimensions already inside the bound are returned unchanged.

    Args:
        width: Source width in pixels.
        height: Source height in pixels.
        bound: Maximum length of the longest side.

    Returns:
        Target ``(width, height)``, each at least one pixel.
    """
    longest_side = max(width, height)
    if longest_side <= bound:
        return width, height
    scale = bound / longest_side
    return max(1, round(width * scale)), max(1, round(height * scale))


def _copy_full_variant(
    source_path: Path,
    destination_root: Path,
    group_id: UUID,
    policy: VariantPolicy,
) -> Image:
    """Copy source bytes verbatim and report decoded dimensions."""
    width, height = _read_dimensions(source_path)
    relative_path = _relative_variant_path(group_id, policy, source_path.suffix.lower())
    destination = destination_root / relative_path
    try:
        shutil.copyfile(source_path, destination)
    except OSError as error:
        raise AtelierFilesystemError(
            f"Failed to copy {source_path} to {destination}: {error}. "
            "Check disk space and write permissions."
        ) from error
    return Image(
        group_id=group_id,
        path=relative_path,
        role=policy.role,
        width=width,
        height=height,
    )


def _write_resized_variant(
    source_path: Path,
    destination_root: Path,
    group_id: UUID,
    policy: VariantPolicy,
) -> Image:
    """Resize a decoded source and save it with the output codec."""
    bound = policy.max_dimension or 0
    relative_path = _relative_variant_path(group_id, policy, OUTPUT_IMAGE_EXTENSION)
    destination = destination_root / relative_path
    try:
        with PILImage.open(source_path) as source_image:
            source_image.load()
            target_size = fit_within(source_image.width, source_image.height, bound)
            resized = source_image.resize(target_size, PILImage.Resampling.LANCZOS)
            if resized.mode not in _JPEG_COMPATIBLE_MODES:
                resized = resized.convert("RGB")
    except _DECODE_ERRORS as error:
        raise _decode_error(source_path, error) from error
    try:
        resized.save(destination, format=OUTPUT_IMAGE_FORMAT, quality=OUTPUT_IMAGE_QUALITY)
    except OSError as error:
        raise AtelierFilesystemError(
            f"Failed to write {policy.role} variant of {source_path} to {destination}: "
            f"{error}. Check disk space and write permissions."
        ) from error
    return Image(
        group_id=group_id,
        path=relative_path,
        role=policy.role,
        width=resized.width,
        height=resized.height,
    )


def _read_dimensions(source_path: Path) -> tuple[int, int]:
    """Fully decode a source image and return its size."""
    try:
        with PILImage.open(source_path) as source_image:
            source_image.load()
            return source_image.width, source_image.height
    except _DECODE_ERRORS as error:
        raise _decode_error(source_path, error) from error


def _relative_variant_path(group_id: UUID, policy: VariantPolicy, suffix: str) -> PurePosixPath:
    return PurePosixPath(str(group_id)) / f"{policy.file_stem}{suffix}"


def _decode_error(source_path: Path, error: Exception) -> AtelierDecodeError:
    return AtelierDecodeError(
        f"Failed to decode image {source_path}: {error}. "
        "Replace or remove the unreadable file and retry ingest."
    )

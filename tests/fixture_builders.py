"""Shared builders for catalog and image fixtures."""

from __future__ import annotations

import csv
from dataclasses import replace
from pathlib import Path

from PIL import Image

from core.config import AtelierConfig
from core.constants import CATALOG_COLUMNS


def build_config(tmp_path: Path) -> AtelierConfig:
    """Build a config rooted at ``tmp_path/data`` with small pools."""
    return replace(
        AtelierConfig.from_env(),
        data_dir=tmp_path / "data",
        artist_workers=2,
        image_workers=2,
    )


def write_image(path: Path, size: tuple[int, int] = (800, 600), mode: str = "RGB") -> Path:
    """Write a solid-color image, format chosen by suffix."""
    path.parent.mkdir(parents=True, exist_ok=True)
    color = (120, 60, 30, 255)[: len(mode)] if mode in ("RGB", "RGBA") else 128
    Image.new(mode, size, color).save(path)
    return path


def catalog_row(name: str = "Vincent Van Gogh", **overrides: object) -> dict[str, object]:
    """Return one catalog row with realistic defaults."""
    row: dict[str, object] = {
        "id": 1,
        "name": name,
        "years": "1853 – 1890",
        "genre": "Post-Impressionism",
        "nationality": "Dutch",
        "bio": "Vincent Willem van Gogh was a Dutch painter.",
        "wikipedia": "http://en.wikipedia.org/wiki/Vincent_van_Gogh",
        "paintings": 877,
    }
    row.update(overrides)
    return row


def write_catalog(csv_path: Path, rows: list[dict[str, object]]) -> Path:
    """Write catalog rows with the standard header."""
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    with csv_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(CATALOG_COLUMNS))
        writer.writeheader()
        writer.writerows(rows)
    return csv_path


def build_input_tree(
    input_dir: Path,
    images_by_artist: dict[str, list[tuple[int, int]]],
    rows: list[dict[str, object]] | None = None,
) -> Path:
    """Create ``data.csv`` and ``images/<Name>/`` under ``input_dir``.

    Args:
        input_dir: Input directory to populate.
        images_by_artist: Image sizes keyed by artist directory name.
        rows: Catalog rows; one default row per artist when omitted.

    Returns:
        The populated input directory.
    """
    for dir_name, sizes in images_by_artist.items():
        for index, size in enumerate(sizes):
            write_image(input_dir / "images" / dir_name / f"painting_{index}.jpg", size)
    if rows is None:
        rows = [
            catalog_row(name=dir_name.replace("_", " "), id=index)
            for index, dir_name in enumerate(images_by_artist)
        ]
    write_catalog(input_dir / "data.csv", rows)
    return input_dir

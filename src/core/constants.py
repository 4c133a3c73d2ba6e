"""Core constants used across Atelier modules.

This module centralizes default paths, file names, and image bounds.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_DIR = Path("data")
DEFAULT_DB_FILE_NAME = "data.db"
DEFAULT_CSV_FILE_NAME = "data.csv"
DEFAULT_INPUT_DIR = Path("input")
DEFAULT_LOG_LEVEL = "INFO"
IMAGES_INPUT_DIR_NAME = "images"
IMAGES_OUTPUT_DIR_NAME = "img"
CATALOG_COLUMNS = (
    "id",
    "name",
    "years",
    "genre",
    "nationality",
    "bio",
    "wikipedia",
    "paintings",
)
YEAR_RANGE_SEPARATORS = ("-", "–")
FULL_FILE_STEM = "full"
CROPPED_FILE_STEM = "cropped"
THUMBNAIL_FILE_STEM = "thumbnail"
CROPPED_MAX_DIMENSION = 600
THUMBNAIL_MAX_DIMENSION = 150
OUTPUT_IMAGE_FORMAT = "JPEG"
OUTPUT_IMAGE_EXTENSION = ".jpg"
OUTPUT_IMAGE_QUALITY = 90
ARTISTS_TABLE_NAME = "artists"

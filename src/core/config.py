"""Runtime configuration model for Atelier.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path

from core.constants import DEFAULT_DATA_DIR, DEFAULT_DB_FILE_NAME, DEFAULT_LOG_LEVEL
from core.errors import AtelierConfigError


@dataclass(frozen=True)
class AtelierConfig:
    """Validated runtime configuration.

    Attributes:
        data_dir: Root directory holding the store file and derived images.
        db_file: Store file name, resolved relative to ``data_dir``.
        artist_workers: Thread count for the per-artist fan-out.
        image_workers: Thread count for the per-image fan-out.
        log_level: Minimum structured log level name.
    """

    data_dir: Path
    db_file: Path
    artist_workers: int
    image_workers: int
    log_level: str

    @classmethod
    def from_env(cls) -> "AtelierConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            AtelierConfigError: If environment values are invalid.
        """
        data_dir_value = os.getenv("ATELIER_DATA_DIR", str(DEFAULT_DATA_DIR))
        db_file_value = os.getenv("ATELIER_DB_FILE", DEFAULT_DB_FILE_NAME)
        default_workers = str(os.cpu_count() or 1)
        artist_workers = _parse_worker_count(
            "ATELIER_ARTIST_WORKERS", os.getenv("ATELIER_ARTIST_WORKERS", default_workers)
        )
        image_workers = _parse_worker_count(
            "ATELIER_IMAGE_WORKERS", os.getenv("ATELIER_IMAGE_WORKERS", default_workers)
        )
        log_level = _parse_log_level(os.getenv("ATELIER_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(
            data_dir=Path(data_dir_value).expanduser().resolve(),
            db_file=Path(db_file_value),
            artist_workers=artist_workers,
            image_workers=image_workers,
            log_level=log_level,
        )

    @property
    def db_path(self) -> Path:
        """Return the absolute store file path."""
        return self.data_dir / self.db_file


def _parse_worker_count(env_name: str, raw_value: str) -> int:
    """Parse a positive worker count environment value.

    Args:
        env_name: Environment variable name for error context.
        raw_value: Raw string from environment.

    Returns:
        Parsed positive integer.

    Raises:
        AtelierConfigError: If value is not a positive integer.
    """
    try:
        value = int(raw_value)
    except ValueError as error:
        raise AtelierConfigError(
            f"Invalid {env_name} value: expected integer, got '{raw_value}'. "
            f"Set {env_name} to a positive number."
        ) from error
    if value < 1:
        raise AtelierConfigError(
            f"Invalid {env_name} value: expected at least 1, got {value}. "
            f"Set {env_name} to a positive number."
        )
    return value


def _parse_log_level(raw_value: str) -> str:
    """Validate a log level name against stdlib level names."""
    level_name = raw_value.strip().upper()
    if not isinstance(logging.getLevelName(level_name), int):
        raise AtelierConfigError(
            f"Invalid ATELIER_LOG_LEVEL value: '{raw_value}'. "
            "Use one of DEBUG, INFO, WARNING, ERROR."
        )
    return level_name

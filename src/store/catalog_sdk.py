"""Python SDK for artist catalog operations.

This module exposes high-level APIs for ingest, full scans, and
identifier lookup backed by the artist store.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from core.config import AtelierConfig
from core.identifiers import parse_identifier
from core.types import Artist, IngestOptions, IngestResult
from ingest.pipeline import find_artist, ingest_catalog, list_artists
from store.artist_store import ArtistStore, open_artist_store


class AtelierClient:
    """Primary SDK entry point for catalog workflows."""

    def __init__(self, config: AtelierConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or AtelierConfig.from_env()

    @property
    def config(self) -> AtelierConfig:
        """Return the runtime configuration."""
        return self._config

    def ingest(self, options: IngestOptions) -> IngestResult:
        """Ingest a catalog and its images into the store.

        Args:
            options: Ingest options.

        Returns:
            Committed ingest result.

        Raises:
            AtelierError: If reading, building, or persistence fails.
        """
        return ingest_catalog(options, self._config)

    def all_artists(self) -> list[Artist]:
        """Return every stored artist in primary-key order."""
        return list_artists(self._open_store())

    def find_by_id(self, artist_id: str) -> Artist:
        """Look up one artist by canonical identifier text.

        Args:
            artist_id: Hyphenated identifier text.

        Returns:
            Stored artist.

        Raises:
            AtelierInputError: If the identifier text is malformed.
            AtelierNotFoundError: If no artist has this identifier.
        """
        return find_artist(self._open_store(), parse_identifier(artist_id))

    def with_data_dir(self, data_dir: str) -> "AtelierClient":
        """Clone the client with a different data directory.

        Args:
            data_dir: New data directory path.

        Returns:
            New SDK client instance.
        """
        resolved_dir = Path(data_dir).expanduser().resolve()
        return AtelierClient(replace(self._config, data_dir=resolved_dir))

    def _open_store(self) -> ArtistStore:
        return open_artist_store(self._config)

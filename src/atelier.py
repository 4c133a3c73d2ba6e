"""Public SDK surface for Atelier.

This module provides a stable import path for library users.
It re-exports the primary client and typed models.
"""

from __future__ import annotations

from core.config import AtelierConfig
from core.types import (
    Artist,
    CatalogRecord,
    Image,
    ImageGroup,
    IngestOptions,
    IngestResult,
    VariantPolicy,
)
from ingest.pipeline import ingest_artists
from store.artist_store import ArtistStore
from store.catalog_sdk import AtelierClient

__all__ = [
    "Artist",
    "ArtistStore",
    "AtelierClient",
    "AtelierConfig",
    "CatalogRecord",
    "Image",
    "ImageGroup",
    "IngestOptions",
    "IngestResult",
    "VariantPolicy",
    "ingest_artists",
]

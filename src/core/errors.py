"""Atelier exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class AtelierError(Exception):
    """Base exception for all Atelier failures."""


class AtelierConfigError(AtelierError):
    """Raised for invalid runtime configuration."""


class AtelierInputError(AtelierError):
    """Raised for missing or malformed catalog input."""


class AtelierLookupError(AtelierError):
    """Raised when an artist image directory cannot be found."""


class AtelierDecodeError(AtelierError):
    """Raised when a source image cannot be decoded."""


class AtelierFilesystemError(AtelierError):
    """Raised for copy, create, and write failures on disk."""


class AtelierParseError(AtelierError):
    """Raised when a catalog field cannot be parsed."""


class AtelierStoreError(AtelierError):
    """Raised for artist store and transaction failures."""


class AtelierNotFoundError(AtelierError):
    """Raised when a lookup by identifier has no match."""


class AtelierIngestError(AtelierError):
    """Raised when a batch ingest run collects one or more failures."""

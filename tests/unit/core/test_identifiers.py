"""Unit tests for time-ordered identifiers."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from core.errors import AtelierInputError
from core.identifiers import new_identifier, parse_identifier


def test_new_identifier_is_version_seven() -> None:
    """Identifiers should be UUIDv7 values."""
    identifier = new_identifier()

    assert identifier.version == 7


def test_new_identifier_is_unique_under_concurrency() -> None:
    """Concurrent generation should never repeat an identifier."""
    with ThreadPoolExecutor(max_workers=8) as executor:
        identifiers = list(executor.map(lambda _: new_identifier(), range(2000)))

    assert len(set(identifiers)) == 2000


def test_new_identifier_sorts_by_creation_order() -> None:
    """Sequentially generated identifiers should sort chronologically."""
    identifiers = [new_identifier() for _ in range(50)]

    assert sorted(identifiers, key=str) == identifiers


def test_parse_identifier_round_trips_canonical_text() -> None:
    """Canonical text should parse back into the same identifier."""
    identifier = new_identifier()

    assert parse_identifier(f" {identifier} ") == identifier


def test_parse_identifier_rejects_malformed_text() -> None:
    """Malformed identifier text should raise an input error."""
    with pytest.raises(AtelierInputError):
        parse_identifier("not-an-id")

"""Unit tests for the catalog SDK client."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import AtelierConfig
from core.errors import AtelierInputError, AtelierNotFoundError
from core.types import IngestOptions
from store.catalog_sdk import AtelierClient
from tests.fixture_builders import build_input_tree


def test_client_ingest_then_lookup(tmp_path: Path, config: AtelierConfig) -> None:
    """Ingested artists should be visible through scan and lookup."""
    input_dir = build_input_tree(tmp_path / "input", {"Gustav_Klimt": [(700, 700)]})
    client = AtelierClient(config)

    result = client.ingest(IngestOptions(input_dir=input_dir))

    assert client.all_artists() == list(result.artists)
    assert client.find_by_id(str(result.artists[0].id)).name == "Gustav Klimt"


def test_client_find_by_id_rejects_malformed_text(config: AtelierConfig) -> None:
    """Malformed identifier text is an input error."""
    with pytest.raises(AtelierInputError):
        AtelierClient(config).find_by_id("not-a-uuid")


def test_client_find_by_id_reports_unknown_id(config: AtelierConfig) -> None:
    """Well-formed but unknown identifiers are not-found errors."""
    with pytest.raises(AtelierNotFoundError):
        AtelierClient(config).find_by_id("0190b2a4-0000-7000-8000-000000000000")


def test_with_data_dir_switches_store(tmp_path: Path, config: AtelierConfig) -> None:
    """Cloned clients should read from their own data directory."""
    client = AtelierClient(config).with_data_dir(str(tmp_path / "other"))

    assert client.config.data_dir == (tmp_path / "other").resolve()
    assert client.all_artists() == []

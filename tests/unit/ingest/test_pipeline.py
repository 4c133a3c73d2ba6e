"""Unit tests for ingest orchestration."""

from __future__ import annotations

from pathlib import Path
from uuid import UUID

import pytest

from core.config import AtelierConfig
from core.errors import (
    AtelierIngestError,
    AtelierLookupError,
    AtelierNotFoundError,
    AtelierParseError,
    AtelierStoreError,
)
from core.types import IngestOptions
from ingest.pipeline import IngestPipelineRunner, find_artist, ingest_catalog, list_artists
from store.artist_store import WriteTransaction, open_artist_store
from tests.fixture_builders import build_input_tree, catalog_row


def _image_dirs(config: AtelierConfig) -> list[Path]:
    image_root = config.data_dir / "img"
    if not image_root.exists():
        return []
    return list(image_root.iterdir())


def test_ingest_catalog_persists_every_artist(tmp_path: Path, config: AtelierConfig) -> None:
    """Successful ingest should commit one artist per catalog row."""
    input_dir = build_input_tree(
        tmp_path / "input",
        {"Claude_Monet": [(1200, 900), (640, 480)], "Edvard_Munch": [(500, 700)]},
    )

    result = ingest_catalog(IngestOptions(input_dir=input_dir), config)

    stored = list_artists(open_artist_store(config))
    assert result.inserted_count == 2
    assert {artist.name for artist in stored} == {"Claude Monet", "Edvard Munch"}
    assert len(_image_dirs(config)) == 3


def test_runner_reaches_done_stage(tmp_path: Path, config: AtelierConfig) -> None:
    """Runner should report the done stage after commit."""
    input_dir = build_input_tree(tmp_path / "input", {"Claude_Monet": [(300, 200)]})
    runner = IngestPipelineRunner(IngestOptions(input_dir=input_dir), config)

    runner.run()

    assert runner.stage == "done"


def test_one_failing_artist_leaves_nothing_behind(tmp_path: Path, config: AtelierConfig) -> None:
    """A missing image directory should abort the whole batch."""
    input_dir = build_input_tree(
        tmp_path / "input",
        {"Claude_Monet": [(400, 300), (400, 300)]},
        rows=[catalog_row(name="Claude Monet"), catalog_row(name="Frida Kahlo", id=2)],
    )
    runner = IngestPipelineRunner(IngestOptions(input_dir=input_dir), config)

    with pytest.raises(AtelierLookupError, match="Frida Kahlo"):
        runner.run()

    assert runner.stage == "aborted"
    assert list_artists(open_artist_store(config)) == []
    assert _image_dirs(config) == []


def test_collect_errors_reports_every_failure(tmp_path: Path, config: AtelierConfig) -> None:
    """Collect mode should aggregate failures of all artists."""
    input_dir = build_input_tree(
        tmp_path / "input",
        {"Claude_Monet": [(400, 300)]},
        rows=[
            catalog_row(name="Claude Monet", years="unknown"),
            catalog_row(name="Frida Kahlo", id=2),
            catalog_row(name="Joan Miro", id=3),
        ],
    )
    options = IngestOptions(input_dir=input_dir, fail_fast=False)

    with pytest.raises(AtelierIngestError, match="3 of 3 artists failed") as error_info:
        ingest_catalog(options, config)

    message = str(error_info.value)
    assert "Claude Monet" in message and "Frida Kahlo" in message and "Joan Miro" in message
    assert isinstance(error_info.value.__cause__, AtelierParseError)
    assert _image_dirs(config) == []


def test_store_failure_removes_generated_images(
    tmp_path: Path,
    config: AtelierConfig,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A failed commit should discard every generated image group."""
    input_dir = build_input_tree(tmp_path / "input", {"Claude_Monet": [(400, 300)]})

    def _failing_commit(self: WriteTransaction) -> None:
        self.abort()
        raise AtelierStoreError("commit refused")

    monkeypatch.setattr(WriteTransaction, "commit", _failing_commit)

    with pytest.raises(AtelierStoreError, match="commit refused"):
        ingest_catalog(IngestOptions(input_dir=input_dir), config)

    assert _image_dirs(config) == []
    assert list_artists(open_artist_store(config)) == []


def test_find_artist_returns_stored_artist(tmp_path: Path, config: AtelierConfig) -> None:
    """Lookup by identifier should return the committed aggregate."""
    input_dir = build_input_tree(tmp_path / "input", {"Claude_Monet": [(400, 300)]})
    result = ingest_catalog(IngestOptions(input_dir=input_dir), config)

    found = find_artist(open_artist_store(config), result.artists[0].id)

    assert found == result.artists[0]


def test_find_artist_raises_for_unknown_id(config: AtelierConfig) -> None:
    """Unknown identifiers should raise a not-found error."""
    store = open_artist_store(config)

    with pytest.raises(AtelierNotFoundError, match="not found"):
        find_artist(store, UUID("0190b2a4-0000-7000-8000-000000000000"))

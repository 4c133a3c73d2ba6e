"""Ingest orchestration for artist catalogs.

This module fans artist construction out over thread pools, aborts the
batch on failure without leaving files behind, and commits every built
artist in a single store transaction.
"""

from __future__ import annotations

from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import replace
from pathlib import Path
from typing import Literal, Sequence
from uuid import UUID

from core.config import AtelierConfig
from core.constants import IMAGES_OUTPUT_DIR_NAME
from core.errors import AtelierError, AtelierIngestError, AtelierNotFoundError
from core.logging_config import get_logger
from core.parallel import ParallelOutcome, map_parallel
from core.types import Artist, CatalogRecord, IngestOptions, IngestResult
from ingest.artist_builder import build_artist
from ingest.catalog_reader import read_catalog
from ingest.image_set import remove_image_groups
from store.artist_store import ArtistStore, open_artist_store

_LOGGER = get_logger(__name__)

IngestStage = Literal["idle", "reading", "building", "aborted", "committing", "done"]


class IngestPipelineRunner:
    """Stateful runner for one ingest run.

    Stages move ``idle -> reading -> building -> committing -> done``;
    any failure moves the run to ``aborted`` with nothing persisted.
    """

    def __init__(self, options: IngestOptions, config: AtelierConfig) -> None:
        self._options = options
        self._config = config
        self._stage: IngestStage = "idle"

    @property
    def stage(self) -> IngestStage:
        """Return the current run stage."""
        return self._stage

    def run(self) -> IngestResult:
        """Read the catalog, build every artist, and commit them."""
        self._set_stage("reading")
        try:
            records = read_catalog(self._options.csv_path)
            store = open_artist_store(self._config)
        except AtelierError:
            self._set_stage("aborted")
            raise
        return self.ingest(records, store)

    def ingest(self, records: Sequence[CatalogRecord], store: ArtistStore) -> IngestResult:
        """Build artists for ``records`` and insert them atomically.

        Args:
            records: Validated catalog records.
            store: Destination artist store.

        Returns:
            Committed ingest result.

        Raises:
            AtelierError: First build failure in fail-fast mode.
            AtelierIngestError: Aggregated build failures otherwise.
            AtelierStoreError: If the transaction fails.
        """
        self._set_stage("building")
        artists = self._build_artists(records)
        self._set_stage("committing")
        self._commit(artists, store)
        self._set_stage("done")
        _log_ingest_completion(self._options, self._config, len(records), len(artists))
        return IngestResult(inserted_count=len(artists), artists=tuple(artists))

    def _build_artists(self, records: Sequence[CatalogRecord]) -> list[Artist]:
        fail_fast = self._options.fail_fast
        # Artist tasks block on image tasks, so each level gets its own pool.
        with ThreadPoolExecutor(
            max_workers=self._config.image_workers, thread_name_prefix="image"
        ) as image_executor, ThreadPoolExecutor(
            max_workers=self._config.artist_workers, thread_name_prefix="artist"
        ) as artist_executor:
            outcome = map_parallel(
                artist_executor,
                lambda record: self._build_artist(record, image_executor),
                records,
                fail_fast=fail_fast,
            )
        if not outcome.succeeded:
            self._abort(outcome.results)
            raise _build_failure(outcome, len(records), fail_fast)
        return list(outcome.results)

    def _build_artist(self, record: CatalogRecord, image_executor: Executor) -> Artist:
        return build_artist(
            record,
            self._options.input_dir,
            self._config.data_dir,
            image_executor,
            fail_fast=self._options.fail_fast,
        )

    def _commit(self, artists: list[Artist], store: ArtistStore) -> None:
        try:
            with store.rw_transaction() as transaction:
                for artist in artists:
                    transaction.insert(artist)
                transaction.commit()
        except AtelierError:
            self._abort(artists)
            raise

    def _abort(self, built_artists: Sequence[Artist]) -> None:
        """Remove image output of artists that will not be persisted."""
        destination_root = self._config.data_dir / IMAGES_OUTPUT_DIR_NAME
        for artist in built_artists:
            remove_image_groups(destination_root, artist.paintings)
        self._set_stage("aborted")
        _LOGGER.error(
            "ingest_aborted",
            input_dir=str(self._options.input_dir),
            discarded_artist_count=len(built_artists),
        )

    def _set_stage(self, stage: IngestStage) -> None:
        _LOGGER.debug("ingest_stage_changed", previous=self._stage, stage=stage)
        self._stage = stage


def ingest_catalog(options: IngestOptions, config: AtelierConfig) -> IngestResult:
    """Run the full ingest pipeline from the catalog file.

    Args:
        options: Ingest request options.
        config: Runtime configuration.

    Returns:
        Committed ingest result.

    Raises:
        AtelierInputError: If the catalog cannot be read.
        AtelierError: If any artist fails to build.
        AtelierStoreError: If persistence fails.
    """
    return IngestPipelineRunner(options, config).run()


def ingest_artists(
    records: Sequence[CatalogRecord],
    input_root: Path,
    data_root: Path,
    store: ArtistStore,
    config: AtelierConfig,
    fail_fast: bool = True,
) -> IngestResult:
    """Build and commit artists for already-parsed catalog records.

    Args:
        records: Validated catalog records.
        input_root: Input directory containing ``images/``.
        data_root: Data directory receiving ``img/``.
        store: Destination artist store.
        config: Runtime configuration for worker counts.
        fail_fast: Abort on the first failure instead of collecting all.

    Returns:
        Committed ingest result.
    """
    options = IngestOptions(input_dir=input_root, fail_fast=fail_fast)
    runner = IngestPipelineRunner(options, replace(config, data_dir=data_root))
    return runner.ingest(records, store)


def list_artists(store: ArtistStore) -> list[Artist]:
    """Return every stored artist in primary-key order."""
    with store.r_transaction() as transaction:
        return transaction.scan_all()


def find_artist(store: ArtistStore, artist_id: UUID) -> Artist:
    """Look up one artist by identifier.

    Args:
        store: Artist store.
        artist_id: Artist primary key.

    Returns:
        Stored artist.

    Raises:
        AtelierNotFoundError: If no artist has this identifier.
        AtelierStoreError: If the store cannot be read.
    """
    with store.r_transaction() as transaction:
        artist = transaction.get_by_key(artist_id)
    if artist is None:
        raise AtelierNotFoundError(
            f"Artist {artist_id} not found in {store.path}. "
            "Use the `all` command to list stored artist ids."
        )
    return artist


def _build_failure(
    outcome: ParallelOutcome[Artist],
    record_count: int,
    fail_fast: bool,
) -> AtelierError:
    """Choose the error raised for a failed build phase."""
    first_error = outcome.errors[0]
    if fail_fast:
        return first_error
    messages = "; ".join(str(error) for error in outcome.errors)
    aggregated = AtelierIngestError(
        f"Ingest aborted: {len(outcome.errors)} of {record_count} artists failed "
        f"and nothing was stored. Failures: {messages}"
    )
    aggregated.__cause__ = first_error
    return aggregated


def _log_ingest_completion(
    options: IngestOptions,
    config: AtelierConfig,
    record_count: int,
    inserted_count: int,
) -> None:
    """Log pipeline completion with contextual metadata."""
    _LOGGER.info(
        "ingest_committed",
        input_dir=str(options.input_dir),
        data_dir=str(config.data_dir),
        db_path=str(config.db_path),
        record_count=record_count,
        inserted_count=inserted_count,
        fail_fast=options.fail_fast,
    )

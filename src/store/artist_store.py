"""Transactional artist store.

This module persists Artist aggregates in an embedded SQLite file keyed
by artist identifier. Writes go through a single all-or-nothing write
transaction; reads scan or look up by primary key.
"""

from __future__ import annotations

import json
import sqlite3
from pathlib import Path
from types import TracebackType
from typing import Literal
from uuid import UUID

from core.config import AtelierConfig
from core.constants import ARTISTS_TABLE_NAME
from core.errors import AtelierStoreError
from core.logging_config import get_logger
from core.types import Artist
from store.artist_payload import artist_from_payload, artist_to_payload

_LOGGER = get_logger(__name__)

TransactionState = Literal["open", "committed", "aborted"]

_SCHEMA = f"""
CREATE TABLE IF NOT EXISTS {ARTISTS_TABLE_NAME} (
    id TEXT PRIMARY KEY NOT NULL,
    name TEXT NOT NULL,
    payload TEXT NOT NULL
)
"""


class ArtistStore:
    """Embedded primary-key store for Artist aggregates.

    Each transaction owns its own SQLite connection, so a store can be
    shared freely while transactions stay on the thread that opened them.
    """

    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path

    @classmethod
    def open(cls, db_path: Path) -> "ArtistStore":
        """Open or create a store file and ensure its schema.

        Args:
            db_path: Store file path; the parent directory must exist.

        Returns:
            Ready store handle.

        Raises:
            AtelierStoreError: If the file cannot be opened or initialized.
        """
        store = cls(db_path)
        connection = store._connect()
        try:
            connection.execute(_SCHEMA)
        except sqlite3.Error as error:
            raise AtelierStoreError(
                f"Failed to initialize artist store at {db_path}: {error}. "
                "Delete the store file if it is not an Atelier database."
            ) from error
        finally:
            connection.close()
        return store

    @property
    def path(self) -> Path:
        """Return the store file path."""
        return self._db_path

    def rw_transaction(self) -> "WriteTransaction":
        """Begin a write transaction."""
        return WriteTransaction(self._connect(), self._db_path)

    def r_transaction(self) -> "ReadTransaction":
        """Begin a read transaction."""
        return ReadTransaction(self._connect(), self._db_path)

    def _connect(self) -> sqlite3.Connection:
        try:
            return sqlite3.connect(self._db_path, isolation_level=None)
        except sqlite3.Error as error:
            raise AtelierStoreError(
                f"Failed to open artist store at {self._db_path}: {error}. "
                "Check the data directory exists and is writable."
            ) from error


class _Transaction:
    """Shared lifecycle for read and write transactions."""

    def __init__(self, connection: sqlite3.Connection, db_path: Path, begin_sql: str) -> None:
        self._connection = connection
        self._db_path = db_path
        self._state: TransactionState = "open"
        try:
            self._connection.execute(begin_sql)
        except sqlite3.Error as error:
            self._connection.close()
            raise AtelierStoreError(
                f"Failed to begin transaction on {db_path}: {error}. "
                "Another process may hold the store lock; retry when it finishes."
            ) from error

    @property
    def state(self) -> TransactionState:
        """Return the transaction lifecycle state."""
        return self._state

    def abort(self) -> None:
        """Roll back and close the transaction if still open."""
        if self._state != "open":
            return
        try:
            if self._connection.in_transaction:
                self._connection.execute("ROLLBACK")
        finally:
            self._state = "aborted"
            self._connection.close()

    def __enter__(self) -> "_Transaction":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.abort()

    def _require_open(self) -> None:
        if self._state != "open":
            raise AtelierStoreError(
                f"Transaction on {self._db_path} is {self._state}. "
                "Open a new transaction for further operations."
            )


class WriteTransaction(_Transaction):
    """All-or-nothing write transaction.

    A failed insert rolls the whole transaction back; leaving the context
    manager without ``commit`` does the same.
    """

    def __init__(self, connection: sqlite3.Connection, db_path: Path) -> None:
        super().__init__(connection, db_path, "BEGIN IMMEDIATE")

    def __enter__(self) -> "WriteTransaction":
        return self

    def insert(self, artist: Artist) -> None:
        """Insert one artist aggregate.

        Args:
            artist: Aggregate to insert.

        Raises:
            AtelierStoreError: If the id already exists or the write fails;
                the transaction is rolled back.
        """
        self._require_open()
        payload = json.dumps(artist_to_payload(artist), sort_keys=True)
        try:
            self._connection.execute(
                f"INSERT INTO {ARTISTS_TABLE_NAME} (id, name, payload) VALUES (?, ?, ?)",
                (str(artist.id), artist.name, payload),
            )
        except sqlite3.IntegrityError as error:
            self.abort()
            raise AtelierStoreError(
                f"Duplicate artist id {artist.id} for '{artist.name}' in {self._db_path}. "
                "The transaction was rolled back; no artists were written."
            ) from error
        except sqlite3.Error as error:
            self.abort()
            raise AtelierStoreError(
                f"Failed to insert artist {artist.id} ('{artist.name}') into "
                f"{self._db_path}: {error}. The transaction was rolled back."
            ) from error

    def commit(self) -> None:
        """Commit every insert of this transaction.

        Raises:
            AtelierStoreError: If the transaction is not open or commit fails.
        """
        self._require_open()
        try:
            self._connection.execute("COMMIT")
        except sqlite3.Error as error:
            self.abort()
            raise AtelierStoreError(
                f"Failed to commit artist store transaction on {self._db_path}: {error}. "
                "The transaction was rolled back."
            ) from error
        self._state = "committed"
        self._connection.close()
        _LOGGER.debug("store_transaction_committed", db_path=str(self._db_path))


class ReadTransaction(_Transaction):
    """Consistent read view over the artist store."""

    def __init__(self, connection: sqlite3.Connection, db_path: Path) -> None:
        super().__init__(connection, db_path, "BEGIN")

    def __enter__(self) -> "ReadTransaction":
        return self

    def scan_all(self) -> list[Artist]:
        """Return every artist in primary-key order.

        Identifiers are time-ordered, so key order follows creation order.
        """
        self._require_open()
        rows = self._query(f"SELECT payload FROM {ARTISTS_TABLE_NAME} ORDER BY id", ())
        return [self._decode(row[0]) for row in rows]

    def get_by_key(self, artist_id: UUID) -> Artist | None:
        """Return the artist with ``artist_id`` or ``None`` when absent."""
        self._require_open()
        rows = self._query(
            f"SELECT payload FROM {ARTISTS_TABLE_NAME} WHERE id = ?",
            (str(artist_id),),
        )
        if not rows:
            return None
        return self._decode(rows[0][0])

    def _query(self, sql: str, parameters: tuple[str, ...]) -> list[tuple[str]]:
        try:
            return self._connection.execute(sql, parameters).fetchall()
        except sqlite3.Error as error:
            raise AtelierStoreError(
                f"Failed to read artists from {self._db_path}: {error}. "
                "Check the store file is a valid Atelier database."
            ) from error

    def _decode(self, raw_payload: str) -> Artist:
        try:
            return artist_from_payload(json.loads(raw_payload))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as error:
            raise AtelierStoreError(
                f"Failed to decode artist payload in {self._db_path}: {error}. "
                "The store file may be corrupt; re-run ingest into a fresh data directory."
            ) from error


def open_artist_store(config: AtelierConfig) -> ArtistStore:
    """Open the configured store, creating the data directory if needed.

    Args:
        config: Runtime configuration.

    Returns:
        Ready store handle.

    Raises:
        AtelierStoreError: If the data directory or store cannot be created.
    """
    try:
        config.data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise AtelierStoreError(
            f"Failed to create data directory {config.data_dir}: {error}. "
            "Pass a writable --data-dir."
        ) from error
    return ArtistStore.open(config.db_path)

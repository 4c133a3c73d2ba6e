"""Catalog CSV reader.

This module loads artist rows from a delimited catalog file and
validates them into typed catalog records.
"""

from __future__ import annotations

import csv
from pathlib import Path

from core.constants import CATALOG_COLUMNS
from core.errors import AtelierInputError
from core.types import CatalogRecord


def read_catalog(csv_path: Path) -> list[CatalogRecord]:
    """Load catalog records from a CSV file.

    Args:
        csv_path: Catalog file with a header row.

    Returns:
        Records in file order.

    Raises:
        AtelierInputError: If the path is not a file or any row is invalid.
    """
    if not csv_path.is_file():
        raise AtelierInputError(
            f"Catalog path {csv_path} is not a file. "
            "Pass an existing CSV file with --csv and the input directory."
        )
    try:
        with csv_path.open(encoding="utf-8", newline="") as handle:
            reader = csv.DictReader(handle)
            _validate_header(csv_path, reader.fieldnames)
            return [_parse_row(csv_path, row, reader.line_num) for row in reader]
    except (OSError, UnicodeDecodeError, csv.Error) as error:
        raise AtelierInputError(
            f"Failed to read catalog {csv_path}: {error}. "
            "Check the file is readable UTF-8 CSV."
        ) from error


def _validate_header(csv_path: Path, fieldnames: list[str] | None) -> None:
    """Require the exact catalog column set."""
    columns = tuple(name.strip() for name in fieldnames or ())
    if sorted(columns) != sorted(CATALOG_COLUMNS):
        raise AtelierInputError(
            f"Invalid catalog header in {csv_path}: expected columns "
            f"{', '.join(CATALOG_COLUMNS)}, got {', '.join(columns) or 'none'}."
        )


def _parse_row(
    csv_path: Path,
    row: dict[str | None, str | None],
    line_number: int,
) -> CatalogRecord:
    """Validate one CSV row into a catalog record.

    Args:
        csv_path: Catalog path for error context.
        row: Raw row mapping from ``csv.DictReader``.
        line_number: Physical line number of the row end.

    Returns:
        Parsed catalog record.

    Raises:
        AtelierInputError: If fields are missing, extra, or non-numeric.
    """
    if None in row or any(value is None for value in row.values()):
        raise AtelierInputError(
            f"Invalid catalog row at {csv_path}:{line_number}: expected "
            f"{len(CATALOG_COLUMNS)} fields. Fix the row and retry ingest."
        )
    values = {str(key).strip(): str(value) for key, value in row.items()}
    return CatalogRecord(
        id=_parse_int(csv_path, line_number, "id", values["id"]),
        name=values["name"],
        years=values["years"],
        genre=values["genre"],
        nationality=values["nationality"],
        bio=values["bio"],
        wikipedia=values["wikipedia"],
        paintings=_parse_int(csv_path, line_number, "paintings", values["paintings"]),
    )


def _parse_int(csv_path: Path, line_number: int, column: str, raw_value: str) -> int:
    try:
        return int(raw_value.strip())
    except ValueError as error:
        raise AtelierInputError(
            f"Invalid catalog row at {csv_path}:{line_number}: column '{column}' "
            f"expected integer, got '{raw_value}'."
        ) from error

"""Atelier CLI entry points.

This module exposes the parse-csv, all, and find-by-id commands.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from cli.rendering import render_artist
from core.config import AtelierConfig
from core.constants import DEFAULT_CSV_FILE_NAME, DEFAULT_INPUT_DIR
from core.errors import AtelierError
from core.logging_config import configure_logging
from core.types import IngestOptions
from store.catalog_sdk import AtelierClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="atelier",
        description="Ingest an artist catalog with artwork images into a local store",
    )
    parser.add_argument("--data-dir", help="Override ATELIER_DATA_DIR for this command")
    parser.add_argument("--db", help="Store file name inside the data directory")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_parse_csv_command(subparsers)
    _add_all_command(subparsers)
    _add_find_by_id_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Atelier CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.data_dir, args.db)
        if args.command == "parse-csv":
            return _run_parse_csv_command(client, args)
        if args.command == "all":
            return _run_all_command(client)
        if args.command == "find-by-id":
            return _run_find_by_id_command(client, args)
    except AtelierError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(data_dir: str | None, db_file: str | None) -> AtelierClient:
    """Build SDK client with optional data-dir and store overrides.

    Args:
        data_dir: Optional data directory override.
        db_file: Optional store file name override.

    Returns:
        Configured SDK client.
    """
    config = AtelierConfig.from_env()
    if data_dir:
        config = replace(config, data_dir=Path(data_dir).expanduser().resolve())
    if db_file:
        config = replace(config, db_file=Path(db_file))
    configure_logging(config.log_level)
    return AtelierClient(config)


def _run_parse_csv_command(client: AtelierClient, args: argparse.Namespace) -> int:
    """Handle parse-csv command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    options = IngestOptions(
        input_dir=Path(args.input).expanduser(),
        csv_file=Path(args.csv),
        fail_fast=not args.collect_errors,
    )
    result = client.ingest(options)
    for artist in result.artists:
        print(f"{artist.id}\t{artist.name}\t{len(artist.paintings)}")
    print(f"inserted_count={result.inserted_count}")
    return 0


def _run_all_command(client: AtelierClient) -> int:
    """Print every stored artist."""
    for artist in client.all_artists():
        print(render_artist(artist))
    return 0


def _run_find_by_id_command(client: AtelierClient, args: argparse.Namespace) -> int:
    """Print one stored artist by identifier."""
    artist = client.find_by_id(args.id)
    print(render_artist(artist))
    return 0


def _add_parse_csv_command(subparsers: Any) -> None:
    """Register parse-csv subcommand."""
    parser = subparsers.add_parser(
        "parse-csv",
        help="Ingest a catalog CSV and its artist images",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=str(DEFAULT_INPUT_DIR),
        help="Input directory holding the CSV file and images/",
    )
    parser.add_argument(
        "-c",
        "--csv",
        default=DEFAULT_CSV_FILE_NAME,
        help="Catalog file name inside the input directory",
    )
    parser.add_argument(
        "--collect-errors",
        action="store_true",
        help="Report every failed artist instead of stopping at the first",
    )


def _add_all_command(subparsers: Any) -> None:
    """Register all subcommand."""
    subparsers.add_parser("all", help="List every stored artist")


def _add_find_by_id_command(subparsers: Any) -> None:
    """Register find-by-id subcommand."""
    parser = subparsers.add_parser("find-by-id", help="Show one artist by identifier")
    parser.add_argument("id", help="Artist identifier printed by parse-csv or all")

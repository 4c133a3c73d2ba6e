"""Unit tests for artist aggregate construction."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from core.errors import AtelierParseError
from core.types import CatalogRecord
from ingest.artist_builder import build_artist, split_year_range
from tests.fixture_builders import write_image


def _record(name: str = "Vincent Van Gogh", years: str = "1853 – 1890") -> CatalogRecord:
    return CatalogRecord(
        id=7,
        name=name,
        years=years,
        genre="Post-Impressionism",
        nationality="Dutch",
        bio="Dutch painter.",
        wikipedia="http://en.wikipedia.org/wiki/Vincent_van_Gogh",
        paintings=877,
    )


@pytest.mark.parametrize(
    ("years", "expected"),
    [
        ("1853 – 1890", ("1853", "1890")),
        ("1840-1926", ("1840", "1926")),
        (" c. 1525 -  1569 ", ("c. 1525", "1569")),
        ("1606 – 1669 - disputed", ("1606", "1669 - disputed")),
    ],
)
def test_split_year_range_splits_on_first_separator(
    years: str, expected: tuple[str, str]
) -> None:
    """Split should use the first hyphen or en dash and trim halves."""
    assert split_year_range("Artist", years) == expected


@pytest.mark.parametrize(
    ("years", "separator"),
    [("1853 – 1890", "–"), ("1840 - 1926", "-"), ("1571 - 1610", "-")],
)
def test_split_year_range_reconstructs_input(years: str, separator: str) -> None:
    """Joining the halves with the separator should restore the range."""
    born, died = split_year_range("Artist", years)

    assert f"{born} {separator} {died}" == years


def test_split_year_range_raises_for_missing_separator() -> None:
    """Missing separators should fail with the artist name."""
    with pytest.raises(AtelierParseError, match="Rembrandt"):
        split_year_range("Rembrandt", "1606 1669")


def test_build_artist_copies_fields_and_builds_groups(tmp_path: Path) -> None:
    """Builder should derive years and attach one group per image."""
    input_root = tmp_path / "input"
    write_image(input_root / "images" / "Vincent_Van_Gogh" / "sunflowers.jpg", (900, 700))
    data_root = tmp_path / "data"

    with ThreadPoolExecutor(max_workers=2) as executor:
        artist = build_artist(_record(), input_root, data_root, executor)

    assert (artist.born, artist.died) == ("1853", "1890")
    assert artist.nationality == "Dutch" and artist.genre == "Post-Impressionism"
    assert len(artist.paintings) == 1 and (data_root / "img").is_dir()
    assert artist.id.version == 7 and artist.id != artist.paintings[0].id


def test_build_artist_parse_error_writes_no_images(tmp_path: Path) -> None:
    """A malformed year range should fail before any image is written."""
    input_root = tmp_path / "input"
    write_image(input_root / "images" / "Vincent_Van_Gogh" / "sunflowers.jpg")
    data_root = tmp_path / "data"

    with ThreadPoolExecutor(max_workers=1) as executor:
        with pytest.raises(AtelierParseError):
            build_artist(_record(years="unknown"), input_root, data_root, executor)

    assert list((data_root / "img").iterdir()) == []

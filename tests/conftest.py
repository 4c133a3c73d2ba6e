"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if str(_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(_SRC_PATH))


@pytest.fixture
def config(tmp_path: Path):
    """Runtime config rooted in the test's temporary directory."""
    from tests.fixture_builders import build_config

    return build_config(tmp_path)

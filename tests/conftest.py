"""
Pytest configuration and shared fixtures.
"""

import random
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for project presets."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the bundled preset library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_fretboard" / "presets" / "library"


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible questions."""
    return random.Random(1234)

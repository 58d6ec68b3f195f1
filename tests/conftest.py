"""
Pytest configuration and shared fixtures.
"""

import pytest
import tempfile
from datetime import datetime, timezone
from pathlib import Path


@pytest.fixture
def now() -> datetime:
    """Fixed reference time so decay and merge stamps are deterministic."""
    return datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def temp_directory():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)

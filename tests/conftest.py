import sqlite3
from collections.abc import Generator
from pathlib import Path

import pytest

from player_style.db.connection import create_connection


@pytest.fixture
def conn() -> Generator[sqlite3.Connection]:
    """Migrated in-memory database, closed after the test."""
    connection = create_connection(":memory:")
    yield connection
    connection.close()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Location for a file-backed database; created on first connection."""
    return tmp_path / "style.db"

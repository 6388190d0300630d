"""Shared pytest fixtures for spendly tests."""

import tempfile
import os
from datetime import datetime, UTC
from pathlib import Path
import pytest

from spendly.database.factories import create_sqlite_database
from spendly.domain.entities import SMSMessage
from spendly.domain.sms_import import SMSImportService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def sms_import_service(temp_db):
    """Create an SMSImportService with a temporary database."""
    return SMSImportService(temp_db)


@pytest.fixture
def make_message():
    """Build SMSMessage objects with sensible defaults."""

    def _make(
        body: str,
        id: str = "1",
        address: str = "UCB",
        received_at: datetime = datetime(2025, 5, 7, 20, 0, tzinfo=UTC),
    ) -> SMSMessage:
        return SMSMessage(id=id, address=address, body=body, received_at=received_at)

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"

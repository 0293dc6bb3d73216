import os
import pytest
import sys
import tempfile
import uuid
from typing import Generator
from sqlmodel import Session

# 1. Path setup: put the backend directory on sys.path
CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
BACKEND_DIR = os.path.dirname(CURRENT_DIR)
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

# keep test logs out of the user's log directory
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "track_library_test_logs"))

from infra.database.connection import Database

@pytest.fixture(name="db_path")
def db_path_fixture() -> Generator[str, None, None]:
    unique_id = str(uuid.uuid4())
    path = os.path.join(tempfile.gettempdir(), f"track_library_test_{unique_id}.db")
    yield path
    if os.path.exists(path):
        try:
            os.remove(path)
        except OSError:
            pass

@pytest.fixture(name="database")
def database_fixture(db_path: str) -> Generator[Database, None, None]:
    """
    Every test gets its own SQLite file with the tracks table already in place.
    """
    database = Database(f"sqlite:///{db_path}")
    database.create_schema()
    yield database
    database.close()

@pytest.fixture(name="session")
def session_fixture(database: Database) -> Generator[Session, None, None]:
    with Session(database.engine) as session:
        yield session

@pytest.fixture(name="client")
def client_fixture(database: Database) -> Generator:
    """TestClient around an app built on the per-test Database."""
    from fastapi.testclient import TestClient
    from main import create_app

    app = create_app(database)
    with TestClient(app) as client:
        yield client

@pytest.fixture
def sample_payload():
    return {
        "songTitle": "A",
        "artistName": "B",
        "albumName": "C",
        "genre": "D",
        "duration": 200,
        "releaseYear": 1999,
    }

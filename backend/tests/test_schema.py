import os
import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, select

import setup_db
from infra.database.connection import Database
from infra.database.schema import initialize_schema
from models import Track

def _add_track(database: Database):
    with Session(database.engine) as s:
        s.add(Track(song_title="T", artist_name="A", album_name="B", genre="G"))
        s.commit()

def _count_tracks(database: Database) -> int:
    with Session(database.engine) as s:
        return len(s.exec(select(Track)).all())

def test_initialize_schema_creates_table(db_path):
    database = Database(f"sqlite:///{db_path}")
    initialize_schema(database)

    assert os.path.exists(db_path)
    columns = {c["name"] for c in inspect(database.engine).get_columns("tracks")}
    assert columns == {
        "track_id", "song_title", "artist_name", "album_name", "genre", "duration", "release_year"
    }

def test_initialize_schema_without_force_keeps_data(database: Database):
    _add_track(database)

    initialize_schema(database, force=False)

    assert _count_tracks(database) == 1

def test_initialize_schema_force_resets_data(database: Database):
    _add_track(database)
    _add_track(database)

    initialize_schema(database, force=True)

    assert _count_tracks(database) == 0

def test_initialize_schema_closes_handle_on_failure(database: Database, mocker):
    mocker.patch.object(
        database, "authenticate",
        side_effect=OperationalError("SELECT 1", {}, Exception("unable to open database file")),
    )
    close = mocker.spy(database, "close")

    with pytest.raises(OperationalError):
        initialize_schema(database)
    close.assert_called_once()

def test_setup_db_cli_requires_flag_for_reset(db_path):
    database = Database(f"sqlite:///{db_path}")
    database.create_schema()
    _add_track(database)

    assert setup_db.main(["--db-path", db_path]) == 0
    assert _count_tracks(database) == 1

    assert setup_db.main(["--db-path", db_path, "--force"]) == 0
    assert _count_tracks(database) == 0
    database.close()

def test_setup_db_cli_reports_failure(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")

    assert setup_db.main(["--db-path", str(blocker / "library.db")]) == 1

def test_memory_database_shares_connection():
    database = Database("sqlite://")
    database.create_schema()
    _add_track(database)

    assert _count_tracks(database) == 1
    database.close()

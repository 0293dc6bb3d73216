import os
from typing import Generator
from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from utils.logger import get_logger

logger = get_logger(__name__)

def _is_memory_url(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")

class Database:
    """
    Storage handle shared by every request.
    Built once at process start (or once per test) and attached to the app;
    nothing in this module holds a global engine.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        if _is_memory_url(url):
            # an in-memory database lives only as long as its connection,
            # so every session has to reuse the same one
            self.engine: Engine = create_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            # route handlers run in FastAPI's threadpool
            self.engine = create_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
            )

    @classmethod
    def from_settings(cls, settings) -> "Database":
        db_dir = os.path.dirname(settings.DB_PATH)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)
        return cls(settings.database_url, echo=settings.SQL_ECHO)

    def authenticate(self) -> None:
        """Open a connection and run a trivial query; raises when storage is unreachable."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def session(self) -> Generator[Session, None, None]:
        with Session(self.engine) as session:
            yield session

    def create_schema(self) -> None:
        SQLModel.metadata.create_all(self.engine)

    def drop_schema(self) -> None:
        SQLModel.metadata.drop_all(self.engine)

    def close(self) -> None:
        self.engine.dispose()

def get_database(request: Request) -> Database:
    return request.app.state.database

def get_session(request: Request) -> Generator[Session, None, None]:
    yield from get_database(request).session()

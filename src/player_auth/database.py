"""Database engine construction and bootstrap."""

from pathlib import Path

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from player_auth.config import settings


def make_engine(database_url: str) -> Engine:
    """Create an engine; SQLite connections may be used from worker threads."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=False, connect_args=connect_args)


engine = make_engine(settings.database_url)


def init_db(bind: Engine = engine) -> None:
    """Create the auth_codes table if it does not exist."""
    database = bind.url.database
    if bind.url.get_backend_name() == "sqlite" and database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(bind)


def get_engine() -> Engine:
    """Return the application engine for dependency injection."""
    return engine

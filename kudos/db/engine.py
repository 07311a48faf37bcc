"""Database engine construction and per-request sessions.

The engine is created once by the application factory and stored on
``app.state.engine``; request handlers reach it through ``get_session``.
"""

from collections.abc import Generator

from fastapi import Request
from sqlalchemy import Engine
from sqlmodel import Session, SQLModel, create_engine


def create_db_engine(database_url: str, *, echo: bool = False) -> Engine:
    connect_args: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        # Required for SQLite when used with FastAPI across threads.
        connect_args = {"check_same_thread": False}
    return create_engine(database_url, echo=echo, connect_args=connect_args)


def create_tables(engine: Engine) -> None:
    """Create all registered tables (development / tests; prod uses Alembic)."""
    import kudos.models  # noqa: F401  (registers table metadata)

    SQLModel.metadata.create_all(engine)


def get_session(request: Request) -> Generator[Session, None, None]:
    with Session(request.app.state.engine) as session:
        yield session

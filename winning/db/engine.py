from collections.abc import Generator

from sqlmodel import Session, SQLModel, create_engine

from winning.core.settings import get_settings

_settings = get_settings()

connect_args: dict[str, object] = {}
if _settings.database_url.startswith("sqlite"):
    # Required for SQLite when used with FastAPI across threads.
    connect_args = {"check_same_thread": False}

engine = create_engine(_settings.database_url, echo=False, connect_args=connect_args)


def create_db_and_tables() -> None:
    """Create the slot table if missing. The document inside is never migrated."""
    # Register table models in metadata before create_all.
    import winning.storage.models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session

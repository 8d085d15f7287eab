from collections.abc import Iterator
from functools import lru_cache

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from form_creator.core.config import settings


class Base(DeclarativeBase):
    pass


@lru_cache
def get_engine() -> Engine:
    """Build the process-wide engine on first use.

    Raises ``DatabaseConfigurationError`` when no database is configured.
    """
    return create_engine(settings.database_url, pool_pre_ping=True)


@lru_cache
def get_sessionmaker() -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())


def get_db() -> Iterator[Session]:
    db = get_sessionmaker()()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def check_connection() -> None:
    """Run a trivial query so a broken configuration fails at startup."""
    with get_engine().connect() as conn:
        conn.execute(text("SELECT 1"))


def dispose_engine() -> None:
    if get_engine.cache_info().currsize:
        get_engine().dispose()

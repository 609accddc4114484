import logging
from contextlib import contextmanager

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import NullPool
from sqlmodel import Session, SQLModel, create_engine

from .config import DATABASE_URL, SQL_ECHO

# Import all models to ensure they are registered with SQLModel metadata
from .models import Task  # noqa: F401

logger = logging.getLogger(__name__)


def build_engine(database_url: str = DATABASE_URL) -> Engine:
    """Create an engine for the given URL."""
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=SQL_ECHO,
            connect_args={"check_same_thread": False},
        )

    # Neon/Postgres: disable pooling for serverless and enable pre-ping
    return create_engine(
        database_url,
        echo=SQL_ECHO,
        pool_pre_ping=True,
        poolclass=NullPool,
    )


@contextmanager
def get_session(engine: Engine):
    """Get a database session bound to ``engine`` (context manager style).

    Usage:
        with get_session(engine) as session:
            # do something with session
    """
    session = Session(engine)
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def create_tables(engine: Engine) -> None:
    """Create all database tables."""
    SQLModel.metadata.create_all(bind=engine)
    logger.info("Database tables ready")


def check_connection(engine: Engine) -> bool:
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.exception("Database connection check failed")
        return False

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from travelvibe import seed
from travelvibe.core.config import Settings
from travelvibe.db.base import Base
from travelvibe.db.memory_store import MemoryStore
from travelvibe.db.sql_store import SqlStore
from travelvibe.db.store import RecordStore
from travelvibe.db import tables  # noqa: F401  registers every model on Base.metadata

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    # Fixed-size pool; callers wait for a free connection rather than opening more.
    return create_engine(
        settings.database_url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=0,
        pool_pre_ping=True,
    )


def init_schema(engine: Engine) -> None:
    """Create missing tables; existing ones are left as they are."""
    Base.metadata.create_all(engine, checkfirst=True)


def select_store(settings: Settings) -> RecordStore:
    """Pick the storage backend for the life of the process.

    Tries one connection to the configured database. If it works, the schema
    is ensured, reference data is seeded and a SqlStore is returned. Otherwise
    the process runs on a seeded MemoryStore; there is no reconnect later.
    """
    engine = None
    try:
        engine = build_engine(settings)
        with engine.connect():
            pass
    except (SQLAlchemyError, ImportError) as e:
        # ImportError: the URL names a DB driver that is not installed
        logger.warning("Database unavailable (%s: %s); using in-memory storage", type(e).__name__, e)
        if engine is not None:
            engine.dispose()
        store = MemoryStore()
        seed.run(store, settings)
        return store

    logger.info("Database connected: %s", engine.url.render_as_string(hide_password=True))
    store = SqlStore(engine)
    try:
        init_schema(engine)
        seed.run(store, settings)
    except SQLAlchemyError:
        # The connection is good, so stay on the database; requests that hit
        # a missing table will fail with a 500 and be logged.
        logger.exception("Database initialization failed")
    return store

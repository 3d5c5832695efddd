from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool
from contextlib import contextmanager
from fastapi import Request
import logging

logger = logging.getLogger(__name__)

Base = declarative_base()


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


class Database:
    """Owns the engine and session factory for one application instance"""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        is_sqlite = database_url.startswith("sqlite")
        is_memory = is_sqlite and (database_url in ("sqlite://", "sqlite:///:memory:") or ":memory:" in database_url)

        engine_kwargs = {"echo": echo}
        if is_sqlite:
            # Wait up to 30 seconds for a lock to be released
            engine_kwargs["connect_args"] = {"check_same_thread": False, "timeout": 30.0}
        if is_memory:
            # One shared connection, otherwise every session sees an empty database
            engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_pre_ping"] = True

        self.engine = create_engine(database_url, **engine_kwargs)

        if is_sqlite:
            @event.listens_for(self.engine, "connect")
            def set_sqlite_pragma(dbapi_conn, connection_record):
                """Enable foreign keys, WAL mode and busy timeout for SQLite connections"""
                # SQLite's built-in lower() folds ASCII only; ILIKE compiles to lower() LIKE lower()
                dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)
                cursor = dbapi_conn.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                if not is_memory:
                    cursor.execute("PRAGMA journal_mode=WAL")
                cursor.execute("PRAGMA busy_timeout=30000")
                cursor.close()

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    @contextmanager
    def transaction(self):
        """Context manager for database transactions"""
        db = self.SessionLocal()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def create_all(self) -> None:
        """Initialize database tables"""
        # Model modules register their tables on Base.metadata when imported
        from .. import models  # noqa: F401

        logger.info("Initializing database tables...")
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables initialized successfully")

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request):
    """Dependency for getting database session"""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()

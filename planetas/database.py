"""
Database connection and session management

Single-file SQLite store, opened lazily on first use.
"""
import logging
import threading
from pathlib import Path
from typing import Optional, Union

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from planetas.config import get_settings
from planetas.exceptions import StorageError

logger = logging.getLogger(__name__)

# Stamped into PRAGMA user_version when the schema is first created
SCHEMA_VERSION = 1

# Create base class for models
Base = declarative_base()


class Database:
    """
    Lazily opened SQLite database.

    The engine is created on the first call to open() and cached until
    close(). Opening is serialized by a lock, so concurrent first callers
    share a single initialization. The schema is created only when the
    file has never been initialized (user_version 0).
    """

    def __init__(self, path: Union[str, Path], echo: bool = False):
        self.path = Path(path)
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self._lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        return self.open()

    def open(self) -> Engine:
        """Return the live engine, opening the file on first use"""
        engine = self._engine
        if engine is not None:
            return engine

        with self._lock:
            if self._engine is None:
                self._engine = self._open_engine()
                self._session_factory = sessionmaker(
                    autocommit=False, autoflush=False, bind=self._engine
                )
            return self._engine

    def session(self) -> Session:
        """Create a new session bound to the (lazily opened) engine"""
        self.open()
        return self._session_factory()

    def schema_version(self) -> int:
        """Read PRAGMA user_version from the open database"""
        with self.engine.connect() as conn:
            return conn.exec_driver_sql("PRAGMA user_version").scalar() or 0

    def close(self) -> None:
        """Dispose the engine; the next open() reopens the file"""
        with self._lock:
            if self._engine is not None:
                self._engine.dispose()
                logger.info("Closed database at %s", self.path)
            self._engine = None
            self._session_factory = None

    def _open_engine(self) -> Engine:
        logger.info("Opening database at %s", self.path)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(
                f"Cannot create database directory {self.path.parent}",
                operation="open",
                original_error=e,
            ) from e

        engine = create_engine(
            f"sqlite:///{self.path}",
            connect_args={"check_same_thread": False},
            echo=self.echo,  # Log SQL queries in debug mode
        )
        try:
            self._create_schema(engine)
        except SQLAlchemyError as e:
            engine.dispose()
            raise StorageError(
                f"Cannot open database {self.path}",
                operation="open",
                original_error=e,
            ) from e
        return engine

    @staticmethod
    def _create_schema(engine: Engine) -> None:
        # Import models to register them with Base
        from planetas.models import Planet  # noqa

        with engine.begin() as conn:
            version = conn.exec_driver_sql("PRAGMA user_version").scalar()
            if version:
                return
            logger.info("Creating schema version %d", SCHEMA_VERSION)
            Base.metadata.create_all(bind=conn)
            conn.exec_driver_sql(f"PRAGMA user_version = {SCHEMA_VERSION}")


settings = get_settings()

# Process-wide database, opened on first request
database = Database(settings.database_path, echo=settings.debug)


def get_database() -> Database:
    """Dependency for the process-wide database"""
    return database


def get_db(db_handle: Database = Depends(get_database)):
    """
    Dependency for getting database session

    Usage in FastAPI:
        @router.get("/items")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = db_handle.session()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Initialize database (open the file, create tables on first run)"""
    database.open()


def close_db():
    """Dispose the database engine at shutdown"""
    database.close()

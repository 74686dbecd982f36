"""
Database connection and session management for Recipe Tracker.

This module provides:
- Database engine creation and configuration
- Session factory for database operations
- Transactional session scope
- Database initialization (create tables, seed reference data)
- SQLite pragmas (foreign keys, WAL mode)
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Dict, Optional

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from ..models.base import Base
from ..utils.config import get_config
from ..utils.constants import RECIPE_CATEGORIES, UNITS_OF_MEASURE

logger = logging.getLogger(__name__)

# Global engine and session factory
_engine: Optional[Engine] = None
_SessionFactory: Optional[sessionmaker] = None


@event.listens_for(Engine, "connect")
def _set_sqlite_pragma(dbapi_connection, connection_record):
    """
    Set SQLite pragmas on connection.

    Enables foreign key constraints on every SQLite connection. Other
    DBAPI connections are left untouched.
    """
    if not isinstance(dbapi_connection, sqlite3.Connection):
        return

    cursor = dbapi_connection.cursor()

    # Enable foreign key constraints (critical for referential integrity)
    cursor.execute("PRAGMA foreign_keys=ON")

    # WAL mode for file databases; in-memory databases ignore it
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA synchronous=NORMAL")

    cursor.close()


def create_database_engine(database_url: Optional[str] = None, echo: bool = False) -> Engine:
    """
    Create and configure the database engine.

    Args:
        database_url: Optional database URL. If None, uses config default.
        echo: If True, log all SQL statements (useful for debugging)

    Returns:
        Configured SQLAlchemy Engine
    """
    config = get_config()
    if database_url is None:
        database_url = config.database_url
        if database_url.startswith("sqlite:///") and ":memory:" not in database_url:
            config.ensure_directories()

    logger.info(f"Creating database engine: {database_url}")

    if ":memory:" in database_url or "mode=memory" in database_url:
        # For in-memory databases (testing), use StaticPool
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    elif database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False, "timeout": config.db_timeout},
        )
    else:
        engine = create_engine(database_url, echo=echo, pool_pre_ping=True)

    return engine


def init_database(engine: Optional[Engine] = None) -> None:
    """
    Initialize the database by creating all tables.

    Safe to call multiple times - existing tables won't be recreated.

    Args:
        engine: Optional engine to use. If None, uses global engine.
    """
    if engine is None:
        engine = get_engine()

    logger.info("Initializing database tables")

    # Import all models to ensure they're registered with Base
    from .. import models  # noqa: F401

    Base.metadata.create_all(engine)

    logger.info("Database tables initialized successfully")


def get_engine(force_recreate: bool = False) -> Engine:
    """
    Get the global database engine.

    Args:
        force_recreate: If True, recreate the engine even if one exists

    Returns:
        Database engine
    """
    global _engine

    if _engine is None or force_recreate:
        _engine = create_database_engine()

    return _engine


def get_session_factory() -> sessionmaker:
    """
    Get the global session factory.

    Returns:
        Session factory (sessionmaker)
    """
    global _SessionFactory

    if _SessionFactory is None:
        engine = get_engine()
        _SessionFactory = sessionmaker(bind=engine, expire_on_commit=False)

    return _SessionFactory


def get_session() -> Session:
    """
    Create a new database session.

    Callers own the session and must commit/rollback and close it.
    Prefer session_scope() for service code.
    """
    session_factory = get_session_factory()
    return session_factory()


@contextmanager
def session_scope():
    """
    Provide a transactional scope for database operations.

    This context manager handles session lifecycle automatically:
    - Creates a new session
    - Commits on success
    - Rolls back on exception
    - Always closes the session

    Yields:
        Database session

    Example:
        with session_scope() as session:
            recipe = Recipe(description="Guacamole")
            session.add(recipe)
            # Commit happens automatically if no exception
    """
    session = get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def seed_reference_data(session: Optional[Session] = None) -> Dict[str, int]:
    """
    Insert the standard units of measure and recipe categories.

    Idempotent: rows that already exist (matched by description) are skipped.

    Args:
        session: Optional database session. If None, creates a new session.

    Returns:
        Dictionary with counts of created rows: {"units_of_measure": n, "categories": n}
    """
    from ..models import Category, UnitOfMeasure

    def _impl(sess: Session) -> Dict[str, int]:
        counts = {"units_of_measure": 0, "categories": 0}

        existing_uoms = {row.description for row in sess.query(UnitOfMeasure).all()}
        for description in UNITS_OF_MEASURE:
            if description not in existing_uoms:
                sess.add(UnitOfMeasure(description=description))
                counts["units_of_measure"] += 1

        existing_categories = {row.description for row in sess.query(Category).all()}
        for description in RECIPE_CATEGORIES:
            if description not in existing_categories:
                sess.add(Category(description=description))
                counts["categories"] += 1

        sess.flush()
        logger.info(
            f"Seeded {counts['units_of_measure']} units of measure "
            f"and {counts['categories']} categories"
        )
        return counts

    if session is not None:
        return _impl(session)
    with session_scope() as sess:
        return _impl(sess)


def verify_database() -> bool:
    """
    Verify that the database is accessible and has tables.

    Returns:
        True if database is valid, False otherwise
    """
    try:
        engine = get_engine()
        inspector = inspect(engine)
        tables = inspector.get_table_names()

        expected_tables = ["recipes", "ingredients", "units_of_measure"]
        return all(table in tables for table in expected_tables)
    except Exception as e:
        logger.error(f"Database verification failed: {e}")
        return False


def close_connections() -> None:
    """
    Close all database connections.

    Useful for cleanup or before application exit.
    """
    global _engine, _SessionFactory

    _SessionFactory = None

    if _engine is not None:
        _engine.dispose()
        _engine = None

    logger.info("Database connections closed")


def initialize_app_database() -> None:
    """
    Initialize the application database.

    Creates tables if they don't exist and seeds reference data.
    """
    config = get_config()

    if not config.database_exists():
        logger.info(f"Creating new database at: {config.database_path}")
    else:
        logger.info(f"Using existing database at: {config.database_path}")

    engine = get_engine()
    init_database(engine)
    seed_reference_data()

    if verify_database():
        logger.info("Database initialized and verified successfully")
    else:
        logger.warning("Database verification failed - tables may not exist")

"""Database connection helper.

Opens one verified connection per call, retrying a fixed number of times with a
fixed delay between attempts. There is no pool: closing the returned connection
closes the underlying driver connection.
"""

import logging
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from visit_counter.config import DatabaseSettings

logger = logging.getLogger(__name__)


class VisitCounterError(Exception):
    """Base class for errors that end a request with a 500."""


class DatabaseConnectionError(VisitCounterError):
    """Raised when no connection could be opened within the retry ceiling."""

    def __init__(self, attempts: int, last_error: Exception):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"failed to connect to DB after {attempts} attempts: {last_error}")


def connect(db_settings: DatabaseSettings, sleep: Optional[Callable[[float], None]] = None) -> Connection:
    """Open and ping a database connection, retrying on failure.

    Args:
        db_settings: Connection parameters, retry ceiling and delay
        sleep: Function used to wait between attempts, defaults to time.sleep

    Returns:
        Open SQLAlchemy connection; use it as a context manager to release it

    Raises:
        DatabaseConnectionError: If every attempt failed
    """
    sleep = sleep or time.sleep
    retries = max(db_settings.retries, 1)
    last_error = None

    for attempt in range(1, retries + 1):
        engine = None
        try:
            engine = create_engine(db_settings.database_url, poolclass=NullPool)
            conn = engine.connect()
            try:
                conn.execute(text("SELECT 1"))
            except SQLAlchemyError:
                conn.close()
                raise
            logger.info(f"Connected to database (attempt {attempt})")
            return conn
        except SQLAlchemyError as e:
            last_error = e
            if engine is not None:
                engine.dispose()
            logger.warning(f"Database connection failed (attempt {attempt}/{retries}): {e}")
            if attempt < retries:
                sleep(db_settings.retry_delay)

    raise DatabaseConnectionError(retries, last_error)


@contextmanager
def connection(db_settings: DatabaseSettings,
               sleep: Optional[Callable[[float], None]] = None) -> Iterator[Connection]:
    """Scoped connect(): close the connection and dispose its engine on exit."""
    conn = connect(db_settings, sleep=sleep)
    try:
        yield conn
    finally:
        conn.close()
        conn.engine.dispose()

"""Queries against the `messages` and `visits` tables.

Each method runs a single statement on the connection it was given. Any
driver or lookup failure is raised as QueryError.
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from visit_counter.database import VisitCounterError
from visit_counter.models import messages, visits

logger = logging.getLogger(__name__)

COUNTER_ID = 1
NO_ROWS = "no rows in result set"
NULL_TEXT = "converting NULL to string is unsupported"
NULL_COUNT = "converting NULL to int is unsupported"


class QueryError(VisitCounterError):
    """Raised when a statement fails or returns no row."""


class VisitRepository:
    """Reads the stored message and maintains the visit counter."""

    def __init__(self, conn: Connection):
        """Initialize repository with an open connection.

        Args:
            conn: SQLAlchemy connection owned by the caller
        """
        self.conn = conn

    def get_message(self) -> str:
        """Return the text of the first row in `messages`.

        Raises:
            QueryError: If the query fails, the table is empty or the text is NULL
        """
        try:
            row = self.conn.execute(select(messages.c.text).limit(1)).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to read message: {e}")
            raise QueryError(str(e)) from e
        if row is None:
            raise QueryError(NO_ROWS)
        if row[0] is None:
            raise QueryError(NULL_TEXT)
        return row[0]

    def increment_visits(self) -> None:
        """Add one to the counter row and commit.

        Raises:
            QueryError: If the update fails
        """
        stmt = (
            update(visits)
            .where(visits.c.id == COUNTER_ID)
            .values(count=visits.c.count + 1)
        )
        try:
            self.conn.execute(stmt)
            self.conn.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to increment visits: {e}")
            raise QueryError(str(e)) from e

    def get_visits(self) -> int:
        """Return the current counter value.

        Raises:
            QueryError: If the query fails, the counter row is missing or NULL
        """
        stmt = select(visits.c.count).where(visits.c.id == COUNTER_ID)
        try:
            row = self.conn.execute(stmt).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to read visits: {e}")
            raise QueryError(str(e)) from e
        if row is None:
            raise QueryError(NO_ROWS)
        if row[0] is None:
            raise QueryError(NULL_COUNT)
        return int(row[0])

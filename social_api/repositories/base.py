"""
Social API — Store Base Class
===============================

What:  Shared failure handling for AccountStore and MessageStore.
How:   `_database_error()` logs the driver error with the failed operation,
       rolls the session back so the request's transaction is usable again,
       and builds the DatabaseError the caller raises.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from social_api.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class Store:
    """Base class for table stores."""

    #: Table name used in log lines and error context
    table: str = ""

    async def _database_error(
        self,
        db: AsyncSession,
        operation: str,
        exc: Exception,
    ) -> DatabaseError:
        logger.error(
            "Database error in %s.%s: %s",
            self.table,
            operation,
            str(exc),
            exc_info=True,
        )
        try:
            await db.rollback()
        except SQLAlchemyError:
            logger.error("Rollback failed after %s.%s", self.table, operation)
        return DatabaseError(
            context={
                "table": self.table,
                "operation": operation,
                "error_type": type(exc).__name__,
            },
        )

"""
Lambda Hubs API — Session-Backed Service Base
===============================================

What:  Shared transaction handling for the data-access services.
How:   Each public service method opens exactly one session and one
       transaction: commit on success, rollback on any error.
       SQLAlchemy failures are logged with their detail and re-raised as
       DatabaseError, which never carries that detail to the client.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import Select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hubs_api.exceptions import DatabaseError
from hubs_api.schemas.common import ListParams

logger = logging.getLogger(__name__)

# Integer primary keys are int4 on PostgreSQL
MIN_ID = -(2**31)
MAX_ID = 2**31 - 1


def storable_id(value: int) -> bool:
    """
    False for ids no row can ever have.

    Lookups short-circuit to "not found" for these instead of handing the
    driver a value it cannot bind (asyncpg DataError, SQLite OverflowError).
    """
    return MIN_ID <= value <= MAX_ID


def paged(query: Select, params: ListParams) -> Select:
    """Apply LIMIT/OFFSET only when the caller asked for a page size."""
    if params.limit is None:
        return query
    return query.limit(params.limit).offset(params.offset)


class SessionService:
    """
    Base class for services that talk to the database.

    Args:
        session_factory: async_sessionmaker bound to the application's engine.
                         Injected by the app factory; there is no global session.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    yield session
        except SQLAlchemyError as e:
            logger.error(
                "%s.%s failed: %s: %s",
                type(self).__name__,
                operation,
                type(e).__name__,
                str(e),
            )
            raise DatabaseError(
                context={
                    "operation": f"{type(self).__name__}.{operation}",
                    "error_type": type(e).__name__,
                },
            ) from e

"""
Lambda Hubs API — Hub Service (Data Access)
=============================================

What:  Every database operation the hubs variant needs: hub CRUD plus the
       message lookups and inserts.
Who:   Called by the hubs and messages route groups.

Contract:
    find / find_hub_messages       → list (possibly empty)
    find_by_id / find_message_by_id → row or None
    add / add_message              → the stored row
    update                         → the refreshed row, or None if no row matched
    remove                         → number of rows deleted (0 or 1)
    Any database failure           → DatabaseError

Ids outside the int4 column range match nothing and never reach the driver.

Routes decide what an empty or None result means (404 or not); this layer
only reports what the database said.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import asc, delete, desc, select

from hubs_api.models.hub import Hub, Message
from hubs_api.schemas.hub import HubListParams
from hubs_api.services.base import SessionService, paged, storable_id

logger = logging.getLogger(__name__)


class HubService(SessionService):
    """Data access for the `hubs` and `messages` tables."""

    # ── Hubs ──────────────────────────────────────────────────────────────

    async def find(self, params: Optional[HubListParams] = None) -> List[Hub]:
        """
        Page through hubs.

        Query plan:
            SELECT * FROM hubs ORDER BY :sortby :sortdir [LIMIT :limit OFFSET :offset]
        Without `limit` every hub is returned.
        `sortby` has already been checked against HubListParams.sortable.
        """
        params = params or HubListParams()
        column = getattr(Hub, params.sortby)
        order = desc(column) if params.sortdir == "desc" else asc(column)

        query = paged(select(Hub).order_by(order), params)

        async with self._transaction("find") as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def find_by_id(self, hub_id: int) -> Optional[Hub]:
        if not storable_id(hub_id):
            return None
        async with self._transaction("find_by_id") as session:
            return await session.get(Hub, hub_id)

    async def add(self, data: Dict[str, Any]) -> Hub:
        async with self._transaction("add") as session:
            hub = Hub(**data)
            session.add(hub)
            await session.flush()  # assigns the id
            logger.info("Hub created: %s", hub.id)
            return hub

    async def update(self, hub_id: int, changes: Dict[str, Any]) -> Optional[Hub]:
        """Apply a partial update; returns None when the hub does not exist."""
        if not storable_id(hub_id):
            return None
        async with self._transaction("update") as session:
            hub = await session.get(Hub, hub_id)
            if hub is None:
                return None
            for field, value in changes.items():
                setattr(hub, field, value)
            await session.flush()
            return hub

    async def remove(self, hub_id: int) -> int:
        if not storable_id(hub_id):
            return 0
        async with self._transaction("remove") as session:
            result = await session.execute(delete(Hub).where(Hub.id == hub_id))
            count = result.rowcount or 0
            if count:
                logger.info("Hub removed: %s", hub_id)
            return count

    # ── Messages ──────────────────────────────────────────────────────────

    async def find_hub_messages(self, hub_id: int) -> List[Message]:
        if not storable_id(hub_id):
            return []
        query = (
            select(Message)
            .where(Message.hub_id == hub_id)
            .order_by(asc(Message.id))
        )
        async with self._transaction("find_hub_messages") as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def find_message_by_id(self, message_id: int) -> Optional[Message]:
        if not storable_id(message_id):
            return None
        async with self._transaction("find_message_by_id") as session:
            return await session.get(Message, message_id)

    async def add_message(self, data: Dict[str, Any]) -> Message:
        """
        Insert a message. `data` must already carry `hub_id`; a hub id that
        does not exist violates the foreign key and surfaces as DatabaseError.
        """
        async with self._transaction("add_message") as session:
            message = Message(**data)
            session.add(message)
            await session.flush()
            logger.info("Message %s added to hub %s", message.id, message.hub_id)
            return message

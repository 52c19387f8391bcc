"""
Lambda Hubs API — Adopter Service (Data Access)
=================================================

What:  Database operations for the animal shelter variant.
Who:   Called by AdopterController, the adopters route group, and the dogs route group.

Same contract as HubService: lists may be empty, single-row lookups return
None when nothing matches, remove returns a row count, and database failures
become DatabaseError.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import asc, delete, desc, select

from hubs_api.models.adopter import Adopter, Dog
from hubs_api.schemas.adopter import AdopterListParams
from hubs_api.services.base import SessionService, paged, storable_id

logger = logging.getLogger(__name__)


class AdopterService(SessionService):
    """Data access for the `adopters` and `dogs` tables."""

    async def find(self, params: Optional[AdopterListParams] = None) -> List[Adopter]:
        params = params or AdopterListParams()
        column = getattr(Adopter, params.sortby)
        order = desc(column) if params.sortdir == "desc" else asc(column)

        query = paged(select(Adopter).order_by(order), params)

        async with self._transaction("find") as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def find_by_id(self, adopter_id: int) -> Optional[Adopter]:
        if not storable_id(adopter_id):
            return None
        async with self._transaction("find_by_id") as session:
            return await session.get(Adopter, adopter_id)

    async def add(self, data: Dict[str, Any]) -> Adopter:
        async with self._transaction("add") as session:
            adopter = Adopter(**data)
            session.add(adopter)
            await session.flush()
            logger.info("Adopter created: %s", adopter.id)
            return adopter

    async def update(self, adopter_id: int, changes: Dict[str, Any]) -> Optional[Adopter]:
        if not storable_id(adopter_id):
            return None
        async with self._transaction("update") as session:
            adopter = await session.get(Adopter, adopter_id)
            if adopter is None:
                return None
            for field, value in changes.items():
                setattr(adopter, field, value)
            await session.flush()
            return adopter

    async def remove(self, adopter_id: int) -> int:
        if not storable_id(adopter_id):
            return 0
        async with self._transaction("remove") as session:
            result = await session.execute(delete(Adopter).where(Adopter.id == adopter_id))
            return result.rowcount or 0

    # ── Dogs ──────────────────────────────────────────────────────────────

    async def find_dogs(self, adopter_id: int) -> List[Dog]:
        if not storable_id(adopter_id):
            return []
        query = select(Dog).where(Dog.adopter_id == adopter_id).order_by(asc(Dog.id))
        async with self._transaction("find_dogs") as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def find_dog_by_id(self, dog_id: int) -> Optional[Dog]:
        if not storable_id(dog_id):
            return None
        async with self._transaction("find_dog_by_id") as session:
            return await session.get(Dog, dog_id)

    async def add_dog(self, data: Dict[str, Any]) -> Dog:
        async with self._transaction("add_dog") as session:
            dog = Dog(**data)
            session.add(dog)
            await session.flush()
            logger.info("Dog %s added for adopter %s", dog.id, dog.adopter_id)
            return dog

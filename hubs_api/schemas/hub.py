"""
Lambda Hubs API — Hub & Message Schemas
=========================================

What:  Request and response contracts for the hubs variant.

Request models forbid unknown fields so a typo in a body is a 400 instead of
a silently dropped column. A message body may carry `hub_id`; the nested
create route always overwrites it with the hub id from the path.
"""

from datetime import datetime
from typing import ClassVar, FrozenSet, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from hubs_api.schemas.common import ListParams


# ── Requests ──────────────────────────────────────────────────────────────


class HubCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=128)


class HubUpdate(BaseModel):
    """Partial update; only the fields present in the body are written."""
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, min_length=1, max_length=128)


class MessageCreate(BaseModel):
    """
    Body of `POST /{hub_id}/messages`.

    `sender` is also accepted as `from`, the name older clients send.
    """
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    sender: str = Field(
        min_length=1,
        max_length=255,
        validation_alias=AliasChoices("sender", "from"),
    )
    text: str = Field(min_length=1)
    hub_id: Optional[int] = None


class HubListParams(ListParams):
    sortable: ClassVar[FrozenSet[str]] = frozenset({"id", "name", "created_at", "updated_at"})


# ── Responses ─────────────────────────────────────────────────────────────


class HubResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    sender: str
    text: str
    hub_id: int
    created_at: datetime
    updated_at: datetime

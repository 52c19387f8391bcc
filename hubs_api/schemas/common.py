"""
Lambda Hubs API — Shared Pydantic Schemas
===========================================

What:  Query-parameter, error, and health models shared by both variants.
"""

from typing import Any, ClassVar, FrozenSet, List, Optional

from pydantic import BaseModel, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Query Parameter Models
# ══════════════════════════════════════════════════════════════════════════


class ListParams(BaseModel):
    """
    Query string accepted by every `GET /` collection endpoint.

    Parameters:
        page:    1-based page number
        limit:   rows per page (max 100); omitted means every row
        sortby:  column to order by; each resource declares its own `sortable` set
        sortdir: asc or desc

    Subclasses set `sortable`. Anything outside it is rejected with a 400
    before the query runs, so the column name never reaches SQL unchecked.
    """

    sortable: ClassVar[FrozenSet[str]] = frozenset({"id"})

    page: int = Field(default=1, ge=1, description="Page number (1-based)")
    limit: Optional[int] = Field(
        default=None, ge=1, le=100, description="Rows per page (max 100); omit for all rows"
    )
    sortby: str = Field(default="id", description="Column to sort by")
    sortdir: str = Field(default="asc", description="Sort direction: asc or desc")

    @field_validator("sortby")
    @classmethod
    def validate_sortby(cls, v: str) -> str:
        if v not in cls.sortable:
            raise ValueError(f"Invalid sortby '{v}'. Must be one of: {sorted(cls.sortable)}")
        return v

    @field_validator("sortdir")
    @classmethod
    def validate_sortdir(cls, v: str) -> str:
        lower = v.lower()
        if lower not in {"asc", "desc"}:
            raise ValueError(f"Invalid sortdir '{v}'. Must be 'asc' or 'desc'")
        return lower

    @property
    def offset(self) -> int:
        # Without a limit there are no pages; `page` is ignored
        if self.limit is None:
            return 0
        return self.limit * (self.page - 1)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class MessageBody(BaseModel):
    """`{"message": ...}`: confirmations, 404s, and 500s."""
    message: str


class LookupFailure(BaseModel):
    """`{"success": false, "message": ...}` envelope of the message lookup route."""
    success: bool = False
    message: Any


class NotImplementedBody(BaseModel):
    implemented: bool = False


class ErrorResponse(BaseModel):
    """
    Body returned when the request itself is malformed (HTTP 400).

    Example:
        {
            "message": "Invalid request",
            "details": [{"loc": ["body", "name"], "msg": "Field required"}]
        }
    """
    message: str = Field(description="Human-readable error description")
    details: Optional[List[Any]] = Field(default=None, description="Per-field validation errors")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

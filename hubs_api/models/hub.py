"""
Lambda Hubs API — Hub & Message SQLAlchemy Models
===================================================

What:  ORM models for the `hubs` and `messages` tables.
Who:   Used by HubService for CRUD operations and by Alembic for schema management.

Table Design:
    - Integer primary keys. Message ids are unique across the whole table, not
      per hub, which is what lets /api/messages/{id} work without the hub id.
    - messages.hub_id cascades on delete: nuking a hub takes its messages along.
    - hubs.name is unique; a duplicate insert fails at the database.
"""

from datetime import datetime, timezone
from typing import List

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hubs_api.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Hub(Base):
    """A chat hub; owns zero or more messages."""

    __tablename__ = "hubs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=func.now(),
    )

    messages: Mapped[List["Message"]] = relationship(
        back_populates="hub",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Hub(id={self.id}, name='{self.name}')>"


class Message(Base):
    """A message posted to exactly one hub."""

    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    sender: Mapped[str] = mapped_column(String(255), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)

    hub_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("hubs.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=func.now(),
    )

    hub: Mapped[Hub] = relationship(back_populates="messages")

    def __repr__(self) -> str:
        return f"<Message(id={self.id}, hub_id={self.hub_id}, sender='{self.sender}')>"

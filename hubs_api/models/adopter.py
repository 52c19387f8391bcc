"""
Lambda Hubs API — Adopter & Dog SQLAlchemy Models
===================================================

What:  ORM models for the animal shelter variant: `adopters` and `dogs`.

Table Design:
    - A dog may be unadopted (adopter_id NULL); deleting an adopter returns
      their dogs to the shelter instead of deleting them (ON DELETE SET NULL).
    - adopters.email is unique.
"""

from typing import List, Optional

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hubs_api.database import Base


class Adopter(Base):
    __tablename__ = "adopters"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    dogs: Mapped[List["Dog"]] = relationship(
        back_populates="adopter",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Adopter(id={self.id}, name='{self.name}')>"


class Dog(Base):
    __tablename__ = "dogs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    weight: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    adopter_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("adopters.id", ondelete="SET NULL", onupdate="CASCADE"),
        nullable=True,
        index=True,
    )

    adopter: Mapped[Optional[Adopter]] = relationship(back_populates="dogs")

    def __repr__(self) -> str:
        return f"<Dog(id={self.id}, name='{self.name}', adopter_id={self.adopter_id})>"

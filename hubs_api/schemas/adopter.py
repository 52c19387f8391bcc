"""
Lambda Hubs API — Adopter & Dog Schemas
=========================================

What:  Request and response contracts for the animal shelter variant.
"""

from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from hubs_api.schemas.common import ListParams


class AdopterCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=128)
    email: EmailStr


class AdopterUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, min_length=1, max_length=128)
    email: Optional[EmailStr] = None


class DogCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1, max_length=128)
    weight: Optional[float] = Field(default=None, gt=0)
    adopter_id: Optional[int] = None


class AdopterListParams(ListParams):
    sortable: ClassVar[FrozenSet[str]] = frozenset({"id", "name", "email"})


class AdopterResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class DogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    weight: Optional[float] = None
    adopter_id: Optional[int] = None

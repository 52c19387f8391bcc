"""
Lambda Hubs API — Adopters Route Group
========================================

What:  CRUD for adopters and the nested dogs listing/creation.
How:   Read endpoints are mapped to AdopterController handlers by name; the
       write endpoints are defined inline. Both styles are in use here on
       purpose so the router shows each of them.

Bound in main.py to /api/adopters and /i/love/dogs, so for example both
    DELETE /api/adopters/3
    DELETE /i/love/dogs/3
reach delete_adopter below.
"""

import logging
from typing import List

from fastapi import APIRouter

from hubs_api.controllers.adopters import AdopterController
from hubs_api.exceptions import NotFoundError, ValidationError
from hubs_api.routes.errors import collaborator_failure
from hubs_api.schemas.adopter import (
    AdopterCreate,
    AdopterResponse,
    AdopterUpdate,
    DogCreate,
    DogResponse,
)
from hubs_api.schemas.common import ErrorResponse, MessageBody
from hubs_api.services.adopter_service import AdopterService

logger = logging.getLogger(__name__)


def build_adopters_router(adopter_service: AdopterService) -> APIRouter:
    router = APIRouter(tags=["Adopters"])
    controller = AdopterController(adopter_service)

    # ── Controller-backed endpoints ───────────────────────────────────────
    router.add_api_route(
        "",
        controller.get_adopters,
        methods=["GET"],
        response_model=List[AdopterResponse],
        responses={400: {"model": ErrorResponse}, 500: {"model": MessageBody}},
        summary="List adopters",
    )
    router.add_api_route(
        "/",
        controller.get_adopters,
        methods=["GET"],
        response_model=List[AdopterResponse],
        include_in_schema=False,
    )
    router.add_api_route(
        "/{adopter_id}",
        controller.get_adopter_by_id,
        methods=["GET"],
        response_model=AdopterResponse,
        responses={404: {"model": MessageBody}, 500: {"model": MessageBody}},
        summary="Get an adopter by id",
    )
    router.add_api_route(
        "/{adopter_id}/dogs",
        controller.get_adopter_dogs,
        methods=["GET"],
        response_model=List[DogResponse],
        responses={500: {"model": MessageBody}},
        summary="List the dogs of an adopter",
    )

    # ── Inline endpoints ──────────────────────────────────────────────────

    @router.post(
        "",
        status_code=201,
        response_model=AdopterResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": MessageBody}},
        summary="Create an adopter",
    )
    @router.post("/", status_code=201, response_model=AdopterResponse, include_in_schema=False)
    async def create_adopter(body: AdopterCreate) -> AdopterResponse:
        with collaborator_failure("Error adding the adopter"):
            adopter = await adopter_service.add(body.model_dump())
        return AdopterResponse.model_validate(adopter)

    @router.delete(
        "/{adopter_id}",
        response_model=MessageBody,
        responses={404: {"model": MessageBody}, 500: {"model": MessageBody}},
        summary="Delete an adopter",
    )
    async def delete_adopter(adopter_id: int) -> MessageBody:
        with collaborator_failure("Error removing the adopter"):
            count = await adopter_service.remove(adopter_id)
        if count > 0:
            return MessageBody(message="The adopter has been nuked")
        raise NotFoundError(
            "The adopter could not be found", resource="adopter", resource_id=adopter_id
        )

    @router.put(
        "/{adopter_id}",
        response_model=AdopterResponse,
        responses={404: {"model": MessageBody}, 500: {"model": MessageBody}},
        summary="Update an adopter",
    )
    async def update_adopter(adopter_id: int, body: AdopterUpdate) -> AdopterResponse:
        changes = body.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            raise ValidationError(field="body", context={"reason": "no fields to update"})
        with collaborator_failure("Error updating the adopter"):
            adopter = await adopter_service.update(adopter_id, changes)
        if not adopter:
            raise NotFoundError(
                "The adopter could not be found", resource="adopter", resource_id=adopter_id
            )
        return AdopterResponse.model_validate(adopter)

    @router.post(
        "/{adopter_id}/dogs",
        status_code=201,
        response_model=DogResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": MessageBody}},
        summary="Add a dog for an adopter",
    )
    async def create_adopter_dog(adopter_id: int, body: DogCreate) -> DogResponse:
        dog_info = {**body.model_dump(), "adopter_id": adopter_id}
        with collaborator_failure("Error adding the dog"):
            dog = await adopter_service.add_dog(dog_info)
        return DogResponse.model_validate(dog)

    return router

"""
Lambda Hubs API — Hubs Route Group
====================================

What:  CRUD for hubs plus the nested messages listing and creation.
How:   build_hubs_router() returns an APIRouter whose handlers close over the
       HubService they were given. main.py mounts the same router at several
       prefixes (/api/hubs, /repos, /thing/otherthing); every alias behaves
       identically because it is literally the same route group.

Paths (relative to the bound prefix):
    GET    /                        list hubs (page, limit, sortby, sortdir)
    GET    /{hub_id}                one hub
    GET    /{hub_id}/messages       messages of a hub
    POST   /                        create a hub
    POST   /{hub_id}/messages       create a message in a hub
    PUT    /{hub_id}                partial update
    DELETE /{hub_id}                delete
    POST   /{owner}/{repo}/git/refs placeholder with a fixed text reply

Each handler makes exactly one HubService call.
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse, PlainTextResponse

from hubs_api.exceptions import DatabaseError, NotFoundError, ValidationError
from hubs_api.routes.errors import collaborator_failure
from hubs_api.schemas.common import ErrorResponse, MessageBody
from hubs_api.schemas.hub import (
    HubCreate,
    HubListParams,
    HubResponse,
    HubUpdate,
    MessageCreate,
    MessageResponse,
)
from hubs_api.services.hub_service import HubService

logger = logging.getLogger(__name__)

GIT_REFS_REPLY = "ok"


def build_hubs_router(
    hub_service: HubService,
    empty_messages_not_found: bool = True,
) -> APIRouter:
    """
    Build the hubs route group around an injected HubService.

    Args:
        hub_service:              data access for hubs and messages
        empty_messages_not_found: answer 404 when a hub has no messages
                                  (the hubs API always has); False returns 200 []
    """
    router = APIRouter(tags=["Hubs"])

    @router.get(
        "",
        response_model=List[HubResponse],
        responses={400: {"model": ErrorResponse}, 500: {"model": MessageBody}},
        summary="List hubs",
    )
    @router.get("/", response_model=List[HubResponse], include_in_schema=False)
    async def list_hubs(params: Annotated[HubListParams, Query()]) -> List[HubResponse]:
        logger.debug("Listing hubs with %s", params.model_dump())
        with collaborator_failure("Error retrieving the hubs"):
            hubs = await hub_service.find(params)
        return [HubResponse.model_validate(hub) for hub in hubs]

    @router.get(
        "/{hub_id}",
        response_model=HubResponse,
        responses={404: {"model": MessageBody}, 500: {"model": MessageBody}},
        summary="Get a hub by id",
    )
    async def get_hub(hub_id: int) -> HubResponse:
        with collaborator_failure("Error retrieving the hub"):
            hub = await hub_service.find_by_id(hub_id)
        if not hub:
            raise NotFoundError("Hub not found", resource="hub", resource_id=hub_id)
        return HubResponse.model_validate(hub)

    @router.post(
        "",
        status_code=201,
        response_model=HubResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": MessageBody}},
        summary="Create a hub",
    )
    @router.post("/", status_code=201, response_model=HubResponse, include_in_schema=False)
    async def create_hub(body: HubCreate) -> HubResponse:
        with collaborator_failure("Error adding the hub"):
            hub = await hub_service.add(body.model_dump())
        return HubResponse.model_validate(hub)

    @router.delete(
        "/{hub_id}",
        response_model=MessageBody,
        responses={404: {"model": MessageBody}, 500: {"model": MessageBody}},
        summary="Delete a hub",
    )
    async def delete_hub(hub_id: int) -> MessageBody:
        with collaborator_failure("Error removing the hub"):
            count = await hub_service.remove(hub_id)
        if count > 0:
            return MessageBody(message="The hub has been nuked")
        raise NotFoundError("The hub could not be found", resource="hub", resource_id=hub_id)

    @router.put(
        "/{hub_id}",
        response_model=HubResponse,
        responses={404: {"model": MessageBody}, 500: {"model": MessageBody}},
        summary="Update a hub",
    )
    async def update_hub(hub_id: int, body: HubUpdate) -> HubResponse:
        changes = body.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            raise ValidationError(field="body", context={"reason": "no fields to update"})
        with collaborator_failure("Error updating the hub"):
            hub = await hub_service.update(hub_id, changes)
        if not hub:
            raise NotFoundError("The hub could not be found", resource="hub", resource_id=hub_id)
        return HubResponse.model_validate(hub)

    @router.get(
        "/{hub_id}/messages",
        response_model=List[MessageResponse],
        responses={404: {"model": MessageBody}, 500: {"model": MessageBody}},
        summary="List the messages of a hub",
    )
    async def list_hub_messages(hub_id: int) -> List[MessageResponse]:
        with collaborator_failure("Error retrieving the messages for this hub"):
            messages = await hub_service.find_hub_messages(hub_id)
        if not messages and empty_messages_not_found:
            raise NotFoundError("No messages for this hub", resource="hub", resource_id=hub_id)
        return [MessageResponse.model_validate(message) for message in messages]

    @router.post(
        "/{hub_id}/messages",
        status_code=201,
        response_model=MessageResponse,
        responses={400: {"model": ErrorResponse}},
        summary="Add a message to a hub",
    )
    async def create_hub_message(hub_id: int, body: MessageCreate):
        # The path decides the hub; a hub_id in the body is overwritten
        message_info = {**body.model_dump(), "hub_id": hub_id}
        try:
            with collaborator_failure("Error adding the message"):
                message = await hub_service.add_message(message_info)
        except DatabaseError as exc:
            # Known inconsistency: this endpoint has always wrapped its failure
            # in {"err": ...} instead of {"message": ...}. Clients depend on it.
            logger.error("Adding message to hub %s failed: %s", hub_id, exc.context)
            return JSONResponse(status_code=500, content={"err": exc.to_dict()})
        return MessageResponse.model_validate(message)

    @router.post(
        "/{owner}/{repo}/git/refs",
        response_class=PlainTextResponse,
        include_in_schema=False,
    )
    async def create_git_ref(owner: str, repo: str) -> str:
        logger.debug("git refs placeholder hit for %s/%s", owner, repo)
        return GIT_REFS_REPLY

    return router

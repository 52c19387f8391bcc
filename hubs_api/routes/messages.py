"""
Lambda Hubs API — Messages Route Group
========================================

What:  Direct access to a message by its own id, without naming its hub.
Why:   Message ids are unique across all hubs, so /api/messages/123 is
       unambiguous; /api/hubs/1/messages/123 would add nothing.

Response bodies on the error paths use the {"success": false, "message": ...}
envelope this route group has always returned.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from hubs_api.exceptions import DatabaseError
from hubs_api.routes.errors import collaborator_failure
from hubs_api.schemas.common import LookupFailure
from hubs_api.schemas.hub import MessageResponse
from hubs_api.services.hub_service import HubService

logger = logging.getLogger(__name__)


def build_messages_router(hub_service: HubService) -> APIRouter:
    router = APIRouter(tags=["Messages"])

    @router.get(
        "/{message_id}",
        response_model=MessageResponse,
        responses={404: {"model": LookupFailure}, 500: {"model": LookupFailure}},
        summary="Get a message by id",
    )
    async def get_message(message_id: int):
        try:
            with collaborator_failure("Error retrieving the message"):
                message = await hub_service.find_message_by_id(message_id)
        except DatabaseError as exc:
            logger.error("Message %s lookup failed: %s", message_id, exc.context)
            return JSONResponse(
                status_code=500,
                content=LookupFailure(message=exc.to_dict()).model_dump(),
            )

        if not message:
            return JSONResponse(
                status_code=404,
                content=LookupFailure(message="invalid message id").model_dump(),
            )
        return MessageResponse.model_validate(message)

    return router

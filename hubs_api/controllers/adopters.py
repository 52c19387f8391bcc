"""
Lambda Hubs API — Adopters Controller
=======================================

What:  Handler functions for the adopters route group, kept apart from the
       router that maps them to URLs.
Why:   With many endpoints the router stays a readable table of
       METHOD + path → handler name, and handler bodies live here.

    MODEL      = services (data access)
    VIEW       = routes (URL definitions)
    CONTROLLER = this module (what runs for each URL)

Only the read handlers are wired up by routes/adopters.py. post_adopter,
delete_adopter_by_id, and put_adopter_by_id are declared placeholders: they
raise EndpointNotImplementedError, which the app answers with
400 {"implemented": false}. The router keeps its inline versions of those.
"""

import logging
from typing import Annotated, List

from fastapi import Query

from hubs_api.exceptions import EndpointNotImplementedError, NotFoundError
from hubs_api.routes.errors import collaborator_failure
from hubs_api.schemas.adopter import (
    AdopterCreate,
    AdopterListParams,
    AdopterResponse,
    AdopterUpdate,
    DogResponse,
)
from hubs_api.services.adopter_service import AdopterService

logger = logging.getLogger(__name__)


class AdopterController:
    """
    Named handlers around an injected AdopterService.

    Handlers are bound methods, so the router can reference them by name:
        router.add_api_route("/{adopter_id}", controller.get_adopter_by_id)
    """

    def __init__(self, adopter_service: AdopterService):
        self.adopter_service = adopter_service

    # GET /
    async def get_adopters(
        self, params: Annotated[AdopterListParams, Query()]
    ) -> List[AdopterResponse]:
        with collaborator_failure("Error retrieving the adopters"):
            adopters = await self.adopter_service.find(params)
        return [AdopterResponse.model_validate(adopter) for adopter in adopters]

    # GET /{adopter_id}
    async def get_adopter_by_id(self, adopter_id: int) -> AdopterResponse:
        with collaborator_failure("Error retrieving the adopters"):
            adopter = await self.adopter_service.find_by_id(adopter_id)
        if not adopter:
            raise NotFoundError("invalid id", resource="adopter", resource_id=adopter_id)
        return AdopterResponse.model_validate(adopter)

    # GET /{adopter_id}/dogs
    async def get_adopter_dogs(self, adopter_id: int) -> List[DogResponse]:
        # An adopter with no dogs is a normal 200 []
        with collaborator_failure("Error retrieving the adopters"):
            dogs = await self.adopter_service.find_dogs(adopter_id)
        return [DogResponse.model_validate(dog) for dog in dogs]

    # POST /
    async def post_adopter(self, body: AdopterCreate) -> AdopterResponse:
        raise EndpointNotImplementedError("post_adopter")

    # DELETE /{adopter_id}
    async def delete_adopter_by_id(self, adopter_id: int) -> None:
        raise EndpointNotImplementedError("delete_adopter_by_id")

    # PUT /{adopter_id}
    async def put_adopter_by_id(self, adopter_id: int, body: AdopterUpdate) -> AdopterResponse:
        raise EndpointNotImplementedError("put_adopter_by_id")

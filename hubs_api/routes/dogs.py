"""
Lambda Hubs API — Dogs Route Group
====================================

What:  Look up a dog by its own id, whoever adopted it (or nobody).
"""

from fastapi import APIRouter

from hubs_api.exceptions import NotFoundError
from hubs_api.routes.errors import collaborator_failure
from hubs_api.schemas.adopter import DogResponse
from hubs_api.schemas.common import MessageBody
from hubs_api.services.adopter_service import AdopterService


def build_dogs_router(adopter_service: AdopterService) -> APIRouter:
    router = APIRouter(tags=["Dogs"])

    @router.get(
        "/{dog_id}",
        response_model=DogResponse,
        responses={404: {"model": MessageBody}, 500: {"model": MessageBody}},
        summary="Get a dog by id",
    )
    async def get_dog(dog_id: int) -> DogResponse:
        with collaborator_failure("Error retrieving the dog"):
            dog = await adopter_service.find_dog_by_id(dog_id)
        if not dog:
            raise NotFoundError("Dog not found", resource="dog", resource_id=dog_id)
        return DogResponse.model_validate(dog)

    return router

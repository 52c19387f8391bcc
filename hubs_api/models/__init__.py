# Importing the models registers them with Base.metadata
from hubs_api.models.adopter import Adopter, Dog
from hubs_api.models.hub import Hub, Message

__all__ = ["Adopter", "Dog", "Hub", "Message"]

"""
Lambda Hubs API — Collaborator Failure Translation
====================================================

What:  Turns any exception raised by a data-access call into a DatabaseError
       carrying the endpoint's fixed client message.
Why:   Every endpoint has its own 500 text ("Error retrieving the hubs",
       "Error removing the adopter", ...). The cause of the failure never
       changes that text; it is only logged.

Usage:
    with collaborator_failure("Error retrieving the hubs"):
        hubs = await hub_service.find(params)
"""

from contextlib import contextmanager
from typing import Iterator

from hubs_api.exceptions import DatabaseError, HubsApiError


@contextmanager
def collaborator_failure(message: str) -> Iterator[None]:
    try:
        yield
    except Exception as e:
        context = {"error_type": type(e).__name__, "error": str(e)}
        if isinstance(e, HubsApiError):
            context.update(e.context)
        raise DatabaseError(message=message, context=context) from e

"""
Lambda Hubs API — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the request-to-response mapping.
How:   Each exception carries a client-facing message and an optional context
       dict. Global exception handlers (registered in main.py) turn them into
       JSON responses; the context is logged, never returned.

Exception Hierarchy:
    HubsApiError (base)
    ├── ValidationError              → 400 Bad Request (rejected before the database)
    ├── NotFoundError                → 404 Not Found
    ├── DatabaseError                → 500 Internal Server Error
    └── EndpointNotImplementedError  → 400 {"implemented": false}

"Not found" and "failure" are distinct: a data-access call that succeeds but
returns nothing becomes NotFoundError; a call that raises becomes DatabaseError.
"""

from typing import Any, Dict, Optional


class HubsApiError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Client-facing description (safe to return in a response)
        context:  Debug details (logged server-side only)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, str]:
        """Public view of the failure: its kind and message, no context."""
        return {"name": type(self).__name__, "message": self.message}


class ValidationError(HubsApiError):
    """
    Raised when a request body, query string, or path parameter is invalid.

    HTTP: 400 Bad Request. FastAPI's own RequestValidationError (normally 422)
    is mapped onto the same response shape.
    """

    def __init__(
        self,
        message: str = "Invalid request",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(HubsApiError):
    """
    Raised when the data-access call succeeded but matched nothing.

    The message is the exact text returned to the client, e.g. "Hub not found".
    """

    def __init__(
        self,
        message: str = "The requested resource was not found",
        resource: Optional[str] = None,
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource:
            ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(HubsApiError):
    """
    Raised when a data-access call fails for any reason.

    What:    Connection lost, constraint violation, bad column, etc.
    HTTP:    500 Internal Server Error

    The client only ever sees `message`; the underlying exception type and text
    live in `context` and are logged.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class EndpointNotImplementedError(HubsApiError):
    """
    Raised by placeholder handlers that are declared but not built yet.

    HTTP: 400 with the fixed body {"implemented": false}.
    """

    def __init__(
        self,
        handler: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["handler"] = handler
        super().__init__(message=f"{handler} is not implemented", context=ctx)
        self.handler = handler

"""
Lambda Hubs API — Middleware Package
======================================

What:  Cross-cutting concerns applied to every request, ahead of routing.

Middleware Chain:
    Request → [CORS] → [Request ID] → [Logging] → body parsing → route group

    Request ID runs before Logging so the access line carries the id.
    JSON body parsing is FastAPI's own, applied to every route.
"""

"""
Lambda Hubs API — Welcome Page
================================

What:  GET / on the application itself (not under any route-group prefix).
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse


def build_root_router(title: str) -> APIRouter:
    router = APIRouter(tags=["Root"])
    page = f"""
      <h2>{title}</h2>
      <p>Welcome to the {title}</p>
    """

    @router.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def welcome() -> HTMLResponse:
        return HTMLResponse(page)

    return router

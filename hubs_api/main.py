"""
Lambda Hubs API — FastAPI Application Factories
=================================================

What:  Assembles the two example APIs: hubs/messages and adopters/dogs.
How:   create_hubs_app() / create_shelter_app() build a FastAPI instance,
       register middleware and exception handlers, and mount route groups at
       their URL prefixes. The data-access service is an argument; when it is
       omitted the factory builds one from settings.
Who:   uvicorn (`uvicorn hubs_api.main:app` or `hubs_api.main:shelter_app`),
       `python -m hubs_api`, and the tests.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │  Middleware: CORS → Request ID → Logging              │
    │                                                      │
    │  Route groups (one router, many prefixes):           │
    │    /api/hubs, /repos, /thing/otherthing → hubs       │
    │    /api/messages                        → messages   │
    │    /api/adopters, /i/love/dogs          → adopters   │
    │    /api/dogs                            → dogs       │
    │                                                      │
    │  Exception handlers:                                 │
    │    request validation / ValidationError → 400        │
    │    EndpointNotImplementedError → 400 {implemented}   │
    │    NotFoundError → 404   DatabaseError → 500          │
    └──────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Iterable, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from hubs_api import __version__
from hubs_api.config import Settings, settings as default_settings
from hubs_api.database import (
    build_engine,
    build_session_factory,
    create_tables,
    dispose_engine,
)
from hubs_api.exceptions import (
    DatabaseError,
    EndpointNotImplementedError,
    NotFoundError,
    ValidationError,
)
from hubs_api.middleware.logging import RequestLoggingMiddleware
from hubs_api.middleware.request_id import RequestIDMiddleware, request_id_var
from hubs_api.routes import health
from hubs_api.routes.adopters import build_adopters_router
from hubs_api.routes.dogs import build_dogs_router
from hubs_api.routes.hubs import build_hubs_router
from hubs_api.routes.messages import build_messages_router
from hubs_api.routes.root import build_root_router
from hubs_api.schemas.common import NotImplementedBody
from hubs_api.services.adopter_service import AdopterService
from hubs_api.services.hub_service import HubService

logger = logging.getLogger(__name__)

HUBS_PREFIXES = ("/api/hubs", "/repos", "/thing/otherthing")
MESSAGES_PREFIXES = ("/api/messages",)
ADOPTERS_PREFIXES = ("/api/adopters", "/i/love/dogs")
DOGS_PREFIXES = ("/api/dogs",)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure the root logger once for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    settings = settings or default_settings
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access middleware replaces uvicorn's access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

def _make_lifespan(title: str, settings: Settings, engine: Optional[AsyncEngine]):
    """
    Startup: configure logging, optionally create tables.
    Shutdown: dispose the engine this app owns.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        setup_logging(settings)
        logger.info("%s starting up...", title)

        if engine is not None and settings.create_tables_on_startup:
            await create_tables(engine)
            logger.info("Database tables ensured")

        logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

        yield

        logger.info("%s shutting down...", title)
        if engine is not None:
            await dispose_engine(engine)
        logger.info("Shutdown complete.")

    return lifespan


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to status codes and bodies.

        RequestValidationError      → 400 {"message", "details"}
        ValidationError             → 400 {"message", "details"}
        EndpointNotImplementedError → 400 {"implemented": false}
        NotFoundError               → 404 {"message"}
        DatabaseError               → 500 {"message"}   (context logged only)
        Exception (fallback)        → 500 {"message"}   (stack trace logged only)
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Rejected request to %s: %s", rid, request.url.path, exc.errors())
        details = [
            {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
            for error in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content=jsonable_encoder({"message": "Invalid request", "details": details}),
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={"message": exc.message, "details": [exc.context]},
        )

    @app.exception_handler(EndpointNotImplementedError)
    async def handle_not_implemented(request: Request, exc: EndpointNotImplementedError):
        rid = request_id_var.get("")
        logger.warning("[%s] Placeholder handler called: %s", rid, exc.handler)
        return JSONResponse(status_code=400, content=NotImplementedBody().model_dump())

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"message": exc.message})

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"message": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error: %s", str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"message": "An unexpected error occurred"},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factories
# ══════════════════════════════════════════════════════════════════════════

def mount(app: FastAPI, router: APIRouter, prefixes: Iterable[str]) -> None:
    """Bind one route group to every prefix; aliases share the same handlers."""
    for prefix in prefixes:
        app.include_router(router, prefix=prefix)


def _create_base_app(
    title: str,
    description: str,
    settings: Settings,
    engine: Optional[AsyncEngine],
) -> FastAPI:
    app = FastAPI(
        title=title,
        description=description,
        version=__version__,
        lifespan=_make_lifespan(title, settings, engine),
    )
    app.state.engine = engine

    # Last added runs first: CORS → Request ID → Logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    register_exception_handlers(app)
    app.include_router(health.router)
    return app


def create_hubs_app(
    hub_service: Optional[HubService] = None,
    settings: Optional[Settings] = None,
    prefixes: Optional[Dict[str, Iterable[str]]] = None,
) -> FastAPI:
    """
    Build the hubs/messages API.

    Args:
        hub_service: data access to use; built from settings.database_url when None
        settings:    configuration (defaults to the module singleton)
        prefixes:    override mount points, keys "hubs" and "messages"
    """
    settings = settings or default_settings
    prefixes = prefixes or {}

    engine = None
    if hub_service is None:
        engine = build_engine(settings)
        hub_service = HubService(build_session_factory(engine))

    app = _create_base_app(
        title="Lambda Hubs API",
        description="Hubs and the messages posted to them.",
        settings=settings,
        engine=engine,
    )

    mount(app, build_hubs_router(hub_service), prefixes.get("hubs", HUBS_PREFIXES))
    mount(app, build_messages_router(hub_service), prefixes.get("messages", MESSAGES_PREFIXES))
    app.include_router(build_root_router("Lambda Hubs API"))
    return app


def create_shelter_app(
    adopter_service: Optional[AdopterService] = None,
    settings: Optional[Settings] = None,
    prefixes: Optional[Dict[str, Iterable[str]]] = None,
) -> FastAPI:
    """Build the adopters/dogs API. Arguments mirror create_hubs_app()."""
    settings = settings or default_settings
    prefixes = prefixes or {}

    engine = None
    if adopter_service is None:
        engine = build_engine(settings)
        adopter_service = AdopterService(build_session_factory(engine))

    app = _create_base_app(
        title="Lambda Animal Shelter API",
        description="Adopters and their dogs.",
        settings=settings,
        engine=engine,
    )

    mount(app, build_adopters_router(adopter_service), prefixes.get("adopters", ADOPTERS_PREFIXES))
    mount(app, build_dogs_router(adopter_service), prefixes.get("dogs", DOGS_PREFIXES))
    app.include_router(build_root_router("Lambda Animal Shelter API"))
    return app


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build whichever variant settings.api_variant names."""
    settings = settings or default_settings
    if settings.api_variant == "shelter":
        return create_shelter_app(settings=settings)
    return create_hubs_app(settings=settings)


# ── Application Instances ────────────────────────────────────────────────
# uvicorn hubs_api.main:app  /  uvicorn hubs_api.main:shelter_app
app = create_hubs_app()
shelter_app = create_shelter_app()

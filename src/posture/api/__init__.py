"""FastAPI application factory for posture."""

from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from posture import __version__
from posture.api.routers import assessment, catalog, diagram, health
from posture.catalog import UnknownComponentError
from posture.config import Settings
from posture.diagram import Diagram
from posture.observability import add_observability_middleware
from posture.templates import UnknownTemplateError

log = logging.getLogger("posture.api")


def create_app(
    settings: Settings | None = None,
    session: Diagram | None = None,
) -> FastAPI:
    """Build and return a configured FastAPI application.

    Each application owns one in-memory diagram session.
    """
    settings = settings or Settings()
    app = FastAPI(
        title="Posture",
        description="Security posture evaluation for component architecture diagrams",
        version=__version__,
    )
    app.state.settings = settings
    app.state.diagram = session or Diagram()

    # ---------------------------------------------------------------
    # Exception handlers: {"error": "..."} bodies
    # ---------------------------------------------------------------

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
        )

    @app.exception_handler(UnknownComponentError)
    async def unknown_component_handler(request: Request, exc: UnknownComponentError):
        return JSONResponse(
            status_code=404,
            content={"error": f"Unknown component type: {exc.args[0]}"},
        )

    @app.exception_handler(UnknownTemplateError)
    async def unknown_template_handler(request: Request, exc: UnknownTemplateError):
        return JSONResponse(
            status_code=404,
            content={"error": f"Unknown template: {exc.args[0]}"},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors:
            first = errors[0]
            loc = ".".join(str(l) for l in first.get("loc", []))
            msg = first.get("msg", "Invalid input")
            detail = f"{loc}: {msg}" if loc else msg
        else:
            detail = "Invalid JSON body"
        return JSONResponse(
            status_code=400,
            content={"error": detail},
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        log.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": str(exc)},
        )

    # ---------------------------------------------------------------
    # Middleware (last added = outermost)
    # ---------------------------------------------------------------

    add_observability_middleware(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------------------------------------------------------------
    # Routers
    # ---------------------------------------------------------------

    api = APIRouter()
    api.include_router(catalog.router)
    api.include_router(diagram.router)
    api.include_router(assessment.router)
    app.include_router(api, prefix="/api")

    app.include_router(health.router)

    return app

"""
promptable.api.app

FastAPI app factory for the Promptable component host.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Own the component registry and the in-memory session store.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from promptable import __version__
from promptable.api.routers.components import router as components_router
from promptable.api.routers.health import router as health_router
from promptable.components.registry import ComponentRegistry, SessionStore, default_registry
from promptable.observability.logging import configure_logging, get_logger
from promptable.observability.middleware import RequestContextMiddleware
from promptable.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings, registry: ComponentRegistry | None = None) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, components=app.state.registry.names())
        yield
        # Pending prompts do not outlive the process.
        app.state.sessions.clear()
        log.info("shutdown")

    app = FastAPI(
        title="Promptable Component Host",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.registry = registry or default_registry()
    app.state.sessions = SessionStore()

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(components_router)

    return app

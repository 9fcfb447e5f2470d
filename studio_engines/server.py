"""FastAPI app for the studio site backend."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from studio_engines.common.error_envelope import build_error_envelope
from studio_engines.common.errors import RepositoryError
from studio_engines.common.health import router as health_router
from studio_engines.config import runtime_config
from studio_engines.dashboard.routes import router as dashboard_router
from studio_engines.gallery.routes import router as gallery_router
from studio_engines.gallery_links.routes import router as gallery_links_router
from studio_engines.identity.routes_auth import router as auth_router
from studio_engines.inquiries.routes import router as inquiries_router
from studio_engines.logging.setup import configure_logging
from studio_engines.page_views.routes import router as page_views_router
from studio_engines.sessions.routes import router as sessions_router
from studio_engines.site_content.routes import router as content_router

logger = logging.getLogger(__name__)


async def _repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    logger.error("store failure on %s %s: %s", request.method, request.url.path, exc.message)
    envelope = build_error_envelope(
        code="store.unavailable",
        message=exc.message,
        status_code=503,
        resource_kind=exc.resource_kind,
    )
    return JSONResponse(status_code=503, content={"detail": envelope.model_dump()})


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Studio Engines", version="0.1.0")
    origins = runtime_config.get_cors_origins()
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_exception_handler(RepositoryError, _repository_error_handler)
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(page_views_router)
    app.include_router(content_router)
    app.include_router(gallery_router)
    app.include_router(gallery_links_router)
    app.include_router(inquiries_router)
    app.include_router(sessions_router)
    app.include_router(dashboard_router)
    return app


app = create_app()

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from atelier.core.config import settings
from atelier.core.database import ensure_core_schema
from atelier.core.errors import InvalidQuery, NotFound, ResourceError, StoreUnavailable
from atelier.core.module_loader import collect_routers


logger = logging.getLogger(__name__)


def _status_for(exc: ResourceError) -> int:
    if isinstance(exc, NotFound):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, StoreUnavailable):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    if isinstance(exc, InvalidQuery):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def resource_error_handler(request: Request, exc: ResourceError) -> JSONResponse:
    status_code = _status_for(exc)
    logger.info("%s %s -> %d %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.message, "code": exc.code})


def create_app() -> FastAPI:
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

    app = FastAPI(title="Atelier API", version="0.1.0")

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ResourceError, resource_error_handler)

    routers = collect_routers()
    # Models are registered by collect_routers; create their tables before serving
    ensure_core_schema()

    for router in routers:
        app.include_router(router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()

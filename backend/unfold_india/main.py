import logging
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from unfold_india.api.routes import api_router
from unfold_india.core.config import get_settings
from unfold_india.core.exceptions import (
    NotFound,
    RemoteFailure,
    Unauthenticated,
    UnfoldIndiaError,
    ValidationError,
)
from unfold_india.core.logging_config import configure_logging
from unfold_india.storage.local import MEDIA_PREFIX

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    Unauthenticated: status.HTTP_401_UNAUTHORIZED,
    NotFound: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    RemoteFailure: status.HTTP_502_BAD_GATEWAY,
}


async def handle_app_error(request: Request, exc: UnfoldIndiaError) -> JSONResponse:
    status_code = next(
        (code for cls, code in ERROR_STATUS.items() if isinstance(exc, cls)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthenticated) else None
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message},
        headers=headers,
    )


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Unfold India",
        docs_url="/docs" if settings.environment == "development" else None,
        redoc_url="/redoc" if settings.environment == "development" else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(UnfoldIndiaError, handle_app_error)
    app.include_router(api_router)

    if settings.storage_backend == "local":
        Path(settings.storage_root).mkdir(parents=True, exist_ok=True)
        app.mount(
            MEDIA_PREFIX,
            StaticFiles(directory=settings.storage_root),
            name="media",
        )

    return app


app = create_app()

from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from galleryfeed.common.logging import get_logger
from galleryfeed.common.settings import get_settings
from galleryfeed.domain.errors import MissingParameterError, RetrievalError
from galleryfeed.services.api.routers import feed, health, media, tags

cfg = get_settings()
dev = cfg.app_env.lower() == "development"
logger = get_logger()


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message})


def install_error_handlers(app: FastAPI) -> None:
    """Every error leaves the API as {"error": "..."} with a matching status."""

    @app.exception_handler(MissingParameterError)
    async def _missing_param(_: Request, exc: MissingParameterError) -> JSONResponse:
        return _error(HTTPStatus.BAD_REQUEST, str(exc))

    @app.exception_handler(RetrievalError)
    async def _retrieval(request: Request, exc: RetrievalError) -> JSONResponse:
        logger.error("Retrieval failed on %s: %s", request.url.path, exc)
        return _error(HTTPStatus.INTERNAL_SERVER_ERROR, str(exc) or "Retrieval failed")

    @app.exception_handler(StarletteHTTPException)
    async def _http(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def _validation(_: Request, exc: RequestValidationError) -> JSONResponse:
        errs = exc.errors()
        msg = errs[0].get("msg", "Invalid request") if errs else "Invalid request"
        return _error(HTTPStatus.BAD_REQUEST, msg)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Gallery Feed API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    install_error_handlers(app)

    # Routers
    app.include_router(health.router)
    app.include_router(feed.router)
    app.include_router(media.router)
    app.include_router(tags.router)
    return app


app = create_app()

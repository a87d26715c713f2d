# roomify_api/main.py

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from roomify_api.core.config import settings
from roomify_api.core.errors import ErrorKind, ProjectError
from roomify_api.core.logging import configure_logging
from roomify_api.api.api import api_router
from roomify_api.api.routes_health import router as health_router
from roomify_api.db.init_db import init_db

logger = logging.getLogger(__name__)

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


def error_response(err: ProjectError) -> JSONResponse:
    return JSONResponse(err.to_body(), status_code=err.status_code, headers=CORS_HEADERS)


async def project_error_handler(request: Request, exc: ProjectError) -> JSONResponse:
    if exc.kind is not ErrorKind.INTERNAL:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [".".join(str(p) for p in e["loc"]) for e in exc.errors()]
    err = ProjectError(
        ErrorKind.BAD_REQUEST,
        "Invalid request body",
        message=f"Invalid fields: {', '.join(fields)}" if fields else "Malformed request",
    )
    return error_response(err)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(ProjectError.internal("Internal server error", exc))


def create_application() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.debug,
    )

    # ---------- CORS ----------
    # Every origin is allowed. CORSMiddleware answers preflights; open_cors
    # adds the header to plain requests that arrive without an Origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def open_cors(request: Request, call_next):
        response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    # ---------- ERRORS ----------
    app.add_exception_handler(ProjectError, project_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # ---------- ROUTERS ----------
    app.include_router(health_router)
    app.include_router(api_router, prefix=settings.api_prefix)

    init_db()

    return app


app = create_application()

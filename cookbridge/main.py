import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cookbridge.core import config
from cookbridge.core.errors import CookBridgeError, error_payload
from cookbridge.core.logging import setup_logging
from cookbridge.core.middleware import RequestLoggingMiddleware
from cookbridge.routers import grocery, health

log = logging.getLogger("cookbridge.errors")


async def cookbridge_error_handler(request: Request, exc: CookBridgeError) -> JSONResponse:
    log.warning(
        exc.message,
        extra={"method": request.method, "path": request.url.path, "status_code": exc.status_code, "details": exc.details},
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(exc.message, exc.status_code, exc.details),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": [str(p) for p in e.get("loc", ())], "msg": e.get("msg", "")}
        for e in exc.errors()
    ]
    log.warning("invalid request", extra={"method": request.method, "path": request.url.path, "status_code": 400})
    return JSONResponse(status_code=400, content=error_payload("Invalid request", 400, errors))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    if exc.status_code == 404 and message == "Not Found":
        message = f"Route {request.url.path} not found"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(message, exc.status_code),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception(
        "unhandled error",
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path, "status_code": 500},
    )
    return JSONResponse(status_code=500, content=error_payload("Internal server error", 500))


def create_app() -> FastAPI:
    app = FastAPI(title="Cook Bridge", version=config.APP_VERSION)
    app.include_router(grocery.router)
    app.include_router(health.router)

    app.add_exception_handler(CookBridgeError, cookbridge_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    setup_logging()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    return app


app = create_app()

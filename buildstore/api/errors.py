"""
API error handling: every failure leaves as {"error": message} with its status code.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from buildstore.core.errors import AppError

INTERNAL_ERROR = "Internal Server Error"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers for the FastAPI application."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Unparseable bodies or values the store could never take (e.g. a non-numeric price)."""

        def flatten_error(err: dict) -> str:
            location = ".".join(str(loc) for loc in err.get("loc", []))
            return f"{location}: {err.get('msg', 'Validation error')}"

        logger.error(
            "Unusable request on {} {}: {}",
            request.method,
            request.url.path,
            " | ".join(flatten_error(err) for err in exc.errors()),
        )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Database error on {} {}: {}", request.method, request.url.path, exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on {} {}", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

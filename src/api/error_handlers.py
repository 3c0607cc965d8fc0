"""Handlers de exceção da API: toda falha vira `{"error", "details"?}`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.exceptions import RequestValidationError as FastAPIRequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.observability import get_correlation_id
from utils.errors import GatewayError

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)

ENDPOINT_NOT_FOUND = "Endpoint not found"
INVALID_REQUEST = "Invalid request payload"
INTERNAL_ERROR = "Internal server error"


async def handle_gateway_error(request: Request, exc: GatewayError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "request_failed",
            extra={
                "path": request.url.path,
                "status_code": exc.status_code,
                "error": exc.message,
                "correlation_id": get_correlation_id(),
            },
        )
    else:
        logger.info(
            "request_rejected",
            extra={
                "path": request.url.path,
                "status_code": exc.status_code,
                "correlation_id": get_correlation_id(),
            },
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def handle_validation_error(
    request: Request, exc: FastAPIRequestValidationError
) -> JSONResponse:
    """Body malformado vira 400 (não 422), listando só os campos com problema."""
    fields = sorted(
        {".".join(str(part) for part in error.get("loc", ())[1:]) for error in exc.errors()}
        - {""}
    )
    logger.info(
        "request_rejected",
        extra={
            "path": request.url.path,
            "status_code": 400,
            "invalid_fields": fields,
            "correlation_id": get_correlation_id(),
        },
    )
    body = {"error": INVALID_REQUEST}
    if fields:
        body["details"] = f"Invalid fields: {', '.join(fields)}"
    return JSONResponse(status_code=400, content=body)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={"error": ENDPOINT_NOT_FOUND})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_error",
        extra={
            "path": request.url.path,
            "error_type": type(exc).__name__,
            "correlation_id": get_correlation_id(),
        },
    )
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})


def register_error_handlers(app: FastAPI) -> None:
    """Registra handlers no app."""
    app.add_exception_handler(GatewayError, handle_gateway_error)
    app.add_exception_handler(FastAPIRequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)

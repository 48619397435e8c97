"""Unified API error response helpers."""
from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.logging import get_logger
from app.services.account_service import AccountError

logger = get_logger(__name__)

MSG_INVALID_BODY = "Invalid request body."
MSG_INTERNAL_ERROR = "Internal server error"


def build_error_payload(
    *,
    message: str,
    errors: dict[str, str] | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {"message": message}
    if errors:
        payload["errors"] = errors
    return payload


async def account_error_handler(request: Request, exc: AccountError) -> JSONResponse:
    logger.info(
        "submission_rejected",
        path=request.url.path,
        status_code=exc.status_code,
        error=type(exc).__name__,
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=build_error_payload(message=exc.message, errors=exc.errors),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(
        "malformed_request",
        path=request.url.path,
        detail=[err.get("msg") for err in exc.errors()],
    )
    return JSONResponse(status_code=400, content=build_error_payload(message=MSG_INVALID_BODY))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AccountError, account_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

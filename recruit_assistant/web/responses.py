"""Uniform ``{success, data|error}`` response envelope and error mapping."""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from recruit_assistant.errors import AssistantUnavailable, InvalidFilter, SourceUnavailable

logger = logging.getLogger("recruit_assistant.web")


def ok(data) -> dict:
    return {"success": True, "data": data}


def error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"success": False, "error": message}, status_code=status_code)


def not_found(what: str) -> JSONResponse:
    return error(f"{what} not found", 404)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidFilter)
    async def _invalid_filter(request: Request, exc: InvalidFilter):
        return error(str(exc), 400)

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError):
        return JSONResponse(
            {"success": False, "error": "Invalid request", "details": jsonable_encoder(exc.errors())},
            status_code=400,
        )

    @app.exception_handler(SourceUnavailable)
    async def _source_unavailable(request: Request, exc: SourceUnavailable):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return error("Failed to load recruitment data", 500)

    @app.exception_handler(AssistantUnavailable)
    async def _assistant_unavailable(request: Request, exc: AssistantUnavailable):
        logger.warning("%s %s: %s", request.method, request.url.path, exc)
        return error(str(exc), 503)

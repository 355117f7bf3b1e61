"""CORS headers and error rendering for the HTTP API.

Every response carries a permissive CORS header set, and any OPTIONS request
is answered directly with an empty 200. Errors are rendered as
``{"error": message}``.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from app.core.errors import AnalysisError, InternalError
from app.core.logging import get_logger

logger = get_logger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"error": message}, headers=CORS_HEADERS
    )


async def cors_middleware(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


async def analysis_error_handler(request: Request, exc: AnalysisError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # the body is untyped, so only undecodable JSON reaches here
    logger.error("Undecodable request body: %s", exc.errors())
    return error_response(InternalError.status_code, InternalError.message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(InternalError.status_code, InternalError.message)


def install(app: FastAPI) -> None:
    app.middleware("http")(cors_middleware)
    app.add_exception_handler(AnalysisError, analysis_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

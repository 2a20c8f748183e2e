"""Error taxonomy and its mapping to ``{"error": ...}`` JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(ApiError):
    status_code = 400


class PayloadTooLarge(BadRequest):
    status_code = 413


class Forbidden(ApiError):
    status_code = 403


class NotFound(ApiError):
    status_code = 404


class InternalError(ApiError):
    status_code = 500


def register_exception_handlers(app: FastAPI) -> None:
    """Answer every ApiError with its status and a bare error message."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return JSONResponse(status_code=exc.status_code, content={'error': exc.message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error({'msg': 'unhandled_error', 'method': request.method, 'path': request.url.path}, exc_info=exc)
        return JSONResponse(status_code=500, content={'error': '서버 오류'})

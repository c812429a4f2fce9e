"""Rejections raised while extracting a safe path from a request."""

import os

import structlog
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exception_handlers import http_exception_handler, request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, Response

from traversal_guard.config import settings

REJECTION_MESSAGE = "Invalid path: possible traversal attack detected"
TRAVERSAL_ERROR_TYPE = "path_traversal"

logger = structlog.get_logger()


class SafePathRejection(HTTPException):
    """Base for both ways a safe path extraction can fail."""

    async def to_response(self, request: Request) -> Response:
        return await http_exception_handler(request, self)


class TraversalAttackError(SafePathRejection):
    """The classifier found a parent dir, root or prefix component."""

    def __init__(self) -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=REJECTION_MESSAGE)

    def __str__(self) -> str:
        return REJECTION_MESSAGE

    async def to_response(self, request: Request) -> Response:
        return PlainTextResponse(REJECTION_MESSAGE, status_code=self.status_code)


class PathExtractionError(SafePathRejection):
    """
    The route parameter could not be obtained. Carries the upstream error unchanged:
    same status, detail and headers, and the original exception as `inner`.
    """

    def __init__(self, inner: HTTPException) -> None:
        super().__init__(
            status_code=inner.status_code,
            detail=inner.detail,
            headers=inner.headers,
        )
        self.inner = inner
        self.__cause__ = inner

    def __str__(self) -> str:
        return str(self.detail)


def log_traversal_rejected(channel: str, raw: str | os.PathLike[str]) -> None:
    if not settings.log_rejected_paths:
        return
    logger.warning(
        "path_traversal_rejected",
        channel=channel,
        path=os.fspath(raw)[: settings.log_path_max_chars],
    )


async def safe_path_rejection_handler(request: Request, exc: SafePathRejection) -> Response:
    if isinstance(exc, PathExtractionError):
        logger.info("path_extraction_failed", status_code=exc.status_code, detail=exc.detail)
    return await exc.to_response(request)


def _body_channel(request: Request) -> str:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        return "form"
    return "json"


async def body_validation_handler(request: Request, exc: RequestValidationError) -> Response:
    """Log traversal rejections found while decoding a body, then answer the usual 422."""
    for error in exc.errors():
        if error.get("type") == TRAVERSAL_ERROR_TYPE and isinstance(error.get("input"), str):
            log_traversal_rejected(_body_channel(request), error["input"])
    return await request_validation_exception_handler(request, exc)


def install_rejection_handlers(app: FastAPI) -> None:
    """
    Render rejections as plain-text 400s (traversal) or the upstream response (extraction),
    and log traversal rejections from form and JSON bodies.
    """
    app.add_exception_handler(SafePathRejection, safe_path_rejection_handler)
    app.add_exception_handler(RequestValidationError, body_validation_handler)

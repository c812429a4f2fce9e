"""Route-parameter extraction: resolve a SafePath from the request's path params."""

import os
from typing import Annotated, Any
from urllib.parse import unquote

from fastapi import Depends, HTTPException, Request, status

from traversal_guard.errors import PathExtractionError, TraversalAttackError, log_traversal_rejected
from traversal_guard.safe_path import SafePath


def _ensure_utf8_path(request: Request, name: str) -> None:
    """
    Starlette decodes the URL with replacement characters, so a param that was not
    valid UTF-8 on the wire looks like a normal string. Re-decode the raw path strictly.
    """
    raw_path = request.scope.get("raw_path")
    if raw_path is None:
        return
    try:
        unquote(raw_path.decode("latin-1"), encoding="utf-8", errors="strict")
    except UnicodeDecodeError:
        raise PathExtractionError(
            HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid URL: Invalid UTF-8 in `{name}`",
            )
        )


class SafePathParam:
    """
    Dependency yielding the named route parameter (e.g. from "/files/{path:path}")
    as a SafePath. With no name, the route must have exactly one parameter.
    Raises PathExtractionError if the parameter cannot be obtained (including a
    percent-encoding that is not valid UTF-8) and TraversalAttackError (400) if
    it is rejected.
    """

    def __init__(self, name: str | None = None):
        self.name = name

    async def __call__(self, request: Request) -> SafePath:
        name, raw = self._extract(request.path_params)
        _ensure_utf8_path(request, name)
        try:
            return SafePath.parse(raw)
        except TraversalAttackError:
            log_traversal_rejected("route", raw)
            raise

    def _extract(self, params: dict[str, Any]) -> tuple[str, str | os.PathLike[str]]:
        if not params:
            raise PathExtractionError(
                HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail="No paths parameters found for handler",
                )
            )
        if self.name is None:
            if len(params) != 1:
                raise PathExtractionError(
                    HTTPException(
                        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                        detail=f"Wrong number of path arguments for `Path`. Expected 1 but got {len(params)}",
                    )
                )
            name, value = next(iter(params.items()))
        else:
            name = self.name
            if name not in params:
                raise PathExtractionError(
                    HTTPException(
                        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                        detail=f"Missing path parameter `{name}`",
                    )
                )
            value = params[name]
        if not isinstance(value, (str, os.PathLike)):
            raise PathExtractionError(
                HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f"Path parameter `{name}` is not a path",
                )
            )
        return name, value


SafePathDep = Annotated[SafePath, Depends(SafePathParam())]

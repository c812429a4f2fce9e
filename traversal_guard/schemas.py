"""Pydantic request models for the form and JSON channels."""

from pydantic import BaseModel

from traversal_guard.safe_path import SafePath


class PathPayload(BaseModel):
    """Body for POST /form (form-encoded) and POST /json."""

    path: SafePath

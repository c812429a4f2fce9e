"""Demo endpoints accepting a path through each channel: route parameter, form and JSON."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse, PlainTextResponse

from traversal_guard.deps import SafePathDep
from traversal_guard.safe_path import SafePath
from traversal_guard.schemas import PathPayload

router = APIRouter(tags=["paths"])
logger = structlog.get_logger()

INDEX_HTML = """<!doctype html>
<html>
  <head><title>Traversal-safe paths</title></head>
  <body>
    <h1>Traversal-safe paths</h1>
    <h2>Route parameter</h2>
    <form onsubmit="location.href = '/path/' + this.path.value; return false;">
      <input name="path" value="foo/bar.txt">
      <button>GET /path/...</button>
    </form>
    <h2>Form body</h2>
    <form method="post" action="/form">
      <input name="path" value="../secret.txt">
      <button>POST /form</button>
    </form>
    <h2>JSON body</h2>
    <form onsubmit="fetch('/json', {method: 'POST', headers: {'Content-Type': 'application/json'},
        body: JSON.stringify({path: this.path.value})}).then(r => r.text()).then(alert); return false;">
      <input name="path" value="/etc/passwd">
      <button>POST /json</button>
    </form>
  </body>
</html>
"""


def _accepted(channel: str, path: SafePath) -> PlainTextResponse:
    logger.info("path_accepted", channel=channel, path=str(path))
    return PlainTextResponse(f"Path: {path}")


@router.get("/", response_class=HTMLResponse)
async def index():
    """Page with one form per channel."""
    return INDEX_HTML


@router.get("/path/{path:path}", response_class=PlainTextResponse)
async def path_from_route(safe_path: SafePathDep):
    """Accept a path from the wildcard route segment."""
    return _accepted("route", safe_path)


@router.post("/form", response_class=PlainTextResponse)
async def path_from_form(payload: Annotated[PathPayload, Form()]):
    """Accept a path from a form-encoded body field."""
    return _accepted("form", payload.path)


@router.post("/json", response_class=PlainTextResponse)
async def path_from_json(payload: PathPayload):
    """Accept a path from a JSON body field."""
    return _accepted("json", payload.path)

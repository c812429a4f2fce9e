"""FastAPI application entry point."""

import structlog
import uvicorn
from fastapi import FastAPI

from traversal_guard.config import settings
from traversal_guard.errors import install_rejection_handlers
from traversal_guard.routers import paths

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.ConsoleRenderer() if settings.debug else structlog.processors.JSONRenderer(),
    ],
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
)

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
)
install_rejection_handlers(app)

app.include_router(paths.router)


@app.get("/health")
def health():
    """Liveness probe."""
    return {"status": "ok"}


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()

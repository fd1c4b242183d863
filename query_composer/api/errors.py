"""Exception handlers that turn composer errors into JSON responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from query_composer.core.exceptions import QueryComposerException
from query_composer.core.logging_config import get_logger

logger = get_logger(__name__)


async def query_composer_exception_handler(request: Request, exc: QueryComposerException) -> JSONResponse:
    """Handle query composer exceptions."""
    logger.warning(
        "query_composer_exception",
        message=exc.message,
        status_code=exc.status_code,
        path=str(request.url.path),
        exception_type=type(exc).__name__,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the composer exception handlers on an application."""
    app.add_exception_handler(QueryComposerException, query_composer_exception_handler)

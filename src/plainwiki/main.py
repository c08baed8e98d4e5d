"""PlainWiki FastAPI application."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from plainwiki.config import Settings, settings
from plainwiki.core.dispatch import make_handler, not_found
from plainwiki.core.handlers import HANDLERS
from plainwiki.core.models import Operation
from plainwiki.core.rendering import PageRenderer, error_response
from plainwiki.core.storage import FileStorage

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)

ROUTE_METHODS: dict[Operation, list[str]] = {
    Operation.VIEW: ["GET", "HEAD"],
    Operation.EDIT: ["GET", "HEAD"],
    Operation.SAVE: ["POST"],
}


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging and give uvicorn's loggers the same format."""
    logging.basicConfig(format=LOG_FORMAT, datefmt=DATE_FORMAT, level=level.upper())
    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        uvicorn_logger.addHandler(handler)
        uvicorn_logger.propagate = False


def create_app(config: Settings = settings) -> FastAPI:
    """Build the application.

    Storage, templates and handlers are created once here and shared
    read-only by every request.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "%s serving pages from %s", config.app_title, config.data_dir.resolve()
        )
        yield

    app = FastAPI(
        title=config.app_title,
        debug=config.debug,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    store = FileStorage(config.data_dir, atomic_writes=config.atomic_writes)
    renderer = PageRenderer(config.templates_dir, app_title=config.app_title)

    for operation, handler_cls in HANDLERS.items():
        app.add_api_route(
            f"/{operation.value}/{{rest:path}}",
            make_handler(handler_cls(store, renderer)),
            methods=ROUTE_METHODS[operation],
            include_in_schema=False,
        )

    @app.exception_handler(StarletteHTTPException)
    async def plain_http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return not_found()
        if exc.status_code == 405:
            return error_response("405 method not allowed", 405, exc.headers)
        return await http_exception_handler(request, exc)

    app.state.store = store
    return app


app = create_app()


def run() -> None:
    """Run the wiki server."""
    configure_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()

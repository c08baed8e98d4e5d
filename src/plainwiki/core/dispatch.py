"""Route dispatch: path validation in front of the page handlers."""

import logging
from typing import Awaitable, Callable

from fastapi import Request
from fastapi.responses import Response

from plainwiki.core.handlers import PageHandler
from plainwiki.core.paths import match_path
from plainwiki.core.rendering import error_response

logger = logging.getLogger(__name__)

Endpoint = Callable[[Request], Awaitable[Response]]


def not_found() -> Response:
    return error_response("404 page not found", 404)


def make_handler(handler: PageHandler) -> Endpoint:
    """Wrap a page handler into a request endpoint.

    The endpoint validates the request path first and answers 404 without
    calling the handler when the path is not a route for the handler's
    operation.
    """

    async def endpoint(request: Request) -> Response:
        # decoded path as received; request.url.path drops tabs and newlines
        path = request.scope["path"]
        match = match_path(path)
        if match is None or match.operation is not handler.operation:
            logger.debug("Rejected path %r", path)
            return not_found()
        return await handler.handle(request, match.title)

    endpoint.__name__ = f"{handler.operation.value}_page"
    return endpoint

"""Template rendering for page responses."""

import logging
from pathlib import Path

from fastapi import Request
from fastapi.responses import PlainTextResponse, Response
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from plainwiki.core.models import Page

logger = logging.getLogger(__name__)


def error_response(
    message: str, status_code: int, headers: dict[str, str] | None = None
) -> PlainTextResponse:
    """Plain-text error response carrying the raw message."""
    return PlainTextResponse(
        message + "\n",
        status_code=status_code,
        headers={"X-Content-Type-Options": "nosniff", **(headers or {})},
    )


class PageRenderer:
    """Renders the named page templates.

    The template set is loaded once and only read afterwards, so a single
    renderer is shared by every request.
    """

    def __init__(self, directory: Path, app_title: str = "PlainWiki"):
        self.templates = Jinja2Templates(directory=str(directory))
        self.app_title = app_title

    def render(self, request: Request, template: str, page: Page) -> Response:
        """Render ``<template>.html`` with the page.

        Rendering happens before the response is returned, so a template
        failure becomes a 500 carrying the renderer's error text.
        """
        try:
            return self.templates.TemplateResponse(
                request,
                f"{template}.html",
                {"page": page, "app_title": self.app_title},
            )
        except TemplateError as e:
            logger.exception("Failed to render template %s", template)
            return error_response(str(e), 500)

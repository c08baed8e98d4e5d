"""Page handlers for the view, edit and save routes."""

import logging
from abc import ABC, abstractmethod

from fastapi import Request
from fastapi.responses import RedirectResponse, Response
from starlette.datastructures import UploadFile

from plainwiki.core.models import Operation, Page
from plainwiki.core.rendering import PageRenderer, error_response
from plainwiki.core.storage import PageStore

logger = logging.getLogger(__name__)


def page_url(operation: Operation, title: str) -> str:
    return f"/{operation.value}/{title}"


class PageHandler(ABC):
    """Handles one page operation for an already validated title."""

    operation: Operation

    def __init__(self, store: PageStore, renderer: PageRenderer):
        self.store = store
        self.renderer = renderer

    @abstractmethod
    async def handle(self, request: Request, title: str) -> Response:
        ...


class ViewHandler(PageHandler):
    """Show a page, or send the client to the editor if it can't be loaded."""

    operation = Operation.VIEW

    async def handle(self, request: Request, title: str) -> Response:
        try:
            page = await self.store.load(title)
        except OSError as e:
            logger.debug("Page %s not loadable (%s), redirecting to edit", title, e)
            return RedirectResponse(
                url=page_url(Operation.EDIT, title), status_code=302
            )
        return self.renderer.render(request, "view", page)


class EditHandler(PageHandler):
    """Show the edit form, blank for pages that can't be loaded."""

    operation = Operation.EDIT

    async def handle(self, request: Request, title: str) -> Response:
        try:
            page = await self.store.load(title)
        except OSError as e:
            logger.debug("Page %s not loadable (%s), editing new page", title, e)
            page = Page(title=title)
        return self.renderer.render(request, "edit", page)


class SaveHandler(PageHandler):
    """Store the submitted body and redirect to the page view."""

    operation = Operation.SAVE

    async def handle(self, request: Request, title: str) -> Response:
        form = await request.form()
        value = form.get("body", "")
        if isinstance(value, UploadFile):
            body = await value.read()
        else:
            body = value.encode("utf-8")

        page = Page(title=title, body=body)
        try:
            await self.store.save(page)
        except OSError as e:
            logger.warning("Failed to save page %s: %s", title, e)
            return error_response(str(e), 500)
        return RedirectResponse(url=page_url(Operation.VIEW, title), status_code=302)


HANDLERS: dict[Operation, type[PageHandler]] = {
    Operation.VIEW: ViewHandler,
    Operation.EDIT: EditHandler,
    Operation.SAVE: SaveHandler,
}

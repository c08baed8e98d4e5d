"""Data models for PlainWiki."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Operation(str, Enum):
    """The three page operations addressable by URL."""

    VIEW = "view"
    EDIT = "edit"
    SAVE = "save"


class Page(BaseModel):
    """Represents a wiki page."""

    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        """Body decoded for display."""
        return self.body.decode("utf-8", errors="replace")


class PathMatch(BaseModel):
    """Operation and title extracted from a request path."""

    model_config = ConfigDict(frozen=True)

    operation: Operation
    title: str

"""URL path validation for page routes."""

import re

from plainwiki.core.models import Operation, PathMatch

# /view/Title, /edit/Title or /save/Title; titles are ASCII alphanumerics only
VALID_PATH = re.compile(r"/(edit|save|view)/([a-zA-Z0-9]+)")

VALID_TITLE = re.compile(r"[a-zA-Z0-9]+")


def match_path(path: str) -> PathMatch | None:
    """Extract the operation and page title from a request path.

    The whole path must match; anything before, after or between the two
    segments (including a trailing slash or newline) is rejected.

    Returns:
        The matched operation and title, or None if the path is not a
        page route.
    """
    m = VALID_PATH.fullmatch(path)
    if m is None:
        return None
    return PathMatch(operation=Operation(m.group(1)), title=m.group(2))


def is_valid_title(title: str) -> bool:
    """Check whether a title is safe to use as a storage key."""
    return VALID_TITLE.fullmatch(title) is not None

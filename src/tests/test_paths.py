"""Unit tests for request path validation."""

import pytest
from pydantic import ValidationError

from plainwiki.core.models import Operation
from plainwiki.core.paths import is_valid_title, match_path


class TestMatchPath:
    @pytest.mark.parametrize(
        "path,operation,title",
        [
            ("/view/FrontPage", Operation.VIEW, "FrontPage"),
            ("/edit/Test", Operation.EDIT, "Test"),
            ("/save/abc123", Operation.SAVE, "abc123"),
            ("/view/9", Operation.VIEW, "9"),
        ],
    )
    def test_valid_paths(self, path, operation, title):
        match = match_path(path)
        assert match is not None
        assert match.operation is operation
        assert match.title == title

    @pytest.mark.parametrize(
        "path",
        [
            "/view/",
            "/view",
            "/",
            "",
            "/delete/Test",
            "/View/Test",
            "/view/Test/",
            "/view/Test/extra",
            "/view/My Page",
            "/view/My_Page",
            "/view/Test.txt",
            "/view/../../etc/passwd",
            "/view/..",
            "view/Test",
            "//view/Test",
            "/view/Test\n",
            "/prefix/view/Test",
            "/view/Ünicode",
        ],
    )
    def test_rejected_paths(self, path):
        assert match_path(path) is None

    def test_match_is_immutable(self):
        match = match_path("/view/Test")
        with pytest.raises(ValidationError):
            match.title = "Other"


class TestIsValidTitle:
    def test_alphanumeric(self):
        assert is_valid_title("HomePage2")

    def test_empty(self):
        assert not is_valid_title("")

    def test_traversal(self):
        assert not is_valid_title("../secret")

    def test_separator(self):
        assert not is_valid_title("a/b")

    def test_trailing_newline(self):
        assert not is_valid_title("Test\n")

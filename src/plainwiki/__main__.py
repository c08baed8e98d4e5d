"""Run the wiki server with ``python -m plainwiki``."""

from plainwiki.main import run

run()

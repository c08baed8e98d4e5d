"""PlainWiki: a minimal flat-file wiki."""

__version__ = "0.1.0"

"""HTTP API for quotesys."""

from quotesys.web.app import create_app

__all__ = ["create_app"]

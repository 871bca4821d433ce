"""REST API for the university registry."""

from university.api.app import create_app

__all__ = ["create_app"]

"""HTTP interface for the route engine."""

from .app_factory import create_app

__all__ = ["create_app"]

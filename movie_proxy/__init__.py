"""TMDB movie proxy that keeps the API key on the server."""

from .app import create_app
from .config import Settings

__all__ = ["create_app", "Settings"]

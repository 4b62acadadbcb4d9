"""nssh command-line interface."""

from .app import app, screenrc_app

__all__ = ["app", "screenrc_app"]

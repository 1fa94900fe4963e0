"""Command line interface for the Blitz simulator."""

from .main import app, main

__all__ = ["app", "main"]

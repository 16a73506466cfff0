"""Command-line collaborator for the story service.

Usage:
    magic-story generate --photo kid.jpg --character "A brave dragon"
    magic-story check-config
    magic-story styles
"""

from .app import app, main

__all__ = ["app", "main"]

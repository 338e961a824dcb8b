"""Textual deck viewer."""

from .app import DeckViewerApp, run_textual_app

__all__ = ["DeckViewerApp", "run_textual_app"]

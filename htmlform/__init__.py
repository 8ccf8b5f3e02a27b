"""Render HTML form widgets from Django forms addressed by field paths."""

__version__ = "0.1.0"

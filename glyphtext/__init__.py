"""Compose text from font glyphs and wrap it to a width."""

__version__ = "0.1.0"
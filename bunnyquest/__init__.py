"""Helpers for a tile-based puzzle game: characters, strings, byte buffers, linked lists and line reading."""

__version__ = "1.0.0"
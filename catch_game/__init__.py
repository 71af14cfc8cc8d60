"""Catch Game: catch falling collectibles before they reach the ground."""

__version__ = "1.0.0"

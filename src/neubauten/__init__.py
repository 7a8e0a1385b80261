"""Neubauten - keyboard-driven terminal browser and player for playlists."""

__version__ = "0.3.0"

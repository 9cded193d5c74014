"""Tile-connect puzzle engine: pair up matching tiles along paths with at most two turns."""

__version__ = "0.1.0"

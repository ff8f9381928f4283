"""Hex-grid coordinates, world generation, terrain meshing, map images and gameplay data."""

__version__ = "0.1.0"
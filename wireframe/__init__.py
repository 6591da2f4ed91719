"""Isometric wireframe viewer for height maps, with map parsing and rendering helpers."""

__version__ = "0.1.0"
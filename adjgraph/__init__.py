"""Weighted graphs on an adjacency matrix with FS/APS and adjacency-list forms."""

__version__ = "0.1.0"
__all__ = ["graph", "directed", "undirected"]
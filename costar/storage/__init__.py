"""Persistence for assembled graphs and movie tables."""

from .base import GraphStore
from .binary import BinaryGraphStore, read_graph, read_movies, write_graph, write_movies

__all__ = ["BinaryGraphStore", "GraphStore", "read_graph", "read_movies", "write_graph", "write_movies"]

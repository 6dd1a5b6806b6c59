"""Top-level package for the NavigateX location graph.

This package exposes an in-memory, undirected, weighted graph of named
locations with case-insensitive identity, breadth-first and depth-first
traversal, and Dijkstra shortest paths, together with the adapters and
service used by the command line launcher.
"""

from .graph.location_graph import LocationGraph

__all__ = ["LocationGraph"]

"""Graph-related utilities for representing the location network.

This subpackage contains the in-memory location graph and the
path-finding algorithm that runs on top of it.
"""

from .location_graph import LocationGraph, normalize_name

__all__ = ["LocationGraph", "normalize_name"]

"""Immutable domain models for the NavigateX location graph.

All models are frozen dataclasses with slots. The graph stores plain
integers and lists internally; these types only appear at the result
boundary, where ids are translated back to canonical names.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class Location:
    """A registered location.

    Attributes:
        id: Dense integer handle, stable for the graph's lifetime
        name: Canonical display name (casing of the first insertion)
    """

    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Edge:
    """An undirected weighted edge between two locations.

    ``source`` is the endpoint with the lower node id.
    """

    source: str
    target: str
    weight: int


@dataclass(frozen=True, slots=True)
class RouteLeg:
    """One hop of a route, in travel order."""

    source: str
    target: str
    weight: int


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path computation.

    Attributes:
        path: Canonical names from source to destination (inclusive)
        distance: Total cost of the path, None when no path was found
        legs: Per-hop breakdown of the path
    """

    path: tuple[str, ...] = field(default_factory=tuple)
    distance: Optional[int] = None
    legs: tuple[RouteLeg, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of locations on the route."""
        return len(self.path)


@dataclass(frozen=True, slots=True)
class GraphStats:
    """Summary counters for a graph snapshot."""

    node_count: int
    edge_count: int
    connected: bool

"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for graph operations, including
seeding the location network and computing shortest paths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import PathResult
    from ..graph.location_graph import LocationGraph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/csv_repository.py

    The repository builds a LocationGraph from seed data and caches it.
    """

    def load(self) -> LocationGraph:
        """Load the location graph.

        Returns:
            The graph built from the repository's seed data.
        """
        ...

    def clear_cache(self) -> None:
        """Drop the cached graph so the next load rebuilds it."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(
        self,
        graph: LocationGraph,
        departure: str,
        arrival: str,
    ) -> PathResult:
        """Find the shortest path between two locations.

        Args:
            graph: The location graph.
            departure: Departure location name (any casing).
            arrival: Arrival location name (any casing).

        Returns:
            PathResult with path, distance and legs.
        """
        ...

    def solve_safe(
        self,
        graph: LocationGraph,
        departure: str,
        arrival: str,
    ) -> PathResult:
        """Like solve(), but returns an empty PathResult instead of raising."""
        ...

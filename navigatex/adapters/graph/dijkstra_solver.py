"""Dijkstra Route Solver adapter.

This adapter wraps LocationGraph.shortest_path and adds:
- Typed errors instead of None results
- Canonical names in error messages
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import LocationNotFoundError, NoRouteFoundError
from ...domain.models import PathResult
from ...graph.location_graph import LocationGraph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: LocationGraph,
        departure: str,
        arrival: str,
    ) -> PathResult:
        """Find the shortest path between two locations.

        Args:
            graph: The location graph.
            departure: Departure location name, any casing.
            arrival: Arrival location name, any casing.

        Returns:
            PathResult with canonical names, distance and legs.

        Raises:
            LocationNotFoundError: If departure or arrival is not in the graph.
            NoRouteFoundError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"departure": departure, "arrival": arrival},
        )

        # Validate inputs
        if not graph.exists(departure):
            raise LocationNotFoundError(
                f"Departure location not in graph: {departure}",
                location=departure,
            )
        if not graph.exists(arrival):
            raise LocationNotFoundError(
                f"Arrival location not in graph: {arrival}",
                location=arrival,
            )

        result = graph.shortest_path(departure, arrival)

        if result is None:
            departure = graph.canonical_name(departure)
            arrival = graph.canonical_name(arrival)
            self._logger.warning(
                "No route found",
                extra={"departure": departure, "arrival": arrival},
            )
            raise NoRouteFoundError(
                f"No path from {departure} to {arrival}",
                departure=departure,
                arrival=arrival,
            )

        self._logger.info(
            "Route found",
            extra={
                "departure": result.path[0],
                "arrival": result.path[-1],
                "stops": result.num_stops,
                "distance": result.distance,
            },
        )
        return result

    def solve_safe(
        self,
        graph: LocationGraph,
        departure: str,
        arrival: str,
    ) -> PathResult:
        """Find the shortest path, returning empty result on failure.

        Like solve(), but returns an empty PathResult instead of raising
        for unknown locations or disconnected pairs.
        """
        result = graph.shortest_path(departure, arrival)
        if result is None:
            return PathResult()
        return result

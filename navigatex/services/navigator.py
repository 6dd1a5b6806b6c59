"""Navigator service - Entry point for the presentation layer.

The service owns a LocationGraph and a route solver. It trims raw user
input before handing it to the graph, turns empty traversal results
into typed errors and formats routes for display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..config import SuggestionConfig, get_config
from ..domain.errors import LocationNotFoundError, NavigateXError
from ..domain.models import GraphStats, PathResult
from ..graph.location_graph import LocationGraph
from ..ports.graph import RouteSolverPort
from ..suggestions import suggest_locations

TRAVERSAL_ORDERS = ("bfs", "dfs")


@dataclass
class NavigatorService:
    """Application service wrapping a location graph.

    Attributes:
        graph: The location graph being edited and queried
        route_solver: Computes shortest paths
        suggestion_config: Tuning for "did you mean" suggestions
    """

    graph: LocationGraph
    route_solver: RouteSolverPort
    suggestion_config: SuggestionConfig = field(
        default_factory=lambda: get_config().suggestions
    )

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_location(self, name: str) -> str:
        """Register a location and return its canonical name."""
        name = name.strip()
        existed = self.graph.exists(name)
        self.graph.add_location(name)
        canonical = self.graph.canonical_name(name)
        if not existed:
            self._logger.info("Location registered", extra={"location": canonical})
        return canonical

    def connect(self, name_a: str, name_b: str, weight: int) -> None:
        """Connect two locations, creating them if needed.

        Raises:
            InvalidWeightError: If weight is negative or not an int.
            InvalidEdgeError: If both names are the same location.
            InvalidLocationNameError: If a name is blank.
        """
        name_a, name_b = name_a.strip(), name_b.strip()
        previous = self.graph.edge_weight(name_a, name_b)
        self.graph.connect(name_a, name_b, weight)
        self._logger.info(
            "Locations connected",
            extra={
                "source": self.graph.canonical_name(name_a),
                "target": self.graph.canonical_name(name_b),
                "weight": weight,
                "previous_weight": previous,
            },
        )

    def traverse(self, start: str, order: str = "bfs") -> List[str]:
        """Visit every location reachable from ``start``.

        Args:
            start: Start location, any casing.
            order: "bfs" or "dfs".

        Raises:
            LocationNotFoundError: If start is unknown.
            ValueError: If order is not a supported traversal.
        """
        if order not in TRAVERSAL_ORDERS:
            raise ValueError(f"Unknown traversal order: {order!r}")

        start = start.strip()
        visited = self.graph.bfs(start) if order == "bfs" else self.graph.dfs(start)
        if not visited:
            raise LocationNotFoundError(
                f"Location not in graph: {start}",
                location=start,
            )
        return visited

    def route(self, departure: str, arrival: str) -> PathResult:
        """Compute the shortest route between two locations.

        Raises:
            LocationNotFoundError: If either location is unknown.
            NoRouteFoundError: If no path exists.
        """
        return self.route_solver.solve(self.graph, departure.strip(), arrival.strip())

    def route_safe(
        self, departure: str, arrival: str
    ) -> Tuple[Optional[PathResult], Optional[str]]:
        """Compute a route, returning an error message instead of raising.

        Returns:
            Tuple of (PathResult or None, error message or None).
        """
        try:
            return self.route(departure, arrival), None
        except LocationNotFoundError as e:
            hint = self.suggest(e.location)
            message = f"Unknown location: {e.location}"
            if hint:
                message += f" (did you mean {', '.join(hint)}?)"
            return None, message
        except NavigateXError as e:
            return None, str(e)

    def suggest(self, name: str) -> List[str]:
        """Return registered names that resemble ``name``."""
        return suggest_locations(
            name,
            self.graph,
            limit=self.suggestion_config.limit,
            score_cutoff=self.suggestion_config.score_cutoff,
        )

    def stats(self) -> GraphStats:
        return self.graph.stats()

    @staticmethod
    def describe_route(result: PathResult) -> str:
        """Format a route as two lines: the path and its distance."""
        if result.is_empty:
            return "No path found"
        return f"Path: {' -> '.join(result.path)}\nDistance: {result.distance}"

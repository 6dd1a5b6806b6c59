"""In-memory undirected weighted graph of named locations.

Locations are matched case-insensitively: ``"mumbai"``, ``"MUMBAI"`` and
``"Mumbai"`` are the same node, and the casing used on first insertion
is the one shown in every result. Each location gets a dense integer id
on creation. Edges are stored in both endpoints' adjacency lists and
always carry the same weight in both directions.

The graph is insert-only and not safe for concurrent mutation.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Dict, Iterator, List, Optional, Tuple

from ..domain.errors import (
    InvalidEdgeError,
    InvalidLocationNameError,
    InvalidWeightError,
)
from ..domain.models import Edge, GraphStats, Location, PathResult, RouteLeg
from .dijkstra import dijkstra, single_source

logger = logging.getLogger(__name__)


def normalize_name(name: str) -> str:
    """Return the case-insensitive matching key for a location name."""
    return name.lower()


class LocationGraph:
    """Undirected weighted graph keyed by case-insensitive location names.

    Example:
        graph = LocationGraph()
        graph.connect("Mumbai", "Bangalore", 850)
        graph.connect("bangalore", "Chennai", 350)
        graph.shortest_path("MUMBAI", "chennai").path
        # ('Mumbai', 'Bangalore', 'Chennai')
    """

    def __init__(self) -> None:
        self._ids: Dict[str, int] = {}
        self._names: List[str] = []
        self._adjacency: List[List[Tuple[int, int]]] = []

    # ------------------------------------------------------------------
    # Identity & registration
    # ------------------------------------------------------------------

    def resolve_or_create(self, name: str) -> int:
        """Return the id for ``name``, registering it if it is new.

        Raises:
            InvalidLocationNameError: If ``name`` is empty or blank.
        """
        key = self._key(name)
        node_id = self._ids.get(key)
        if node_id is not None:
            return node_id

        node_id = len(self._names)
        self._ids[key] = node_id
        self._names.append(name)
        self._adjacency.append([])
        logger.debug("Location added", extra={"location": name, "id": node_id})
        return node_id

    def add_location(self, name: str) -> int:
        """Register a location without any edges and return its id."""
        return self.resolve_or_create(name)

    def location_id(self, name: str) -> Optional[int]:
        """Return the id for ``name``, or None if it is unknown."""
        return self._ids.get(normalize_name(name))

    def exists(self, name: str) -> bool:
        return normalize_name(name) in self._ids

    def canonical_name(self, name: str) -> str:
        """Return the stored casing of ``name``, or ``name`` itself if unknown."""
        node_id = self.location_id(name)
        if node_id is None:
            return name
        return self._names[node_id]

    def locations(self) -> List[Location]:
        return [Location(id=i, name=name) for i, name in enumerate(self._names)]

    def node_count(self) -> int:
        return len(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.exists(name)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def connect(self, name_a: str, name_b: str, weight: int) -> None:
        """Add an edge, or overwrite its weight if the pair is already connected.

        Unknown names are registered first, so connecting two new names
        creates both locations.

        Raises:
            InvalidWeightError: If ``weight`` is not a non-negative int.
            InvalidEdgeError: If both names resolve to the same location.
            InvalidLocationNameError: If either name is empty or blank.
        """
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise InvalidWeightError(
                f"Edge weight must be an integer, got {weight!r}",
                weight=weight,
            )
        if weight < 0:
            raise InvalidWeightError(
                f"Edge weight must be non-negative, got {weight}",
                weight=weight,
            )
        if self._key(name_a) == self._key(name_b):
            raise InvalidEdgeError(
                f"Cannot connect a location to itself: {self.canonical_name(name_a)}",
                location=self.canonical_name(name_a),
            )

        u = self.resolve_or_create(name_a)
        v = self.resolve_or_create(name_b)

        for i, (neighbor, _) in enumerate(self._adjacency[u]):
            if neighbor == v:
                self._adjacency[u][i] = (v, weight)
                for j, (reverse, _) in enumerate(self._adjacency[v]):
                    if reverse == u:
                        self._adjacency[v][j] = (u, weight)
                        break
                logger.debug(
                    "Edge weight updated",
                    extra={
                        "source": self._names[u],
                        "target": self._names[v],
                        "weight": weight,
                    },
                )
                return

        self._adjacency[u].append((v, weight))
        self._adjacency[v].append((u, weight))

    def edge_weight(self, name_a: str, name_b: str) -> Optional[int]:
        """Return the weight of the edge between two locations, if any."""
        u = self.location_id(name_a)
        v = self.location_id(name_b)
        if u is None or v is None:
            return None
        for neighbor, weight in self._adjacency[u]:
            if neighbor == v:
                return weight
        return None

    def neighbors(self, name: str) -> List[Tuple[str, int]]:
        """Return ``(neighbor name, weight)`` pairs in insertion order."""
        node_id = self.location_id(name)
        if node_id is None:
            return []
        return [(self._names[v], w) for v, w in self._adjacency[node_id]]

    def edges(self) -> List[Edge]:
        """Return every undirected edge once, lower id endpoint first."""
        result: List[Edge] = []
        for u, entries in enumerate(self._adjacency):
            for v, weight in entries:
                if u < v:
                    result.append(Edge(self._names[u], self._names[v], weight))
        return result

    def edge_count(self) -> int:
        return sum(len(entries) for entries in self._adjacency) // 2

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def bfs(self, start: str) -> List[str]:
        """Breadth-first visit from ``start``; empty list if it is unknown."""
        start_id = self.location_id(start)
        if start_id is None:
            return []
        return [self._names[i] for i in self._bfs_ids(start_id)]

    def dfs(self, start: str) -> List[str]:
        """Depth-first pre-order visit from ``start``; empty list if it is unknown.

        Uses an explicit stack. Neighbors are pushed in reverse so they are
        visited in insertion order, matching the recursive formulation.
        """
        start_id = self.location_id(start)
        if start_id is None:
            return []

        visited = [False] * len(self._names)
        order: List[str] = []
        stack = [start_id]

        while stack:
            u = stack.pop()
            if visited[u]:
                continue
            visited[u] = True
            order.append(self._names[u])

            for v, _ in reversed(self._adjacency[u]):
                if not visited[v]:
                    stack.append(v)

        return order

    def is_connected(self) -> bool:
        """Return True if every location is reachable from location 0.

        An empty graph is connected.
        """
        if not self._names:
            return True
        return len(self._bfs_ids(0)) == len(self._names)

    def stats(self) -> GraphStats:
        return GraphStats(
            node_count=self.node_count(),
            edge_count=self.edge_count(),
            connected=self.is_connected(),
        )

    # ------------------------------------------------------------------
    # Shortest paths
    # ------------------------------------------------------------------

    def shortest_path(self, source: str, destination: str) -> Optional[PathResult]:
        """Compute the cheapest route between two locations.

        Returns None when either location is unknown or when the
        destination cannot be reached from the source.
        """
        s = self.location_id(source)
        t = self.location_id(destination)
        if s is None or t is None:
            return None

        ids, distance = dijkstra(self._adjacency, s, t)
        if distance is None:
            return None

        legs = tuple(
            RouteLeg(self._names[a], self._names[b], self._weight(a, b))
            for a, b in zip(ids, ids[1:])
        )
        return PathResult(
            path=tuple(self._names[i] for i in ids),
            distance=distance,
            legs=legs,
        )

    def distances_from(self, source: str) -> Dict[str, int]:
        """Return the shortest distance to every location reachable from ``source``."""
        s = self.location_id(source)
        if s is None:
            return {}
        dist, _ = single_source(self._adjacency, s)
        return {self._names[i]: d for i, d in enumerate(dist) if d is not None}

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _key(name: str) -> str:
        if not name or not name.strip():
            raise InvalidLocationNameError(
                "Location name must not be empty",
                name=name,
            )
        return normalize_name(name)

    def _bfs_ids(self, start: int) -> List[int]:
        visited = [False] * len(self._names)
        visited[start] = True
        queue = deque([start])
        order: List[int] = []

        while queue:
            u = queue.popleft()
            order.append(u)
            for v, _ in self._adjacency[u]:
                if not visited[v]:
                    visited[v] = True
                    queue.append(v)

        return order

    def _weight(self, u: int, v: int) -> int:
        for neighbor, weight in self._adjacency[u]:
            if neighbor == v:
                return weight
        raise KeyError((u, v))

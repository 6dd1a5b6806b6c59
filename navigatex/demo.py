"""Graph demonstration on four Indian cities.

Prints the node and edge counts, both traversals from Mumbai and the
cheapest Mumbai to Chennai route.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .adapters.graph import DijkstraRouteSolver
from .graph.location_graph import LocationGraph
from .services.navigator import NavigatorService

DEMO_LOCATIONS = ("Mumbai", "Delhi", "Bangalore", "Chennai")
DEMO_EDGES = (
    ("Mumbai", "Delhi", 1400),
    ("Mumbai", "Bangalore", 850),
    ("Delhi", "Bangalore", 2150),
    ("Bangalore", "Chennai", 350),
)


def build_demo_graph() -> LocationGraph:
    graph = LocationGraph()
    for name in DEMO_LOCATIONS:
        graph.add_location(name)
    for source, target, weight in DEMO_EDGES:
        graph.connect(source, target, weight)
    return graph


def run_demo(out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    service = NavigatorService(build_demo_graph(), DijkstraRouteSolver())
    stats = service.stats()

    print("=== GRAPH DEMONSTRATION ===", file=out)
    print(f"Graph: {stats.node_count} nodes, {stats.edge_count} edges", file=out)
    print(f"BFS from Mumbai: {' -> '.join(service.traverse('Mumbai', 'bfs'))}", file=out)
    print(f"DFS from Mumbai: {' -> '.join(service.traverse('Mumbai', 'dfs'))}", file=out)

    route = service.route("Mumbai", "Chennai")
    print("Shortest path (Dijkstra's):", file=out)
    print(service.describe_route(route), file=out)

"""Simple launcher for the location graph.

Asks whether to run the fixed demonstration or an interactive session
where locations and roads can be added and queried.
"""

from __future__ import annotations

import sys

from navigatex.adapters.graph import CSVGraphRepository, DijkstraRouteSolver
from navigatex.config import configure_logging, get_config
from navigatex.demo import run_demo
from navigatex.domain.errors import (
    ConfigurationError,
    GraphDataError,
    LocationNotFoundError,
    NavigateXError,
)
from navigatex.graph.location_graph import LocationGraph
from navigatex.ports.graph import GraphRepositoryPort
from navigatex.services.navigator import NavigatorService

MENU = """
1) Add location
2) Connect locations
3) BFS
4) DFS
5) Shortest path
6) Stats
0) Quit"""


def _ask(prompt: str) -> str:
    return input(prompt).strip()


def _load_graph(use_seed: bool) -> LocationGraph:
    if not use_seed:
        return LocationGraph()
    repository: GraphRepositoryPort = CSVGraphRepository(get_config().graph)
    try:
        return repository.load()
    except GraphDataError as e:
        print(f"Could not load seed data ({e}), starting empty.")
        return LocationGraph()


def interactive(service: NavigatorService) -> None:
    while True:
        print(MENU)
        choice = _ask("Choice: ")

        try:
            if choice == "1":
                name = service.add_location(_ask("Location: "))
                print(f"Location {name!r} registered.")
            elif choice == "2":
                source = _ask("From: ")
                target = _ask("To: ")
                try:
                    weight = int(_ask("Weight: "))
                except ValueError:
                    print("Weight must be a whole number.")
                    continue
                service.connect(source, target, weight)
                print("Connected.")
            elif choice in {"3", "4"}:
                order = "bfs" if choice == "3" else "dfs"
                visited = service.traverse(_ask("Start: "), order)
                print(f"{order.upper()}: {' -> '.join(visited)}")
            elif choice == "5":
                result, error = service.route_safe(_ask("From: "), _ask("To: "))
                print(error if result is None else service.describe_route(result))
            elif choice == "6":
                stats = service.stats()
                print(
                    f"{stats.node_count} nodes, {stats.edge_count} edges, "
                    f"{'connected' if stats.connected else 'not connected'}"
                )
            elif choice in {"0", "q", "quit"}:
                return
            else:
                print("Unknown choice.")
        except LocationNotFoundError as e:
            hint = service.suggest(e.location)
            print(f"Error: {e}" + (f" (did you mean {', '.join(hint)}?)" if hint else ""))
        except NavigateXError as e:
            print(f"Error: {e}")


def main() -> None:
    try:
        configure_logging()
    except ConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print("=== NavigateX launcher ===")
    print("1) Demonstration")
    print("2) Interactive session (seed data)")
    print("3) Interactive session (empty graph)")
    choice = _ask("Choice (1/2/3): ").lower()

    if choice in {"1", "demo", "d"}:
        run_demo()
    elif choice in {"2", "3"}:
        graph = _load_graph(use_seed=choice == "2")
        interactive(NavigatorService(graph, DijkstraRouteSolver()))
    else:
        print("Unrecognised choice.")
        sys.exit(1)


if __name__ == "__main__":
    main()

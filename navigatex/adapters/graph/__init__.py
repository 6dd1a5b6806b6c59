"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Builds a LocationGraph from CSV seed files
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .csv_repository import CSVGraphRepository
from .dijkstra_solver import DijkstraRouteSolver

__all__ = ["CSVGraphRepository", "DijkstraRouteSolver"]

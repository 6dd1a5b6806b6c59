"""Tests for the Dijkstra route solver adapter."""

import logging

import pytest

from navigatex.adapters.graph import DijkstraRouteSolver
from navigatex.domain.errors import LocationNotFoundError, NoRouteFoundError
from navigatex.domain.models import PathResult
from navigatex.graph.location_graph import LocationGraph


@pytest.fixture
def graph():
    g = LocationGraph()
    g.connect("Mumbai", "Delhi", 1400)
    g.connect("Mumbai", "Bangalore", 850)
    g.connect("Delhi", "Bangalore", 2150)
    g.connect("Bangalore", "Chennai", 350)
    g.add_location("Goa")
    return g


class TestDijkstraRouteSolver:
    """Test suite for DijkstraRouteSolver."""

    def test_solve_returns_canonical_route(self, graph):
        result = DijkstraRouteSolver().solve(graph, "mumbai", "CHENNAI")

        assert result.path == ("Mumbai", "Bangalore", "Chennai")
        assert result.distance == 1200
        assert result.num_stops == 3

    def test_solve_unknown_departure_raises(self, graph):
        with pytest.raises(LocationNotFoundError) as exc_info:
            DijkstraRouteSolver().solve(graph, "Atlantis", "Mumbai")

        assert exc_info.value.location == "Atlantis"

    def test_solve_unknown_arrival_raises(self, graph):
        with pytest.raises(LocationNotFoundError) as exc_info:
            DijkstraRouteSolver().solve(graph, "Mumbai", "Atlantis")

        assert exc_info.value.location == "Atlantis"

    def test_solve_disconnected_raises_with_canonical_names(self, graph):
        with pytest.raises(NoRouteFoundError) as exc_info:
            DijkstraRouteSolver().solve(graph, "MUMBAI", "goa")

        assert exc_info.value.departure == "Mumbai"
        assert exc_info.value.arrival == "Goa"
        assert str(exc_info.value) == "No path from Mumbai to Goa"

    def test_solve_logs_missing_route(self, graph, caplog):
        caplog.set_level(logging.WARNING, logger="navigatex.adapters.graph.dijkstra_solver")

        with pytest.raises(NoRouteFoundError):
            DijkstraRouteSolver().solve(graph, "Mumbai", "Goa")

        assert any(record.message == "No route found" for record in caplog.records)

    def test_solve_safe_returns_empty_result(self, graph):
        solver = DijkstraRouteSolver()

        for departure, arrival in [("Mumbai", "Goa"), ("Atlantis", "Mumbai")]:
            result = solver.solve_safe(graph, departure, arrival)
            assert result == PathResult()
            assert result.is_empty
            assert result.distance is None

    def test_solve_safe_returns_route(self, graph):
        result = DijkstraRouteSolver().solve_safe(graph, "Delhi", "Chennai")

        assert result.path == ("Delhi", "Bangalore", "Chennai")
        assert result.distance == 2500

"""CSV Graph Repository adapter.

Builds a LocationGraph from two seed files:
- locations.csv with a ``name`` column
- edges.csv with ``source``, ``target`` and ``weight`` columns

Locations are registered first, in file order, so their ids follow the
file. Edges are added next, in file order, which fixes the neighbor
order seen by the traversals. The files are only read, never written.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphDataError, NavigateXError
from ...graph.location_graph import LocationGraph

LOCATION_COLUMNS = ("name",)
EDGE_COLUMNS = ("source", "target", "weight")


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[LocationGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> LocationGraph:
        """Load the location graph from CSV files.

        Returns:
            The graph built from the seed files.

        Raises:
            GraphDataError: If a file is missing or malformed.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "locations_path": str(self.config.locations_path),
                "edges_path": str(self.config.edges_path),
            },
        )

        graph = LocationGraph()
        self._load_locations(graph, self.config.locations_path)
        self._load_edges(graph, self.config.edges_path)

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"nodes": graph.node_count(), "edges": graph.edge_count()},
        )
        return graph

    def _load_locations(self, graph: LocationGraph, path: Path) -> None:
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                self._check_columns(reader, LOCATION_COLUMNS, path)
                for row in reader:
                    name = (row.get("name") or "").strip()
                    if name:
                        graph.add_location(name)
        except OSError as e:
            raise GraphDataError(
                "Failed to read locations",
                file_path=str(path),
                cause=e,
            )

    def _load_edges(self, graph: LocationGraph, path: Path) -> None:
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                self._check_columns(reader, EDGE_COLUMNS, path)
                for row in reader:
                    source = (row.get("source") or "").strip()
                    target = (row.get("target") or "").strip()
                    weight_str = (row.get("weight") or "").strip()

                    if not source and not target and not weight_str:
                        continue

                    try:
                        graph.connect(source, target, int(weight_str))
                    except (ValueError, NavigateXError) as e:
                        raise GraphDataError(
                            f"Invalid edge row {source!r} -> {target!r} ({weight_str!r})",
                            file_path=str(path),
                            line=reader.line_num,
                            cause=e,
                        )
        except OSError as e:
            raise GraphDataError(
                "Failed to read edges",
                file_path=str(path),
                cause=e,
            )

    @staticmethod
    def _check_columns(
        reader: csv.DictReader, required: tuple[str, ...], path: Path
    ) -> None:
        fieldnames = reader.fieldnames or []
        missing = [column for column in required if column not in fieldnames]
        if missing:
            raise GraphDataError(
                f"Missing columns: {', '.join(missing)}",
                file_path=str(path),
            )

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")

"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphDataError,
    InvalidEdgeError,
    InvalidLocationNameError,
    InvalidWeightError,
    LocationNotFoundError,
    NavigateXError,
    NoRouteFoundError,
)
from .models import Edge, GraphStats, Location, PathResult, RouteLeg

__all__ = [
    # Models
    "Location",
    "Edge",
    "RouteLeg",
    "PathResult",
    "GraphStats",
    # Errors
    "NavigateXError",
    "InvalidLocationNameError",
    "InvalidWeightError",
    "InvalidEdgeError",
    "LocationNotFoundError",
    "NoRouteFoundError",
    "GraphDataError",
    "ConfigurationError",
]

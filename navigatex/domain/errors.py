"""Typed domain errors for the NavigateX location graph.

The graph core reports unknown locations and missing routes through
empty or ``None`` results. The solver and service layers turn those
results into the typed errors below so callers can react (for example
by prompting again for a valid name).

All errors inherit from NavigateXError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class NavigateXError(Exception):
    """Base error for the NavigateX domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidLocationNameError(NavigateXError, ValueError):
    """A location name is empty or blank.

    Attributes:
        name: The rejected name as supplied by the caller
    """

    name: str = ""


@dataclass
class InvalidWeightError(NavigateXError, ValueError):
    """An edge weight is negative or not an integer.

    Dijkstra's algorithm is only correct for non-negative costs, so the
    weight is checked before the graph is touched.

    Attributes:
        weight: The rejected weight
    """

    weight: object = None


@dataclass
class InvalidEdgeError(NavigateXError, ValueError):
    """An edge would connect a location to itself.

    Attributes:
        location: Canonical name of the location
    """

    location: str = ""


@dataclass
class LocationNotFoundError(NavigateXError):
    """No location matches the given name, case-insensitively.

    Attributes:
        location: The name that was looked up
    """

    location: str = ""


@dataclass
class NoRouteFoundError(NavigateXError):
    """Both locations exist but are not connected.

    Attributes:
        departure: Canonical name of the departure location
        arrival: Canonical name of the arrival location
    """

    departure: str = ""
    arrival: str = ""


@dataclass
class GraphDataError(NavigateXError):
    """Seed data for the graph could not be read or is malformed.

    Attributes:
        file_path: Path to the offending data file
        line: 1-based line number of the offending row, if known
    """

    file_path: Optional[str] = None
    line: Optional[int] = None


@dataclass
class ConfigurationError(NavigateXError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None

"""Typed domain errors for the metro line network.

The core network API reports ordinary "not found" conditions through
empty results (``None``, ``[]``). These error types are raised by the
stricter service and adapter surfaces, and for caller mistakes such as
an out-of-range line index.

All errors inherit from EasyMetroError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class EasyMetroError(Exception):
    """Base error for the metro network domain.

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
class SpecificationError(EasyMetroError):
    """The line specification text could not produce a network."""


@dataclass
class LineIndexError(EasyMetroError, IndexError):
    """A line was requested by an index outside ``[0, line_count)``.

    Attributes:
        index: The index that was requested
        line_count: Number of lines in the network at the time
    """

    index: int = 0
    line_count: int = 0


@dataclass
class StationNotFoundError(EasyMetroError):
    """Station name not found in the network.

    Attributes:
        station_name: The station name that was not found
    """

    station_name: str = ""


@dataclass
class NoRouteFoundError(EasyMetroError):
    """No path exists between the requested stations.

    Attributes:
        departure: Departure station name
        arrival: Arrival station name
    """

    departure: str = ""
    arrival: str = ""


@dataclass
class ConfigurationError(EasyMetroError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None

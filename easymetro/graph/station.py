"""Station node of the line network.

A station is identified by its name across the whole network: two lines
declaring the same name share one Station, which makes it a junction.
"""

from __future__ import annotations

from typing import Dict, List


class Station:
    """A named node tracking its line membership and direct neighbors."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.lines: List[str] = []
        # Insertion-ordered set; neighbor order drives the search order.
        self._neighbors: Dict[str, Station] = {}

    def __repr__(self) -> str:
        return f"Station(name={self.name!r}, lines={self.lines!r})"

    def get_name(self) -> str:
        return self.name

    def get_lines(self) -> List[str]:
        return list(self.lines)

    def add_line(self, line_name: str) -> None:
        """Record that ``line_name`` passes through this station.

        Repeated names are kept, so a line revisiting the station shows
        up more than once.
        """
        self.lines.append(line_name)

    def add_neighbor_station(self, other: Station) -> None:
        """Register ``other`` as one hop away.

        The caller is responsible for the symmetric registration on
        ``other``. Registering the same neighbor twice is a no-op.
        """
        self._neighbors.setdefault(other.name, other)

    def get_neighbor_stations(self) -> List[Station]:
        return list(self._neighbors.values())

    def has_neighbor(self, name: str) -> bool:
        return name in self._neighbors

    def is_in_the_same_line_as(self, other: Station) -> bool:
        """True if both stations share at least one line."""
        return not set(self.lines).isdisjoint(other.lines)

    @property
    def is_junction(self) -> bool:
        """True if two or more distinct lines pass through the station."""
        return len(set(self.lines)) > 1

"""Domain models for the metro line network.

``Path`` is the mutable working value of the shortest-path search: it
grows one station per step and is cloned at every branch so that
alternate branches never share history. ``RouteResult`` is the frozen
view handed out by the service layer once a search has finished.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Path:
    """A candidate route: station names visited plus accumulated cost.

    Attributes:
        stations: Ordered names of the stations visited so far
        total_cost: Cost accumulated along the way (never negative)
    """

    stations: List[str] = field(default_factory=list)
    total_cost: float = 0

    def add_station(self, name: str) -> None:
        self.stations.append(name)

    def add_cost(self, cost: float) -> None:
        self.total_cost += cost

    def clone(self) -> Path:
        """Return an independent copy carrying the same cost."""
        return Path(stations=list(self.stations), total_cost=self.total_cost)

    def get_path(self) -> List[str]:
        """Return a copy of the visited station names."""
        return list(self.stations)

    def get_total_cost(self) -> float:
        return self.total_cost

    @property
    def length(self) -> int:
        """Number of stations on the path."""
        return len(self.stations)

    @property
    def previous_station(self) -> Optional[str]:
        """Name of the station before the last one, if any."""
        if len(self.stations) < 2:
            return None
        return self.stations[-2]


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a route computation between two stations.

    Attributes:
        path: Ordered tuple of station names forming the route
        total_cost: Total cost of the route
        line_switches: Number of hops that changed line
    """

    path: tuple[str, ...]
    total_cost: float
    line_switches: int = 0

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of stops in the route."""
        return len(self.path)

    @property
    def departure(self) -> Optional[str]:
        return self.path[0] if self.path else None

    @property
    def arrival(self) -> Optional[str]:
        return self.path[-1] if self.path else None

"""In-memory line network: lines, stations and their adjacency.

Lines are kept in declaration order and addressed by index. Stations are
owned by a name-keyed registry, so every name maps to exactly one
Station whatever the number of lines declaring it. Adjacency is built as
lines are added: consecutive names of a line become mutual neighbors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..domain.errors import LineIndexError
from ..domain.models import Path
from .station import Station
from .traversal import count_line_switches, find_shortest_paths

logger = logging.getLogger(__name__)


@dataclass
class Line:
    """A named, ordered sequence of station names as declared."""

    name: str
    stations: List[str] = field(default_factory=list)


class LineNetwork:
    """Set of lines and the station graph they induce."""

    def __init__(self) -> None:
        self._lines: List[Line] = []
        self._stations: Dict[str, Station] = {}

    def __repr__(self) -> str:
        return (
            f"LineNetwork(lines={len(self._lines)}, stations={len(self._stations)})"
        )

    def __len__(self) -> int:
        return len(self._stations)

    def __contains__(self, station_name: object) -> bool:
        return station_name in self._stations

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_line(self, line_name: str, station_names: Iterable[str]) -> None:
        """Record a new line and link its consecutive stations."""
        names = list(station_names)
        self._lines.append(Line(name=line_name, stations=names))
        self._register_stations(line_name, names, previous=None)
        logger.debug(
            "Line added", extra={"line": line_name, "stations": len(names)}
        )

    def add_station_names_to_line(
        self, station_names: Iterable[str], line_name: str
    ) -> None:
        """Extend an existing line, chaining from its current last station.

        A line holding a single station also chains from it, so adjacency
        always matches the consecutive pairs of the stored station list.
        Unknown line names are ignored; check ``exist_line`` first when
        that matters.
        """
        line = self._find_line(line_name)
        if line is None:
            logger.debug("Line not found, stations ignored", extra={"line": line_name})
            return

        names = list(station_names)
        previous = self._stations[line.stations[-1]] if line.stations else None
        line.stations.extend(names)
        self._register_stations(line_name, names, previous=previous)
        logger.debug(
            "Line extended",
            extra={"line": line_name, "stations": len(line.stations)},
        )

    def _register_stations(
        self,
        line_name: str,
        station_names: List[str],
        previous: Optional[Station],
    ) -> None:
        for name in station_names:
            station = self._stations.get(name)
            if station is None:
                station = Station(name)
                self._stations[name] = station
            station.add_line(line_name)

            if previous is not None:
                previous.add_neighbor_station(station)
                station.add_neighbor_station(previous)
            previous = station

    def _find_line(self, line_name: str) -> Optional[Line]:
        for line in self._lines:
            if line.name == line_name:
                return line
        return None

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def exist_line(self, line_name: str) -> bool:
        return self._find_line(line_name) is not None

    def get_line_count(self) -> int:
        return len(self._lines)

    def _line_at(self, index: int) -> Line:
        if not 0 <= index < len(self._lines):
            raise LineIndexError(
                f"Line index out of range: {index}",
                index=index,
                line_count=len(self._lines),
            )
        return self._lines[index]

    def get_line_name(self, index: int) -> str:
        """Return the name of the line at ``index``.

        Raises:
            LineIndexError: If ``index`` is not a valid line index.
        """
        return self._line_at(index).name

    def get_line_station_names(self, index: int) -> List[str]:
        """Return a copy of the station names declared for a line.

        Raises:
            LineIndexError: If ``index`` is not a valid line index.
        """
        return list(self._line_at(index).stations)

    def get_line_names(self) -> List[str]:
        return [line.name for line in self._lines]

    def get_station_names(self) -> List[str]:
        return list(self._stations)

    def get_station_info(self, station_name: str) -> Optional[Station]:
        """Return the live Station for ``station_name``, or None."""
        return self._stations.get(station_name)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def get_shortest_paths(
        self,
        from_name: str,
        to_name: str,
        cost_per_station: float,
        cost_per_line_switch: float,
    ) -> List[Path]:
        """Return the fewest-stations path between two stations.

        The result holds at most one Path; it is empty when ``from_name``
        is unknown or ``to_name`` cannot be reached.
        """
        return find_shortest_paths(
            self._stations,
            from_name,
            to_name,
            cost_per_station,
            cost_per_line_switch,
        )

    def count_line_switches(self, station_names: List[str]) -> int:
        """Count the hops of a path over this network that change line.

        Every name must belong to the network, as on a path returned by
        ``get_shortest_paths``.
        """
        return count_line_switches(self._stations, station_names)

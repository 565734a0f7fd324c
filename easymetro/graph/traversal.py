"""Least-cost path search over a station graph.

The search is an exhaustive depth-first sweep sharing one visited set
across all branches: once any branch has entered a station, no other
branch enters it again, except the destination which always stays
reachable. Every time the destination is reached the candidate is
compared with the best one so far by station count; the accumulated
cost is only the value attached to the winning candidate. A longer path
with fewer line switches therefore loses to a shorter, costlier one.
"""

from __future__ import annotations

from typing import Iterator, List, Mapping, Optional, Sequence, Tuple

from ..domain.models import Path
from .station import Station

# (station being expanded, path ending at that station, remaining neighbors)
_Frame = Tuple[Station, Path, Iterator[Station]]


def find_shortest_paths(
    stations: Mapping[str, Station],
    from_name: str,
    to_name: str,
    cost_per_station: float,
    cost_per_line_switch: float,
) -> List[Path]:
    """Search the best path from ``from_name`` to ``to_name``.

    Parameters
    ----------
    stations:
        Registry of the network's stations, keyed by name.
    from_name:
        Name of the departure station.
    to_name:
        Name of the arrival station.
    cost_per_station:
        Cost added for every hop to a next station.
    cost_per_line_switch:
        Extra cost added when the station before the current one shares
        no line with the station being entered.

    Returns
    -------
    list[Path]
        A single-element list with the fewest-stations path, or an empty
        list when the departure is unknown or the arrival unreachable.
    """
    origin = stations.get(from_name)
    if origin is None:
        return []

    visited = {origin.name}
    start = Path(stations=[origin.name], total_cost=0)
    if origin.name == to_name:
        return [start]

    best: Optional[Path] = None
    # Explicit stack instead of recursion; the order of visits matches
    # the recursive formulation.
    stack: List[_Frame] = [(origin, start, iter(origin.get_neighbor_stations()))]

    while stack:
        _, path, remaining = stack[-1]
        for neighbor in remaining:
            if neighbor.name in visited and neighbor.name != to_name:
                continue

            branch = path.clone()
            branch.add_station(neighbor.name)
            branch.add_cost(cost_per_station)
            previous = path.previous_station
            if previous is not None and not stations[previous].is_in_the_same_line_as(
                neighbor
            ):
                branch.add_cost(cost_per_line_switch)

            visited.add(neighbor.name)
            if neighbor.name == to_name:
                if best is None or branch.length < best.length:
                    best = branch
                continue

            stack.append(
                (neighbor, branch, iter(neighbor.get_neighbor_stations()))
            )
            break
        else:
            stack.pop()

    return [best] if best is not None else []


def count_line_switches(
    stations: Mapping[str, Station], path: Sequence[str]
) -> int:
    """Count the hops of ``path`` that are charged as a line switch."""
    switches = 0
    for index in range(2, len(path)):
        before = stations[path[index - 2]]
        entered = stations[path[index]]
        if not before.is_in_the_same_line_as(entered):
            switches += 1
    return switches

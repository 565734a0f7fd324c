"""Depth-first route solver adapter.

This adapter wraps the network's shortest-path search and adds:
- Domain model output (RouteResult)
- Line switch counting
- Typed errors for unknown stations and unreachable arrivals
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NoRouteFoundError, StationNotFoundError
from ...domain.models import RouteResult
from ...graph.line_network import LineNetwork


@dataclass
class DepthFirstRouteSolver:
    """Route solver using the network's fewest-stations search.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        network: LineNetwork,
        departure: str,
        arrival: str,
        cost_per_station: float,
        cost_per_line_switch: float,
    ) -> RouteResult:
        """Find the shortest route between two stations.

        Args:
            network: The line network to search.
            departure: Departure station name.
            arrival: Arrival station name.
            cost_per_station: Cost of each hop.
            cost_per_line_switch: Extra cost of each line change.

        Returns:
            RouteResult with path, cost and line switch count.

        Raises:
            StationNotFoundError: If departure or arrival is not in the network.
            NoRouteFoundError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"departure": departure, "arrival": arrival},
        )

        if departure not in network:
            raise StationNotFoundError(
                f"Departure station not in network: {departure}",
                station_name=departure,
            )
        if arrival not in network:
            raise StationNotFoundError(
                f"Arrival station not in network: {arrival}",
                station_name=arrival,
            )

        route = self.solve_safe(
            network, departure, arrival, cost_per_station, cost_per_line_switch
        )

        if route.is_empty:
            self._logger.warning(
                "No route found",
                extra={"departure": departure, "arrival": arrival},
            )
            raise NoRouteFoundError(
                f"No path from {departure} to {arrival}",
                departure=departure,
                arrival=arrival,
            )

        self._logger.info(
            "Route found",
            extra={
                "departure": departure,
                "arrival": arrival,
                "stops": route.num_stops,
                "total_cost": route.total_cost,
            },
        )
        return route

    def solve_safe(
        self,
        network: LineNetwork,
        departure: str,
        arrival: str,
        cost_per_station: float,
        cost_per_line_switch: float,
    ) -> RouteResult:
        """Find the shortest route, returning an empty result on failure.

        Like solve(), but returns an empty RouteResult instead of raising
        exceptions.
        """
        paths = network.get_shortest_paths(
            departure, arrival, cost_per_station, cost_per_line_switch
        )
        if not paths:
            return RouteResult(path=(), total_cost=float("inf"))

        best = paths[0]
        return RouteResult(
            path=tuple(best.stations),
            total_cost=best.total_cost,
            line_switches=network.count_line_switches(best.stations),
        )

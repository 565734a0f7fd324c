"""Route planner service - Main orchestrator.

This service is what a front-end (such as the line specification form)
talks to: it builds the network from the specification text, fills in
default costs from configuration, runs the route solver and formats the
result for display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from ..config import RoutingConfig, get_config
from ..domain.errors import ConfigurationError, EasyMetroError, SpecificationError
from ..domain.models import RouteResult
from ..graph.line_network import LineNetwork
from ..ports.graph import NetworkParserPort, RouteSolverPort

NetworkSource = Union[str, LineNetwork, None]


def _format_cost(cost: float) -> str:
    return f"{cost:g}"


@dataclass
class RoutePlannerService:
    """Main service for planning routes over a line specification.

    Attributes:
        parser: Builds networks from specification text
        route_solver: Computes shortest routes
        config: Default routing costs
    """

    parser: NetworkParserPort
    route_solver: RouteSolverPort
    config: RoutingConfig = field(default_factory=lambda: get_config().routing)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self, text: Optional[str]) -> LineNetwork:
        """Build a network from specification text.

        Raises:
            SpecificationError: If the text holds no line declaration.
        """
        network = self.parser.parse(text)
        if network is None:
            raise SpecificationError("Line specification is empty")
        return network

    def _resolve_cost(self, value: Optional[float], setting_name: str) -> float:
        if value is None:
            return getattr(self.config, setting_name)
        if value < 0:
            raise ConfigurationError(
                f"{setting_name} must not be negative, got {value}",
                setting_name=setting_name,
                expected_type="non-negative number",
            )
        return value

    def plan(
        self,
        source: NetworkSource,
        departure: str,
        arrival: str,
        cost_per_station: Optional[float] = None,
        cost_per_line_switch: Optional[float] = None,
    ) -> RouteResult:
        """Plan the shortest route from ``departure`` to ``arrival``.

        Args:
            source: Specification text, or an already built network.
            departure: Departure station name.
            arrival: Arrival station name.
            cost_per_station: Cost of each hop (config default if None).
            cost_per_line_switch: Cost of each line change (config default if None).

        Returns:
            RouteResult with the computed route.

        Raises:
            SpecificationError: If the specification text is empty.
            ConfigurationError: If a cost is negative.
            StationNotFoundError: If a station is not in the network.
            NoRouteFoundError: If no path exists between the stations.
        """
        station_cost = self._resolve_cost(cost_per_station, "cost_per_station")
        switch_cost = self._resolve_cost(cost_per_line_switch, "cost_per_line_switch")

        network = source if isinstance(source, LineNetwork) else self.load(source)

        self._logger.info(
            "Planning route",
            extra={
                "departure": departure,
                "arrival": arrival,
                "cost_per_station": station_cost,
                "cost_per_line_switch": switch_cost,
            },
        )
        return self.route_solver.solve(
            network, departure, arrival, station_cost, switch_cost
        )

    def describe(
        self,
        source: NetworkSource,
        departure: str,
        arrival: str,
        cost_per_station: Optional[float] = None,
        cost_per_line_switch: Optional[float] = None,
    ) -> str:
        """Plan a route and return a message suitable for display.

        Domain errors are reported in the message instead of raised.
        """
        try:
            route = self.plan(
                source, departure, arrival, cost_per_station, cost_per_line_switch
            )
        except EasyMetroError as exc:
            self._logger.info("Route planning failed", extra={"error": str(exc)})
            return f"Error: {exc}"

        path_str = " -> ".join(route.path)
        return (
            f"Shortest route: {path_str}\n"
            f"Total cost: {_format_cost(route.total_cost)}\n"
            f"Line switches: {route.line_switches}"
        )

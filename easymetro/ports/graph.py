"""Graph ports - Abstractions for network building and routing.

These protocols define the contracts the service layer depends on:
turning specification text into a LineNetwork, and computing routes
over a built network.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import RouteResult
    from ..graph.line_network import LineNetwork


class NetworkParserPort(Protocol):
    """Port for building a network from specification text.

    Implementation: adapters/graph/text_parser.py
    """

    def parse(self, text: Optional[str]) -> Optional[LineNetwork]:
        """Parse a line specification.

        Args:
            text: Specification text, one line declaration per line.

        Returns:
            The populated network, or None for empty input.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/depth_first_solver.py
    """

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
        """
        ...

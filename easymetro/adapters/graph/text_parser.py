"""Text network parser adapter.

This adapter wraps the line specification parser and adds:
- Logging of the built network's size
- Rejection of blank input as a typed error on demand
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...domain.errors import SpecificationError
from ...graph.line_network import LineNetwork
from ...io.lines_spec import parse_lines_spec


@dataclass
class TextNetworkParser:
    """Network parser reading the ``Name: S1, S2, ...`` text format.

    This adapter implements NetworkParserPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def parse(self, text: Optional[str]) -> Optional[LineNetwork]:
        """Parse a line specification.

        Args:
            text: Specification text, one line declaration per line.

        Returns:
            The populated network, or None for empty input.
        """
        network = parse_lines_spec(text)
        if network is None:
            self._logger.debug("Empty specification")
            return None

        self._logger.debug(
            "Specification parsed",
            extra={
                "lines": network.get_line_count(),
                "station_count": len(network),
            },
        )
        return network

    def parse_or_raise(self, text: Optional[str]) -> LineNetwork:
        """Parse a line specification, raising on empty input.

        Raises:
            SpecificationError: If the text holds no line declaration.
        """
        network = self.parse(text)
        if network is None:
            raise SpecificationError("Line specification is empty")
        return network

"""Top-level package for easymetro.

easymetro compiles a textual description of metro lines into a station
graph and searches least-cost routes on it. The two entry points used by
front-ends are ``parse_lines_spec`` and ``LineNetwork.get_shortest_paths``.
"""

from .domain.errors import (
    ConfigurationError,
    EasyMetroError,
    LineIndexError,
    NoRouteFoundError,
    SpecificationError,
    StationNotFoundError,
)
from .domain.models import Path, RouteResult
from .graph.line_network import Line, LineNetwork
from .graph.station import Station
from .io.lines_spec import parse_line_declaration, parse_lines_spec

__all__ = [
    "parse_lines_spec",
    "parse_line_declaration",
    "Line",
    "LineNetwork",
    "Station",
    "Path",
    "RouteResult",
    "EasyMetroError",
    "SpecificationError",
    "LineIndexError",
    "StationNotFoundError",
    "NoRouteFoundError",
    "ConfigurationError",
]

"""Graph-related modules representing the metro line network.

This subpackage holds the station node, the line network that builds
the station adjacency graph, and the path search running on top of it.
"""

from .line_network import Line, LineNetwork
from .station import Station
from .traversal import count_line_switches, find_shortest_paths

__all__ = [
    "Line",
    "LineNetwork",
    "Station",
    "count_line_switches",
    "find_shortest_paths",
]

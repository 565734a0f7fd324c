"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextNetworkParser: Builds a LineNetwork from specification text
- DepthFirstRouteSolver: Finds shortest routes with the depth-first search
"""

from .depth_first_solver import DepthFirstRouteSolver
from .text_parser import TextNetworkParser

__all__ = ["DepthFirstRouteSolver", "TextNetworkParser"]

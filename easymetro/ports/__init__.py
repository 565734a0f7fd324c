"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the service layer and the adapters
that build and search line networks. They enable dependency injection
and make the services testable with stand-in implementations.
"""

from .graph import NetworkParserPort, RouteSolverPort

__all__ = [
    "NetworkParserPort",
    "RouteSolverPort",
]

"""Domain layer - Core models and errors.

This module contains the search result models and typed errors used
throughout the package. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    EasyMetroError,
    LineIndexError,
    NoRouteFoundError,
    SpecificationError,
    StationNotFoundError,
)
from .models import Path, RouteResult

__all__ = [
    # Models
    "Path",
    "RouteResult",
    # Errors
    "EasyMetroError",
    "SpecificationError",
    "LineIndexError",
    "StationNotFoundError",
    "NoRouteFoundError",
    "ConfigurationError",
]

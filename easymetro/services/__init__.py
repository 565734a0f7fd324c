"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Builds a network from text and plans routes on it
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]

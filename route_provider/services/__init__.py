"""Services layer - Query engine and transport mapping.

Available services:
- RouteQueryService: The five route queries over a route graph
- RouteRequestHandler: Parses payloads and maps query outcomes to responses
"""

from .route_handler import RouteRequestHandler
from .route_query import RouteQueryService

__all__ = ["RouteQueryService", "RouteRequestHandler"]

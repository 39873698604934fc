"""Domain layer - Core models, request types and errors.

This module contains immutable domain models and typed errors used
throughout the application.
"""

from .errors import (
    AcademyNotFoundError,
    ConfigurationError,
    InvalidGraphError,
    InvalidInputError,
    RouteProviderError,
    TraversalLimitError,
)
from .models import (
    NO_SUCH_ROUTE_TEXT,
    DistanceResult,
    QueryResponse,
    Route,
    RouteStatus,
)

__all__ = [
    # Models
    "Route",
    "RouteStatus",
    "DistanceResult",
    "QueryResponse",
    "NO_SUCH_ROUTE_TEXT",
    # Errors
    "RouteProviderError",
    "InvalidInputError",
    "AcademyNotFoundError",
    "InvalidGraphError",
    "TraversalLimitError",
    "ConfigurationError",
]

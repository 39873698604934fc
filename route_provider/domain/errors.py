"""Typed domain errors for the Route Provider.

Every failure the query layer can raise is one of these types, so the
transport layer can map each of them to the right response without
inspecting messages.

"No such route" and "unreachable" are NOT errors: they are regular
query outcomes carried by ``DistanceResult``.

All errors inherit from RouteProviderError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RouteProviderError(Exception):
    """Base error for the route provider domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidInputError(RouteProviderError):
    """Caller-supplied parameters are absent or malformed.

    Attributes:
        parameter: Name of the offending parameter, if known
    """

    parameter: str = ""


@dataclass
class AcademyNotFoundError(InvalidInputError):
    """Academy id is not part of the route graph.

    Attributes:
        academy: The academy id that was not found
    """

    academy: str = ""


@dataclass
class InvalidGraphError(RouteProviderError):
    """Graph construction was given a malformed route.

    Attributes:
        route_index: Position of the offending route in the input
    """

    route_index: Optional[int] = None


@dataclass
class TraversalLimitError(RouteProviderError):
    """A query expanded more states than the configured guard allows."""

    limit: int = 0


@dataclass
class ConfigurationError(RouteProviderError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None

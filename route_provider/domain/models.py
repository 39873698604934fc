"""Immutable domain models for the Route Provider.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts of the route graph and
of query outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

NO_SUCH_ROUTE_TEXT = "NO SUCH ROUTE"


def normalize_academy_id(academy: str) -> str:
    """Canonical form of an academy id: stripped and upper-cased."""
    return academy.strip().upper()


class RouteStatus(Enum):
    """Outcome of a distance query."""

    FOUND = auto()
    NO_SUCH_ROUTE = auto()
    UNREACHABLE = auto()


@dataclass(frozen=True, slots=True)
class Route:
    """A directed, weighted connection between two academies.

    Attributes:
        origin: Academy the route leaves from
        destination: Academy the route arrives at
        distance: Non-negative route length
    """

    origin: str
    destination: str
    distance: int


@dataclass(frozen=True, slots=True)
class DistanceResult:
    """Result of a distance query.

    ``distance`` is only set when ``status`` is ``RouteStatus.FOUND``.
    """

    status: RouteStatus
    distance: Optional[int] = None

    @classmethod
    def found(cls, distance: int) -> DistanceResult:
        return cls(status=RouteStatus.FOUND, distance=distance)

    @classmethod
    def no_such_route(cls) -> DistanceResult:
        return cls(status=RouteStatus.NO_SUCH_ROUTE)

    @classmethod
    def unreachable(cls) -> DistanceResult:
        return cls(status=RouteStatus.UNREACHABLE)

    @property
    def is_found(self) -> bool:
        """Check if a numeric distance was computed."""
        return self.status is RouteStatus.FOUND


@dataclass(frozen=True, slots=True)
class QueryResponse:
    """Transport-level response for a query.

    Attributes:
        status_code: HTTP-style status (200, 400, 422, 500)
        body: Integer answer, sentinel text or error message
    """

    status_code: int
    body: Union[int, str, None] = None

    @property
    def is_success(self) -> bool:
        return self.status_code == 200

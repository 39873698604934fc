"""Graph ports - Abstractions for the route graph and its queries.

These protocols define the contracts between the query engine, the
graph store it reads from, and the transport layer that drives it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, Tuple

if TYPE_CHECKING:
    from ..domain.models import DistanceResult, Route


class RouteGraphPort(Protocol):
    """Port for read-only adjacency lookups.

    Implementation: adapters/graph/in_memory_graph.py

    The graph is built once and never mutated, so implementations can be
    shared between concurrent queries without locking.
    """

    def outgoing_routes(self, academy: str) -> Tuple[Route, ...]:
        """Return routes leaving ``academy`` in construction order.

        Args:
            academy: The academy id.

        Returns:
            The outgoing routes; empty when there are none.
        """
        ...

    def has_academy(self, academy: str) -> bool:
        """Check whether ``academy`` is part of the graph."""
        ...

    def academies(self) -> Tuple[str, ...]:
        """List every known academy id."""
        ...


class RouteQueryPort(Protocol):
    """Port for the five route queries.

    Implementation: services/route_query.py
    """

    def route_distance(self, stops: Sequence[str]) -> DistanceResult:
        ...

    def shortest_route_distance(self, start: str, end: str) -> DistanceResult:
        ...

    def count_routes_with_stop_limit(
        self, start: str, end: str, stop_limit: int
    ) -> int:
        ...

    def count_routes_with_exact_stops(
        self, start: str, end: str, exact_stops: int
    ) -> int:
        ...

    def count_routes_with_distance_limit(
        self, start: str, end: str, distance_limit: int
    ) -> int:
        ...

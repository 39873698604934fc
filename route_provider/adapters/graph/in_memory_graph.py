"""In-memory route graph adapter.

Builds the adjacency mapping from a list of ``(origin, destination,
distance)`` triples and answers lookups. The structure is frozen after
construction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import InvalidGraphError
from ...domain.models import Route, normalize_academy_id


@dataclass(frozen=True)
class InMemoryRouteGraph:
    """Route graph held in memory.

    This adapter implements RouteGraphPort.

    Attributes:
        routes: Edge triples the graph is built from
    """

    routes: Sequence[Sequence[Any]]
    _adjacency: Dict[str, Tuple[Route, ...]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not self.routes:
            raise InvalidGraphError("A route graph needs at least one route")

        adjacency: Dict[str, List[Route]] = {}

        for index, triple in enumerate(self.routes):
            route = _build_route(index, triple)
            adjacency.setdefault(route.origin, []).append(route)
            # Destination-only academies are known, with no outgoing routes
            adjacency.setdefault(route.destination, [])

        frozen = {academy: tuple(routes) for academy, routes in adjacency.items()}
        object.__setattr__(self, "_adjacency", frozen)

        logging.getLogger(__name__).debug(
            "Route graph built",
            extra={"academies": len(frozen), "routes": self.route_count},
        )

    @classmethod
    def from_config(cls, config: Optional[GraphConfig] = None) -> InMemoryRouteGraph:
        """Build the graph from the configured route triples."""
        config = config or get_config().graph
        return cls(routes=tuple(config.routes))

    def outgoing_routes(self, academy: str) -> Tuple[Route, ...]:
        return self._adjacency.get(academy, ())

    def has_academy(self, academy: str) -> bool:
        return academy in self._adjacency

    def academies(self) -> Tuple[str, ...]:
        return tuple(self._adjacency)

    @property
    def route_count(self) -> int:
        return sum(len(routes) for routes in self._adjacency.values())

    def __contains__(self, academy: object) -> bool:
        return academy in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)


def _build_route(index: int, triple: Sequence[Any]) -> Route:
    """Validate one edge triple and turn it into a Route.

    Raises:
        InvalidGraphError: If the triple is malformed.
    """
    if isinstance(triple, (str, bytes)) or len(triple) != 3:
        raise InvalidGraphError(
            f"Route #{index} must be an (origin, destination, distance) triple",
            route_index=index,
        )

    origin, destination, distance = triple

    for academy in (origin, destination):
        if not isinstance(academy, str) or not academy.strip():
            raise InvalidGraphError(
                f"Route #{index} has an invalid academy id: {academy!r}",
                route_index=index,
            )

    if isinstance(distance, bool) or not isinstance(distance, int):
        raise InvalidGraphError(
            f"Route #{index} distance must be an integer, got {distance!r}",
            route_index=index,
        )
    if distance < 0:
        raise InvalidGraphError(
            f"Route #{index} distance must be non-negative, got {distance}",
            route_index=index,
        )

    return Route(
        origin=normalize_academy_id(origin),
        destination=normalize_academy_id(destination),
        distance=distance,
    )

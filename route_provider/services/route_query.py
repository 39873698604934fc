"""Route query service - the query engine.

Implements the five route queries over a read-only route graph:

- literal route distance
- shortest route distance (FIFO relaxation)
- route counts bounded by stops, by exact stops, and by distance

Every call allocates its own traversal state, so one service instance
can serve concurrent queries.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Sequence, Tuple

from ..config import QueryConfig, get_config
from ..domain.errors import AcademyNotFoundError, InvalidInputError, TraversalLimitError
from ..domain.models import DistanceResult
from ..ports.graph import RouteGraphPort


@dataclass
class _Budget:
    """Counts expanded states for one query and trips the traversal guard."""

    limit: int
    query: str
    spent: int = 0

    def spend(self) -> None:
        self.spent += 1
        if self.spent > self.limit:
            raise TraversalLimitError(
                f"{self.query} expanded more than {self.limit} states",
                limit=self.limit,
            )


@dataclass
class RouteQueryService:
    """Query engine over a route graph.

    This service implements RouteQueryPort. Academy ids and limits are
    validated here; the transport layer only parses.

    Attributes:
        graph: Read-only route graph
        config: Query limits
    """

    graph: RouteGraphPort
    config: QueryConfig = field(default_factory=lambda: get_config().query)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def route_distance(self, stops: Sequence[str]) -> DistanceResult:
        """Total distance of a literal route.

        Each consecutive pair of stops must be joined by exactly one
        route; otherwise the result is ``no_such_route``.

        Args:
            stops: Academy ids in travel order, at least two.

        Returns:
            DistanceResult with the summed distance, or no_such_route.

        Raises:
            InvalidInputError: If fewer than two stops are given.
            AcademyNotFoundError: If a stop is not a known academy.
        """
        if isinstance(stops, str) or len(stops) < 2:
            raise InvalidInputError(
                "A route needs at least two stops", parameter="stops"
            )
        for stop in stops:
            self._require_academy(stop, "stops")

        self._logger.debug("Computing route distance", extra={"stops": list(stops)})

        total = 0
        for origin, destination in zip(stops, stops[1:]):
            matches = [
                route
                for route in self.graph.outgoing_routes(origin)
                if route.destination == destination
            ]
            if len(matches) != 1:
                self._logger.info(
                    "No such route",
                    extra={
                        "origin": origin,
                        "destination": destination,
                        "matches": len(matches),
                    },
                )
                return DistanceResult.no_such_route()
            total += matches[0].distance

        self._logger.info(
            "Route distance computed",
            extra={"stops": len(stops), "distance": total},
        )
        return DistanceResult.found(total)

    def shortest_route_distance(self, start: str, end: str) -> DistanceResult:
        """Shortest distance from ``start`` to ``end``.

        Distances are relaxed breadth-first from a FIFO queue rather than
        a priority queue: an academy is queued again whenever a shorter
        distance to it is found, and the search ends once the queue
        drains. Recorded distances only ever decrease.

        Returns:
            DistanceResult with the distance, or unreachable.
        """
        self._validate_pair(start, end)

        budget = _Budget(self.config.max_expanded_states, "shortest_route_distance")
        distances: Dict[str, Optional[int]] = {
            academy: None for academy in self.graph.academies()
        }
        distances[start] = 0
        queue: Deque[str] = deque([start])

        while queue:
            current = queue.popleft()
            current_distance = distances[current]
            assert current_distance is not None

            for route in self.graph.outgoing_routes(current):
                budget.spend()
                candidate = current_distance + route.distance
                known = distances.get(route.destination)
                if known is None or candidate < known:
                    distances[route.destination] = candidate
                    queue.append(route.destination)

        distance = distances.get(end)
        if distance is None:
            self._logger.info(
                "Destination unreachable", extra={"start": start, "end": end}
            )
            return DistanceResult.unreachable()

        self._logger.info(
            "Shortest distance computed",
            extra={
                "start": start,
                "end": end,
                "distance": distance,
                "relaxations": budget.spent,
            },
        )
        return DistanceResult.found(distance)

    def count_routes_with_stop_limit(
        self, start: str, end: str, stop_limit: int
    ) -> int:
        """Count routes from ``start`` to ``end`` with at most ``stop_limit`` stops.

        A branch ends at its first arrival at ``end`` after at least one
        stop. Cycles are allowed and every distinct walk counts.
        """
        self._validate_pair(start, end)
        self._require_limit(stop_limit, "stop_limit")

        budget = _Budget(self.config.max_expanded_states, "count_routes_with_stop_limit")
        count = 0
        stack: List[Tuple[str, int]] = [(start, 0)]

        while stack:
            current, stops = stack.pop()
            budget.spend()

            if stops > stop_limit:
                continue
            if current == end and stops > 0:
                count += 1
                continue

            for route in self.graph.outgoing_routes(current):
                stack.append((route.destination, stops + 1))

        self._log_count("count_routes_with_stop_limit", start, end, stop_limit, count)
        return count

    def count_routes_with_exact_stops(
        self, start: str, end: str, exact_stops: int
    ) -> int:
        """Count routes from ``start`` to ``end`` with exactly ``exact_stops`` stops."""
        self._validate_pair(start, end)
        self._require_limit(exact_stops, "exact_stops")

        budget = _Budget(self.config.max_expanded_states, "count_routes_with_exact_stops")
        count = 0
        stack: List[Tuple[str, int]] = [(start, 0)]

        while stack:
            current, stops = stack.pop()
            budget.spend()

            if current == end and stops == exact_stops:
                count += 1
                continue
            if stops >= exact_stops:
                continue

            for route in self.graph.outgoing_routes(current):
                stack.append((route.destination, stops + 1))

        self._log_count("count_routes_with_exact_stops", start, end, exact_stops, count)
        return count

    def count_routes_with_distance_limit(
        self, start: str, end: str, distance_limit: int
    ) -> int:
        """Count routes from ``start`` to ``end`` shorter than ``distance_limit``.

        Every arrival at ``end`` counts and the walk keeps going past it,
        so a longer route looping back through ``end`` counts again. A
        branch stops once its distance reaches the limit or it hits an
        academy without outgoing routes; an arrival at that point is
        not counted.
        """
        self._validate_pair(start, end)
        self._require_limit(distance_limit, "distance_limit")

        budget = _Budget(
            self.config.max_expanded_states, "count_routes_with_distance_limit"
        )
        count = 0
        stack: List[Tuple[str, int]] = [(start, 0)]

        while stack:
            current, distance = stack.pop()
            budget.spend()

            outgoing = self.graph.outgoing_routes(current)
            if distance >= distance_limit or not outgoing:
                continue
            if current == end and distance > 0:
                count += 1

            for route in outgoing:
                stack.append((route.destination, distance + route.distance))

        self._log_count(
            "count_routes_with_distance_limit", start, end, distance_limit, count
        )
        return count

    def _require_academy(self, academy: str, parameter: str) -> None:
        if not isinstance(academy, str) or not self.graph.has_academy(academy):
            raise AcademyNotFoundError(
                f"Unknown academy: {academy!r}",
                parameter=parameter,
                academy=str(academy),
            )

    def _validate_pair(self, start: str, end: str) -> None:
        self._require_academy(start, "starting_academy")
        self._require_academy(end, "destination_academy")

    @staticmethod
    def _require_limit(value: int, parameter: str) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidInputError(
                f"{parameter} must be a non-negative integer, got {value!r}",
                parameter=parameter,
            )

    def _log_count(
        self, query: str, start: str, end: str, limit: int, count: int
    ) -> None:
        self._logger.info(
            "Routes counted",
            extra={
                "query": query,
                "start": start,
                "end": end,
                "limit": limit,
                "count": count,
            },
        )

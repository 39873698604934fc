"""Route request handler - transport mapping for the query engine.

Parses raw payloads into request models, runs the matching query and
maps every outcome to a ``QueryResponse``:

- 200 with the numeric answer, or ``NO SUCH ROUTE`` for both distance
  queries when no route exists
- 400 for a missing or malformed payload or an unknown academy
- 422 when the traversal guard trips
- 500 for anything unexpected
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..domain.errors import InvalidInputError, TraversalLimitError
from ..domain.models import NO_SUCH_ROUTE_TEXT, DistanceResult, QueryResponse
from ..domain.requests import (
    DistanceLimitRequest,
    ExactStopsRequest,
    RouteDistanceRequest,
    ShortestRouteRequest,
    StopLimitRequest,
)
from ..ports.graph import RouteQueryPort

RequestT = TypeVar("RequestT", bound=BaseModel)

Payload = Optional[Union[Mapping[str, Any], BaseModel]]


@dataclass
class RouteRequestHandler:
    """Maps raw query payloads to responses.

    Attributes:
        queries: The query engine
    """

    queries: RouteQueryPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def calculate_route_distance(self, payload: Payload) -> QueryResponse:
        """Handle ``{"stops": "ABC"}``."""
        return self._handle(
            "calculate_route_distance",
            payload,
            RouteDistanceRequest,
            lambda r: _distance_body(self.queries.route_distance(r.stops)),
        )

    def find_shortest_route_distance(self, payload: Payload) -> QueryResponse:
        return self._handle(
            "find_shortest_route_distance",
            payload,
            ShortestRouteRequest,
            lambda r: _distance_body(
                self.queries.shortest_route_distance(
                    r.starting_academy, r.destination_academy
                )
            ),
        )

    def count_routes_with_stop_limit(self, payload: Payload) -> QueryResponse:
        return self._handle(
            "count_routes_with_stop_limit",
            payload,
            StopLimitRequest,
            lambda r: self.queries.count_routes_with_stop_limit(
                r.starting_academy, r.destination_academy, r.stop_limit
            ),
        )

    def count_routes_with_exact_stops(self, payload: Payload) -> QueryResponse:
        return self._handle(
            "count_routes_with_exact_stops",
            payload,
            ExactStopsRequest,
            lambda r: self.queries.count_routes_with_exact_stops(
                r.starting_academy, r.destination_academy, r.exact_stops
            ),
        )

    def count_routes_with_distance_limit(self, payload: Payload) -> QueryResponse:
        return self._handle(
            "count_routes_with_distance_limit",
            payload,
            DistanceLimitRequest,
            lambda r: self.queries.count_routes_with_distance_limit(
                r.starting_academy, r.destination_academy, r.distance_limit
            ),
        )

    def _handle(
        self,
        action: str,
        payload: Payload,
        request_type: Type[RequestT],
        run: Callable[[RequestT], Union[int, str]],
    ) -> QueryResponse:
        if payload is None or not isinstance(payload, (Mapping, BaseModel)):
            self._logger.warning("Missing request payload", extra={"action": action})
            return QueryResponse(status_code=400, body="Missing request payload")

        try:
            if isinstance(payload, request_type):
                request = payload
            elif isinstance(payload, BaseModel):
                request = request_type.model_validate(payload.model_dump())
            else:
                request = request_type.model_validate(dict(payload))
            body = run(request)
        except ValidationError as e:
            self._logger.warning(
                "Invalid request", extra={"action": action, "errors": e.error_count()}
            )
            return QueryResponse(status_code=400, body=_validation_message(e))
        except InvalidInputError as e:
            self._logger.warning(
                "Invalid request", extra={"action": action, "parameter": e.parameter}
            )
            return QueryResponse(status_code=400, body=e.message)
        except TraversalLimitError as e:
            self._logger.error(
                "Traversal limit reached", extra={"action": action, "limit": e.limit}
            )
            return QueryResponse(status_code=422, body=e.message)
        except Exception:
            self._logger.exception("Unexpected error", extra={"action": action})
            return QueryResponse(status_code=500, body="Internal server error")

        return QueryResponse(status_code=200, body=body)


def _distance_body(result: DistanceResult) -> Union[int, str]:
    if result.is_found:
        assert result.distance is not None
        return result.distance
    return NO_SUCH_ROUTE_TEXT


def _validation_message(error: ValidationError) -> str:
    details = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "payload"
        details.append(f"{location}: {item['msg']}")
    return "; ".join(details)

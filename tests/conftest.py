import pytest

from route_provider.adapters.graph import InMemoryRouteGraph
from route_provider.config import DEFAULT_ROUTES, QueryConfig, reset_config
from route_provider.container import reset_container
from route_provider.services import RouteQueryService, RouteRequestHandler


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Keep environment overrides and cached singletons out of every test."""
    for name in ("RP_GRAPH_ROUTES", "RP_QUERY_MAX_EXPANDED_STATES", "RP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def academy_graph():
    return InMemoryRouteGraph(routes=DEFAULT_ROUTES)


@pytest.fixture
def queries(academy_graph):
    return RouteQueryService(graph=academy_graph, config=QueryConfig())


@pytest.fixture
def handler(queries):
    return RouteRequestHandler(queries=queries)


@pytest.fixture
def make_queries():
    """Build a query service over an ad-hoc graph."""

    def _make(routes, max_expanded_states=1_000_000):
        return RouteQueryService(
            graph=InMemoryRouteGraph(routes=routes),
            config=QueryConfig(max_expanded_states=max_expanded_states),
        )

    return _make

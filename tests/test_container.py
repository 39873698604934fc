import pytest

from route_provider.adapters.graph import InMemoryRouteGraph
from route_provider.config import AppConfig, GraphConfig
from route_provider.container import Container, get_container, reset_container
from route_provider.domain.errors import InvalidGraphError
from route_provider.ports.graph import RouteGraphPort, RouteQueryPort
from route_provider.services import RouteQueryService, RouteRequestHandler


def test_default_container_wires_the_handler():
    container = Container.create_default()

    handler = container.resolve(RouteRequestHandler)

    assert isinstance(handler, RouteRequestHandler)
    assert isinstance(handler.queries, RouteQueryService)
    assert handler.calculate_route_distance({"stops": "ABC"}).body == 9


def test_graph_is_built_once():
    container = Container.create_default()

    assert container.resolve(RouteGraphPort) is container.resolve(RouteGraphPort)
    assert container.resolve(RouteQueryPort).graph is container.resolve(RouteGraphPort)


def test_configured_routes_reach_the_graph():
    config = AppConfig(graph=GraphConfig(routes=[("P", "Q", 7)]))
    container = Container.create_default(config)

    queries = container.resolve(RouteQueryPort)

    assert queries.shortest_route_distance("P", "Q").distance == 7


def test_invalid_configured_graph_fails_at_startup():
    config = AppConfig(graph=GraphConfig(routes=[("P", "Q", -7)]))
    container = Container.create_default(config)

    with pytest.raises(InvalidGraphError):
        container.resolve(RouteGraphPort)


def test_register_overrides_binding():
    container = Container.create_default()
    container.register(RouteGraphPort, lambda: InMemoryRouteGraph(routes=[("A", "B", 1)]))

    assert container.resolve(RouteGraphPort).route_count == 1


def test_non_singleton_registration():
    container = Container()
    container.register(list, list, singleton=False)

    assert container.resolve(list) is not container.resolve(list)


def test_unregistered_type():
    container = Container()

    assert not container.is_registered(RouteGraphPort)
    with pytest.raises(KeyError):
        container.resolve(RouteGraphPort)


def test_global_container_reset():
    first = get_container()

    assert get_container() is first

    reset_container()

    assert get_container() is not first


def test_register_refreshes_cached_dependents():
    container = Container.create_default()
    before = container.resolve(RouteQueryPort)

    container.register(RouteGraphPort, lambda: InMemoryRouteGraph(routes=[("A", "B", 1)]))
    after = container.resolve(RouteQueryPort)

    assert after is not before
    assert after.graph.route_count == 1


def test_clear_singletons_rebuilds_instances():
    container = Container.create_default()
    graph = container.resolve(RouteGraphPort)

    container.clear_singletons()

    assert container.resolve(RouteGraphPort) is not graph
    assert container.is_registered(RouteGraphPort)
